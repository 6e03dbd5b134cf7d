import pytest

from muonplots.histogram import Hist1D
from muonplots.plotting import Curve, graph_plot, overlay_plot, root_color

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def _hist(name, weight):
    hist = Hist1D(name, name, 60, 0, 120)
    for x in (3.0, 15.0, 40.0, 90.0):
        hist.fill(x, weight)
    return hist


def test_root_color_basic_indices():
    assert root_color(1) == "#000000"
    assert root_color(0) == "#ffffff"
    assert root_color(2) == "#ff0000"


def test_root_color_hue_offsets_are_lighter():
    light = root_color(632 - 9)
    assert light.startswith("#ff")
    assert light != root_color(632)


def test_root_color_unknown_index():
    with pytest.raises(ValueError):
        root_color(-1)
    with pytest.raises(ValueError):
        root_color(5000)


def test_overlay_plot_writes_png(tmp_path):
    target = tmp_path / "plots" / "muon-pt" / "overlay.png"
    curves = [Curve(_hist("all", 10), "All Events", 46), Curve(_hist("part", 2), "Part", 42)]
    written = overlay_plot(
        target, curves, "Muon p_{T}", "Muon p_{T} [GeV]", "N_{muons}",
        xrange=(5, 80), yrange=(1, 1e10), legend_columns=2,
        annotation=(0.8, 0.53, "L = 127 pb^-1"),
    )
    assert written == target
    assert target.read_bytes()[:8] == PNG_MAGIC


def test_overlay_plot_unlabelled_curve(tmp_path):
    target = tmp_path / "plain.png"
    overlay_plot(target, [Curve(_hist("h", 1), None, 30)], "t", "x", "y", logy=False)
    assert target.read_bytes()[:8] == PNG_MAGIC


def test_overlay_plot_needs_curves(tmp_path):
    with pytest.raises(ValueError):
        overlay_plot(tmp_path / "empty.png", [], "t", "x", "y")


def test_overlay_plot_rejects_bad_columns(tmp_path):
    with pytest.raises(ValueError):
        overlay_plot(tmp_path / "c.png", [Curve(_hist("h", 1), "h", 30)], "t", "x", "y",
                     legend_columns=0)


def test_graph_plot_writes_png(tmp_path):
    target = tmp_path / "graphs" / "pass.png"
    xs = [0, 10, 20, 30, 40]
    written = graph_plot(
        target,
        [("All Events", xs, [100, 50, 20, 5, 1], 46), ("Cut", xs, [40, 20, 8, 2, 0], 42)],
        "Survival", "Momentum", "Number of Muons",
    )
    assert written == target
    assert target.read_bytes()[:8] == PNG_MAGIC


def test_graph_plot_length_mismatch(tmp_path):
    with pytest.raises(ValueError):
        graph_plot(tmp_path / "g.png", [("a", [1, 2, 3], [1, 2], 46)], "t", "x", "y")


def test_graph_plot_needs_series(tmp_path):
    with pytest.raises(ValueError):
        graph_plot(tmp_path / "g.png", [], "t", "x", "y")