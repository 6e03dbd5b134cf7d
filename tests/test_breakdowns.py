import pytest

from muonplots.breakdowns import (
    SEPARATION_VARIABLES,
    all_events_plot,
    momentum_magnitude_plot,
    parton_shower_breakdown,
    separation_plots,
)
from muonplots.histogram import Hist1D
from muonplots.samples import SAMPLE_NAMES, HistogramStore

SEP_NAMES = [var for var, _, _ in SEPARATION_VARIABLES]


def _hist(name, weight):
    hist = Hist1D(name, name, 60, 0.0, 120.0)
    hist.fill(10.0, weight)
    return hist


def make_stores():
    stores = []
    for i, sample in enumerate(SAMPLE_NAMES):
        weight = float(i + 1)
        hists = [_hist("Bare_Muon_pT", weight), _hist("Muon_P", weight)]
        for var in SEP_NAMES:
            hists.extend(_hist(f"{var}_{k}", weight) for k in range(1, 9))
        stores.append(HistogramStore(sample, hists))
    return stores


def _total(stores, name="Bare_Muon_pT"):
    return sum(store.get(name).integral() for store in stores)


def test_all_events_sum_matches_parts(tmp_path):
    stores = make_stores()
    out = tmp_path / "all_events.png"
    hists = all_events_plot(stores, out)
    assert out.is_file()
    assert list(hists) == [
        "sum", "bottomonium", "charmonium", "bbbar", "ccbar", "ttbar", "wbos", "zbos", "gamma",
    ]
    parts = sum(h.integral() for key, h in hists.items() if key != "sum")
    assert hists["sum"].integral() == pytest.approx(parts)
    assert hists["sum"].integral() == pytest.approx(_total(stores))


def test_all_events_wrong_store_count(tmp_path):
    with pytest.raises(ValueError):
        all_events_plot(make_stores()[:5], tmp_path / "x.png")


def test_momentum_magnitude_leaves_out_photon(tmp_path):
    stores = make_stores()
    out = tmp_path / "magP.png"
    hists = momentum_magnitude_plot(stores, out)
    assert out.is_file()
    assert "gamma" not in hists
    expected = _total(stores, "Muon_P") - stores[4].get("Muon_P").integral()
    assert hists["sum"].integral() == pytest.approx(expected)


def test_momentum_magnitude_missing_histogram(tmp_path):
    stores = [HistogramStore(name, [_hist("Bare_Muon_pT", 1.0)]) for name in SAMPLE_NAMES]
    with pytest.raises(KeyError):
        momentum_magnitude_plot(stores, tmp_path / "magP.png")


def test_separation_totals_accumulate(tmp_path):
    stores = make_stores()
    results = separation_plots(stores, tmp_path)
    assert list(results) == SEP_NAMES
    for var in SEP_NAMES:
        assert (tmp_path / f"{var}.png").is_file()
    total = _total(stores)
    for position, var in enumerate(SEP_NAMES, start=1):
        assert results[var]["all"].integral() == pytest.approx(position * total)
        assert results[var]["slice3"].integral() == pytest.approx(position * total)


def test_separation_snapshots_are_independent(tmp_path):
    results = separation_plots(make_stores(), tmp_path)
    first = results["MetMuon_dPhi"]["slice1"]
    last = results["diMu_dR"]["slice1"]
    assert first is not last
    assert last.integral() == pytest.approx(len(SEP_NAMES) * first.integral())


def test_parton_shower_breakdown_totals(tmp_path):
    stores = make_stores()
    results = parton_shower_breakdown(stores, tmp_path)
    assert sorted(results) == ["bbbar", "bottomonium", "ccbar", "charmonium"]
    for process, hists in results.items():
        assert (tmp_path / f"{process}.png").is_file()
        total, *members = hists
        assert total.integral() == pytest.approx(sum(h.integral() for h in members))
    assert len(results["bottomonium"]) == 6
    assert len(results["charmonium"]) == 7


def test_parton_shower_ccbar_uses_repeated_sample(tmp_path):
    stores = make_stores()
    results = parton_shower_breakdown(stores, tmp_path)
    members = results["ccbar"][1:]
    assert [h is stores[i].get("Bare_Muon_pT") for i, h in zip(range(22, 28), members)] == [
        True
    ] * 6


def test_parton_shower_wrong_store_count(tmp_path):
    with pytest.raises(ValueError):
        parton_shower_breakdown(make_stores()[:-1], tmp_path)