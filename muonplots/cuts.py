"""Muon momentum after combined trigger-style cuts, and the survival of those cuts.

Both functions sum the ``ComboCuts`` histograms over the sample stores and
draw them on a logarithmic scale next to the muon pT of all events.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from .histogram import Hist1D
from .plotting import Curve, graph_plot, overlay_plot
from .samples import HistogramStore, sum_histograms

__all__ = ["L1_PRESCALE", "combo_cuts_plot", "survival_function_plot"]

# Prescale of the level-1 trigger the survival counts are divided by.
L1_PRESCALE = 7.386750749

_NBINS = 60
_LOW = 0.0
_HIGH = 120.0

_BARE_PT_LABEL = "Bare Muon pT [GeV]"
_N_MUONS = r"$N_{muons}$"

# Thresholds are taken every ten bins; only the first few are drawn.
_THRESHOLD_STEPS = 7
_THRESHOLD_BIN_STEP = 10
_GRAPH_POINTS = 5

_COMBO_LABELS: dict[str, str] = {
    "all": "All Events",
    "cut1": "MET > 30 GeV",
    "cut2": "1 muon || MET > 30 GeV",
    "cut3": "(Met > 5 && 1 muon) || MET > 30",
    "cut4": "(Met > 10 && 1 muon) || MET > 30",
    "cut5": "(Met > 15 && 1 muon) || MET > 30",
}

_COMBO_COLORS: dict[str, int] = {
    "all": 46, "cut1": 42, "cut2": 32, "cut3": 38, "cut4": 48, "cut5": 33,
}

_SURVIVAL_LABELS: dict[str, str] = {
    "all": "All Events",
    "cut1": "MET > 30 GeV",
    "cut2": "Met > 5, 1 muon || MET > 30",
    "cut3": "Met > 10, 1 muon || MET > 30",
    "cut4": "Met > 15, 1 muon || MET > 30",
}


def _summed(stores: Sequence[HistogramStore], name: str, histname: str) -> Hist1D:
    return sum_histograms(name, (store.get(histname) for store in stores), _NBINS, _LOW, _HIGH)


def _cut_sums(stores: Sequence[HistogramStore], count: int) -> dict[str, Hist1D]:
    hists = {"all": _summed(stores, "sum", "Bare_Muon_pT")}
    for k in range(1, count + 1):
        hists[f"cut{k}"] = _summed(stores, f"muon cuts {k}", f"ComboCuts{k}")
    return hists


def combo_cuts_plot(
    stores: Iterable[HistogramStore], output: str | Path, graph_output: str | Path
) -> tuple[dict[str, Hist1D], dict[str, list[float]]]:
    """Muon pT under each combined cut, and the counts above pT thresholds.

    The histograms are drawn to ``output``. For every histogram the number
    of muons from threshold bin 0, 10, 20, ... 60 upwards (overflow
    included) is computed; the count from bin 30 is printed per histogram,
    and the first thresholds are drawn as graphs to ``graph_output``.
    Returns the summed histograms and the threshold counts, by key.
    """
    stores = list(stores)
    hists = _cut_sums(stores, 5)
    overlay_plot(
        output,
        [Curve(hists[key], _COMBO_LABELS[key], _COMBO_COLORS[key]) for key in hists],
        title="Muon pT with Cuts",
        xlabel=_BARE_PT_LABEL,
        ylabel=_N_MUONS,
    )

    passes = {
        key: [hist.integral(j * _THRESHOLD_BIN_STEP, 1000) for j in range(_THRESHOLD_STEPS)]
        for key, hist in hists.items()
    }
    for counts in passes.values():
        print(f"{counts[3]:g}")

    thresholds = [float(j * _THRESHOLD_BIN_STEP) for j in range(_THRESHOLD_STEPS)]
    graph_plot(
        graph_output,
        [
            (
                _COMBO_LABELS[key],
                thresholds[:_GRAPH_POINTS],
                counts[:_GRAPH_POINTS],
                _COMBO_COLORS[key],
            )
            for key, counts in passes.items()
        ],
        title="Number of Muons that Pass Momentum Thresholds",
        xlabel=_BARE_PT_LABEL,
        ylabel=_N_MUONS,
    )
    return hists, passes


def survival_function_plot(
    stores: Iterable[HistogramStore], output: str | Path
) -> tuple[dict[str, Hist1D], dict[str, tuple[list[float], list[float]]]]:
    """Number of muons above each momentum, divided by the trigger prescale.

    For all events point ``i`` (1..59) sits at ``2 i`` and counts bins from
    ``2 i`` up to the overflow bin. For each cut point ``k`` (0..59) sits at
    ``2 k + 2`` and counts bins ``k``..60. Returns the scaled histograms and
    the ``(xs, ys)`` of every graph, by key.
    """
    stores = list(stores)
    hists = _cut_sums(stores, 4)
    for hist in hists.values():
        hist.scale(1 / L1_PRESCALE)

    graphs: dict[str, tuple[list[float], list[float]]] = {}
    everything = hists["all"]
    graphs["all"] = (
        [2.0 * i for i in range(1, _NBINS)],
        [everything.integral(2 * i, 200) for i in range(1, _NBINS)],
    )
    for key, hist in hists.items():
        if key == "all":
            continue
        graphs[key] = (
            [2.0 * k + 2 for k in range(_NBINS)],
            [hist.integral(k, _NBINS) for k in range(_NBINS)],
        )

    colors = {"all": 46, "cut1": 42, "cut2": 32, "cut3": 38, "cut4": 48}
    graph_plot(
        output,
        [(_SURVIVAL_LABELS[key], xs, ys, colors[key]) for key, (xs, ys) in graphs.items()],
        title="Survival Function",
        xlabel="Momentum",
        ylabel="Number of Muons",
    )
    return hists, graphs