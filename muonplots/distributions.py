"""Distributions of event variables broken down by physics process.

Every function sums the relevant histograms over the sample stores, draws
them on a logarithmic scale and returns the summed histograms under short
keys, in drawing order.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, Sequence

from .histogram import Hist1D
from .plotting import Curve, overlay_plot
from .samples import SAMPLE_NAMES, HistogramStore, sum_histograms, process_sums

__all__ = ["VARIABLES", "variable_plots", "muon_eta_plot", "isolation_plot"]

_NBINS = 60

_DPHI = r"$\Delta \Phi$"
_DR = r"$\Delta R$"

# (histogram name, x-axis label, title, upper edge of the range)
VARIABLES: tuple[tuple[str, str, str, float], ...] = (
    ("MetMuon_dPhi", _DPHI, r"$\Delta \phi$ between $E_T^{miss}$ and Lead Muon", math.pi),
    ("JetMuon_dPhi", _DPHI, r"$\Delta \phi$ between Lead Jet and Lead Muon", math.pi),
    ("diMu_dPhi", _DPHI, r"$\Delta \phi$ between First Two Muons", math.pi),
    ("JetMuon_dR", _DR, r"$\Delta R$ between Lead Jet and Lead Muon", 10.0),
    ("diMu_dR", _DR, r"$\Delta R$ between First Two Muons", 10.0),
)

_PROCESS_COLORS: dict[str, int] = {
    "sum": 46,
    "bottomonium": 42,
    "charmonium": 41,
    "bbbar": 30,
    "ccbar": 29,
    "ttbar": 38,
    "wbos": 36,
    "zbos": 48,
    "gamma": 40,
}

_DRAW_ORDER: tuple[str, ...] = (
    "sum", "bottomonium", "charmonium", "bbbar", "ccbar", "ttbar", "wbos", "zbos", "gamma",
)

# The eta plot reads this histogram, booked by the generator over 0..2.5.
_ETA_SOURCE = "Bare_Muon_pT"
_ETA_HIGH = 2.5

# Sample indices per process used by the eta plot; a subset of the full list.
_ETA_GROUPS: dict[str, tuple[int, ...]] = {
    "ttbar": (0, 1),
    "bottomonium": (5, 7, 8),
    "charmonium": (10, 12, 13, 14),
    "ccbar": (22, 24, 25, 26),
    "bbbar": (16, 18, 19, 20),
}


def _check_count(stores: Sequence[HistogramStore]) -> None:
    if len(stores) != len(SAMPLE_NAMES):
        raise ValueError(f"expected {len(SAMPLE_NAMES)} sample stores, got {len(stores)}")


def variable_plots(
    stores: Iterable[HistogramStore], outdir: str | Path
) -> dict[str, dict[str, Hist1D]]:
    """One process breakdown per separation variable, written to ``outdir``.

    Each image is named after its variable. The result maps each variable
    to the histograms returned by ``process_sums``.
    """
    stores = list(stores)
    _check_count(stores)
    base = Path(outdir)
    results: dict[str, dict[str, Hist1D]] = {}
    for index, (var, xlabel, title, xmax) in enumerate(VARIABLES):
        hists = process_sums(stores, var, _NBINS, 0.0, xmax)
        labels = {
            "sum": "All Events",
            "ttbar": "ttbar",
            "bottomonium": "Bottomonium",
            "wbos": "W Boson",
            "charmonium": "Charmonium",
            "zbos": "Z Boson",
            "bbbar": r"$b\bar{b}$",
            "gamma": r"$\gamma^*$",
            "ccbar": r"$c\bar{c}$",
        }
        legend_order = list(labels)
        curves = [Curve(hists[key], labels[key], _PROCESS_COLORS[key]) for key in legend_order]
        overlay_plot(
            base / f"{var}.png",
            curves,
            title=title,
            xlabel=xlabel,
            ylabel=r"$N_{muons}$",
            xrange=(0, 8) if index == 4 else None,
            yrange=(1, 1e11),
            legend_columns=2,
        )
        results[var] = hists
    return results


def muon_eta_plot(stores: Iterable[HistogramStore], output: str | Path) -> dict[str, Hist1D]:
    """Muon eta summed per process over a subset of the samples."""
    stores = list(stores)
    _check_count(stores)
    parts: dict[str, Hist1D] = {}
    for process, indices in _ETA_GROUPS.items():
        parts[process] = sum_histograms(
            process, (stores[i].get(_ETA_SOURCE) for i in indices), _NBINS, 0.0, _ETA_HIGH
        )
    parts["wbos"] = stores[2].get(_ETA_SOURCE)
    parts["zbos"] = stores[3].get(_ETA_SOURCE)
    parts["gamma"] = stores[4].get(_ETA_SOURCE)
    summed = sum_histograms(
        "Muon Eta",
        (parts[p] for p in ("bottomonium", "charmonium", "bbbar", "ccbar",
                            "ttbar", "wbos", "zbos", "gamma")),
        _NBINS,
        0.0,
        _ETA_HIGH,
    )
    hists = {"sum": summed}
    hists.update((key, parts[key]) for key in _DRAW_ORDER[1:])
    labels = {
        "sum": "All Events",
        "bottomonium": "Bottomonium",
        "charmonium": "Charmonium",
        "bbbar": "bbbar",
        "ccbar": "ccbar",
        "ttbar": "ttbar",
        "wbos": "wbos",
        "zbos": "zbos",
        "gamma": "gamma*",
    }
    overlay_plot(
        output,
        [Curve(hists[key], labels[key], _PROCESS_COLORS[key]) for key in _DRAW_ORDER],
        title="Muon Eta",
        xlabel="Eta",
        ylabel=r"$N_{events}$",
        xrange=(1, 2.5),
        yrange=(0.1, 1e13),
    )
    return hists


def isolation_plot(stores: Iterable[HistogramStore], output: str | Path) -> dict[str, Hist1D]:
    """Muon pT for events passing each muon isolation requirement."""
    stores = list(stores)
    hists = {
        "all": sum_histograms(
            "sum", (store.get("Bare_Muon_pT") for store in stores), _NBINS, 0.0, 120.0
        )
    }
    for level in range(1, 8):
        hists[f"iso{level}"] = sum_histograms(
            f"sum iso{level}", (store.get(f"Iso{level}") for store in stores), _NBINS, 0.0, 120.0
        )
    labels = {
        "iso1": "Muon Isolation > 70 GeV",
        "iso2": "Muon Isolation < 70 GeV",
        "iso3": "Muon Isolation < 50 GeV",
        "iso4": "Muon Isolation < 40 GeV",
        "iso5": "Muon Isolation < 30 GeV",
        "iso6": "Muon Isolation < 20 GeV",
        "iso7": "Muon Isolation < 10 GeV",
    }
    colors = {"iso1": 42, "iso2": 41, "iso3": 30, "iso4": 29, "iso5": 38, "iso6": 36, "iso7": 40}
    curves = [Curve(hists["all"], "all events", 46)]
    curves.extend(Curve(hists[key], labels[key], colors[key]) for key in labels)
    overlay_plot(
        output,
        curves,
        title="Muon Isolation 'Trigger' Passes",
        xlabel="Bare Muon pT [GeV]",
        ylabel=r"$N_{events}$",
    )
    return hists