"""Muon momentum broken down by physics process, by sample slice and by separation cuts.

Every function sums the relevant histograms over the sample stores, draws
them on a logarithmic scale and returns the histograms it drew.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from .histogram import Hist1D
from .plotting import Curve, overlay_plot
from .samples import (
    PROCESS_GROUPS,
    SAMPLE_NAMES,
    HistogramStore,
    process_sums,
    sum_histograms,
)

__all__ = [
    "SEPARATION_VARIABLES",
    "all_events_plot",
    "momentum_magnitude_plot",
    "separation_plots",
    "parton_shower_breakdown",
]

_NBINS = 60
_LOW = 0.0
_HIGH = 120.0

_PT_LABEL = r"Muon $p_{T}$ [GeV]"
_BARE_PT_LABEL = "Bare Muon pT [GeV]"
_N_MUONS = r"$N_{muons}$"
_N_EVENTS = r"$N_{events}$"

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

_LIGHT_RED = 623

_DPHI_LABELS: tuple[str, ...] = (
    r"$\Delta \phi < \frac{\pi}{8}$",
    r"$\frac{\pi}{8} < \Delta \phi < \frac{\pi}{4}$",
    r"$\frac{\pi}{4} < \Delta \phi < \frac{3\pi}{8}$",
    r"$\frac{3\pi}{8} < \Delta \phi < \frac{\pi}{2}$",
    r"$\frac{\pi}{2} < \Delta \phi < \frac{5\pi}{8}$",
    r"$\frac{5\pi}{4} < \Delta \phi < \frac{3\pi}{4}$",
    r"$\frac{3\pi}{4} < \Delta \phi < \frac{7\pi}{8}$",
    r"$\frac{7\pi}{8} < \Delta \phi < \pi$",
)

_DR_LABELS: tuple[str, ...] = (
    r"$\Delta R < 1$",
    r"$1 < \Delta R < 2$",
    r"$2 < \Delta R < 3$",
    r"$3 < \Delta R < 4$",
    r"$4 < \Delta R < 5$",
    r"$5 < \Delta R < 6$",
    r"$6 < \Delta R < 7$",
    r"$\Delta R > 7$",
)

# (histogram prefix, slice labels, title)
SEPARATION_VARIABLES: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("MetMuon_dPhi", _DPHI_LABELS,
     r"Cuts on $\Delta \phi$ between $E_T^{miss}$ and Lead Muon"),
    ("JetMuon_dPhi", _DPHI_LABELS, r"Cuts on $\Delta \phi$ between Lead Jet and Lead Muon"),
    ("diMu_dPhi", _DPHI_LABELS, r"Cuts on $\Delta \phi$ between First Two Muons"),
    ("JetMuon_dR", _DR_LABELS, r"Cuts on $\Delta R$ between Lead Jet and Lead Muon"),
    ("diMu_dR", _DR_LABELS, r"Cuts on $\Delta R$ between First Two Muons"),
)

_SLICE_COLORS: tuple[int, ...] = (42, 41, 30, 29, 38, 36, 40, 48)

# Slice indices (0-based) in the order they appear in the two-column legend.
_SLICE_LEGEND_ORDER: tuple[int, ...] = (4, 0, 5, 1, 6, 2, 7, 3)

# (process, legend name of the total, title, labels of the members, colours of the members)
_SHOWER_BREAKDOWNS: tuple[tuple[str, str, str, tuple[str, ...], tuple[int, ...]], ...] = (
    ("bottomonium", "All Bottomonium", "Bottomonium Muon Bare pT",
     ("2-20 GeV", "20-40 GeV", "40-60 GeV", "60-120 GeV", "120+ GeV"),
     (42, 41, 30, 38, 40)),
    ("charmonium", "All Charmonium", "Charmonium Muon Bare pT",
     ("2-10 GeV", "10-20 GeV", "20-40 GeV", "40-60 GeV", "60-120 GeV", "120 GeV+"),
     (42, 41, 30, 38, 40, _LIGHT_RED)),
    ("bbbar", "All bbbar", "bbbar Muon Bare pT",
     ("2-20 GeV", "20-40 GeV", "40-60 GeV", "60-120 GeV", "120-200 GeV", "200+ GeV"),
     (42, 41, 30, 38, 40, _LIGHT_RED)),
    ("ccbar", "All ccbar", "ccbar Muon Bare pT",
     ("2-20 GeV", "20-40 GeV", "40-60 GeV", "60-120 GeV", "120-200 GeV", "200+ GeV"),
     (42, 41, 30, 38, 40, _LIGHT_RED)),
)


def _check_count(stores: Sequence[HistogramStore]) -> None:
    if len(stores) != len(SAMPLE_NAMES):
        raise ValueError(f"expected {len(SAMPLE_NAMES)} sample stores, got {len(stores)}")


def all_events_plot(stores: Iterable[HistogramStore], output: str | Path) -> dict[str, Hist1D]:
    """Muon pT for every process and for all of them together."""
    stores = list(stores)
    hists = process_sums(stores, "Bare_Muon_pT", _NBINS, _LOW, _HIGH)
    labels = {
        "sum": "All Events",
        "bottomonium": "Bottomonium",
        "charmonium": "Charmonium",
        "bbbar": r"$b\bar{b}$",
        "ccbar": r"$c\bar{c}$",
        "ttbar": r"$t\bar{t}$",
        "wbos": "W Boson",
        "zbos": "Z Boson",
        "gamma": r"$\gamma^{*}$",
    }
    overlay_plot(
        output,
        [Curve(hists[key], labels[key], _PROCESS_COLORS[key]) for key in labels],
        title=r"Muon $p_{T}$ for all Processes",
        xlabel=_PT_LABEL,
        ylabel=_N_MUONS,
        xrange=(0, 80),
        yrange=(1, 1e11),
        annotation=(0.8, 0.53, r"$L = 1.27 \times 10^{2}$ pb$^{-1}$"),
    )
    return hists


def momentum_magnitude_plot(
    stores: Iterable[HistogramStore], output: str | Path
) -> dict[str, Hist1D]:
    """Muon momentum magnitude per process; the photon sample is left out."""
    stores = list(stores)
    parts = process_sums(stores, "Muon_P", _NBINS, _LOW, _HIGH)
    keys = ("bottomonium", "charmonium", "bbbar", "ccbar", "ttbar", "wbos", "zbos")
    hists = {"sum": sum_histograms("sum", (parts[key] for key in keys), _NBINS, _LOW, _HIGH)}
    hists.update((key, parts[key]) for key in keys)
    labels = {
        "sum": "All Events",
        "bottomonium": "Bottomonium",
        "charmonium": "Charmonium",
        "bbbar": "bbbar",
        "ccbar": "ccbar",
        "ttbar": "ttbar",
        "wbos": "wbos",
        "zbos": "zbos",
    }
    overlay_plot(
        output,
        [Curve(hists[key], labels[key], _PROCESS_COLORS[key]) for key in labels],
        title="Magnitude of Muon Momentum Normalized to Cross-section",
        xlabel="Bare Muon P [GeV]",
        ylabel=_N_EVENTS,
        xrange=(0, 120),
        yrange=(1, 1e10),
        annotation=(0.69, 0.58, "luminosity: 1pm^(-1)"),
    )
    return hists


def separation_plots(
    stores: Iterable[HistogramStore], outdir: str | Path
) -> dict[str, dict[str, Hist1D]]:
    """Muon pT in slices of each separation variable, one image per variable.

    The running totals are kept from one variable to the next, so each plot
    also holds the contributions of the variables drawn before it. The
    result maps each variable to snapshots under ``"all"`` and
    ``"slice1"``..``"slice8"``.
    """
    stores = list(stores)
    base = Path(outdir)
    total = Hist1D("sum", "sum", _NBINS, _LOW, _HIGH)
    slices = [Hist1D(f"plot{k}", f"plot{k}", _NBINS, _LOW, _HIGH) for k in range(1, 9)]
    results: dict[str, dict[str, Hist1D]] = {}
    for var, labels, title in SEPARATION_VARIABLES:
        for store in stores:
            total.add(store.get("Bare_Muon_pT"))
            for k, hist in enumerate(slices, start=1):
                hist.add(store.get(f"{var}_{k}"))
        curves = [Curve(total, "All Events", 46)]
        curves.extend(
            Curve(slices[i], labels[i], _SLICE_COLORS[i]) for i in _SLICE_LEGEND_ORDER
        )
        overlay_plot(
            base / f"{var}.png",
            curves,
            title=title,
            xlabel=_PT_LABEL,
            ylabel=_N_MUONS,
            xrange=(5, 80),
            yrange=(1, 1e10),
            legend_columns=2,
        )
        snapshot = {"all": total.copy()}
        snapshot.update((f"slice{k}", hist.copy()) for k, hist in enumerate(slices, start=1))
        results[var] = snapshot
    return results


def parton_shower_breakdown(
    stores: Iterable[HistogramStore], outdir: str | Path
) -> dict[str, list[Hist1D]]:
    """Muon pT of each multi-sample process split into its generator slices.

    One image per process is written to ``outdir``, named after the process.
    The result maps each process to its total followed by its member
    histograms in sample order.
    """
    stores = list(stores)
    _check_count(stores)
    base = Path(outdir)
    results: dict[str, list[Hist1D]] = {}
    for process, total_label, title, labels, colors in _SHOWER_BREAKDOWNS:
        members = [stores[i].get("Bare_Muon_pT") for i in PROCESS_GROUPS[process]]
        total = sum_histograms(process, members, _NBINS, _LOW, _HIGH)
        curves = [Curve(total, total_label, 46)]
        curves.extend(
            Curve(hist, label, color) for hist, label, color in zip(members, labels, colors)
        )
        overlay_plot(
            base / f"{process}.png",
            curves,
            title=title,
            xlabel=_BARE_PT_LABEL,
            ylabel=_N_EVENTS,
            xrange=(0, 120),
            yrange=(1, 1e10),
        )
        results[process] = [total, *members]
    return results