"""Muon momentum plots split by event selection: jets, muons and missing energy.

Every function sums the relevant histograms over the sample stores, draws
them on a logarithmic scale to ``output`` and returns the summed histograms
under short keys, in drawing order.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from .histogram import Hist1D
from .plotting import Curve, overlay_plot
from .samples import HistogramStore, sum_histograms

__all__ = [
    "dimuon_jet_plot",
    "met_inclusive_plot",
    "njets_plot",
    "nmuons_plot",
    "w_kinematics_plot",
]

_NBINS = 60
_LOW = 0.0
_HIGH = 120.0

_PT_LABEL = r"Muon $p_{T}$ [GeV]"
_N_MUONS = r"$N_{muons}$"
_MET = r"$E_{T}^{miss}$"


def _summed(stores: Sequence[HistogramStore], name: str, histnames: Iterable[str]) -> Hist1D:
    """Sum of every named histogram over every store."""
    names = tuple(histnames)
    return sum_histograms(
        name,
        (store.get(histname) for store in stores for histname in names),
        _NBINS,
        _LOW,
        _HIGH,
    )


def dimuon_jet_plot(stores: Iterable[HistogramStore], output: str | Path) -> dict[str, Hist1D]:
    """Muon pT for all events, dimuon-or-jet events and high missing energy."""
    stores = list(stores)
    hists = {
        "all": _summed(stores, "sum", ["Bare_Muon_pT"]),
        "jet": _summed(stores, "Jet", ["One_Jet", "Two_Jet", "Mult_Jet"]),
        "dimuon": _summed(stores, "Dimuon", ["diMuon"]),
        "dimuon_jet": _summed(stores, "Dimuon, Jet", ["diMuJet"]),
        "dimuon_jet_met": _summed(stores, "dimujet", ["diMuJetMET"]),
        "met5": _summed(stores, "sum met5", ["Met5", "Met6", "Met7", "Met8"]),
    }
    overlay_plot(
        output,
        [
            Curve(hists["all"], "All Events", 46),
            Curve(hists["dimuon_jet"], "Dimuon or Jet", 32),
            Curve(hists["dimuon_jet_met"], "Dimuon or Jet, MET < 30", 42),
            Curve(hists["met5"], "MET > 30 GeV", 38),
        ],
        title=r"Muon $p_{T}$ for Events with Jets and More than One Muon",
        xlabel=_PT_LABEL,
        ylabel=_N_MUONS,
        xrange=(5, 80),
        yrange=(1, 1e10),
    )
    return hists


def met_inclusive_plot(stores: Iterable[HistogramStore], output: str | Path) -> dict[str, Hist1D]:
    """Muon pT above increasing missing-energy thresholds.

    Each threshold histogram is the sum of its own and all higher slices.
    The totals with and without the 30 GeV threshold are printed.
    """
    stores = list(stores)
    slices = [f"Met{i}" for i in range(1, 9)]
    hists = {"all": _summed(stores, "sum", ["Bare_Muon_pT"])}
    for level in range(2, 7):
        hists[f"met{level}"] = _summed(stores, f"sum met{level}", slices[level - 1 :])

    labels = {2: "5", 3: "10", 4: "20", 5: "30", 6: "40"}
    colors = {2: 42, 3: 30, 4: 38, 5: 36, 6: 40}
    curves = [Curve(hists["all"], "All Events", 46)]
    curves.extend(
        Curve(hists[f"met{level}"], f"{labels[level]} < {_MET} [GeV]", colors[level])
        for level in range(2, 7)
    )

    print(f"All Muons: {hists['all'].integral(0, 200):g}")
    print(f"30 GeV threshold: {hists['met5'].integral(0, 200):g}")
    print(f"All Muons (> 30 GeV): {hists['all'].integral(30, 200):g}")
    print(f"30 GeV threshold (> 30 GeV): {hists['met5'].integral(30, 200):g}")

    overlay_plot(
        output,
        curves,
        title=f"Cuts on {_MET}",
        xlabel=_PT_LABEL,
        ylabel=_N_MUONS,
        xrange=(5, 120),
    )
    return hists


def njets_plot(stores: Iterable[HistogramStore], output: str | Path) -> dict[str, Hist1D]:
    """Muon pT split by the number of jets in the event."""
    stores = list(stores)
    hists = {
        "all": _summed(stores, "sum", ["Bare_Muon_pT"]),
        "jet0": _summed(stores, "sum jet1", ["No_Jet"]),
        "jet1": _summed(stores, "sum jet2", ["One_Jet"]),
        "jet2": _summed(stores, "sum jet3", ["Two_Jet"]),
        "jetmulti": _summed(stores, "sum jet4", ["Mult_Jet"]),
    }
    overlay_plot(
        output,
        [
            Curve(hists["all"], "All Events", 46),
            Curve(hists["jet0"], "nJets = 0", 42),
            Curve(hists["jet1"], "nJets = 1", 41),
            Curve(hists["jet2"], "nJets = 2", 30),
            Curve(hists["jetmulti"], "nJets > 2", 29),
        ],
        title=r"Muon $p_{T}$ Distribution for Number of Jets in Event",
        xlabel=_PT_LABEL,
        ylabel=_N_MUONS,
        xrange=(5, 80),
    )
    return hists


def nmuons_plot(stores: Iterable[HistogramStore], output: str | Path) -> dict[str, Hist1D]:
    """Muon pT split by the number of muons in the event."""
    stores = list(stores)
    hists = {
        "all": _summed(stores, "sum", ["Bare_Muon_pT"]),
        "one": _summed(stores, "plot1", ["OneMuon"]),
        "two": _summed(stores, "plot2", ["TwoMuon"]),
        "three": _summed(stores, "plot3", ["ThreeMuon"]),
    }
    overlay_plot(
        output,
        [
            Curve(hists["all"], "All Events", 46),
            Curve(hists["one"], "nMuons=1", 42),
            Curve(hists["two"], "nMuons=2", 38),
            Curve(hists["three"], "nMuons=3", 30),
        ],
        title=r"Muon $p_{T}$ Distribution for Number of Muons in Event",
        xlabel=_PT_LABEL,
        ylabel=_N_MUONS,
        xrange=(5, 80),
        yrange=(1, 1e10),
    )
    return hists


def w_kinematics_plot(store: HistogramStore, output: str | Path) -> dict[str, Hist1D]:
    """Muon, jet and missing transverse momentum of the W boson sample."""
    hists = {
        "muon": store.get("Bare_Muon_pT"),
        "jet": store.get("JetPt"),
        "met": store.get("MetPt"),
    }
    overlay_plot(
        output,
        [
            Curve(hists["muon"], "Muon pT", 46),
            Curve(hists["jet"], "Jet pT", 42),
            Curve(hists["met"], "MET", 30),
        ],
        title="W Boson Kinematics",
        xlabel="pT [GeV]",
        ylabel=_N_MUONS,
    )
    return hists