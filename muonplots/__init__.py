"""Combine per-sample muon histograms and draw selection comparison plots."""

__version__ = "0.1.0"
__all__ = [
    "breakdowns",
    "cuts",
    "distributions",
    "histogram",
    "plotting",
    "samples",
    "selections",
    "stdarg",
]