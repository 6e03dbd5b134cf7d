"""Overlay plots of histograms and line graphs written to image files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from matplotlib.colors import to_hex
from matplotlib.figure import Figure

from .histogram import Hist1D

__all__ = ["Curve", "root_color", "overlay_plot", "graph_plot"]

_FIGSIZE = (8.0, 6.0)
_DPI = 100
_LEGEND_FONT_SIZE = 10

_FIXED_COLORS: dict[int, tuple[float, float, float]] = {
    0: (1.0, 1.0, 1.0), 1: (0.0, 0.0, 0.0), 2: (1.0, 0.0, 0.0),
    3: (0.0, 1.0, 0.0), 4: (0.0, 0.0, 1.0), 5: (1.0, 1.0, 0.0),
    6: (1.0, 0.0, 1.0), 7: (0.0, 1.0, 1.0), 8: (0.35, 0.83, 0.33),
    9: (0.35, 0.33, 0.85), 10: (0.999, 0.999, 0.999),
    11: (0.76, 0.76, 0.76), 12: (0.3, 0.3, 0.3), 13: (0.4, 0.4, 0.4),
    14: (0.5, 0.5, 0.5), 15: (0.6, 0.6, 0.6), 16: (0.7, 0.7, 0.7),
    17: (0.8, 0.8, 0.8), 18: (0.9, 0.9, 0.9), 19: (0.95, 0.95, 0.95),
    20: (0.8, 0.78, 0.67), 21: (0.8, 0.78, 0.67), 22: (0.76, 0.75, 0.66),
    23: (0.73, 0.71, 0.64), 24: (0.70, 0.65, 0.59), 25: (0.72, 0.64, 0.61),
    26: (0.68, 0.6, 0.55), 27: (0.61, 0.56, 0.51), 28: (0.53, 0.4, 0.34),
    29: (0.69, 0.81, 0.78), 30: (0.52, 0.76, 0.64), 31: (0.54, 0.66, 0.63),
    32: (0.51, 0.62, 0.80), 33: (0.68, 0.74, 0.78), 34: (0.48, 0.56, 0.60),
    35: (0.46, 0.54, 0.57), 36: (0.41, 0.51, 0.59), 37: (0.43, 0.48, 0.52),
    38: (0.49, 0.6, 0.82), 39: (0.5, 0.5, 0.59), 40: (0.67, 0.65, 0.75),
    41: (0.83, 0.81, 0.53), 42: (0.87, 0.73, 0.53), 43: (0.74, 0.62, 0.51),
    44: (0.78, 0.6, 0.49), 45: (0.75, 0.51, 0.47), 46: (0.81, 0.37, 0.38),
    47: (0.67, 0.56, 0.58), 48: (0.65, 0.47, 0.48), 49: (0.58, 0.41, 0.44),
}

# Named hues; each accepts an offset from -10 (lightest) to +4 (darkest).
_HUES: dict[int, tuple[float, float, float]] = {
    400: (1.0, 1.0, 0.0),   # yellow
    416: (0.0, 1.0, 0.0),   # green
    432: (0.0, 1.0, 1.0),   # cyan
    600: (0.0, 0.0, 1.0),   # blue
    616: (1.0, 0.0, 1.0),   # magenta
    632: (1.0, 0.0, 0.0),   # red
    800: (1.0, 0.5, 0.0),   # orange
}


def root_color(index: int) -> str:
    """The hex colour of a colour index of the analysis' colour table."""
    if index in _FIXED_COLORS:
        return to_hex(_FIXED_COLORS[index])
    for base, rgb in _HUES.items():
        offset = index - base
        if -10 <= offset <= 4:
            if offset < 0:
                mix = min(0.8, -offset * 0.08)
                shade = tuple(c + (1.0 - c) * mix for c in rgb)
            else:
                shade = tuple(c * (1.0 - 0.15 * offset) for c in rgb)
            return to_hex(shade)
    raise ValueError(f"unknown colour index {index}")


@dataclass
class Curve:
    """A histogram drawn as a line, with its legend label and colour index."""

    hist: Hist1D
    label: str | None
    color: int
    width: float = 3.0


def _save(fig: Figure, output: str | Path) -> Path:
    target = Path(output)
    target.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(target)
    return target


def _style_axes(ax, title: str, xlabel: str, ylabel: str, logy: bool) -> None:
    ax.set_title(title, family="serif")
    ax.set_xlabel(xlabel, family="serif")
    ax.set_ylabel(ylabel, family="serif")
    if logy:
        ax.set_yscale("log", nonpositive="clip")


def overlay_plot(
    output: str | Path,
    curves: Sequence[Curve],
    title: str,
    xlabel: str,
    ylabel: str,
    xrange: tuple[float, float] | None = None,
    yrange: tuple[float, float] | None = None,
    logy: bool = True,
    legend_columns: int = 1,
    annotation: tuple[float, float, str] | None = None,
) -> Path:
    """Draw ``curves`` on one set of axes and write the image to ``output``.

    The legend lists the labelled curves in the order given. ``annotation``
    is ``(x, y, text)`` in axes-fraction coordinates.
    """
    if not curves:
        raise ValueError("an overlay plot needs at least one curve")
    if legend_columns < 1:
        raise ValueError(f"legend needs at least one column, got {legend_columns}")
    fig = Figure(figsize=_FIGSIZE, dpi=_DPI)
    ax = fig.add_subplot()
    for curve in curves:
        hist = curve.hist
        ax.stairs(
            hist.contents[1 : hist.nbins + 1],
            hist.bin_edges(),
            color=root_color(curve.color),
            linewidth=curve.width,
            label=curve.label if curve.label is not None else "_nolegend_",
        )
    _style_axes(ax, title, xlabel, ylabel, logy)
    if xrange is not None:
        ax.set_xlim(*xrange)
    if yrange is not None:
        ax.set_ylim(*yrange)
    if any(curve.label is not None for curve in curves):
        ax.legend(frameon=False, ncol=legend_columns, fontsize=_LEGEND_FONT_SIZE)
    if annotation is not None:
        x, y, text = annotation
        ax.text(x, y, text, transform=ax.transAxes, ha="center", va="center",
                family="serif", fontsize=9)
    return _save(fig, output)


def graph_plot(
    output: str | Path,
    series: Sequence[tuple[str | None, Sequence[float], Sequence[float], int]],
    title: str,
    xlabel: str,
    ylabel: str,
    logy: bool = True,
) -> Path:
    """Draw line graphs and write the image to ``output``.

    Each entry of ``series`` is ``(label, xs, ys, colour index)``.
    """
    if not series:
        raise ValueError("a graph plot needs at least one series")
    fig = Figure(figsize=_FIGSIZE, dpi=_DPI)
    ax = fig.add_subplot()
    for label, xs, ys, color in series:
        if len(xs) != len(ys):
            raise ValueError(f"series {label!r} has {len(xs)} x values and {len(ys)} y values")
        ax.plot(list(xs), list(ys), color=root_color(color), linewidth=3,
                label=label if label is not None else "_nolegend_")
    _style_axes(ax, title, xlabel, ylabel, logy)
    if any(entry[0] is not None for entry in series):
        ax.legend(frameon=False, fontsize=_LEGEND_FONT_SIZE)
    return _save(fig, output)