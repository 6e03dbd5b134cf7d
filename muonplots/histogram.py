"""Fixed-width one-dimensional histogram with underflow and overflow bins."""

from __future__ import annotations

from typing import Any

__all__ = ["HistogramMismatchError", "Hist1D", "hist_from_dict"]


class HistogramMismatchError(ValueError):
    """Raised when histograms with different binning are combined."""


class Hist1D:
    """Histogram with ``nbins`` equal bins over ``[low, high)``.

    Bin 0 is the underflow bin, bins 1..nbins cover the range and bin
    nbins + 1 is the overflow bin.
    """

    def __init__(self, name: str, title: str, nbins: int, low: float, high: float) -> None:
        if nbins < 1:
            raise ValueError(f"histogram needs at least one bin, got {nbins}")
        if not high > low:
            raise ValueError(f"upper edge {high} must exceed lower edge {low}")
        self.name = name
        self.title = title
        self.nbins = int(nbins)
        self.low = float(low)
        self.high = float(high)
        self.contents = [0.0] * (self.nbins + 2)

    def __repr__(self) -> str:
        return f"Hist1D({self.name!r}, {self.nbins}, {self.low}, {self.high})"

    def _binning(self) -> tuple[int, float, float]:
        return (self.nbins, self.low, self.high)

    def _check_index(self, index: int) -> None:
        if not 0 <= index <= self.nbins + 1:
            raise IndexError(f"bin {index} outside 0..{self.nbins + 1}")

    def find_bin(self, x: float) -> int:
        """The bin that ``x`` falls into."""
        if x < self.low:
            return 0
        if x >= self.high:
            return self.nbins + 1
        return 1 + int(self.nbins * (x - self.low) / (self.high - self.low))

    def fill(self, x: float, weight: float = 1.0) -> int:
        """Add ``weight`` to the bin of ``x`` and return that bin."""
        index = self.find_bin(x)
        self.contents[index] += weight
        return index

    def bin_content(self, index: int) -> float:
        self._check_index(index)
        return self.contents[index]

    def set_bin_content(self, index: int, value: float) -> None:
        self._check_index(index)
        self.contents[index] = float(value)

    def add(self, other: "Hist1D", factor: float = 1.0) -> "Hist1D":
        """Add ``factor`` times ``other`` bin by bin; binning must match."""
        if other._binning() != self._binning():
            raise HistogramMismatchError(
                f"cannot add {other.name!r} {other._binning()} "
                f"to {self.name!r} {self._binning()}"
            )
        self.contents = [a + factor * b for a, b in zip(self.contents, other.contents)]
        return self

    def scale(self, factor: float) -> "Hist1D":
        """Multiply every bin by ``factor``."""
        self.contents = [value * factor for value in self.contents]
        return self

    def integral(self, first: int | None = None, last: int | None = None) -> float:
        """Sum of bins ``first``..``last`` inclusive.

        Without arguments the range bins 1..nbins are summed. A negative
        ``first`` starts at the underflow bin; a ``last`` beyond the overflow
        bin or below ``first`` ends at the overflow bin.
        """
        first = 1 if first is None else first
        last = self.nbins if last is None else last
        first = max(first, 0)
        if last > self.nbins + 1 or last < first:
            last = self.nbins + 1
        return sum(self.contents[first : last + 1])

    def bin_edges(self) -> list[float]:
        width = (self.high - self.low) / self.nbins
        return [self.low + i * width for i in range(self.nbins)] + [self.high]

    def bin_centers(self) -> list[float]:
        edges = self.bin_edges()
        return [(a + b) / 2 for a, b in zip(edges, edges[1:])]

    def copy(self, name: str | None = None) -> "Hist1D":
        """An independent copy, optionally under another name."""
        clone = Hist1D(self.name if name is None else name, self.title, self.nbins, self.low, self.high)
        clone.contents = list(self.contents)
        return clone

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "nbins": self.nbins,
            "low": self.low,
            "high": self.high,
            "contents": list(self.contents),
        }


def hist_from_dict(data: dict[str, Any]) -> Hist1D:
    """Rebuild a histogram from the mapping made by ``Hist1D.to_dict``."""
    try:
        hist = Hist1D(data["name"], data["title"], data["nbins"], data["low"], data["high"])
        contents = [float(value) for value in data["contents"]]
    except KeyError as exc:
        raise ValueError(f"histogram data lacks field {exc.args[0]!r}") from None
    if len(contents) != hist.nbins + 2:
        raise ValueError(
            f"histogram {hist.name!r} needs {hist.nbins + 2} contents, got {len(contents)}"
        )
    hist.contents = contents
    return hist