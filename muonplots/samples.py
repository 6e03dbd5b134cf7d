"""Per-sample histogram files and the sums built from them.

Each generated sample is kept as one JSON file holding its histograms.
The analysis reads a fixed list of samples, and the plotting code adds
them up per physics process.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from .histogram import Hist1D, hist_from_dict

__all__ = [
    "SAMPLE_NAMES",
    "PROCESS_GROUPS",
    "SINGLE_PROCESSES",
    "SUM_ORDER",
    "HistogramStore",
    "load_store",
    "sample_paths",
    "load_samples",
    "sum_histograms",
    "sum_over_samples",
    "process_sums",
]

# The slot meant for the 20 GeV c-cbar sample reads the 40 GeV file; the
# analysis has always used the list this way.
SAMPLE_NAMES: tuple[str, ...] = (
    "ttbar-dilep", "ttbar-semilep",
    "wbos", "zbos", "gamma",
    "bottom2", "bottom20", "bottom40", "bottom60", "bottom120",
    "charm2", "charm10", "charm20", "charm40", "charm60", "charm120",
    "bb2", "bb20", "bb40", "bb60", "bb120", "bb200",
    "cc2", "cc40", "cc40", "cc60", "cc120", "cc200",
)

SAMPLE_SUFFIX = ".json"

PROCESS_GROUPS: dict[str, tuple[int, ...]] = {
    "ttbar": (0, 1),
    "bottomonium": tuple(range(5, 10)),
    "charmonium": tuple(range(10, 16)),
    "bbbar": tuple(range(16, 22)),
    "ccbar": tuple(range(22, 28)),
}

SINGLE_PROCESSES: dict[str, int] = {"wbos": 2, "zbos": 3, "gamma": 4}

SUM_ORDER: tuple[str, ...] = (
    "bottomonium", "charmonium", "bbbar", "ccbar", "ttbar", "wbos", "zbos", "gamma",
)


class HistogramStore:
    """A named collection of histograms, looked up by histogram name."""

    def __init__(self, name: str, histograms: Iterable[Hist1D] = ()) -> None:
        self.name = name
        self._histograms: dict[str, Hist1D] = {}
        for hist in histograms:
            if hist.name in self._histograms:
                raise ValueError(f"store {name!r} holds histogram {hist.name!r} twice")
            self._histograms[hist.name] = hist

    def __repr__(self) -> str:
        return f"HistogramStore({self.name!r}, {len(self._histograms)} histograms)"

    def __contains__(self, name: object) -> bool:
        return name in self._histograms

    def __len__(self) -> int:
        return len(self._histograms)

    def __iter__(self) -> Iterator[Hist1D]:
        return iter(self._histograms.values())

    def get(self, name: str) -> Hist1D:
        """The histogram called ``name``; KeyError when there is none."""
        try:
            return self._histograms[name]
        except KeyError:
            raise KeyError(f"store {self.name!r} has no histogram {name!r}") from None

    def names(self) -> list[str]:
        """Sorted names of the histograms held."""
        return sorted(self._histograms)

    def save(self, path: str | Path) -> Path:
        """Write the store as JSON to ``path``, creating parent directories."""
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "name": self.name,
            "histograms": [hist.to_dict() for hist in self._histograms.values()],
        }
        target.write_text(json.dumps(payload), encoding="utf-8")
        return target


def load_store(path: str | Path) -> HistogramStore:
    """Read a store written by ``HistogramStore.save``."""
    source = Path(path)
    data = json.loads(source.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or "histograms" not in data:
        raise ValueError(f"{source} is not a histogram store")
    name = data.get("name", source.stem)
    return HistogramStore(name, (hist_from_dict(item) for item in data["histograms"]))


def sample_paths(directory: str | Path) -> list[Path]:
    """The sample files the analysis reads, in its fixed order."""
    base = Path(directory)
    return [base / f"{name}{SAMPLE_SUFFIX}" for name in SAMPLE_NAMES]


def load_samples(directory: str | Path) -> list[HistogramStore]:
    """Load every sample store from ``directory`` in the fixed order."""
    return [load_store(path) for path in sample_paths(directory)]


def sum_histograms(
    name: str, histograms: Iterable[Hist1D], nbins: int, low: float, high: float
) -> Hist1D:
    """A new histogram ``name`` holding the bin-by-bin sum of ``histograms``."""
    total = Hist1D(name, name, nbins, low, high)
    for hist in histograms:
        total.add(hist)
    return total


def sum_over_samples(
    stores: Iterable[HistogramStore], histname: str, nbins: int, low: float, high: float
) -> Hist1D:
    """Sum of histogram ``histname`` over all ``stores``."""
    return sum_histograms(histname, (store.get(histname) for store in stores), nbins, low, high)


def process_sums(
    stores: Sequence[HistogramStore], histname: str, nbins: int, low: float, high: float
) -> dict[str, Hist1D]:
    """Histogram ``histname`` summed per physics process and over all of them.

    The result maps ``"sum"`` and each name of ``SUM_ORDER`` to a new
    histogram; the stores are left untouched.
    """
    if len(stores) != len(SAMPLE_NAMES):
        raise ValueError(f"expected {len(SAMPLE_NAMES)} sample stores, got {len(stores)}")
    parts: dict[str, Hist1D] = {}
    for process, indices in PROCESS_GROUPS.items():
        parts[process] = sum_histograms(
            process, (stores[i].get(histname) for i in indices), nbins, low, high
        )
    for process, index in SINGLE_PROCESSES.items():
        parts[process] = stores[index].get(histname).copy(process)
    result = {"sum": sum_histograms("sum", (parts[p] for p in SUM_ORDER), nbins, low, high)}
    result.update((process, parts[process]) for process in SUM_ORDER)
    return result