# muonplots

Tools for combining per-sample muon histograms and drawing the comparison
plots used to study event selections. The plots cover muon transverse
momentum split by number of jets or muons, missing transverse energy
thresholds, angular separations, process breakdowns, combined cuts and
survival functions.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Histograms

`muonplots.histogram.Hist1D` is a histogram with fixed-width bins over
`[low, high)`. Bin 0 is the underflow bin and bin `nbins + 1` is the
overflow bin. It provides `find_bin`, `fill`, `bin_content`,
`set_bin_content`, `add`, `scale`, `integral`, `bin_edges`, `bin_centers`,
`copy` and `to_dict`. `hist_from_dict` rebuilds a histogram from the
mapping that `to_dict` returns. If you `add` histograms whose binning
differs, a `HistogramMismatchError` is raised.

## Input data

Each simulated sample is a `muonplots.samples.HistogramStore`, a named set
of histograms saved as a JSON file with `HistogramStore.save` and read back
with `load_store`.

`sample_paths(directory)` lists the files the plots expect, in a fixed
order: `ttbar-dilep.json`, `ttbar-semilep.json`, `wbos.json`, `zbos.json`,
`gamma.json`, then the bottomonium, charmonium, bb̄ and cc̄ slices.
`load_samples(directory)` loads them all in that order.

Three helpers combine the stores:

- `sum_histograms` adds up a set of histograms.
- `sum_over_samples` adds up one histogram across all stores.
- `process_sums` returns one histogram per physics process and one for all
  processes together.

## Drawing plots

Each plotting function takes the list of stores and an output path or
directory. It writes PNG images with matplotlib and returns the histograms
it drew.

```python
from muonplots.samples import load_samples
from muonplots.selections import njets_plot, met_inclusive_plot
from muonplots.breakdowns import all_events_plot, separation_plots
from muonplots.cuts import combo_cuts_plot, survival_function_plot

stores = load_samples("histograms")
njets_plot(stores, "plots/muon-pt/nJets.png")
met_inclusive_plot(stores, "plots/muon-pt/met_incl.png")
all_events_plot(stores, "plots/all_events.png")
separation_plots(stores, "plots/separation")
combo_cuts_plot(stores, "plots/muon-pt/combo_cuts.png", "plots/pass_cuts.png")
survival_function_plot(stores, "plots/cdf.png")
```

The plotting functions, by module:

- `muonplots.selections`: `dimuon_jet_plot`, `met_inclusive_plot`,
  `njets_plot`, `nmuons_plot`, and `w_kinematics_plot`, which takes a
  single store.
- `muonplots.distributions`: `variable_plots`, `muon_eta_plot`,
  `isolation_plot`.
- `muonplots.breakdowns`: `all_events_plot`, `momentum_magnitude_plot`,
  `separation_plots`, `parton_shower_breakdown`.
- `muonplots.cuts`: `combo_cuts_plot`, `survival_function_plot`.
  `survival_function_plot` divides its counts by `L1_PRESCALE`.

For lower-level drawing, `muonplots.plotting.overlay_plot` takes a list of
`Curve` objects, and `muonplots.plotting.graph_plot` takes
`(label, xs, ys, colour index)` series. `root_color` turns a colour index
into a hex colour.

## Argument parsing

`muonplots.stdarg.StdArg` parses declared flags and key–value options given
in any order. Declare them with `add_flags` and `add_keys`, then call
`process`. Reading starts at the third element of the argument list.

After `process`, query the results with `flag`, `key`, `value` and
`get(name, kind)`. `get` converts the value to `str`, `int`, `float`,
`bool` or any other callable. `show_flags` and `show_keys` print what was
read.

A `BadInput` error is raised for:

- an unknown key,
- a flag or key given twice,
- a key without a value,
- a value that cannot be converted.

## What it does not do

The package installs no command-line program. Plots are made by calling the
functions above from Python. It does not produce the per-sample histograms
itself; it reads stores that were written beforehand.