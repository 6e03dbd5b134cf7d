import json

import pytest

from muonplots.histogram import Hist1D, HistogramMismatchError
from muonplots.samples import (
    SAMPLE_NAMES,
    SUM_ORDER,
    HistogramStore,
    load_samples,
    load_store,
    process_sums,
    sample_paths,
    sum_histograms,
    sum_over_samples,
)


def _hist(name, weight, x=10.0):
    hist = Hist1D(name, name, 60, 0, 120)
    hist.fill(x, weight)
    return hist


def _stores():
    return [
        HistogramStore(sample, [_hist("Bare_Muon_pT", index + 1)])
        for index, sample in enumerate(SAMPLE_NAMES)
    ]


def test_store_get_and_names():
    store = HistogramStore("s", [_hist("b", 1), _hist("a", 2)])
    assert store.names() == ["a", "b"]
    assert store.get("a").integral() == pytest.approx(2)
    assert "b" in store
    assert len(store) == 2


def test_store_missing_histogram_raises():
    store = HistogramStore("s", [_hist("a", 1)])
    with pytest.raises(KeyError):
        store.get("missing")


def test_store_duplicate_names_rejected():
    with pytest.raises(ValueError):
        HistogramStore("s", [_hist("a", 1), _hist("a", 2)])


def test_save_load_round_trip(tmp_path):
    store = HistogramStore("zbos", [_hist("Bare_Muon_pT", 3, 50), _hist("Met1", 4, 7)])
    path = store.save(tmp_path / "deep" / "zbos.json")
    loaded = load_store(path)
    assert loaded.name == "zbos"
    assert loaded.names() == store.names()
    for name in store.names():
        assert loaded.get(name).to_dict() == store.get(name).to_dict()


def test_load_store_rejects_non_store(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_store(path)


def test_sample_paths_order(tmp_path):
    paths = sample_paths(tmp_path)
    assert len(paths) == 28
    assert paths[0] == tmp_path / "ttbar-dilep.json"
    assert paths[-1] == tmp_path / "cc200.json"
    assert paths[23] == paths[24]


def test_load_samples(tmp_path):
    for store in _stores():
        store.save(tmp_path / f"{store.name}.json")
    loaded = load_samples(tmp_path)
    assert [store.name for store in loaded] == list(SAMPLE_NAMES)


def test_sum_histograms_adds_bins():
    parts = [_hist("a", 1, 5), _hist("b", 2, 5), _hist("c", 4, 100)]
    total = sum_histograms("total", parts, 60, 0, 120)
    assert total.name == "total"
    assert total.integral() == pytest.approx(sum(p.integral() for p in parts))
    assert total.bin_content(parts[0].find_bin(5)) == pytest.approx(3)


def test_sum_histograms_binning_mismatch():
    other = Hist1D("x", "x", 30, 0, 120)
    with pytest.raises(HistogramMismatchError):
        sum_histograms("total", [other], 60, 0, 120)


def test_sum_over_samples_missing_histogram():
    with pytest.raises(KeyError):
        sum_over_samples(_stores(), "Nope", 60, 0, 120)


def test_process_sums_invariants():
    stores = _stores()
    result = process_sums(stores, "Bare_Muon_pT", 60, 0, 120)
    assert list(result) == ["sum", *SUM_ORDER]
    every = sum(s.get("Bare_Muon_pT").integral() for s in stores)
    assert result["sum"].integral() == pytest.approx(every)
    ttbar = stores[0].get("Bare_Muon_pT").integral() + stores[1].get("Bare_Muon_pT").integral()
    assert result["ttbar"].integral() == pytest.approx(ttbar)
    assert result["gamma"].integral() == pytest.approx(stores[4].get("Bare_Muon_pT").integral())


def test_process_sums_leaves_stores_untouched():
    stores = _stores()
    before = stores[2].get("Bare_Muon_pT").integral()
    result = process_sums(stores, "Bare_Muon_pT", 60, 0, 120)
    result["wbos"].scale(10)
    assert stores[2].get("Bare_Muon_pT").integral() == pytest.approx(before)


def test_process_sums_needs_all_samples():
    with pytest.raises(ValueError):
        process_sums(_stores()[:-1], "Bare_Muon_pT", 60, 0, 120)