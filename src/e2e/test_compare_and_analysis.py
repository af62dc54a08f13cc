import logging
import pytest

from product_search import analysis
from product_search.engine import SearchEngine
from product_search.generator import ProductDataGenerator
from product_search.analysis import (
    analyze_search_scenarios,
    benchmark_positions,
    benchmark_sizes,
    compare_search_performance,
    complexity_table,
)
from product_search.models import Product


def _test_engine() -> SearchEngine:
    return SearchEngine(ProductDataGenerator().test_case_products())


def test_compare_reports_both_algorithms():
    eng = _test_engine()
    r = eng.compare_search_performance(15)
    assert r.target_id == 15 and r.catalog_size == 12
    assert r.linear_found and r.binary_found
    assert r.linear_ops == 5
    assert r.binary_ops == 4
    assert r.efficiency_gain == pytest.approx(5 / 4)
    assert r.linear_time_ns >= 0 and r.binary_time_ns >= 0
    assert r.theoretical_linear == 6
    assert r.theoretical_binary == 4
    assert r.theoretical_efficiency == pytest.approx(1.5)
    assert r.linear_product == r.binary_product == "Fifteenth Product"


def test_compare_leaves_counter_on_binary_search():
    eng = _test_engine()
    eng.linear_search_by_id(32)
    assert eng.get_last_operation_count() == 12
    r = compare_search_performance(eng, 32)
    assert r.linear_ops == 12
    assert eng.get_last_operation_count() == r.binary_ops
    assert r.binary_ops != r.linear_ops


def test_compare_not_found():
    r = _test_engine().compare_search_performance(99)
    assert not r.linear_found and not r.binary_found
    assert r.linear_ops == 12 and r.binary_ops == 4
    assert r.linear_product is None and r.binary_product is None


@pytest.mark.parametrize("products", [[], [Product(7, "only", "x")]])
def test_compare_small_catalogs_have_no_log_domain_error(products):
    eng = SearchEngine(products)
    r = eng.compare_search_performance(7)
    assert r.theoretical_binary == 0
    assert r.theoretical_efficiency is None
    if not products:
        assert r.linear_ops == 0 and r.binary_ops == 0
        assert r.efficiency_gain is None
    else:
        assert r.linear_ops == 1 and r.binary_ops == 1
        assert r.efficiency_gain == pytest.approx(1.0)


def test_report_to_dict_has_all_fields():
    d = _test_engine().compare_search_performance(1).to_dict()
    for key in ("linear_found", "linear_ops", "linear_time_ns", "binary_found",
                "binary_ops", "binary_time_ns", "efficiency_gain", "speed_ratio"):
        assert key in d


def test_scenario_analysis_on_test_dataset():
    s = analyze_search_scenarios(_test_engine())
    assert s is not None
    assert s.catalog_size == 12
    assert s.linear_best == 1
    assert s.binary_best == 3       # sorted[6] is id 25
    assert s.linear_worst == 12
    assert s.binary_worst == 4      # probe id is absent
    assert s.linear_average == 6
    assert s.binary_average == 4


def test_scenario_analysis_empty_catalog():
    assert analyze_search_scenarios(SearchEngine([])) is None


def test_benchmark_positions():
    reports = benchmark_positions(_test_engine())
    assert [r.target_id for r in reports] == [1, 5, 20, 29, 32]
    assert reports[0].linear_ops == 1
    assert reports[-1].linear_ops == 12
    assert all(r.linear_found and r.binary_found for r in reports)
    assert benchmark_positions(SearchEngine([])) == []


def test_benchmark_sizes_uses_generator():
    rows = benchmark_sizes([5, 20], ProductDataGenerator(seed=1))
    assert [r.size for r in rows] == [5, 20]
    assert [r.samples for r in rows] == [5, 10]
    for r in rows:
        assert r.linear_avg_ns >= 0 and r.binary_avg_ns >= 0
        assert r.speedup is None or r.speedup > 0


def test_benchmark_sizes_rejects_non_positive_size():
    with pytest.raises(ValueError):
        benchmark_sizes([10, 0])


def test_complexity_table():
    rows = complexity_table([1, 10, 1024])
    assert [(r.size, r.linear_comparisons, r.binary_comparisons) for r in rows] == [
        (1, 1, 0), (10, 10, 4), (1024, 1024, 10),
    ]
    assert rows[0].improvement is None
    assert rows[1].improvement == pytest.approx(2.5)
    assert rows[2].improvement == pytest.approx(102.4)


def test_zero_elapsed_time_leaves_speed_ratios_unset(monkeypatch):
    monkeypatch.setattr(analysis.time, "perf_counter_ns", lambda: 1000)
    report = compare_search_performance(_test_engine(), 15)
    assert report.linear_time_ns == 0 and report.binary_time_ns == 0
    assert report.speed_ratio is None
    assert report.efficiency_gain == pytest.approx(5 / 4)

    row = benchmark_sizes([5], ProductDataGenerator(seed=3))[0]
    assert row.binary_avg_ns == 0
    assert row.speedup is None


def test_benchmark_sizes_logs_samples_only_when_verbose(monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="product_search.analysis")
    monkeypatch.delenv("PRODUCT_SEARCH_VERBOSE", raising=False)
    benchmark_sizes([3], ProductDataGenerator(seed=4))
    assert not [r for r in caplog.records if "sample" in r.getMessage()]

    caplog.clear()
    monkeypatch.setenv("PRODUCT_SEARCH_VERBOSE", "1")
    benchmark_sizes([3], ProductDataGenerator(seed=4))
    assert len([r for r in caplog.records if "sample" in r.getMessage()]) == 3
