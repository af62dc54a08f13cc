# src/product_search/analysis.py
"""
Comparative cost reporting for linear vs binary search.

compare_search_performance() is the engine-level comparison; the rest builds
the scenario, benchmark and theory tables shown by the front-ends.
"""

from __future__ import annotations

import logging
import os
import time
from typing import Iterable, List, Optional

from . import config as CFG
from .engine import SearchEngine
from .generator import ProductDataGenerator
from .models import ComplexityRow, PerformanceReport, ScenarioAnalysis, SizeBenchmark
from .search import theoretical_binary

log = logging.getLogger(__name__)


# Per-sample progress logging (set PRODUCT_SEARCH_VERBOSE=1 to enable)
def _verbose() -> bool:
    return os.environ.get("PRODUCT_SEARCH_VERBOSE") == "1"


def _ratio(num: float, den: float) -> Optional[float]:
    return num / den if den > 0 else None


def compare_search_performance(engine: SearchEngine, product_id: int) -> PerformanceReport:
    """
    Run linear then binary search for `product_id` and time each one.

    The order is fixed: after this call engine.last_operation_count holds
    the binary search count.
    """
    t0 = time.perf_counter_ns()
    linear = engine.linear_search_by_id(product_id)
    linear_ns = time.perf_counter_ns() - t0
    linear_ops = engine.last_operation_count

    t0 = time.perf_counter_ns()
    binary = engine.binary_search_by_id(product_id)
    binary_ns = time.perf_counter_ns() - t0
    binary_ops = engine.last_operation_count

    n = len(engine)
    theo_linear = n // 2
    theo_binary = theoretical_binary(n)

    report = PerformanceReport(
        target_id=product_id,
        catalog_size=n,
        linear_found=linear is not None,
        linear_ops=linear_ops,
        linear_time_ns=linear_ns,
        binary_found=binary is not None,
        binary_ops=binary_ops,
        binary_time_ns=binary_ns,
        efficiency_gain=_ratio(linear_ops, binary_ops) if linear_ops > 0 else None,
        speed_ratio=_ratio(linear_ns, binary_ns),
        theoretical_linear=theo_linear,
        theoretical_binary=theo_binary,
        theoretical_efficiency=_ratio(theo_linear, theo_binary),
        linear_product=linear.name if linear is not None else None,
        binary_product=binary.name if binary is not None else None,
    )
    log.info("compare id=%d n=%d linear_ops=%d binary_ops=%d", product_id, n, linear_ops, binary_ops)
    return report


def analyze_search_scenarios(engine: SearchEngine,
                             probe_id: int = CFG.NOT_FOUND_PROBE_ID) -> Optional[ScenarioAnalysis]:
    """Best/worst case counts on the current catalog; None when it is empty."""
    n = len(engine)
    if n == 0:
        return None

    engine.linear_search_by_id(engine.items[0].id)
    linear_best = engine.last_operation_count

    engine.binary_search_by_id(engine.sorted_items[n // 2].id)
    binary_best = engine.last_operation_count

    engine.linear_search_by_id(engine.items[-1].id)
    linear_worst = engine.last_operation_count

    engine.binary_search_by_id(probe_id)
    binary_worst = engine.last_operation_count

    return ScenarioAnalysis(
        catalog_size=n,
        linear_best=linear_best,
        binary_best=binary_best,
        linear_worst=linear_worst,
        binary_worst=binary_worst,
        linear_average=n // 2,
        binary_average=theoretical_binary(n),
    )


def benchmark_positions(engine: SearchEngine) -> List[PerformanceReport]:
    """Compare at 1-based positions 1, n/4, n/2, 3n/4 and n of the insertion order."""
    n = len(engine)
    positions = [1, n // 4, n // 2, 3 * n // 4, n]
    reports: List[PerformanceReport] = []
    for pos in positions:
        if 0 < pos <= n:
            reports.append(compare_search_performance(engine, engine.items[pos - 1].id))
    return reports


def benchmark_sizes(sizes: Iterable[int] = CFG.PERFORMANCE_SIZES,
                    generator: Optional[ProductDataGenerator] = None) -> List[SizeBenchmark]:
    """
    Average linear/binary wall time over evenly spaced lookups per catalog size.

    Each size gets a fresh random catalog from `generator` and
    min(MAX_TIMING_SAMPLES, size) lookups of ids that are present.
    """
    gen = generator or ProductDataGenerator()
    rows: List[SizeBenchmark] = []
    for size in sizes:
        if size <= 0:
            raise ValueError(f"benchmark size must be positive, got {size}")
        products = gen.random_products(size)
        engine = SearchEngine(products)
        samples = min(CFG.MAX_TIMING_SAMPLES, size)

        linear_total = binary_total = 0
        for i in range(samples):
            target = products[(i * size) // samples].id

            t0 = time.perf_counter_ns()
            engine.linear_search_by_id(target)
            linear_total += time.perf_counter_ns() - t0

            t0 = time.perf_counter_ns()
            engine.binary_search_by_id(target)
            binary_total += time.perf_counter_ns() - t0
            if _verbose():
                log.info("size=%d sample %d/%d: id=%d", size, i + 1, samples, target)

        linear_avg = linear_total / samples
        binary_avg = binary_total / samples
        rows.append(SizeBenchmark(
            size=size,
            samples=samples,
            linear_avg_ns=linear_avg,
            binary_avg_ns=binary_avg,
            speedup=_ratio(linear_avg, binary_avg),
        ))
        log.info("benchmark size=%d linear=%.0fns binary=%.0fns", size, linear_avg, binary_avg)
    return rows


def complexity_table(sizes: Iterable[int] = CFG.THEORY_SIZES) -> List[ComplexityRow]:
    """Worst-case comparisons: n for linear, ceil(log2 n) for binary."""
    rows = []
    for size in sizes:
        binary = theoretical_binary(size)
        rows.append(ComplexityRow(
            size=size,
            linear_comparisons=size,
            binary_comparisons=binary,
            improvement=_ratio(size, binary),
        ))
    return rows
