# src/frontend/formatting.py
"""Plain-text renderers shared by the console CLI and the desktop app."""

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

from product_search.models import (
    ComplexityRow,
    DatasetInfo,
    PerformanceReport,
    Product,
    ScenarioAnalysis,
    SizeBenchmark,
)


def format_micros(ns: float) -> str:
    return f"{ns / 1000.0:.2f} μs"


def _ratio(x: Optional[float], suffix: str = "x") -> str:
    return "n/a" if x is None else f"{x:.1f}{suffix}"


def format_product(p: Product, detailed: bool = False) -> str:
    if not detailed:
        return str(p)
    return "\n".join([
        "=== PRODUCT DETAILS ===",
        f"Product ID: {p.id}",
        f"Name: {p.name}",
        f"Category: {p.category}",
        f"Price: ${p.price:.2f}",
        f"Description: {p.description}",
        f"Stock: {p.stock} ({'available' if p.is_available() else 'out of stock'})",
        f"Rating: {p.rating:.1f}/5.0",
    ])


def format_table(products: Sequence[Product]) -> str:
    if not products:
        return "(no matches)"
    lines = [f"{'#':<3} {'ID':<6} {'Name':<28} {'Category':<13} {'Price':>10} {'Stock':>6}"]
    for i, p in enumerate(products, 1):
        name = (p.name[:26] + "..") if len(p.name) > 28 else p.name
        lines.append(f"{i:<3} {p.id:<6} {name:<28} {p.category:<13} {p.price:>10.2f} {p.stock:>6}")
    return "\n".join(lines)


def format_outcome(algorithm: str, result: Optional[Product], comparisons: int,
                   elapsed_ns: Optional[int] = None) -> str:
    status = "FOUND" if result is not None else "NOT FOUND"
    line = f"{algorithm:<16} {status:<10} | {comparisons} comparisons"
    if elapsed_ns is not None:
        line += f" | {format_micros(elapsed_ns)}"
    if result is not None:
        line += f"\n  {result}"
    return line


def format_report(r: PerformanceReport) -> str:
    def found(flag: bool) -> str:
        return "Found" if flag else "Not Found"

    lines = [
        f"Dataset size: {r.catalog_size} products",
        f"Target Product ID: {r.target_id}",
        "",
        "LINEAR SEARCH:  O(n)",
        f"  Result: {found(r.linear_found)}" + (f" ({r.linear_product})" if r.linear_product else ""),
        f"  Time: {r.linear_time_ns} ns",
        f"  Comparisons: {r.linear_ops}",
        "BINARY SEARCH:  O(log n)",
        f"  Result: {found(r.binary_found)}" + (f" ({r.binary_product})" if r.binary_product else ""),
        f"  Time: {r.binary_time_ns} ns",
        f"  Comparisons: {r.binary_ops}",
        "",
        f"Efficiency gain: {_ratio(r.efficiency_gain)} fewer comparisons",
        f"Speed improvement: {_ratio(r.speed_ratio)} faster",
        f"Theory: linear avg ~{r.theoretical_linear}, binary worst ~{r.theoretical_binary}"
        f" ({_ratio(r.theoretical_efficiency)})",
    ]
    return "\n".join(lines)


def format_scenarios(s: Optional[ScenarioAnalysis]) -> str:
    if s is None:
        return "No products available for analysis."
    return "\n".join([
        f"Catalog size: {s.catalog_size}",
        f"Best case   linear (first element):  {s.linear_best} comparisons",
        f"Best case   binary (middle element): {s.binary_best} comparisons",
        f"Worst case  linear (last element):   {s.linear_worst} comparisons",
        f"Worst case  binary (not found):      {s.binary_worst} comparisons",
        f"Average     linear ~{s.linear_average}, binary ~{s.binary_average}",
    ])


def format_complexity(rows: Iterable[ComplexityRow]) -> str:
    lines = [f"{'Dataset Size':<15} {'Linear':<12} {'Binary':<12} Improvement"]
    for row in rows:
        lines.append(f"{row.size:<15,} {row.linear_comparisons:<12,} {row.binary_comparisons:<12} "
                     f"{_ratio(row.improvement)}")
    return "\n".join(lines)


def format_size_benchmarks(rows: Iterable[SizeBenchmark]) -> str:
    lines: List[str] = [f"{'Size':<8} {'Linear (μs)':<14} {'Binary (μs)':<14} Speedup"]
    for row in rows:
        lines.append(f"{row.size:<8} {row.linear_avg_ns / 1000.0:<14.2f} "
                     f"{row.binary_avg_ns / 1000.0:<14.2f} {_ratio(row.speedup)}")
    return "\n".join(lines)


def format_dataset_info(info: Optional[DatasetInfo]) -> str:
    if info is None:
        return "Total Products: 0\nNo products in dataset."
    return "\n".join([
        f"Total Products: {info.total}",
        f"Price Range: ${info.min_price:.2f} - ${info.max_price:.2f}",
        f"Average Price: ${info.avg_price:.2f}",
        f"Categories: {len(info.categories)}",
        f"Category List: {', '.join(info.categories)}",
        f"Product ID Range: {info.min_id} - {info.max_id}",
    ])
