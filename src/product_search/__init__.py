"""
Product Search Engine

An in-memory product catalog searched by linear scan and by binary search
over an id-sorted view, with exact comparison counting so the two
algorithms can be compared step for step.

Main API:
    SearchEngine(products): catalog snapshot + search operations
    ProductDataGenerator(seed): sample, fixed and random catalogs
    compare_search_performance(engine, id): linear vs binary report

Example Usage:
    from product_search import SearchEngine, ProductDataGenerator

    engine = SearchEngine(ProductDataGenerator().test_case_products())
    product = engine.binary_search_by_id(15)
    print(product, engine.get_last_operation_count())
"""

# src/product_search/__init__.py
from .models import Product, SearchOutcome, PerformanceReport  # re-export
from .engine import SearchEngine
from .generator import ProductDataGenerator, load_dataset, dataset_info
from .analysis import (
    compare_search_performance,
    analyze_search_scenarios,
    benchmark_positions,
    benchmark_sizes,
    complexity_table,
)

__version__ = "1.0.0"
__all__ = [
    "Product",
    "SearchOutcome",
    "PerformanceReport",
    "SearchEngine",
    "ProductDataGenerator",
    "load_dataset",
    "dataset_info",
    "compare_search_performance",
    "analyze_search_scenarios",
    "benchmark_positions",
    "benchmark_sizes",
    "complexity_table",
]
