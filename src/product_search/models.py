# src/product_search/models.py
"""
Data models for the product search engine.

- Product: one catalog entry (immutable once built).
- SearchOutcome: a search result bundled with the comparisons it cost.
- PerformanceReport: linear vs binary comparison for a single target id.
- ScenarioAnalysis, ComplexityRow, SizeBenchmark, DatasetInfo: report rows
  produced by product_search.analysis and product_search.generator.

These classes hold no search logic; the algorithms live in search.py and the
stateful wrapper in engine.py.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True, slots=True)
class Product:
    """
    One catalog entry.

    Attributes
    ----------
    id : int
        Key used by the binary searches. Assumed unique; duplicates make the
        binary result depend on where the midpoint lands.
    name : str
        Matched by case-insensitive substring containment.
    category : str
        Matched by case-insensitive equality.
    price, stock, rating :
        Not used by the id/name/category searches; price feeds the range filter.
    description : str
        Free text, display only.
    """
    id: int
    name: str
    category: str
    price: float = 0.0
    stock: int = 0
    rating: float = 0.0
    description: str = ""

    def contains_in_name(self, term: str) -> bool:
        return term.lower() in self.name.lower()

    def is_in_category(self, category: str) -> bool:
        return self.category.lower() == category.lower()

    def is_available(self) -> bool:
        return self.stock > 0

    def is_price_in_range(self, min_price: float, max_price: float) -> bool:
        return min_price <= self.price <= max_price

    def __str__(self) -> str:
        return (f"Product[ID={self.id}, Name='{self.name}', "
                f"Category='{self.category}', Price=${self.price:.2f}]")


@dataclass(frozen=True, slots=True)
class SearchOutcome:
    """
    A search result plus the number of element comparisons it took.

    `result` is an Optional[Product] for id lookups and a tuple of products
    for the linear filters.
    """
    result: Union[Optional[Product], Tuple[Product, ...]]
    comparisons: int

    @property
    def found(self) -> bool:
        if isinstance(self.result, tuple):
            return bool(self.result)
        return self.result is not None


@dataclass(frozen=True, slots=True)
class PerformanceReport:
    """
    Linear vs binary search for one target id on one catalog snapshot.

    Ratios are None when their denominator is zero (e.g. an empty catalog
    or a binary search that finished under the timer resolution).
    """
    target_id: int
    catalog_size: int
    linear_found: bool
    linear_ops: int
    linear_time_ns: int
    binary_found: bool
    binary_ops: int
    binary_time_ns: int
    efficiency_gain: Optional[float]
    speed_ratio: Optional[float]
    theoretical_linear: int
    theoretical_binary: int
    theoretical_efficiency: Optional[float]
    linear_product: Optional[str] = None
    binary_product: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ScenarioAnalysis:
    catalog_size: int
    linear_best: int          # first inserted item
    binary_best: int          # middle of the sorted view
    linear_worst: int         # last inserted item
    binary_worst: int         # id that is not in the catalog
    linear_average: int       # n // 2
    binary_average: int       # ceil(log2 n)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ComplexityRow:
    size: int
    linear_comparisons: int
    binary_comparisons: int
    improvement: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SizeBenchmark:
    size: int
    samples: int
    linear_avg_ns: float
    binary_avg_ns: float
    speedup: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class DatasetInfo:
    total: int
    min_price: float
    max_price: float
    avg_price: float
    categories: Tuple[str, ...]   # first-seen order
    min_id: int
    max_id: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
