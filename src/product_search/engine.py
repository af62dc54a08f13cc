# src/product_search/engine.py
from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional, Sequence

from . import search as S
from .models import Product, PerformanceReport, SearchOutcome

log = logging.getLogger(__name__)


class SearchEngine:
    """
    Holds one catalog snapshot in two orderings and runs searches over it:
      - items:        insertion order (linear search and filters)
      - sorted_items: ascending by id (binary searches)

    Public API (used by the CLI and the GUI):
      * linear_search_by_id / binary_search_by_id / binary_search_recursive
      * linear_search_by_name / linear_search_by_category / linear_search_by_price_range
      * get_last_operation_count()
      * compare_search_performance(id)

    Every search resets `last_operation_count` before its first comparison
    and leaves the final count there. That field is shared instance state:
    one engine must not serve concurrent callers. The functions in
    product_search.search return the count with the result and need no lock.

    Replacing the dataset means building a new engine; there is no
    incremental insert/delete.
    """

    # ------------- lifecycle -------------

    def __init__(self, products: Iterable[Product]) -> None:
        # both views are copies; later changes to the caller's list are not seen
        self.items: tuple[Product, ...] = tuple(products)
        self.sorted_items: tuple[Product, ...] = tuple(S.sort_by_id(self.items))
        self.last_operation_count: int = 0
        log.info("SearchEngine ready: %d products", len(self.items))

    def __len__(self) -> int:
        return len(self.items)

    # ------------- linear family -------------

    def linear_search_by_id(self, product_id: int) -> Optional[Product]:
        return self._run(S.linear_search_by_id, self.items, product_id).result

    def linear_search_by_name(self, term: Optional[str]) -> List[Product]:
        return list(self._run(S.linear_search_by_name, self.items, term).result)

    def linear_search_by_category(self, category: Optional[str]) -> List[Product]:
        return list(self._run(S.linear_search_by_category, self.items, category).result)

    def linear_search_by_price_range(self, min_price: float, max_price: float) -> List[Product]:
        outcome = self._run(S.linear_search_by_price_range, self.items, min_price, max_price)
        return list(outcome.result)

    # ------------- binary family -------------

    def binary_search_by_id(self, product_id: int) -> Optional[Product]:
        return self._run(S.binary_search_by_id, self.sorted_items, product_id).result

    def binary_search_recursive(self, product_id: int) -> Optional[Product]:
        return self._run(S.binary_search_recursive, self.sorted_items, product_id).result

    # ------------- instrumentation -------------

    def get_last_operation_count(self) -> int:
        return self.last_operation_count

    def compare_search_performance(self, product_id: int) -> PerformanceReport:
        """Linear then binary on the same target; the counter ends on the binary count."""
        from .analysis import compare_search_performance
        return compare_search_performance(self, product_id)

    def get_products(self) -> List[Product]:
        return list(self.items)

    def get_sorted_products(self) -> List[Product]:
        return list(self.sorted_items)

    # ------------- internals -------------

    def _run(self, algorithm: Callable[..., SearchOutcome], view: Sequence[Product], *args) -> SearchOutcome:
        self.last_operation_count = 0
        outcome = algorithm(view, *args)
        self.last_operation_count = outcome.comparisons
        log.debug("%s: comparisons=%d found=%s", algorithm.__name__, outcome.comparisons, outcome.found)
        return outcome
