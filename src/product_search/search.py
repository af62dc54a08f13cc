# src/product_search/search.py
"""
Search algorithms over a sequence of products.

Every function is stateless and returns a SearchOutcome, so the comparison
count travels with the result. SearchEngine wraps these and keeps the
legacy `last_operation_count` field in sync.

Counting rule: one comparison per element examined (linear) or per loop
iteration / recursive step that probes a midpoint (binary).
"""

from __future__ import annotations
import math
from typing import List, Optional, Sequence

from .models import Product, SearchOutcome


def sort_by_id(products: Sequence[Product]) -> List[Product]:
    """Stable sort ascending by id (the precondition of the binary searches)."""
    return sorted(products, key=lambda p: p.id)


def max_binary_comparisons(n: int) -> int:
    """Upper bound on binary search probes for n items: floor(log2 n) + 1."""
    if n <= 0:
        return 0
    return n.bit_length()


def theoretical_binary(n: int) -> int:
    """ceil(log2 n), with n <= 1 treated as 0 instead of a math domain error."""
    if n <= 1:
        return 0
    return math.ceil(math.log2(n))


def _is_blank(text: Optional[str]) -> bool:
    return text is None or not text.strip()


# /* ~~~ linear family ~~~ */

def linear_search_by_id(products: Sequence[Product], product_id: int) -> SearchOutcome:
    comparisons = 0
    for p in products:
        comparisons += 1
        if p.id == product_id:
            return SearchOutcome(p, comparisons)
    return SearchOutcome(None, comparisons)


def linear_search_by_name(products: Sequence[Product], term: Optional[str]) -> SearchOutcome:
    """Case-insensitive substring match. A blank term short-circuits with no scan."""
    if _is_blank(term):
        return SearchOutcome((), 0)
    comparisons = 0
    hits: List[Product] = []
    for p in products:
        comparisons += 1
        if p.contains_in_name(term):
            hits.append(p)
    return SearchOutcome(tuple(hits), comparisons)


def linear_search_by_category(products: Sequence[Product], category: Optional[str]) -> SearchOutcome:
    """Case-insensitive exact match. A blank category short-circuits with no scan."""
    if _is_blank(category):
        return SearchOutcome((), 0)
    comparisons = 0
    hits: List[Product] = []
    for p in products:
        comparisons += 1
        if p.is_in_category(category):
            hits.append(p)
    return SearchOutcome(tuple(hits), comparisons)


def linear_search_by_price_range(products: Sequence[Product], min_price: float,
                                 max_price: float) -> SearchOutcome:
    """Inclusive price filter. Always scans the whole catalog."""
    comparisons = 0
    hits: List[Product] = []
    for p in products:
        comparisons += 1
        if p.is_price_in_range(min_price, max_price):
            hits.append(p)
    return SearchOutcome(tuple(hits), comparisons)


# /* ~~~ binary family (input must be sorted ascending by id) ~~~ */

def binary_search_by_id(sorted_products: Sequence[Product], product_id: int) -> SearchOutcome:
    comparisons = 0
    low, high = 0, len(sorted_products) - 1
    while low <= high:
        comparisons += 1
        mid = low + (high - low) // 2
        mid_id = sorted_products[mid].id
        if mid_id == product_id:
            return SearchOutcome(sorted_products[mid], comparisons)
        if mid_id < product_id:
            low = mid + 1
        else:
            high = mid - 1
    return SearchOutcome(None, comparisons)


def binary_search_recursive(sorted_products: Sequence[Product], product_id: int) -> SearchOutcome:
    """Recursive variant; same probes and count as binary_search_by_id."""
    return _binary_step(sorted_products, product_id, 0, len(sorted_products) - 1, 0)


def _binary_step(items: Sequence[Product], target: int, low: int, high: int,
                 comparisons: int) -> SearchOutcome:
    if low > high:
        return SearchOutcome(None, comparisons)
    comparisons += 1
    mid = low + (high - low) // 2
    mid_id = items[mid].id
    if mid_id == target:
        return SearchOutcome(items[mid], comparisons)
    if mid_id < target:
        return _binary_step(items, target, mid + 1, high, comparisons)
    return _binary_step(items, target, low, mid - 1, comparisons)
