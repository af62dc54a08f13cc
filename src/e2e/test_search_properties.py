import random
import pytest

from product_search.engine import SearchEngine
from product_search.generator import ProductDataGenerator
from product_search.models import Product
import product_search.search as S


def _shuffled_catalog(n: int, seed: int) -> list[Product]:
    products = ProductDataGenerator(seed=seed).products_with_id_pattern(n, start_id=3, increment=7)
    random.Random(seed).shuffle(products)
    return products


def _probe_ids(products: list[Product]) -> list[int]:
    ids = [p.id for p in products]
    # present ids plus gaps and both ends out of range
    return ids + [i + 1 for i in ids] + [-5, 0, 10**6]


@pytest.mark.parametrize("n", [0, 1, 2, 3, 7, 16, 33, 100])
def test_linear_and_binary_agree(n):
    eng = SearchEngine(_shuffled_catalog(n, seed=n))
    for k in _probe_ids(list(eng.items)):
        lin = eng.linear_search_by_id(k)
        binr = eng.binary_search_by_id(k)
        assert (lin is None) == (binr is None)
        if lin is not None:
            assert lin.id == binr.id == k


@pytest.mark.parametrize("n", [0, 1, 2, 5, 12, 64, 101])
def test_recursive_matches_iterative_result_and_count(n):
    eng = SearchEngine(_shuffled_catalog(n, seed=n + 1))
    for k in _probe_ids(list(eng.items)):
        a = eng.binary_search_by_id(k)
        ops_a = eng.get_last_operation_count()
        b = eng.binary_search_recursive(k)
        ops_b = eng.get_last_operation_count()
        assert a == b
        assert ops_a == ops_b


@pytest.mark.parametrize("n", [1, 2, 3, 4, 8, 12, 31, 32, 100, 257])
def test_cost_bounds(n):
    eng = SearchEngine(_shuffled_catalog(n, seed=3))
    bound = n.bit_length()  # floor(log2 n) + 1
    assert S.max_binary_comparisons(n) == bound
    for k in _probe_ids(list(eng.items)):
        eng.binary_search_by_id(k)
        assert eng.get_last_operation_count() <= bound
        eng.linear_search_by_id(k)
        assert eng.get_last_operation_count() <= n


def test_linear_cost_is_one_based_position():
    products = _shuffled_catalog(20, seed=9)
    eng = SearchEngine(products)
    for pos, p in enumerate(products, start=1):
        eng.linear_search_by_id(p.id)
        assert eng.get_last_operation_count() == pos


def test_repeated_searches_are_idempotent():
    eng = SearchEngine(ProductDataGenerator().sample_products())
    for call in (
        lambda: eng.linear_search_by_id(1008),
        lambda: eng.binary_search_by_id(1008),
        lambda: eng.binary_search_recursive(4242),
        lambda: eng.linear_search_by_name("pro"),
        lambda: eng.linear_search_by_category("laptops"),
    ):
        first = call()
        first_ops = eng.get_last_operation_count()
        second = call()
        assert first == second
        assert eng.get_last_operation_count() == first_ops


def test_engine_copies_input_and_sorts_second_view():
    products = _shuffled_catalog(10, seed=4)
    eng = SearchEngine(products)
    original_ids = [p.id for p in products]

    products.clear()
    assert [p.id for p in eng.items] == original_ids
    assert sorted(eng.sorted_items, key=lambda p: p.id) == list(eng.sorted_items)
    assert sorted(p.id for p in eng.items) == [p.id for p in eng.sorted_items]

    # accessors hand out copies
    got = eng.get_products()
    got.clear()
    assert len(eng.get_products()) == 10
    assert [p.id for p in eng.get_sorted_products()] == sorted(original_ids)


def test_sort_is_stable_for_equal_ids():
    a = Product(3, "a", "x")
    b = Product(3, "b", "x")
    c = Product(1, "c", "x")
    eng = SearchEngine([a, b, c])
    assert list(eng.sorted_items) == [c, a, b]


def test_stateless_functions_carry_their_count():
    items = ProductDataGenerator().test_case_products()
    out = S.linear_search_by_name(items, "samsung")
    assert out.found and len(out.result) == 3 and out.comparisons == 12

    out = S.binary_search_by_id(S.sort_by_id(items), 15)
    assert out.found and out.result.id == 15 and out.comparisons == 4

    out = S.binary_search_recursive(S.sort_by_id(items), 99)
    assert not out.found and out.result is None and out.comparisons == 4

    out = S.linear_search_by_category(items, "")
    assert not out.found and out.result == () and out.comparisons == 0


def test_theoretical_binary_handles_small_catalogs():
    assert S.theoretical_binary(0) == 0
    assert S.theoretical_binary(1) == 0
    assert S.theoretical_binary(2) == 1
    assert S.theoretical_binary(12) == 4
    assert S.theoretical_binary(1024) == 10
    assert S.max_binary_comparisons(0) == 0
