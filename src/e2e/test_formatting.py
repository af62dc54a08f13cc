from frontend import formatting as F
from product_search.analysis import complexity_table
from product_search.engine import SearchEngine
from product_search.generator import ProductDataGenerator, dataset_info
from product_search.models import Product, SizeBenchmark


def test_format_product_detailed():
    p = Product(5, "Widget", "Tools", price=9.5, stock=0, rating=4.25, description="A widget")
    text = F.format_product(p, detailed=True)
    assert "Product ID: 5" in text
    assert "Price: $9.50" in text
    assert "out of stock" in text
    assert F.format_product(p) == str(p)


def test_format_table():
    assert F.format_table([]) == "(no matches)"
    rows = ProductDataGenerator().test_case_products()[:2]
    text = F.format_table(rows)
    assert text.splitlines()[0].startswith("#")
    assert "First Product" in text and "Second Product" in text


def test_format_outcome():
    p = Product(1, "x", "y")
    assert "FOUND" in F.format_outcome("Linear Search", p, 1)
    text = F.format_outcome("Binary Search", None, 3, elapsed_ns=2500)
    assert "NOT FOUND" in text and "3 comparisons" in text and "2.50 μs" in text


def test_format_report_handles_missing_ratios():
    r = SearchEngine([]).compare_search_performance(1)
    text = F.format_report(r)
    assert "Dataset size: 0 products" in text
    assert "Efficiency gain: n/a" in text


def test_format_tables_and_info():
    assert "1,024" in F.format_complexity(complexity_table([1024]))
    text = F.format_size_benchmarks([SizeBenchmark(10, 10, 2000.0, 500.0, 4.0)])
    assert "2.00" in text and "0.50" in text and "4.0x" in text
    assert "No products in dataset." in F.format_dataset_info(None)
    info = dataset_info(ProductDataGenerator().sample_products())
    assert "Total Products: 15" in F.format_dataset_info(info)
    assert "No products available" in F.format_scenarios(None)
