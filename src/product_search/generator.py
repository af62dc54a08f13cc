# src/product_search/generator.py
"""Sample, fixed and randomized product catalogs for demos and benchmarks."""

from __future__ import annotations

import logging
import random
from typing import Callable, Dict, List, Optional, Sequence

from . import config as CFG
from .models import DatasetInfo, Product

log = logging.getLogger(__name__)

PRODUCT_NAMES = (
    "iPhone 15 Pro", "Samsung Galaxy S24", "MacBook Pro", "Dell XPS 13",
    "iPad Air", "Microsoft Surface", "AirPods Pro", "Sony WH-1000XM5",
    "Nintendo Switch", "PlayStation 5", "Xbox Series X", "Steam Deck",
    "Canon EOS R5", "Sony A7 IV", "GoPro Hero 12", "DJI Mini 4 Pro",
    "Apple Watch Ultra", "Garmin Fenix 7", "Fitbit Charge 6", "Samsung Watch",
    "Kindle Oasis", "iPad Pro", "Surface Book", "ThinkPad X1 Carbon",
)

CATEGORIES = (
    "Electronics", "Computers", "Audio", "Gaming", "Photography",
    "Wearables", "Tablets", "Smartphones", "Laptops", "Accessories",
)

DESCRIPTIONS = (
    "Latest technology with premium features",
    "High-performance device for professionals",
    "Affordable option with great value",
    "Premium quality with exceptional design",
    "Best-in-class performance and reliability",
    "Innovative features for modern users",
    "Compact and portable design",
    "Professional-grade quality and durability",
)

# (id, name, category, price, description, stock, rating)
_SAMPLE = [
    (1001, "iPhone 15 Pro", "Smartphones", 999.99, "Latest iPhone with A17 Pro chip", 25, 4.8),
    (1002, "Samsung Galaxy S24", "Smartphones", 899.99, "Android flagship with AI features", 30, 4.7),
    (1003, "MacBook Pro 14", "Laptops", 1999.99, "Professional laptop with M3 chip", 15, 4.9),
    (1004, "Dell XPS 13", "Laptops", 1299.99, "Ultrabook with InfinityEdge display", 20, 4.6),
    (1005, "iPad Air", "Tablets", 599.99, "Versatile tablet for work and play", 40, 4.5),
    (1006, "AirPods Pro", "Audio", 249.99, "Premium wireless earbuds with ANC", 60, 4.7),
    (1007, "Sony WH-1000XM5", "Audio", 399.99, "Industry-leading noise canceling headphones", 35, 4.8),
    (1008, "Nintendo Switch", "Gaming", 299.99, "Hybrid gaming console", 50, 4.6),
    (1009, "PlayStation 5", "Gaming", 499.99, "Next-gen gaming console", 10, 4.9),
    (1010, "Canon EOS R5", "Photography", 3899.99, "Professional mirrorless camera", 8, 4.8),
    (1011, "Apple Watch Ultra", "Wearables", 799.99, "Rugged smartwatch for athletes", 22, 4.7),
    (1012, "Microsoft Surface Pro", "Tablets", 1099.99, "2-in-1 laptop tablet hybrid", 18, 4.5),
    (1013, "Kindle Oasis", "Electronics", 279.99, "Premium e-reader with warm light", 45, 4.4),
    (1014, "ThinkPad X1 Carbon", "Laptops", 1599.99, "Business laptop with carbon fiber", 12, 4.6),
    (1015, "GoPro Hero 12", "Photography", 399.99, "Action camera with 5.3K video", 28, 4.5),
]

# ids 1,2,5,10,15,20,25,27,29,30,31,32; three "Samsung" names for the name filter
_TEST_CASES = [
    (1, "First Product", "Electronics", 100.00, "Test product at first position", 1, 1.0),
    (2, "Second Product", "Computers", 200.00, "Test product for basic search", 2, 2.0),
    (5, "Fifth Product", "Audio", 500.00, "Test product with gap in ID sequence", 5, 3.0),
    (10, "Tenth Product", "Gaming", 1000.00, "Test product for mid-range search", 10, 4.0),
    (15, "Fifteenth Product", "Photography", 1500.00, "Test product for middle position", 15, 5.0),
    (20, "Twentieth Product", "Wearables", 2000.00, "Test product for higher range", 20, 4.5),
    (25, "Samsung Phone", "Smartphones", 800.00, "Test product for name search", 25, 4.2),
    (27, "Samsung Tablet", "Tablets", 600.00, "Another Samsung product", 15, 4.1),
    (29, "Samsung Laptop", "Laptops", 1200.00, "Third Samsung product for multiple matches", 8, 4.3),
    (30, "Apple iPhone", "Smartphones", 999.00, "Test product for brand search", 30, 4.8),
    (31, "Test Laptop", "Laptops", 1100.00, "Laptop for category search", 12, 4.0),
    (32, "Final Product", "Electronics", 3200.00, "Test product at last position", 1, 5.0),
]

_BESTSELLING = [
    (2001, "iPhone 15", "Smartphones", 799.99, "Best-selling smartphone", 100, 4.8),
    (2002, "AirPods", "Audio", 179.99, "Best-selling earbuds", 200, 4.6),
    (2003, "MacBook Air", "Laptops", 1099.99, "Best-selling laptop", 75, 4.7),
    (2004, "iPad", "Tablets", 449.99, "Best-selling tablet", 150, 4.5),
    (2005, "Nintendo Switch Lite", "Gaming", 199.99, "Popular handheld console", 120, 4.4),
    (2006, "Echo Dot", "Electronics", 49.99, "Best-selling smart speaker", 300, 4.3),
    (2007, "Fire TV Stick", "Electronics", 39.99, "Popular streaming device", 250, 4.2),
    (2008, "Kindle", "Electronics", 89.99, "Best-selling e-reader", 180, 4.4),
    (2009, "Apple Watch SE", "Wearables", 279.99, "Popular smartwatch", 90, 4.5),
    (2010, "Samsung Buds", "Audio", 149.99, "Popular wireless earbuds", 160, 4.3),
]

_ELECTRONICS = [
    (3001, "Smart TV 55", "Electronics", 699.99, "4K Smart Television", 25, 4.5),
    (3002, "Bluetooth Speaker", "Electronics", 129.99, "Portable wireless speaker", 50, 4.3),
    (3003, "Wireless Charger", "Electronics", 39.99, "Fast wireless charging pad", 80, 4.2),
    (3004, "Smart Home Hub", "Electronics", 199.99, "Central smart home controller", 30, 4.4),
    (3005, "Security Camera", "Electronics", 159.99, "WiFi security camera", 40, 4.1),
    (3006, "Robot Vacuum", "Electronics", 399.99, "Smart robot vacuum cleaner", 20, 4.6),
    (3007, "Smart Doorbell", "Electronics", 249.99, "Video doorbell with app", 35, 4.3),
    (3008, "Streaming Device", "Electronics", 89.99, "4K streaming media player", 60, 4.4),
]

_BUDGET = [
    (4001, "Budget Phone", "Smartphones", 199.99, "Affordable smartphone", 100, 3.8),
    (4002, "Basic Laptop", "Laptops", 399.99, "Entry-level laptop", 50, 3.5),
    (4003, "Wired Earphones", "Audio", 19.99, "Basic wired earphones", 200, 3.9),
    (4004, "Budget Tablet", "Tablets", 149.99, "7-inch budget tablet", 75, 3.6),
    (4005, "Basic Webcam", "Electronics", 29.99, "HD webcam for video calls", 120, 3.7),
    (4006, "USB Hub", "Accessories", 24.99, "4-port USB hub", 150, 4.0),
]

_PREMIUM = [
    (5001, "iPhone 15 Pro Max", "Smartphones", 1199.99, "Premium flagship smartphone", 20, 4.9),
    (5002, "MacBook Pro 16", "Laptops", 2499.99, "Professional laptop", 15, 4.8),
    (5003, "Sony A7R V", "Photography", 3899.99, "Professional camera", 5, 4.9),
    (5004, "Bose QuietComfort Ultra", "Audio", 429.99, "Premium noise-canceling headphones", 25, 4.7),
    (5005, "Surface Studio", "Computers", 3499.99, "All-in-one creative workstation", 8, 4.6),
]

SCENARIOS = ("bestselling", "electronics", "budget", "premium")


def _build(rows) -> List[Product]:
    return [
        Product(id=pid, name=name, category=cat, price=price,
                description=desc, stock=stock, rating=rating)
        for pid, name, cat, price, desc, stock, rating in rows
    ]


class ProductDataGenerator:
    """
    Produces catalogs for the engine. Fixed datasets are always identical;
    random ones depend on `seed` (None → fresh entropy per instance).
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def sample_products(self) -> List[Product]:
        return _build(_SAMPLE)

    def test_case_products(self) -> List[Product]:
        return _build(_TEST_CASES)

    def random_products(self, count: int) -> List[Product]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        rng = self._rng
        products = []
        for i in range(count):
            products.append(Product(
                id=i + 1,
                name=f"{rng.choice(PRODUCT_NAMES)} {i + 1}",
                category=rng.choice(CATEGORIES),
                price=CFG.PRICE_MIN + rng.random() * CFG.PRICE_SPAN,
                description=rng.choice(DESCRIPTIONS),
                stock=rng.randint(1, CFG.STOCK_MAX),
                rating=CFG.RATING_MIN + rng.random() * CFG.RATING_SPAN,
            ))
        log.debug("generated %d random products", count)
        return products

    def products_with_id_pattern(self, count: int, start_id: int = 1, increment: int = 1) -> List[Product]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        products = []
        for i in range(count):
            pid = start_id + i * increment
            products.append(Product(
                id=pid,
                name=f"Product {pid}",
                category=CATEGORIES[i % len(CATEGORIES)],
                price=100.0 + i * 50.0,
                description=f"Test product with ID {pid}",
                stock=10 + i,
                rating=3.0 + (i % 3),
            ))
        return products

    def scenario_products(self, scenario: str) -> List[Product]:
        """Named fixed datasets; unknown names fall back to the sample set."""
        table: Dict[str, Callable[[], List[Product]]] = {
            "bestselling": lambda: _build(_BESTSELLING),
            "electronics": lambda: _build(_ELECTRONICS),
            "budget": lambda: _build(_BUDGET),
            "premium": lambda: _build(_PREMIUM),
        }
        return table.get(scenario.lower(), self.sample_products)()


def dataset_info(products: Sequence[Product]) -> Optional[DatasetInfo]:
    """Price/category/id summary of a catalog; None when it is empty."""
    if not products:
        return None
    prices = [p.price for p in products]
    ids = [p.id for p in products]
    # dict keeps first-seen order
    categories = tuple(dict.fromkeys(p.category for p in products))
    return DatasetInfo(
        total=len(products),
        min_price=min(prices),
        max_price=max(prices),
        avg_price=sum(prices) / len(products),
        categories=categories,
        min_id=min(ids),
        max_id=max(ids),
    )


def product_id_at_position(products: Sequence[Product], position: int) -> Optional[int]:
    """Id at a 1-based position, or None when the position is out of range."""
    if 1 <= position <= len(products):
        return products[position - 1].id
    return None


DATASETS = ("sample", "test", "random", "pattern") + SCENARIOS


def load_dataset(name: str, *, size: int = CFG.RANDOM_DATASET_SIZE,
                 seed: Optional[int] = None) -> List[Product]:
    """Resolve a dataset name (as offered by the CLI/GUI) to a product list."""
    key = name.lower()
    if key not in DATASETS:
        raise ValueError(f"unknown dataset {name!r}; choose from {', '.join(DATASETS)}")
    gen = ProductDataGenerator(seed)
    if key == "sample":
        return gen.sample_products()
    if key == "test":
        return gen.test_case_products()
    if key == "random":
        return gen.random_products(size)
    if key == "pattern":
        return gen.products_with_id_pattern(size)
    return gen.scenario_products(key)
