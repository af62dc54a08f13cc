# src/product_search/config.py
from __future__ import annotations

# dataset loaded when no --dataset is given
DEFAULT_DATASET: str = "sample"

# size of the catalog built for --dataset random / pattern
RANDOM_DATASET_SIZE: int = 100

# id that never appears in the bundled datasets (worst-case probe)
NOT_FOUND_PROBE_ID: int = 99999

# /* ~~~ benchmark tuning ~~~ */
PERFORMANCE_SIZES: tuple[int, ...] = (10, 50, 100, 500, 1000)
THEORY_SIZES: tuple[int, ...] = (10, 100, 1_000, 10_000, 100_000, 1_000_000)
MAX_TIMING_SAMPLES: int = 10

# /* ~~~ random catalog bounds ~~~ */
PRICE_MIN: float = 50.0
PRICE_SPAN: float = 2950.0
STOCK_MAX: int = 100
RATING_MIN: float = 1.0
RATING_SPAN: float = 4.0
