# src/frontend/repl.py
"""Interactive menu on top of a SearchEngine (python -m frontend --repl)."""

from __future__ import annotations
import os, sys, time
from typing import Callable, Optional

from product_search.engine import SearchEngine
from product_search.generator import DATASETS, dataset_info, load_dataset
from product_search.analysis import analyze_search_scenarios, compare_search_performance, complexity_table
from . import formatting as F

HELP = """Commands:
  linear <id>        linear search by id
  binary <id>        iterative binary search by id
  recursive <id>     recursive binary search by id
  compare <id>       linear vs binary for one id
  name <term>        products whose name contains <term>
  category <name>    products in <name>
  price <min> <max>  products priced in [min, max]
  list | info | scenarios | theory
  dataset <name>     switch catalog (""" + ", ".join(DATASETS) + """)
  help | quit        (an empty line also quits)"""


def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""


CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"


class Session:
    """
    REPL state: the current engine and how it was built.
    Switching datasets discards the engine and builds a new one.
    """

    def __init__(self, engine: SearchEngine, dataset: str, size: int, seed: Optional[int]) -> None:
        self.engine = engine
        self.dataset = dataset
        self.size = size
        self.seed = seed

    def switch(self, name: str) -> str:
        products = load_dataset(name, size=self.size, seed=self.seed)
        self.engine = SearchEngine(products)
        self.dataset = name.lower()
        return f"(dataset: {self.dataset}, {len(self.engine)} products)"

    # /* ~~~ one command line in, text out ~~~ */
    def handle(self, line: str) -> str:
        cmd, _, rest = line.strip().partition(" ")
        cmd = cmd.lower()
        rest = rest.strip()
        eng = self.engine

        lookups: dict[str, Callable] = {
            "linear": eng.linear_search_by_id,
            "binary": eng.binary_search_by_id,
            "recursive": eng.binary_search_recursive,
        }
        if cmd in lookups or cmd == "compare":
            try:
                product_id = int(rest)
            except ValueError:
                return _c("error: please enter a valid product id (integer).", "31")
            if cmd == "compare":
                return F.format_report(compare_search_performance(eng, product_id))
            t0 = time.perf_counter_ns()
            product = lookups[cmd](product_id)
            elapsed = time.perf_counter_ns() - t0
            return F.format_outcome(cmd.capitalize() + " Search", product, eng.get_last_operation_count(), elapsed)

        if cmd == "name":
            rows = eng.linear_search_by_name(rest)
            return F.format_table(rows) + f"\n{eng.get_last_operation_count()} comparisons"
        if cmd == "category":
            rows = eng.linear_search_by_category(rest)
            return F.format_table(rows) + f"\n{eng.get_last_operation_count()} comparisons"
        if cmd == "price":
            try:
                lo, hi = (float(x) for x in rest.split())
            except ValueError:
                return _c("error: usage: price <min> <max>", "31")
            rows = eng.linear_search_by_price_range(lo, hi)
            return F.format_table(rows) + f"\n{eng.get_last_operation_count()} comparisons"
        if cmd == "list":
            return F.format_table(eng.items)
        if cmd == "info":
            return F.format_dataset_info(dataset_info(eng.items))
        if cmd == "scenarios":
            return F.format_scenarios(analyze_search_scenarios(eng))
        if cmd == "theory":
            return F.format_complexity(complexity_table())
        if cmd == "dataset":
            try:
                return _c(self.switch(rest), "2;36")
            except ValueError as exc:
                return _c(f"error: {exc}", "31")
        if cmd == "help":
            return HELP
        return _c(f"unknown command {cmd!r} (type 'help')", "31")


def run_repl(engine: SearchEngine, *, dataset: str, size: int, seed: Optional[int] = None) -> int:
    session = Session(engine, dataset, size, seed)
    print(f"Product search [{dataset}: {len(engine)} products]. Type 'help' for commands, empty line to quit.")
    while True:
        try:
            raw = input("> ")
        except (EOFError, KeyboardInterrupt):
            print(); break
        if raw.strip() == "" or raw.strip().lower() in ("quit", "exit"):
            print("Goodbye!"); break
        print(session.handle(raw))
    return 0
