from __future__ import annotations
import argparse, json, logging, os, sys, time
from dataclasses import asdict

from product_search import config as CFG
from product_search.engine import SearchEngine
from product_search.generator import DATASETS, ProductDataGenerator, dataset_info, load_dataset
from product_search.analysis import (
    analyze_search_scenarios,
    benchmark_positions,
    benchmark_sizes,
    complexity_table,
    compare_search_performance,
)
from . import formatting as F

log = logging.getLogger(__name__)


def _emit(obj) -> None:
    print(json.dumps(obj, ensure_ascii=False, indent=2))


def _show(as_json: bool, data, text: str) -> None:
    if as_json:
        _emit(data)
    else:
        print(text)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Product search CLI (linear vs binary search)")
    p.add_argument("--dataset", choices=DATASETS, default=CFG.DEFAULT_DATASET, help="Catalog to load")
    p.add_argument("--size", type=int, default=CFG.RANDOM_DATASET_SIZE,
                   help="Catalog size for --dataset random/pattern")
    p.add_argument("--seed", type=int, default=None, help="Seed for random catalogs")

    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--linear", type=int, metavar="ID", help="Linear search by product id")
    g.add_argument("--binary", type=int, metavar="ID", help="Iterative binary search by product id")
    g.add_argument("--recursive", type=int, metavar="ID", help="Recursive binary search by product id")
    g.add_argument("--compare", type=int, metavar="ID", help="Compare linear vs binary for one id")
    g.add_argument("--name", metavar="TERM", help="Products whose name contains TERM")
    g.add_argument("--category", metavar="NAME", help="Products in category NAME")
    g.add_argument("--price", nargs=2, type=float, metavar=("MIN", "MAX"), help="Products priced in [MIN, MAX]")
    g.add_argument("--scenarios", action="store_true", help="Best/worst case comparison counts")
    g.add_argument("--benchmark", action="store_true", help="Compare at positions 1, n/4, n/2, 3n/4, n")
    g.add_argument("--perf", nargs="*", type=int, metavar="SIZE",
                   help="Average timings on random catalogs of the given sizes")
    g.add_argument("--theory", action="store_true", help="Worst-case comparison table")
    g.add_argument("--info", action="store_true", help="Dataset summary")
    g.add_argument("--list", action="store_true", help="List the catalog")
    g.add_argument("--repl", action="store_true", help="Interactive menu")

    p.add_argument("--json", action="store_true", help="Emit JSON")
    p.add_argument("--verbose", action="store_true")
    return p


def _run_lookup(eng: SearchEngine, algorithm: str, product_id: int, as_json: bool) -> None:
    method = {
        "linear": eng.linear_search_by_id,
        "binary": eng.binary_search_by_id,
        "recursive": eng.binary_search_recursive,
    }[algorithm]
    t0 = time.perf_counter_ns()
    product = method(product_id)
    elapsed = time.perf_counter_ns() - t0
    ops = eng.get_last_operation_count()
    if as_json:
        _emit({
            "algorithm": algorithm,
            "found": product is not None,
            "comparisons": ops,
            "elapsed_ns": elapsed,
            "product": asdict(product) if product is not None else None,
        })
        return
    print(F.format_outcome(algorithm.capitalize() + " Search", product, ops, elapsed))


def _run_filter(rows, ops: int, as_json: bool) -> None:
    if as_json:
        _emit({"count": len(rows), "comparisons": ops, "products": [asdict(r) for r in rows]})
        return
    print(F.format_table(rows))
    print(f"\n{len(rows)} result(s), {ops} comparisons")


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
        os.environ["PRODUCT_SEARCH_VERBOSE"] = "1"
    if args.size < 0:
        p.error("--size must be >= 0")
    if args.perf is not None and any(s <= 0 for s in args.perf):
        p.error("--perf sizes must be positive")

    products = load_dataset(args.dataset, size=args.size, seed=args.seed)
    eng = SearchEngine(products)
    log.info("Loaded dataset %s (%d products)", args.dataset, len(eng))

    if args.repl:
        from .repl import run_repl
        return run_repl(eng, dataset=args.dataset, size=args.size, seed=args.seed)

    for algorithm in ("linear", "binary", "recursive"):
        product_id = getattr(args, algorithm)
        if product_id is not None:
            _run_lookup(eng, algorithm, product_id, args.json)
            return 0

    if args.compare is not None:
        report = compare_search_performance(eng, args.compare)
        _show(args.json, report.to_dict(), F.format_report(report))
    elif args.name is not None:
        rows = eng.linear_search_by_name(args.name)
        _run_filter(rows, eng.get_last_operation_count(), args.json)
    elif args.category is not None:
        rows = eng.linear_search_by_category(args.category)
        _run_filter(rows, eng.get_last_operation_count(), args.json)
    elif args.price is not None:
        rows = eng.linear_search_by_price_range(args.price[0], args.price[1])
        _run_filter(rows, eng.get_last_operation_count(), args.json)
    elif args.scenarios:
        s = analyze_search_scenarios(eng)
        _show(args.json, s.to_dict() if s else None, F.format_scenarios(s))
    elif args.benchmark:
        reports = benchmark_positions(eng)
        if args.json:
            _emit([r.to_dict() for r in reports])
        else:
            print("\n\n".join(F.format_report(r) for r in reports) or "(empty catalog)")
    elif args.perf is not None:
        rows = benchmark_sizes(args.perf or CFG.PERFORMANCE_SIZES, ProductDataGenerator(args.seed))
        _show(args.json, [r.to_dict() for r in rows], F.format_size_benchmarks(rows))
    elif args.theory:
        rows = complexity_table()
        _show(args.json, [r.to_dict() for r in rows], F.format_complexity(rows))
    elif args.info:
        info = dataset_info(eng.items)
        _show(args.json, info.to_dict() if info else None, F.format_dataset_info(info))
    elif args.list:
        _show(args.json, [asdict(x) for x in eng.items], F.format_table(eng.items))
    return 0


if __name__ == "__main__":
    sys.exit(main())
