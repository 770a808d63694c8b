"""
Benchmark bucket sort against radix sort on a CSV column or generated data.

Run with something like:
    python sort_benchmark.py --csv Hotel_Item_Inventory_Dataset.csv --column Purchase_Price --sizes 100 500 1000
    python sort_benchmark.py --kind int --n 100000 --sizes 1000 10000 100000 --out results.csv
"""

from __future__ import annotations

import argparse
import csv
import gc
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from bucket_sort import BucketSort
from sequential_radix import RadixSort
from sort_config import load_config
from sort_logging import get_logger

logger = get_logger(__name__)

KINDS = ("int", "float", "str")
VALUE_HIGH = 1_000_000

RESULT_COLUMNS = ["algorithm", "n", "seconds", "comparisons", "moves"]


@dataclass(frozen=True)
class BenchmarkResult:
    algorithm: str
    n: int
    seconds: float
    comparisons: int
    moves: int


def load_csv_column(file_path, column_name: str, delimiter: str = ",") -> List[float]:
    """Numeric values of one named column; cells that do not parse are skipped."""
    df = pd.read_csv(file_path, sep=delimiter, dtype=str, keep_default_na=False)
    if column_name not in df.columns:
        raise KeyError(f"Column '{column_name}' not found")
    values = pd.to_numeric(df[column_name].str.strip(), errors="coerce").dropna().astype(float)
    return [float(v) for v in values[np.isfinite(values)]]


def generate_values(n: int, kind: str, seed: Optional[int] = None) -> list:
    """Reproducible non-negative test data of the given element kind."""
    rng = np.random.default_rng(seed)
    if kind == "int":
        return [int(v) for v in rng.integers(0, VALUE_HIGH, size=n)]
    if kind == "float":
        return [round(float(v), 2) for v in rng.uniform(0, VALUE_HIGH / 1000, size=n)]
    if kind == "str":
        return [str(int(v)) for v in rng.integers(0, VALUE_HIGH // 1000, size=n)]
    raise ValueError(f"Unknown kind: {kind}")


def _non_decreasing(values: Sequence) -> bool:
    return all(values[i - 1] <= values[i] for i in range(1, len(values)))


def order_guaranteed(sorter, data: Sequence) -> bool:
    """Whether ``sorter`` must return ``data`` in ascending order."""
    if not data or isinstance(data[0], str):
        return False
    if isinstance(sorter, RadixSort):
        # radix only restores sign order for ints
        return isinstance(data[0], int) or all(v >= 0 for v in data)
    return True


def time_sorter(name: str, sorter, data: Sequence, repeats: int) -> BenchmarkResult:
    """Median wall time of ``sorter.sort`` over fresh copies of ``data``."""
    # Warmup (also verifies numeric results on the first call)
    warm = list(data)
    sorter.sort(warm)
    if data and not isinstance(data[0], str) and not _non_decreasing(warm):
        if order_guaranteed(sorter, data):
            raise AssertionError(f"{name} produced an unsorted result for n={len(data)}")
        logger.warning("%s leaves negative floats out of order for n=%d", name, len(data))

    times = []
    for _ in range(repeats):
        copy = list(data)
        gc.disable()
        start = time.perf_counter()
        sorter.sort(copy)
        elapsed = time.perf_counter() - start
        gc.enable()
        times.append(elapsed)

    comparisons, moves = sorter.get_stats()
    return BenchmarkResult(name, len(data), float(np.median(times)), comparisons, moves)


def default_sorters() -> Dict[str, Callable[[], object]]:
    config = load_config()
    return {
        "Bucket Sort": lambda: BucketSort(config=config),
        "Radix Sort": lambda: RadixSort(config=config),
    }


def run_benchmarks(data: Sequence, sizes: Sequence[int], repeats: int = 5, sorters=None) -> List[BenchmarkResult]:
    sorters = sorters or default_sorters()
    results: List[BenchmarkResult] = []
    for size in sizes:
        if size > len(data):
            logger.warning("Skipping n=%d: only %d values available", size, len(data))
            continue
        subset = list(data[:size])
        for name, factory in sorters.items():
            result = time_sorter(name, factory(), subset, repeats)
            logger.info(
                "%-12s n=%-9d time=%.6fs comparisons=%d moves=%d",
                name, size, result.seconds, result.comparisons, result.moves,
            )
            results.append(result)
    return results


def write_results(results: Sequence[BenchmarkResult], path) -> Path:
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", newline="", encoding="utf-8") as fh:
        writer = csv.writer(fh)
        writer.writerow(RESULT_COLUMNS)
        for r in results:
            writer.writerow([r.algorithm, r.n, f"{r.seconds:.9f}", r.comparisons, r.moves])
    return out_path


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Bucket sort vs radix sort benchmark")
    parser.add_argument("--csv", default=None, help="Delimited file to read values from.")
    parser.add_argument("--column", default=None, help="Numeric column to sort (required with --csv).")
    parser.add_argument("--kind", choices=KINDS, default="int", help="Element kind for generated data.")
    parser.add_argument("--n", type=int, default=10_000, help="Number of values to generate.")
    parser.add_argument("--sizes", type=int, nargs="+", default=[100, 500, 1000], help="Prefix sizes to time.")
    parser.add_argument("--repeats", type=int, default=5, help="Timed runs per (algorithm, size).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility.")
    parser.add_argument("--out", default=None, help="Write results as CSV to this path.")
    args = parser.parse_args(argv)
    if args.csv and not args.column:
        parser.error("--column is required with --csv")
    if args.repeats < 1:
        parser.error("--repeats must be >= 1")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    if args.csv:
        data = load_csv_column(args.csv, args.column)
        logger.info("Loaded %d values from %s[%s]", len(data), args.csv, args.column)
    else:
        data = generate_values(args.n, args.kind, args.seed)
        logger.info("Generated %d %s values (seed=%s)", len(data), args.kind, args.seed)

    results = run_benchmarks(data, args.sizes, args.repeats)
    for r in results:
        print(f"{r.algorithm:<12} n = {r.n:>10,}  →  time = {r.seconds:.6f} s  "
              f"comparisons = {r.comparisons:,}  moves = {r.moves:,}")

    if args.out:
        out_path = write_results(results, args.out)
        logger.info("Wrote %s", out_path)


if __name__ == "__main__":
    main()
