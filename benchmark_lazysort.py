import sys
import os
import time
import csv
import random
import argparse
from itertools import islice
from typing import Dict, Any, List

# Add project root to path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from lazysort import lazy_sorted


def run_single_trial(trial_id: int, size: int, prefix: int, seed: int) -> Dict[str, Any]:
    """
    Takes the first `prefix` items of one random input both lazily and
    through a full eager sort, on separate copies of the same data.
    """
    rng = random.Random(seed * 1_000_003 + trial_id)
    values = [rng.random() for _ in range(size)]

    result = {
        "trial": trial_id,
        "size": size,
        "prefix": prefix,
        "lazy_time": 0.0, "lazy_comparisons": 0, "lazy_partitions": 0,
        "eager_time": 0.0,
        "match": False,
    }

    # Lazy
    start_time = time.perf_counter()
    it = lazy_sorted(list(values), check_invariants=False)
    lazy_prefix = list(islice(it, prefix))
    result["lazy_time"] = time.perf_counter() - start_time
    result["lazy_comparisons"] = it.metrics.comparisons
    result["lazy_partitions"] = it.metrics.partitions

    # Eager
    start_time = time.perf_counter()
    eager_prefix = sorted(values)[:prefix]
    result["eager_time"] = time.perf_counter() - start_time

    result["match"] = lazy_prefix == eager_prefix
    return result


def run_benchmark(sizes: List[int], prefixes: List[int], trials: int, seed: int) -> List[Dict[str, Any]]:
    results = []
    configs = [(n, k) for n in sizes for k in prefixes if k <= n]
    total = len(configs) * trials
    done = 0

    for size, prefix in configs:
        for t in range(trials):
            done += 1
            print(f"  [{done}/{total}] n={size} k={prefix} trial {t+1}/{trials} ...", end="\r")
            results.append(run_single_trial(t, size, prefix, seed))

    print()
    return results


def _int_list(text: str) -> List[int]:
    return [int(part) for part in text.split(",") if part.strip()]


def main():
    parser = argparse.ArgumentParser(description="Benchmark lazy sorting against a full sort")
    parser.add_argument("--sizes", type=_int_list, default=[1_000, 10_000, 100_000],
                        help="Comma-separated input sizes")
    parser.add_argument("--prefix", type=_int_list, default=[1, 10, 100, 1_000],
                        help="Comma-separated numbers of items to take")
    parser.add_argument("--trials", type=int, default=5, help="Trials per configuration")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--output", type=str, default="benchmark_results.csv", help="Output CSV file")

    args = parser.parse_args()

    print(f"Starting Benchmark: sizes={args.sizes}, prefixes={args.prefix}, {args.trials} trials")

    results = run_benchmark(args.sizes, args.prefix, args.trials, args.seed)
    if not results:
        print("No configuration has prefix <= size, nothing to do.")
        return

    mismatches = sum(1 for r in results if not r["match"])
    print("Benchmark Complete!")
    print(f"Prefixes differing from the eager sort: {mismatches}/{len(results)}")

    # Save to CSV
    keys = results[0].keys()
    with open(args.output, "w", newline="") as f:
        dict_writer = csv.DictWriter(f, fieldnames=keys)
        dict_writer.writeheader()
        dict_writer.writerows(results)

    print(f"Results saved to {args.output}")

    # Print Summary Table
    print("\nSummary Statistics:")
    print(f"{'n':>8} | {'k':>6} | {'Lazy (ms)':>10} | {'Eager (ms)':>10} | {'Comparisons':>12}")
    print("-" * 58)

    groups: Dict[tuple, List[Dict[str, Any]]] = {}
    for r in results:
        groups.setdefault((r["size"], r["prefix"]), []).append(r)

    for (size, prefix), rows in groups.items():
        lazy_ms = 1000 * sum(r["lazy_time"] for r in rows) / len(rows)
        eager_ms = 1000 * sum(r["eager_time"] for r in rows) / len(rows)
        comparisons = sum(r["lazy_comparisons"] for r in rows) / len(rows)
        print(f"{size:>8} | {prefix:>6} | {lazy_ms:>10.3f} | {eager_ms:>10.3f} | {comparisons:>12.0f}")


if __name__ == "__main__":
    main()
