"""
Lazy Sort Chart Generator
=========================
Benchmarks prefix extraction and plots how the cost of lazy sorting grows
with the number of items actually taken.
Run:  python generate_charts.py --trials 3
Output: charts/ folder with 2 PNG files.
"""

import sys
import os
import argparse
import numpy as np
from typing import Dict, Any, List, Tuple
from collections import defaultdict

# Ensure project root is on the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for file output
import matplotlib.pyplot as plt

from benchmark_lazysort import run_benchmark

# ---------------------------------------------------------------------------
# Color Palette & Styling
# ---------------------------------------------------------------------------
SIZE_COLORS = ["#FF6B6B", "#51CF66", "#339AF0", "#E0AF68", "#BB9AF7"]
BG_COLOR = "#1A1B26"       # Tokyo Night background
CARD_COLOR = "#24283B"     # Card panels
TEXT_COLOR = "#C0CAF5"     # Soft lavender text
GRID_COLOR = "#414868"     # Subtle grid lines


def setup_style():
    """Apply a dark, presentation-friendly matplotlib style."""
    plt.rcParams.update({
        "figure.facecolor": BG_COLOR,
        "axes.facecolor": CARD_COLOR,
        "axes.edgecolor": GRID_COLOR,
        "axes.labelcolor": TEXT_COLOR,
        "axes.titleweight": "bold",
        "text.color": TEXT_COLOR,
        "xtick.color": TEXT_COLOR,
        "ytick.color": TEXT_COLOR,
        "grid.color": GRID_COLOR,
        "grid.alpha": 0.3,
        "font.size": 13,
        "axes.titlesize": 16,
        "axes.labelsize": 13,
        "legend.facecolor": CARD_COLOR,
        "legend.edgecolor": GRID_COLOR,
        "legend.fontsize": 11,
        "figure.dpi": 180,
        "savefig.dpi": 180,
        "savefig.bbox": "tight",
        "savefig.facecolor": BG_COLOR,
    })


def group_by_size(results: List[Dict[str, Any]]) -> Dict[int, List[Tuple[int, List[Dict[str, Any]]]]]:
    """
    Group benchmark rows as {size: [(prefix, rows), ...]} with prefixes
    in ascending order.
    """
    grouped = defaultdict(lambda: defaultdict(list))
    for r in results:
        grouped[r["size"]][r["prefix"]].append(r)
    return {
        size: sorted(by_prefix.items())
        for size, by_prefix in sorted(grouped.items())
    }


# ---------------------------------------------------------------------------
# Chart Generators
# ---------------------------------------------------------------------------
def chart_1_timing(grouped, out_dir):
    """Line chart: lazy prefix time vs eager full sort, per input size."""
    fig, ax = plt.subplots(figsize=(10, 6))

    for i, (size, series) in enumerate(grouped.items()):
        color = SIZE_COLORS[i % len(SIZE_COLORS)]
        ks = np.array([k for k, _ in series])
        lazy_ms = np.array([np.mean([r["lazy_time"] for r in rows]) for _, rows in series]) * 1000
        eager_ms = np.array([np.mean([r["eager_time"] for r in rows]) for _, rows in series]) * 1000
        ax.plot(ks, lazy_ms, marker="o", color=color, label=f"lazy, n={size}", zorder=3)
        ax.plot(ks, eager_ms, linestyle="--", color=color, alpha=0.6,
                label=f"sorted(), n={size}", zorder=2)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Items taken (k)")
    ax.set_ylabel("Time (ms)")
    ax.set_title("Prefix Cost: Lazy vs Full Sort", fontsize=18, pad=15)
    ax.legend(loc="upper left")
    ax.grid(zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    fig.savefig(os.path.join(out_dir, "1_timing.png"))
    plt.close(fig)
    print("  + Chart 1: Timing")


def chart_2_comparisons(grouped, out_dir):
    """Line chart: measured comparisons vs the n + k log2 n model."""
    fig, ax = plt.subplots(figsize=(10, 6))

    for i, (size, series) in enumerate(grouped.items()):
        color = SIZE_COLORS[i % len(SIZE_COLORS)]
        ks = np.array([k for k, _ in series], dtype=float)
        measured = np.array([np.mean([r["lazy_comparisons"] for r in rows]) for _, rows in series])
        model = size + ks * np.log2(max(size, 2))
        ax.plot(ks, measured, marker="o", color=color, label=f"measured, n={size}", zorder=3)
        ax.plot(ks, model, linestyle=":", color=color, alpha=0.6,
                label=f"n + k log2 n, n={size}", zorder=2)

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("Items taken (k)")
    ax.set_ylabel("Comparisons")
    ax.set_title("Comparisons Spent per Prefix", fontsize=18, pad=15)
    ax.legend(loc="upper left")
    ax.grid(zorder=0)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)

    fig.savefig(os.path.join(out_dir, "2_comparisons.png"))
    plt.close(fig)
    print("  + Chart 2: Comparisons")


def main():
    parser = argparse.ArgumentParser(description="Generate lazy sort benchmark charts")
    parser.add_argument("--trials", type=int, default=3,
                        help="Trials per configuration (default: 3)")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--quick", action="store_true",
                        help="Quick mode: smaller inputs for faster testing")
    args = parser.parse_args()

    out_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), "charts")
    os.makedirs(out_dir, exist_ok=True)

    setup_style()

    if args.quick:
        sizes = [1_000, 10_000]
        prefixes = [1, 10, 100, 1_000]
    else:
        sizes = [1_000, 10_000, 100_000]
        prefixes = [1, 10, 100, 1_000, 10_000, 100_000]

    print("Lazy Sort Benchmark")
    print(f"  Trials per config : {args.trials}")
    print(f"  Input sizes       : {sizes}")
    print(f"  Prefix lengths    : {prefixes}")
    print(f"  Output folder     : {out_dir}")
    print()

    print("Phase 1/2: Running Benchmarks...")
    results = run_benchmark(sizes, prefixes, args.trials, args.seed)
    grouped = group_by_size(results)

    print("\nPhase 2/2: Generating Charts...")
    chart_1_timing(grouped, out_dir)
    chart_2_comparisons(grouped, out_dir)

    print(f"All charts saved to: {out_dir}")


if __name__ == "__main__":
    main()
