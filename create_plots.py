#!/usr/bin/env python3
"""Create QPS vs N plots from scalar_benchmark.py CSV output."""

from __future__ import annotations

import argparse
import csv
from collections import defaultdict
from pathlib import Path
from typing import Sequence

import matplotlib

matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt


def load_csv(csv_path: Path) -> list[dict]:
    """Load benchmark CSV and return list of dicts."""
    rows = []
    with open(csv_path, "r", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        for row in reader:
            rows.append({
                "method": row["method"],
                "n": int(row["n"]),
                "k": int(row["k"]),
                "qps": float(row["qps"]),
            })
    return rows


def create_qps_plot(rows: list[dict], output_path: Path) -> None:
    """One line per (method, K): QPS against N, log-log."""
    series: dict[tuple[str, int], list[tuple[int, float]]] = defaultdict(list)
    for r in rows:
        series[(r["method"], r["k"])].append((r["n"], r["qps"]))

    markers = {"Univariate": "o", "Brute force": "s"}

    fig, ax = plt.subplots(figsize=(10, 7))
    for (method, k), pts in sorted(series.items()):
        pts.sort()
        ax.plot(
            [p[0] for p in pts],
            [p[1] for p in pts],
            label=f"{method} (K={k})",
            marker=markers.get(method, "o"),
            alpha=0.8,
        )

    ax.set_xlabel("N (samples)", fontsize=12, fontweight="bold")
    ax.set_ylabel("QPS (k-NN + range count per query)", fontsize=12, fontweight="bold")
    ax.set_title("Query throughput vs sample count", fontsize=14, fontweight="bold")
    ax.legend(loc="best", fontsize=10, framealpha=0.9)
    ax.grid(True, alpha=0.3, linestyle="--")
    ax.set_xscale("log")
    ax.set_yscale("log")

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches="tight")
    print(f"Created plot: {output_path}")
    plt.close(fig)


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-i", "--input", dest="input_csv", default="benchmark.csv")
    parser.add_argument("-o", "--output", dest="output_png", default="qps_vs_n_plot.png")
    args = parser.parse_args(argv)

    rows = load_csv(Path(args.input_csv))
    if not rows:
        raise ValueError(f"No rows in {args.input_csv}")
    create_qps_plot(rows, Path(args.output_png))


if __name__ == "__main__":
    main()
