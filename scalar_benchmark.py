#!/usr/bin/env python3
from __future__ import annotations

import argparse
import csv
import itertools
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import numpy as np

_THIS_DIR = Path(__file__).resolve().parent
if str(_THIS_DIR) not in sys.path:
    sys.path.insert(0, str(_THIS_DIR))

from scalar_nn.cli import add_common_io_args, add_norm_arg, add_seed_arg, configure_logging
from scalar_nn.metrics import mean, norms_agree, qps_from_times
from scalar_nn.search import BruteForceSearcher, NeighbourSearcher, NormType, UnivariateNeighbourSearcher

logger = logging.getLogger("scalar_benchmark")


@dataclass
class BenchmarkParams:
    n_grid: list[int]
    k_grid: list[int]
    queries: int = 200  # sampled query indices per grid point
    radius: float = 0.1
    norm: NormType = NormType.MAX_NORM
    seed: int = 1
    with_reference: bool = True


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Benchmark the univariate searcher against brute force (QPS vs N and K)."
    )
    p.add_argument("-o", "--output", dest="output_csv", required=True)
    p.add_argument("--n-grid", default="1000,10000,100000", help="Comma-separated sample counts")
    p.add_argument("--k-grid", default="1,4,10", help="Comma-separated K values")
    p.add_argument("--queries", type=int, default=200, help="Query samples per grid point (default: 200)")
    p.add_argument("--radius", type=float, default=0.1, help="Radius for the count query (default: 0.1)")
    p.add_argument(
        "--no-reference",
        action="store_true",
        help="Skip the brute-force searcher (it is O(N) per query)",
    )
    add_norm_arg(p)
    add_seed_arg(p)
    add_common_io_args(p)
    return p.parse_args(argv)


def _parse_int_grid(s: str) -> list[int]:
    return [int(x.strip()) for x in s.split(",") if x.strip()]


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)
    params = BenchmarkParams(
        n_grid=_parse_int_grid(args.n_grid),
        k_grid=_parse_int_grid(args.k_grid),
        queries=int(args.queries),
        radius=float(args.radius),
        norm=args.norm,
        seed=int(args.seed),
        with_reference=not args.no_reference,
    )

    out_path = Path(args.output_csv)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    rng = np.random.default_rng(params.seed)
    rows: list[dict[str, object]] = []
    for n, k in itertools.product(params.n_grid, params.k_grid):
        if n <= k:
            logger.warning("Skipping n=%d k=%d (need n > k)", n, k)
            continue
        X = rng.standard_normal(n)
        q_idx = rng.choice(n, size=min(params.queries, n), replace=False).tolist()

        uni_row, uni_norms = _eval_searcher(UnivariateNeighbourSearcher, "Univariate", X, q_idx, k, params)
        if params.with_reference:
            ref_row, ref_norms = _eval_searcher(BruteForceSearcher, "Brute force", X, q_idx, k, params)
            agree = [norms_agree(a, b) for a, b in zip(uni_norms, ref_norms)]
            uni_row["agreement"] = float(mean(1.0 if m else 0.0 for m in agree))
            ref_row["agreement"] = 1.0
            rows.extend([uni_row, ref_row])
        else:
            uni_row["agreement"] = ""
            rows.append(uni_row)
        logger.info("n=%d k=%d univariate qps=%.3g", n, k, uni_row["qps"])

    if not rows:
        raise RuntimeError("No benchmark rows produced")

    fieldnames = sorted(rows[0].keys())
    with out_path.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for row in rows:
            w.writerow(row)

    print(f"[benchmark] Wrote {len(rows)} rows to: {out_path}")


def _eval_searcher(
    cls: type[NeighbourSearcher],
    method_name: str,
    X: np.ndarray,
    q_idx: list[int],
    k: int,
    params: BenchmarkParams,
) -> tuple[dict[str, object], list[list[float]]]:
    t0 = time.perf_counter()
    searcher = cls(X, norm_type=params.norm)  # type: ignore[call-arg]
    build_s = time.perf_counter() - t0

    times: list[float] = []
    knn_norms: list[list[float]] = []
    for s in q_idx:
        s0 = time.perf_counter()
        res = searcher.find_k_nearest_neighbours(k, s)
        searcher.count_points_within_or_on_r(s, params.radius)
        times.append(time.perf_counter() - s0)
        knn_norms.append(res.norms.tolist())

    row: dict[str, object] = {
        "method": method_name,
        "n": int(X.shape[0]),
        "k": k,
        "norm": params.norm.value,
        "avg_time_per_query_s": float(mean(times)),
        "qps": qps_from_times(times),
        "build_time_s": float(build_s),
    }
    return row, knn_norms


if __name__ == "__main__":
    main()
