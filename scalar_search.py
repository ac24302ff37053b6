#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

_THIS_DIR = Path(__file__).resolve().parent
if str(_THIS_DIR) not in sys.path:
    sys.path.insert(0, str(_THIS_DIR))

from scalar_nn.cli import add_common_io_args, add_norm_arg, configure_logging
from scalar_nn.metrics import mean, norms_agree, qps_from_times
from scalar_nn.output_format import SampleRow, SummaryRow, write_report_header, write_sample_rows, write_summary_table
from scalar_nn.samples import load_samples
from scalar_nn.search import BruteForceSearcher, NeighbourSearcher, NormType, UnivariateNeighbourSearcher

logger = logging.getLogger("scalar_search")

QUERY_KINDS = ("nn", "knn", "count")


@dataclass
class SearchParams:
    query: str = "all"  # nn | knn | count | all
    k: int = 4
    radius: float = 1.0
    norm: NormType = NormType.MAX_NORM
    limit: int | None = None  # only query the first `limit` samples
    check: bool = False  # also run the brute-force reference


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Nearest-neighbour queries for every sample of a 1-D sample set."
    )
    parser.add_argument(
        "-d",
        "--data",
        dest="samples_path",
        required=True,
        help="Samples file (.npy/.dat, .npz with 'values', or text with one value per line)",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_path",
        required=True,
        help="Output results file (e.g. results.txt)",
    )
    parser.add_argument(
        "--query",
        default="all",
        choices=["all", *QUERY_KINDS],
        help="Query kind to run for each sample (default: all)",
    )
    parser.add_argument("-k", type=int, default=4, help="K for the k-NN query (default: 4)")
    parser.add_argument(
        "-r",
        "--radius",
        type=float,
        default=1.0,
        help="Radius for the count query, in norm units (default: 1.0)",
    )
    parser.add_argument("--limit", type=int, default=None, help="Only query the first LIMIT samples")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Also run the brute-force searcher and report agreement",
    )
    add_norm_arg(parser)
    add_common_io_args(parser)
    return parser.parse_args(argv)


@dataclass
class QueryRun:
    method: str
    rows: list[SampleRow]
    times: list[float]
    knn_norms: list[list[float] | None]  # per row, for the agreement check


def _run_queries(name: str, searcher: NeighbourSearcher, params: SearchParams, sample_indices: Sequence[int]) -> QueryRun:
    kinds = QUERY_KINDS if params.query == "all" else (params.query,)
    values = searcher.values
    run = QueryRun(method=name, rows=[], times=[], knn_norms=[])
    for s in sample_indices:
        fields: dict[str, object] = {}
        knn_norms = None
        t0 = time.perf_counter()
        if "nn" in kinds:
            nb = searcher.find_nearest_neighbour(s)
            fields["nn_index"] = nb.index
            fields["nn_norm"] = nb.norm
        if "knn" in kinds:
            res = searcher.find_k_nearest_neighbours(params.k, s)
            fields["knn_indices"] = tuple(res.indices.tolist())
            fields["kth_norm"] = res.kth.norm
            knn_norms = res.norms.tolist()
        if "count" in kinds:
            fields["count_strict"] = searcher.count_points_strictly_within_r(s, params.radius)
            fields["count_inclusive"] = searcher.count_points_within_or_on_r(s, params.radius)
        run.times.append(time.perf_counter() - t0)
        run.rows.append(SampleRow(sample_index=s, value=float(values[s]), **fields))  # type: ignore[arg-type]
        run.knn_norms.append(knn_norms)
    return run


def _agreement(run: QueryRun, ref: QueryRun) -> float:
    """Share of sampled queries whose norms and counts match the reference."""
    if not run.rows:
        return 1.0
    matches = 0
    for a, b, a_knn, b_knn in zip(run.rows, ref.rows, run.knn_norms, ref.knn_norms):
        if a.nn_norm is not None and not norms_agree([a.nn_norm], [b.nn_norm]):
            continue
        if a_knn is not None and not norms_agree(a_knn, b_knn or []):
            continue
        if a.count_strict != b.count_strict or a.count_inclusive != b.count_inclusive:
            continue
        matches += 1
    return matches / float(len(run.rows))


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)
    params = SearchParams(
        query=args.query,
        k=int(args.k),
        radius=float(args.radius),
        norm=args.norm,
        limit=args.limit,
        check=bool(args.check),
    )

    store = load_samples(args.samples_path)
    out_path = Path(args.output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    n = len(store)
    limit = n if params.limit is None else max(0, min(int(params.limit), n))
    sample_indices = list(range(limit))

    # -----------------------
    # Build searchers once
    # -----------------------
    methods: list[tuple[str, NeighbourSearcher]] = []
    print(f"[scalar_search] Building univariate searcher over {n} samples ...")
    t0 = time.perf_counter()
    methods.append(("Univariate", UnivariateNeighbourSearcher(store.values, norm_type=params.norm)))
    logger.info("Univariate build: %.3fs", time.perf_counter() - t0)
    if params.check:
        methods.append(("Brute force (Ref)", BruteForceSearcher(store.values, norm_type=params.norm)))

    runs = [_run_queries(name, searcher, params, sample_indices) for name, searcher in methods]

    # -----------------------
    # Summary (+ agreement vs reference)
    # -----------------------
    ref = runs[-1] if params.check else None
    summary: list[SummaryRow] = []
    for run in runs:
        agreement = None if ref is None else _agreement(run, ref)
        if agreement is not None and agreement < 1.0:
            logger.warning("%s disagrees with the reference (agreement %.3f)", run.method, agreement)
        summary.append(
            SummaryRow(
                method=run.method,
                time_per_query_s=float(mean(run.times)),
                qps=qps_from_times(run.times),
                agreement=agreement,
            )
        )

    with out_path.open("w", encoding="utf-8", newline="\n") as out:
        write_report_header(
            out,
            n,
            params.norm.value,
            params.k if params.query in ("all", "knn") else None,
            params.radius if params.query in ("all", "count") else None,
        )
        write_summary_table(out, summary)
        write_sample_rows(out, runs[0].rows)

    print(f"[scalar_search] Wrote results to: {out_path}")


if __name__ == "__main__":
    main()
