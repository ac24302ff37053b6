"""
output_format.py
================
Layout of the report written by scalar_search.py (results.txt):
- a header with the sample count, norm type, K and radius
- a summary table with Time/query, QPS and agreement per searcher
- one row per queried sample with its neighbour results
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, TextIO


@dataclass(frozen=True)
class SummaryRow:
    method: str
    time_per_query_s: float
    qps: float
    agreement: float | None  # None when no reference was run


@dataclass(frozen=True)
class SampleRow:
    sample_index: int
    value: float
    nn_index: int | None = None  # nearest neighbour (None if not queried)
    nn_norm: float | None = None
    knn_indices: Sequence[int] | None = None  # k nearest, ascending by norm
    kth_norm: float | None = None
    count_strict: int | None = None  # norm < r
    count_inclusive: int | None = None  # norm <= r


def _fmt(v: object) -> str:
    if v is None:
        return "-"
    if isinstance(v, float):
        return f"{v:.6g}"
    return str(v)


def write_report_header(out: TextIO, n: int, norm_type: str, k: int | None, radius: float | None) -> None:
    out.write(f"Samples: {n}\n")
    out.write(f"Norm: {norm_type}\n")
    out.write(f"K = {_fmt(k)}\tr = {_fmt(radius)}\n\n")


def write_summary_table(out: TextIO, rows: Iterable[SummaryRow]) -> None:
    out.write("[1] Searcher summary\n")
    out.write("Method\t|\tTime/query (s)\t|\tQPS\t|\tAgreement vs brute force\n")
    for r in rows:
        time_s = f"{r.time_per_query_s:.3g}"
        qps = f"{r.qps:.3g}"
        agr = "-" if r.agreement is None else f"{r.agreement:.2f}"
        out.write(f"{r.method}\t|\t{time_s}\t|\t{qps}\t|\t{agr}\n")
    out.write("\n\n")


def write_sample_rows(out: TextIO, rows: Iterable[SampleRow]) -> None:
    out.write("[2] Per-sample neighbours\n")
    out.write("Index\t|\tValue\t|\tNN index\t|\tNN norm\t|\tKNN indices\t|\tK-th norm\t|\tCount < r\t|\tCount <= r\n")
    for r in rows:
        knn = "-" if r.knn_indices is None else ",".join(str(i) for i in r.knn_indices)
        out.write(
            f"{r.sample_index}\t|\t{_fmt(r.value)}\t|\t{_fmt(r.nn_index)}\t|\t{_fmt(r.nn_norm)}"
            f"\t|\t{knn}\t|\t{_fmt(r.kth_norm)}\t|\t{_fmt(r.count_strict)}\t|\t{_fmt(r.count_inclusive)}\n"
        )
    out.write("\n")
