"""
metrics.py
==========
Small helpers for comparing neighbour searchers against the brute-force reference:
- norms_agree: whether two searchers returned the same norms for one query
- mean: average of a list of values (e.g. time per query)
- qps_from_times: queries per second from per-query timings
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np


def norms_agree(
    norms: Sequence[float],
    reference_norms: Sequence[float],
    rtol: float = 1e-12,
    atol: float = 0.0,
) -> bool:
    """True when both rank-ordered norm lists have the same length and values."""
    a = np.asarray(norms, dtype=np.float64)
    b = np.asarray(reference_norms, dtype=np.float64)
    if a.shape != b.shape:
        return False
    return bool(np.allclose(a, b, rtol=rtol, atol=atol))


def mean(values: Iterable[float]) -> float:
    vals = list(values)
    if not vals:
        return 0.0
    return sum(vals) / float(len(vals))


def qps_from_times(times: Sequence[float]) -> float:
    total = float(sum(times))
    return float(len(times) / total) if total > 0.0 else 0.0
