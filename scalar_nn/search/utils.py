"""
utils.py
========
Shared helpers for the searchers:
- ensure_samples_1d: owned, read-only float64 copy of the samples
- check_*: argument checks (sample count, index, k, radius)
- norms_to_many / k_smallest: vectorised full scan used by the brute-force reference
"""

from __future__ import annotations

import math
import operator
from typing import Tuple

import numpy as np

from ..errors import InsufficientDataError, InvalidIndexError
from .norms import NormType


def ensure_samples_1d(x: np.ndarray) -> np.ndarray:
    """Owned, read-only float64 copy of a 1-D (or (n, 1)) sample array."""
    arr = np.array(x, dtype=np.float64, copy=True)
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0].copy()
    if arr.ndim != 1:
        raise ValueError("Expected 1D array (n,) or a single column (n, 1)")
    if not np.all(np.isfinite(arr)):
        raise ValueError("Samples must be finite (no NaN or inf)")
    arr.flags.writeable = False
    return arr


def check_sample_count(n: int) -> None:
    if n <= 1:
        raise InsufficientDataError(
            f"Nearest neighbour search is poorly defined for <= 1 data point (got {n})"
        )


def check_sample_index(sample_index: int, n: int) -> int:
    if isinstance(sample_index, (bool, np.bool_)):
        raise TypeError("sample_index must be an integer, not bool")
    idx = operator.index(sample_index)
    if idx < 0 or idx >= n:
        raise InvalidIndexError(f"sample_index {idx} out of range [0, {n})")
    return idx


def check_k(k: int, n: int) -> int:
    if isinstance(k, (bool, np.bool_)):
        raise TypeError("k must be an integer, not bool")
    k = operator.index(k)
    if k <= 0:
        raise ValueError("k must be positive")
    if n <= k:
        raise InsufficientDataError(
            f"Not enough data points for a K nearest neighbours search (n={n}, k={k})"
        )
    return k


def check_radius(r: float) -> float:
    r = float(r)
    if math.isnan(r) or r < 0.0:
        raise ValueError("r must be a non-negative number")
    return r


def norms_to_many(x: float, values: np.ndarray, norm_type: NormType) -> np.ndarray:
    """Norms from scalar x to each entry of values."""
    diff = values - float(x)
    if norm_type is NormType.MAX_NORM:
        return np.abs(diff)
    return diff * diff


def k_smallest(norms: np.ndarray, k: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return (indices, norms) for the k smallest norms, ascending.

    Equal norms inside the selection keep index order.
    """
    if k <= 0:
        raise ValueError("k must be positive")
    n = int(norms.shape[0])
    k_eff = min(k, n)
    if k_eff == 0:
        return np.empty((0,), dtype=np.int64), np.empty((0,), dtype=np.float64)
    if k_eff < n:
        part = np.sort(np.argpartition(norms, k_eff - 1)[:k_eff])
    else:
        part = np.arange(n)
    order = np.argsort(norms[part], kind="stable")
    idx = part[order].astype(np.int64, copy=False)
    return idx, norms[idx]
