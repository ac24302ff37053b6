"""
brute_force.py
==============
Exact full-scan searcher (O(n) per query) with the same query contract.
Used as ground truth by the tests, scalar_search.py --check and scalar_benchmark.py.
"""

from __future__ import annotations

import logging
from typing import Union

import numpy as np

from .base import KnnResult, NeighbourResult, NeighbourSearcher
from .norms import NormType
from .utils import (
    check_k,
    check_radius,
    check_sample_count,
    check_sample_index,
    ensure_samples_1d,
    k_smallest,
    norms_to_many,
)

logger = logging.getLogger(__name__)


class BruteForceSearcher(NeighbourSearcher):
    """Exact O(n) scan per query; reference for the sorted-rank searcher.

    Equal norms resolve by original index, so with ties only the norms
    (not the indices) are comparable to UnivariateNeighbourSearcher.
    """

    def __init__(self, values: np.ndarray, norm_type: Union[NormType, str] = NormType.MAX_NORM) -> None:
        super().__init__(norm_type)
        X = ensure_samples_1d(values)
        check_sample_count(int(X.shape[0]))
        self._X = X
        logger.debug("Built brute-force searcher: n=%d norm=%s", X.shape[0], self._norm_type.value)

    @property
    def num_observations(self) -> int:
        return int(self._X.shape[0])

    @property
    def values(self) -> np.ndarray:
        return self._X

    def _norms_excluding(self, idx: int) -> np.ndarray:
        d = norms_to_many(self._X[idx], self._X, self._norm_type)
        d[idx] = np.inf
        return d

    def find_nearest_neighbour(self, sample_index: int) -> NeighbourResult:
        idx = check_sample_index(sample_index, self.num_observations)
        d = self._norms_excluding(idx)
        best = int(np.argmin(d))
        return NeighbourResult(index=best, norm=float(d[best]))

    def find_k_nearest_neighbours(self, k: int, sample_index: int) -> KnnResult:
        k = check_k(k, self.num_observations)
        idx = check_sample_index(sample_index, self.num_observations)
        nb_idx, nb_norms = k_smallest(self._norms_excluding(idx), k)
        return KnnResult(
            neighbours=tuple(
                NeighbourResult(index=i, norm=d) for i, d in zip(nb_idx.tolist(), nb_norms.tolist())
            )
        )

    def count_points_within_r(self, sample_index: int, r: float, allow_equal_to_r: bool) -> int:
        idx = check_sample_index(sample_index, self.num_observations)
        r = check_radius(r)
        d = norms_to_many(self._X[idx], self._X, self._norm_type)
        inside = (d <= r) if allow_equal_to_r else (d < r)
        inside[idx] = False
        return int(np.count_nonzero(inside))
