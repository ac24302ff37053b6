"""
univariate.py
=============
Sorted-rank neighbour search in one scalar variable.
Construction sorts once (argsort) and keeps the inverse permutation; each query
starts at the sample's rank and walks outward, so no query scans the full set:
- find_nearest_neighbour: O(1), compares the two adjacent ranks
- find_k_nearest_neighbours: O(k), two-pointer expansion
- count_points_within_r: O(matches), stops at the first point outside r on each side
"""

from __future__ import annotations

import logging
from typing import Union

import numpy as np

from .base import KnnResult, NeighbourResult, NeighbourSearcher
from .norms import NormType, norm_function
from .utils import check_k, check_radius, check_sample_count, check_sample_index, ensure_samples_1d

logger = logging.getLogger(__name__)


class UnivariateNeighbourSearcher(NeighbourSearcher):
    """Neighbour search in a single scalar variable via one sorted permutation.

    Sorting linearises the 1-D metric: the nearest other sample is always
    one rank away, and the k nearest form a contiguous run of ranks around
    the query. Queries walk outward from the query's rank and never scan
    the whole set.

    Ties between the lower and upper candidate go to the upper (higher-rank)
    one, both for the nearest neighbour and for each step of the k-NN walk.
    """

    def __init__(self, values: np.ndarray, norm_type: Union[NormType, str] = NormType.MAX_NORM) -> None:
        super().__init__(norm_type)
        X = ensure_samples_1d(values)
        n = int(X.shape[0])
        check_sample_count(n)

        order = np.argsort(X, kind="stable").astype(np.int64, copy=False)
        ranks = np.empty((n,), dtype=np.int64)
        ranks[order] = np.arange(n, dtype=np.int64)
        order.flags.writeable = False
        ranks.flags.writeable = False

        self._X = X
        self._sorted_indices = order
        self._ranks = ranks
        # Python lists for the scalar hot loops; never mutated after this point.
        self._order_list: list[int] = order.tolist()
        self._ranks_list: list[int] = ranks.tolist()
        self._sorted_values: list[float] = X[order].tolist()
        self._n = n
        self._norm = norm_function(self._norm_type)

        logger.debug("Built univariate searcher: n=%d norm=%s", n, self._norm_type.value)

    @property
    def num_observations(self) -> int:
        return self._n

    @property
    def values(self) -> np.ndarray:
        """Read-only copy of the samples, in original order."""
        return self._X

    @property
    def sorted_indices(self) -> np.ndarray:
        """Original index at each rank (ascending by value)."""
        return self._sorted_indices

    @property
    def ranks(self) -> np.ndarray:
        """Rank of each original index; inverse of sorted_indices."""
        return self._ranks

    def find_nearest_neighbour(self, sample_index: int) -> NeighbourResult:
        idx = check_sample_index(sample_index, self._n)
        rank = self._ranks_list[idx]
        vals = self._sorted_values
        x = vals[rank]
        if rank == 0:
            # Only one candidate; n > 1 is checked at construction.
            cand = 1
        elif rank == self._n - 1:
            cand = self._n - 2
        else:
            norm_above = self._norm(x, vals[rank + 1])
            norm_below = self._norm(x, vals[rank - 1])
            if norm_above <= norm_below:
                return NeighbourResult(index=self._order_list[rank + 1], norm=norm_above)
            return NeighbourResult(index=self._order_list[rank - 1], norm=norm_below)
        return NeighbourResult(index=self._order_list[cand], norm=self._norm(x, vals[cand]))

    def find_k_nearest_neighbours(self, k: int, sample_index: int) -> KnnResult:
        n = self._n
        k = check_k(k, n)
        idx = check_sample_index(sample_index, n)
        rank = self._ranks_list[idx]
        vals = self._sorted_values
        order = self._order_list
        norm = self._norm
        x = vals[rank]

        # -1 marks a side with no candidates left.
        lower = rank - 1
        upper = rank + 1 if rank < n - 1 else -1

        out: list[NeighbourResult | None] = [None] * k
        for i in range(k):
            # n > k guarantees at least one side still has a candidate.
            # Exhausted sides are skipped explicitly: norms may overflow to inf.
            if upper == -1:
                take_upper = False
            elif lower == -1:
                take_upper = True
            else:
                take_upper = norm(x, vals[upper]) <= norm(x, vals[lower])
            if take_upper:
                out[i] = NeighbourResult(index=order[upper], norm=norm(x, vals[upper]))
                upper = -1 if upper == n - 1 else upper + 1
            else:
                out[i] = NeighbourResult(index=order[lower], norm=norm(x, vals[lower]))
                lower -= 1
        return KnnResult(neighbours=tuple(out))  # type: ignore[arg-type]

    def count_points_within_r(self, sample_index: int, r: float, allow_equal_to_r: bool) -> int:
        idx = check_sample_index(sample_index, self._n)
        r = check_radius(r)
        rank = self._ranks_list[idx]
        vals = self._sorted_values
        norm = self._norm
        x = vals[rank]

        count = 0
        # Smaller values first; stop at the first point outside r.
        i = rank - 1
        while i >= 0:
            d = norm(x, vals[i])
            if d < r or (allow_equal_to_r and d == r):
                count += 1
                i -= 1
            else:
                break
        # Then larger values.
        i = rank + 1
        while i < self._n:
            d = norm(x, vals[i])
            if d < r or (allow_equal_to_r and d == r):
                count += 1
                i += 1
            else:
                break
        return count
