"""
base.py
=======
Query contract (NeighbourSearcher) and result containers:
- NeighbourResult: one neighbour (original index + norm)
- KnnResult: k neighbours ascending by norm, with indices / norms array views
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Tuple, Union, overload

import numpy as np

from .norms import NormType


@dataclass(frozen=True)
class NeighbourResult:
    index: int  # original index of the neighbour
    norm: float  # norm from the query sample to the neighbour


@dataclass(frozen=True)
class KnnResult:
    """K nearest neighbours of one sample, ascending by norm."""

    neighbours: Tuple[NeighbourResult, ...]

    def __len__(self) -> int:
        return len(self.neighbours)

    def __iter__(self) -> Iterator[NeighbourResult]:
        return iter(self.neighbours)

    @overload
    def __getitem__(self, i: int) -> NeighbourResult: ...

    @overload
    def __getitem__(self, i: slice) -> Tuple[NeighbourResult, ...]: ...

    def __getitem__(self, i):
        return self.neighbours[i]

    @property
    def indices(self) -> np.ndarray:
        return np.fromiter((nb.index for nb in self.neighbours), dtype=np.int64, count=len(self.neighbours))

    @property
    def norms(self) -> np.ndarray:
        return np.fromiter((nb.norm for nb in self.neighbours), dtype=np.float64, count=len(self.neighbours))

    @property
    def kth(self) -> NeighbourResult:
        """The farthest of the K neighbours (the K-th nearest)."""
        if not self.neighbours:
            raise IndexError("empty result")
        return self.neighbours[-1]


class NeighbourSearcher(ABC):
    """Query contract shared by neighbour searchers.

    Every query names a sample by its original index and excludes that
    sample from the search. Norms are in the searcher's norm space.
    """

    def __init__(self, norm_type: Union[NormType, str] = NormType.MAX_NORM) -> None:
        self._norm_type = NormType.parse(norm_type)

    @property
    def norm_type(self) -> NormType:
        return self._norm_type

    @property
    @abstractmethod
    def values(self) -> np.ndarray:
        """Read-only samples, in original order."""

    @property
    @abstractmethod
    def num_observations(self) -> int:
        """Number of samples in the index."""

    def __len__(self) -> int:
        return self.num_observations

    @abstractmethod
    def find_nearest_neighbour(self, sample_index: int) -> NeighbourResult:
        """Return the single nearest other sample."""

    @abstractmethod
    def find_k_nearest_neighbours(self, k: int, sample_index: int) -> KnnResult:
        """Return the k nearest other samples, ascending by norm."""

    @abstractmethod
    def count_points_within_r(self, sample_index: int, r: float, allow_equal_to_r: bool) -> int:
        """Count other samples with norm < r (or <= r when allow_equal_to_r)."""

    def count_points_strictly_within_r(self, sample_index: int, r: float) -> int:
        return self.count_points_within_r(sample_index, r, False)

    def count_points_within_or_on_r(self, sample_index: int, r: float) -> int:
        return self.count_points_within_r(sample_index, r, True)
