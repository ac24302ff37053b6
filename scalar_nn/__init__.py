"""One-dimensional nearest-neighbour search for neighbour-statistics estimators.

This package contains reusable modules for:
- the univariate neighbour searcher (sorted-rank index) and a brute-force reference
- norm selection (max norm / squared Euclidean)
- sample I/O (.npy, .npz, plain text)
- metrics and report writers used by the command line scripts
"""

from .errors import InsufficientDataError, InvalidIndexError, NeighbourSearchError, UnknownNormError
from .search import (
    BruteForceSearcher,
    KnnResult,
    NeighbourResult,
    NeighbourSearcher,
    NormType,
    UnivariateNeighbourSearcher,
)

__all__ = [
    "BruteForceSearcher",
    "InsufficientDataError",
    "InvalidIndexError",
    "KnnResult",
    "NeighbourResult",
    "NeighbourSearchError",
    "NeighbourSearcher",
    "NormType",
    "UnivariateNeighbourSearcher",
    "UnknownNormError",
]
