"""
scalar_nn/search/__init__.py
============================
Exports the searcher classes of the package, so callers can write:
    from scalar_nn.search import UnivariateNeighbourSearcher, NormType
instead of importing from each module separately.
"""

from .base import KnnResult, NeighbourResult, NeighbourSearcher  # query contract + result containers
from .brute_force import BruteForceSearcher  # exact full-scan reference
from .norms import NormType, norm  # norm selection
from .univariate import UnivariateNeighbourSearcher  # sorted-rank 1-D index


__all__ = [
    "BruteForceSearcher",
    "KnnResult",
    "NeighbourResult",
    "NeighbourSearcher",
    "NormType",
    "UnivariateNeighbourSearcher",
    "norm",
]
