"""
norms.py
========
Norm between two scalar samples:
- MAX_NORM: |x1 - x2|
- EUCLIDEAN_SQUARED: (x1 - x2)^2
Both are monotonic in |x1 - x2|, so rank order gives neighbour order for either.
norm_function returns the plain function, for the per-query hot loops.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Union

from ..errors import UnknownNormError


class NormType(str, Enum):
    """Distance between two scalar samples."""

    MAX_NORM = "max_norm"  # |x1 - x2|
    EUCLIDEAN_SQUARED = "euclidean_squared"  # (x1 - x2)^2

    @classmethod
    def parse(cls, selector: Union["NormType", str]) -> "NormType":
        """Resolve an enum member, its value, or a known alias.

        Unknown selectors raise UnknownNormError rather than falling back
        to squared difference.
        """
        if isinstance(selector, cls):
            return selector
        if not isinstance(selector, str):
            raise UnknownNormError(f"Unknown norm type: {selector!r}")
        key = selector.strip().lower().replace("-", "_")
        found = _ALIASES.get(key)
        if found is None:
            raise UnknownNormError(
                f"Unknown norm type: {selector!r} (expected one of {sorted(_ALIASES)})"
            )
        return found


_ALIASES = {
    "max_norm": NormType.MAX_NORM,
    "max": NormType.MAX_NORM,
    "abs": NormType.MAX_NORM,
    "absolute": NormType.MAX_NORM,
    "euclidean_squared": NormType.EUCLIDEAN_SQUARED,
    "squared": NormType.EUCLIDEAN_SQUARED,
    # The squared difference is what the Euclidean selector computes per variable.
    "euclidean": NormType.EUCLIDEAN_SQUARED,
}


def _abs_diff(x1: float, x2: float) -> float:
    return abs(x1 - x2)


def _squared_diff(x1: float, x2: float) -> float:
    difference = x1 - x2
    return difference * difference


def norm_function(norm_type: Union[NormType, str]) -> Callable[[float, float], float]:
    """Return the scalar norm for a selector, for use in tight loops."""
    if NormType.parse(norm_type) is NormType.MAX_NORM:
        return _abs_diff
    return _squared_diff


def norm(x1: float, x2: float, norm_type: Union[NormType, str] = NormType.MAX_NORM) -> float:
    """Norm between two scalars under the given norm type."""
    return norm_function(norm_type)(x1, x2)
