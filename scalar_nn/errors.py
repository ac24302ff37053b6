"""
errors.py
=========
Exceptions raised by the neighbour searchers. Each one also subclasses the
builtin a caller would catch for it (ValueError / IndexError):
- InsufficientDataError: N <= 1 at construction, or N <= K for a k-NN query
- InvalidIndexError: sample index outside [0, N)
- UnknownNormError: norm selector that names no supported norm
"""

from __future__ import annotations


class NeighbourSearchError(Exception):
    """Base class for neighbour search failures."""


class InsufficientDataError(NeighbourSearchError, ValueError):
    """Too few samples for the requested search (N <= 1, or N <= K)."""


class InvalidIndexError(NeighbourSearchError, IndexError):
    """Sample index outside [0, N)."""


class UnknownNormError(NeighbourSearchError, ValueError):
    """Norm selector that does not name a supported norm."""
