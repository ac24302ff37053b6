"""
samples.py
==========
Saving and loading of scalar sample sets (one real value per observation).
- save_samples: writes the values to a file (e.g. samples.dat) with .npy content,
  at exactly the given path.
- load_samples: reads .npy / .npz (key "values") / plain text (one value per line)
  and returns a SampleSet.
open_memmap writes the .npy file in chunks, so large sets do not need a second
full copy in memory while saving.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from numpy.lib.format import open_memmap

logger = logging.getLogger(__name__)

_TEXT_SUFFIXES = {".txt", ".csv", ".tsv"}


@dataclass(frozen=True)
class SampleSet:
    """In-memory scalar samples, indexed by original index."""

    values: np.ndarray  # shape: (n,), float64

    def __post_init__(self) -> None:
        if self.values.ndim != 1:
            raise ValueError("values must be 1D (n,)")

    def __len__(self) -> int:
        return int(self.values.shape[0])


def save_samples(samples_path: str | Path, values: np.ndarray) -> Path:
    """Write values as .npy content to exactly samples_path (no suffix added)."""
    p = Path(samples_path)
    p.parent.mkdir(parents=True, exist_ok=True)

    vec = np.asarray(values, dtype=np.float64)
    if vec.ndim != 1:
        raise ValueError("values must be 1D (n,)")

    if p.exists():
        p.unlink()

    mm = open_memmap(p, mode="w+", dtype=np.float64, shape=vec.shape)
    chunk = 1 << 16
    for i0 in range(0, vec.shape[0], chunk):
        i1 = min(vec.shape[0], i0 + chunk)
        mm[i0:i1] = vec[i0:i1]
    mm.flush()
    del mm

    logger.debug("Saved %d samples to %s", vec.shape[0], p)
    return p


def load_samples(samples_path: str | Path) -> SampleSet:
    """Load samples from .npy/.dat, .npz or a text file.

    Text files hold one value per line; blank lines and lines starting
    with '#' are skipped. A single (n, 1) column is accepted and flattened.
    """
    p = Path(samples_path)
    if not p.exists():
        raise FileNotFoundError(str(p))

    if p.suffix.lower() in _TEXT_SUFFIXES:
        vec = _load_text(p)
    else:
        loaded = np.load(p, allow_pickle=False)
        if isinstance(loaded, np.lib.npyio.NpzFile):
            with loaded:
                if "values" not in loaded.files:
                    raise ValueError(f"NPZ missing 'values': {p}")
                vec = np.asarray(loaded["values"], dtype=np.float64)
        else:
            vec = np.asarray(loaded, dtype=np.float64)

    if vec.ndim == 2 and vec.shape[1] == 1:
        vec = vec[:, 0]
    logger.debug("Loaded %d samples from %s", vec.shape[0] if vec.ndim else 0, p)
    return SampleSet(values=vec)


def _load_text(p: Path) -> np.ndarray:
    vals: list[float] = []
    with p.open("r", encoding="utf-8") as f:
        for lineno, ln in enumerate(f, start=1):
            s = ln.strip()
            if not s or s.startswith("#"):
                continue
            try:
                vals.append(float(s))
            except ValueError as e:
                raise ValueError(f"{p}:{lineno}: not a number: {s!r}") from e

    if not vals:
        raise ValueError(f"Empty samples file: {p}")
    return np.asarray(vals, dtype=np.float64)
