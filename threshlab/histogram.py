# histogram.py
# intensity histogram + zero trimming

from __future__ import annotations
from typing import Tuple
import numpy as np

from .config import D
from .errors import DegenerateHistogram


def intensity_histogram(gray: np.ndarray) -> np.ndarray:
    """Round (half to even), clip to [0,255] and count into 256 buckets."""
    levels = np.clip(np.rint(gray.ravel()), 0, D.MAX_INTENSITY).astype(np.int64)
    return np.bincount(levels, minlength=D.BINS)


def populated_range(hist: np.ndarray) -> Tuple[int, int]:
    """Inclusive (first, last) indices of non-zero buckets."""
    nz = np.flatnonzero(hist)
    if nz.size == 0:
        raise DegenerateHistogram("histogram has no populated bucket")
    return int(nz[0]), int(nz[-1])


def trim_zeros(hist: np.ndarray) -> Tuple[np.ndarray, int]:
    """Drop empty buckets at both ends; returns (trimmed, offset of trimmed[0])."""
    lo, hi = populated_range(hist)
    return hist[lo:hi + 1], lo
