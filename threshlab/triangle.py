# triangle.py
# Triangle (histogram shape) method.
#
# A chord runs from the histogram peak to the far end of its longer tail.
# The threshold is the bucket under that chord whose bar lies furthest
# (perpendicular distance) from it.

from __future__ import annotations
from typing import Tuple
import numpy as np

from .histogram import trim_zeros


def scan_segment(trimmed: np.ndarray) -> Tuple[int, int, bool]:
    """
    (start, stop, rising) of the tail to scan inside the trimmed histogram.
    rising: peak sits in the upper half, scan from the start up to the peak.
    """
    peak = int(np.argmax(trimmed))
    rising = trimmed.size / 2 <= peak
    if rising:
        return 0, peak + 1, True
    return peak, trimmed.size, False


def chord_distances(segment: np.ndarray, rising: bool) -> np.ndarray:
    """Perpendicular distance of each bar below the peak-to-tail chord."""
    n = segment.size
    height = float(segment.max())
    slope = height / n  # tan of the hypotenuse angle
    steps = np.arange(1, n + 1, dtype=np.float64) if rising else np.arange(n, 0, -1, dtype=np.float64)
    line = steps * slope
    leg_b = np.clip(line - segment, 0, None)
    leg_b[np.isclose(line, segment)] = 0.0
    leg_a = leg_b / slope
    hyp = np.hypot(leg_a, leg_b)
    return np.divide(leg_a * leg_b, hyp, out=np.zeros(n), where=hyp > 0)


def triangle_threshold(hist: np.ndarray) -> int:
    """Absolute intensity of the bucket furthest below the triangle's hypotenuse."""
    hist = np.asarray(hist, dtype=np.float64)
    trimmed, lo = trim_zeros(hist)
    start, stop, rising = scan_segment(trimmed)
    dist = chord_distances(trimmed[start:stop], rising)
    return lo + start + int(np.argmax(dist))
