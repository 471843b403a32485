# otsu.py
# Otsu's method: pick the split maximising between-class variance.

from __future__ import annotations
import numpy as np

from .histogram import populated_range


def between_class_variances(hist: np.ndarray) -> np.ndarray:
    """
    Variance for every split t in [0, len-1): class 1 = hist[:t+1],
    class 2 = hist[t+1:]. Splits leaving a class empty score 0.
    """
    hist = np.asarray(hist, dtype=np.float64)
    total = hist.sum()
    idx = np.arange(hist.size)
    wB = np.cumsum(hist)[:-1]
    sumB = np.cumsum(idx * hist)[:-1]
    wF = total - wB
    sumF = np.dot(idx, hist) - sumB
    out = np.zeros(hist.size - 1)
    ok = (wB > 0) & (wF > 0)
    mB = sumB[ok] / wB[ok]
    mF = sumF[ok] / wF[ok]
    out[ok] = (wB[ok] / total) * (wF[ok] / total) * (mB - mF) ** 2
    return out


def otsu_threshold(hist: np.ndarray) -> int:
    """
    Split index with the largest between-class variance.
    Ties keep the earliest split; a single populated bucket returns that bucket.
    """
    lo, _ = populated_range(hist)
    var_max = 0.0; thr = -1
    for t, var_between in enumerate(between_class_variances(hist)):
        if var_between > var_max: var_max, thr = var_between, t
    return thr if thr >= 0 else lo
