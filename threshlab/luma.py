# luma.py
# channel reduction to grayscale

import numpy as np

from .config import D


def to_grayscale(image: np.ndarray) -> np.ndarray:
    """[H,W,3] -> weighted luma [H,W,1]; [H,W,1] passes through untouched."""
    if image.shape[-1] == 1:
        return image
    r, g, b = D.LUMA_WEIGHTS
    rgb = image.astype(np.float64)
    return r*rgb[..., 0:1] + g*rgb[..., 1:2] + b*rgb[..., 2:3]
