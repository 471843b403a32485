# config.py
# Tunable defaults in one place.

from __future__ import annotations
from dataclasses import dataclass


@dataclass
class Defaults:
    # Thresholding
    METHOD: str = "binary"
    METHODS: tuple = ("binary", "otsu", "triangle")
    INVERTED: bool = False
    THRESH_VALUE: float = 0.5

    # CCIR601 luma weights (R, G, B)
    LUMA_WEIGHTS: tuple = (0.2989, 0.5870, 0.1140)

    # Histogram
    BINS: int = 256
    MAX_INTENSITY: int = 255

    # Summaries
    COMPONENT_CONNECTIVITY: int = 2  # 8-neighbour

D = Defaults()
