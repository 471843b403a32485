# binarise.py
# validation, threshold selection & 0/255 masks

from __future__ import annotations
import logging
import numbers
import numpy as np

from .config import D
from .errors import InvalidArgument
from .histogram import intensity_histogram
from .luma import to_grayscale
from .otsu import otsu_threshold
from .triangle import triangle_threshold

logger = logging.getLogger(__name__)


def validate_image(image) -> np.ndarray:
    image = np.asarray(image)
    if image.ndim != 3:
        raise InvalidArgument(f"image must be rank 3, but got rank {image.ndim}")
    h, w, c = image.shape
    if c not in (1, 3):
        raise InvalidArgument(f"image color channel must be 1 or 3, but got {c}")
    if h == 0 or w == 0:
        raise InvalidArgument(f"image height and width must be positive, but got {h}x{w}")
    if image.dtype.kind not in "iuf":
        raise InvalidArgument(f"image dtype must be integer or float, but got {image.dtype}")
    return image


def validate_method(method: str) -> str:
    if method not in D.METHODS:
        raise InvalidArgument(f"method must be one of {', '.join(D.METHODS)}, but was {method!r}")
    return method


def validate_thresh_value(thresh_value) -> float:
    if isinstance(thresh_value, bool) or not isinstance(thresh_value, numbers.Real):
        raise InvalidArgument(f"thresh_value must be a number, but got {thresh_value!r}")
    if not 0 <= thresh_value <= 1:
        raise InvalidArgument(f"thresh_value must be within [0, 1], but got {thresh_value}")
    return float(thresh_value)


def _resolve(method, inverted, thresh_value):
    # None -> current value in D, read per call
    return (D.METHOD if method is None else method,
            D.INVERTED if inverted is None else inverted,
            D.THRESH_VALUE if thresh_value is None else thresh_value)


def select_threshold(gray: np.ndarray, method: str | None = None, thresh_value: float | None = None) -> float:
    """Scalar threshold in [0,255] for an already reduced grayscale array."""
    method, _, thresh_value = _resolve(method, None, thresh_value)
    if method == "binary":
        return thresh_value * D.MAX_INTENSITY
    hist = intensity_histogram(gray)
    if np.count_nonzero(hist) == 1:
        # single bucket: its unrounded top value keeps `gray > thr` false everywhere
        return float(gray.max())
    if method == "otsu":
        return otsu_threshold(hist)
    if method == "triangle":
        return triangle_threshold(hist)
    raise InvalidArgument(f"method must be one of {', '.join(D.METHODS)}, but was {method!r}")


def binarise(image, method: str | None = None, inverted: bool | None = None,
             thresh_value: float | None = None) -> tuple[np.ndarray, float]:
    """
    Binarise an [H,W,C] image (C in {1,3}, values 0..255).
    Arguments left as None take the current value from config.D.
    Returns (0/255 int32 array shaped like the input, threshold used).
    """
    method, inverted, thresh_value = _resolve(method, inverted, thresh_value)
    image = validate_image(image)
    method = validate_method(method)
    thresh_value = validate_thresh_value(thresh_value)

    gray = to_grayscale(image)
    thr = select_threshold(gray, method, thresh_value)
    logger.debug("threshold %s (method=%s, inverted=%s)", thr, method, inverted)

    fg = gray <= thr if inverted else gray > thr
    out = fg.astype(np.int32) * 255
    if image.shape[-1] != 1:
        out = np.repeat(out, image.shape[-1], axis=-1)
    return out, thr


def threshold(image, method: str | None = None, inverted: bool | None = None,
              thresh_value: float | None = None) -> np.ndarray:
    """Binary (0/255) image from a grayscale or RGB image; see binarise()."""
    return binarise(image, method, inverted, thresh_value)[0]
