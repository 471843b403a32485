# errors.py
# exceptions raised by the thresholding ops


class InvalidArgument(ValueError):
    """Bad image, method or threshold value handed to a thresholding op."""


class DegenerateHistogram(InvalidArgument):
    """Histogram without a single populated bucket."""
