# threshlab/__init__.py

# Errors
from .errors import InvalidArgument, DegenerateHistogram

# Tunables
from .config import Defaults, D

# Core ops
from .binarise import (
    threshold,
    binarise,
    select_threshold,
    validate_image,
    validate_method,
)
from .luma import to_grayscale
from .histogram import intensity_histogram, trim_zeros
from .otsu import otsu_threshold, between_class_variances
from .triangle import triangle_threshold

# I/O & batch
from .io_save_load import load_image, save_binary, save_json
from .pipeline import threshold_files, summarise
