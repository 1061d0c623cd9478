"""Chromabyte: an immutable byte-per-channel RGBA color with black-body estimation."""

from .colors.color import Color
from .colors.palette import (
    PALETTE,
    named,
    TRANSPARENT,
    RED,
    GREEN,
    BLUE,
    CYAN,
    MAGENTA,
    YELLOW,
    WHITE,
    BLACK,
    GREY,
)
from .blackbody import (
    black_body,
    planck_law,
    band_mean,
    band_ratios,
    normalization_peak,
)
from .types.format_type import FormatType

__version__ = "1.0.0"

__all__ = [
    # core color type
    "Color",
    "FormatType",
    # palette
    "PALETTE",
    "named",
    "TRANSPARENT",
    "RED",
    "GREEN",
    "BLUE",
    "CYAN",
    "MAGENTA",
    "YELLOW",
    "WHITE",
    "BLACK",
    "GREY",
    # black body
    "black_body",
    "planck_law",
    "band_mean",
    "band_ratios",
    "normalization_peak",
    "__version__",
]
