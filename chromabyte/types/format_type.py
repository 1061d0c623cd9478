"""Presentation formats for exported channel values."""
from __future__ import annotations
from enum import Enum
from typing import Iterable
import numpy as np
from numpy import ndarray
from .color_types import BYTE_MAX


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"
    PERCENTAGE = "percentage"

    @property
    def full_scale(self) -> float:
        """Value a fully saturated (255) channel maps to."""
        return _FULL_SCALE[self]

    @property
    def dtype(self) -> type:
        return _DTYPES[self]


_FULL_SCALE = {
    FormatType.INT: BYTE_MAX,
    FormatType.FLOAT: 1.0,
    FormatType.PERCENTAGE: 100.0,
}

_DTYPES = {
    FormatType.INT: np.uint8,
    FormatType.FLOAT: np.float32,
    FormatType.PERCENTAGE: np.float32,
}


def bytes_to_format(channels: Iterable[int], format_type: FormatType | str = FormatType.INT) -> ndarray:
    """
    Present byte channels in ``format_type``.

    INT keeps the bytes as ``uint8``. FLOAT divides by 255 in single precision,
    and PERCENTAGE scales that unit value to ``[0, 100]``.
    """
    format_type = FormatType(format_type)
    dtype = format_type.dtype
    if format_type is FormatType.INT:
        return np.array(tuple(channels), dtype=dtype)
    unit = np.array(tuple(channels), dtype=dtype) / dtype(BYTE_MAX)
    if format_type is FormatType.FLOAT:
        return unit
    return unit * dtype(format_type.full_scale)
