from numbers import Real
import numpy as np
from ..types.color_types import BYTE_MAX


def _require_real(value, name: str) -> None:
    if not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")


def unit_to_byte(value: Real, name: str = "channel") -> int:
    """
    Scale a unit float to a byte with double precision.

    The scaled value is clamped to ``[0, 255]`` and truncated toward zero, so
    ``0.999999`` maps to 254 rather than 255. NaN compares false against both
    bounds and lands on 0; infinities saturate.
    """
    _require_real(value, name)
    scaled = float(value) * BYTE_MAX
    return int(max(0.0, min(scaled, float(BYTE_MAX))))


def unit_to_byte_f32(value: Real, name: str = "channel") -> int:
    """Single precision counterpart of :func:`unit_to_byte`."""
    _require_real(value, name)
    with np.errstate(over="ignore", invalid="ignore"):
        scaled = np.float32(value) * np.float32(BYTE_MAX)
    return int(max(np.float32(0.0), min(scaled, np.float32(BYTE_MAX))))


def byte_to_unit(value: int) -> float:
    return value / float(BYTE_MAX)


def require_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def to_byte(value: int, name: str = "channel") -> int:
    """Keep the low eight bits of an integer channel."""
    return require_int(value, name) & 0xFF
