"""
Chromabyte Color Type
=====================

A single immutable RGBA value type with one byte per channel.

Features
--------
- Immutable instances (frozen after initialization), hashable by value
- Integer constructors (packed 24-bit, bytes) and float constructors that
  clamp and truncate unit floats to bytes
- Export to numpy arrays in INT, FLOAT or PERCENTAGE format
- Stable 4-byte wire form (red, green, blue, alpha)
- Named palette (``Color.RED``, ``Color.GREY``, ...)

Usage
-----
>>> from chromabyte.colors import Color
>>> Color.rgb24(0xff8000)
Color(r=255, g=128, b=0, a=255)
>>> Color.rgb_f64(0.999999, 0.5, 0.0).r()
254
>>> Color.RED.with_alpha(128).to_bytes()
b'\\xff\\x00\\x00\\x80'
>>> Color.GREY.as_f32_array()
array([0.49803922, 0.49803922, 0.49803922, 1.        ], dtype=float32)

Notes
-----
- Float input outside ``[0, 1]`` is clamped, never rejected
- Integer input is reduced to its low eight bits
- ``Color.black_body`` lives in :mod:`chromabyte.blackbody`
"""

from .color import Color
from .palette import (
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

__all__ = [
    "Color",
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
]
