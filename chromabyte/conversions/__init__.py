"""Scalar channel conversions between unit floats and bytes."""

from .numbers import unit_to_byte, unit_to_byte_f32, byte_to_unit, to_byte, require_int

__all__ = [
    "unit_to_byte",
    "unit_to_byte_f32",
    "byte_to_unit",
    "to_byte",
    "require_int",
]
