from __future__ import annotations
from typing import Any, Iterator, Mapping, Tuple, Union
from numbers import Real
from string import hexdigits
import struct
import numpy as np
from numpy import ndarray
from ..conversions import unit_to_byte, unit_to_byte_f32, byte_to_unit, to_byte, require_int
from ..types.color_types import Byte, ByteTuple, CHANNELS, BYTE_MAX
from ..types.format_type import FormatType, bytes_to_format

_BYTE_LAYOUT = struct.Struct("BBBB")


class Color:
    """
    Immutable RGBA color with one unsigned byte per channel.

    Channels are stored in the order red, green, blue, alpha. Two colors with
    the same four bytes are equal and hash alike. Every "modification" returns
    a new instance.

    Named palette entries (``Color.RED``, ``Color.TRANSPARENT``, ...) are
    attached by :mod:`chromabyte.colors.palette`.
    """
    __slots__ = ('_value', '_frozen')  # no __dict__ → no stray attributes

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, red: Byte, green: Byte, blue: Byte, alpha: Byte) -> None:
        self._value: ByteTuple = (
            to_byte(red, "red"),
            to_byte(green, "green"),
            to_byte(blue, "blue"),
            to_byte(alpha, "alpha"),
        )
        super().__setattr__('_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def rgb24(cls, packed: int) -> Color:
        """Build an opaque color from ``0xRRGGBB``; bits above 23 are ignored."""
        packed = require_int(packed, "packed")
        return cls.rgb((packed & 0xff0000) >> 16, (packed & 0x00ff00) >> 8, packed & 0x0000ff)

    @classmethod
    def rgb(cls, r: Byte, g: Byte, b: Byte) -> Color:
        return cls(r, g, b, 0xFF)

    @classmethod
    def rgba(cls, r: Byte, g: Byte, b: Byte, a: Byte) -> Color:
        return cls(r, g, b, a)

    @classmethod
    def rgb_f32(cls, r: Real, g: Real, b: Real) -> Color:
        """
        Build an opaque color from unit floats using single precision.

        Each channel is scaled by 255, clamped to ``[0, 255]`` and truncated.
        Out-of-range input is clamped, never rejected.
        """
        return cls.rgb(unit_to_byte_f32(r, "red"), unit_to_byte_f32(g, "green"), unit_to_byte_f32(b, "blue"))

    @classmethod
    def rgb_f64(cls, r: Real, g: Real, b: Real) -> Color:
        """
        Build an opaque color from unit floats using double precision.

        Args:
            r, g, b: Channel intensities, nominally in ``[0.0, 1.0]``.

        Returns:
            Color whose channels are ``trunc(clamp(x * 255, 0, 255))``.
        """
        return cls.rgb(unit_to_byte(r, "red"), unit_to_byte(g, "green"), unit_to_byte(b, "blue"))

    @classmethod
    def rgba_f32(cls, r: Real, g: Real, b: Real, a: Real) -> Color:
        return cls.rgba(
            unit_to_byte_f32(r, "red"),
            unit_to_byte_f32(g, "green"),
            unit_to_byte_f32(b, "blue"),
            unit_to_byte_f32(a, "alpha"),
        )

    @classmethod
    def rgba_f64(cls, r: Real, g: Real, b: Real, a: Real) -> Color:
        """Like :meth:`rgb_f64`, with alpha going through the same clamp and truncation."""
        return cls.rgba(
            unit_to_byte(r, "red"),
            unit_to_byte(g, "green"),
            unit_to_byte(b, "blue"),
            unit_to_byte(a, "alpha"),
        )

    @classmethod
    def black_body(cls, temperature: Real) -> Color:
        """Approximate visible color of a black body at ``temperature`` kelvin."""
        from ..blackbody import black_body  # local import to avoid cycles
        return black_body(temperature)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ByteTuple:
        return self._value

    @property
    def red(self) -> Byte:
        return self._value[0]

    @property
    def green(self) -> Byte:
        return self._value[1]

    @property
    def blue(self) -> Byte:
        return self._value[2]

    @property
    def alpha(self) -> Byte:
        return self._value[3]

    def r(self) -> Byte:
        return self._value[0]

    def g(self) -> Byte:
        return self._value[1]

    def b(self) -> Byte:
        return self._value[2]

    def a(self) -> Byte:
        return self._value[3]

    # ------------------ DERIVED COLORS ------------------
    def with_alpha(self, alpha: Byte) -> Color:
        """Return a new color with the same RGB channels and a replaced alpha byte."""
        return self.__class__(*self._value[:3], alpha)

    def with_alpha_f64(self, alpha: Real) -> Color:
        return self.with_alpha(unit_to_byte(alpha, "alpha"))

    # ------------------ EXPORT ------------------
    def to_tuple(self) -> ByteTuple:
        return self._value

    def to_rgb24(self) -> int:
        """Pack red, green and blue into ``0xRRGGBB``; alpha is dropped."""
        r, g, b, _ = self._value
        return (r << 16) | (g << 8) | b

    def as_array(self, format_type: Union[FormatType, str] = FormatType.INT) -> ndarray:
        """
        Export the channels as a numpy array of shape ``(4,)``.

        Args:
            format_type: INT yields the raw bytes as ``uint8``; FLOAT yields
                ``float32`` values in ``[0, 1]``; PERCENTAGE yields ``float32``
                values in ``[0, 100]``.

        Returns:
            numpy array ordered red, green, blue, alpha.
        """
        return bytes_to_format(self._value, format_type)

    def as_f32_array(self) -> ndarray:
        """Channels divided by 255 as ``float32``, ordered red, green, blue, alpha."""
        return self.as_array(FormatType.FLOAT)

    def as_unit_tuple(self) -> Tuple[float, float, float, float]:
        """Channels divided by 255 as Python floats (double precision)."""
        r, g, b, a = self._value
        return (byte_to_unit(r), byte_to_unit(g), byte_to_unit(b), byte_to_unit(a))

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}{:02x}".format(*self._value)

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """
        Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

        The leading ``#`` is optional. Short forms repeat each digit, as in CSS.
        Colors without an alpha digit group are opaque.

        Raises:
            ValueError: If the text is not one of the accepted forms.
        """
        if not isinstance(text, str):
            raise TypeError(f"hex color must be a string, got {type(text).__name__}")
        digits = text[1:] if text.startswith("#") else text
        if len(digits) not in (3, 4, 6, 8) or any(c not in hexdigits for c in digits):
            raise ValueError(f"Invalid hex color: {text!r}")
        if len(digits) in (3, 4):
            digits = "".join(c * 2 for c in digits)
        if len(digits) == 6:
            digits += "ff"
        channels = [int(digits[i:i + 2], 16) for i in range(0, 8, 2)]
        return cls(*channels)

    # ------------------ SERIALIZATION ------------------
    def to_bytes(self) -> bytes:
        """Four bytes, red first."""
        return _BYTE_LAYOUT.pack(*self._value)

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview], offset: int = 0) -> Color:
        """Read a color written by :meth:`to_bytes`, starting at ``offset``."""
        if offset < 0 or len(data) - offset < _BYTE_LAYOUT.size:
            raise ValueError(
                f"Color needs {_BYTE_LAYOUT.size} bytes from offset {offset}, "
                f"got {max(len(data) - offset, 0)}"
            )
        return cls(*_BYTE_LAYOUT.unpack_from(data, offset))

    def to_dict(self) -> dict[str, Byte]:
        return dict(zip(CHANNELS, self._value))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Color:
        """
        Inverse of :meth:`to_dict`.

        Unlike the integer constructors, channel values are validated rather than
        masked, since a mapping usually comes from outside the process.
        """
        channels = []
        for name in CHANNELS:
            try:
                v = data[name]
            except KeyError:
                raise ValueError(f"Color mapping is missing channel {name!r}") from None
            if isinstance(v, bool) or not isinstance(v, (int, np.integer)) or not 0 <= v <= BYTE_MAX:
                raise ValueError(f"Channel {name!r} must be an integer in [0, {BYTE_MAX}], got {v!r}")
            channels.append(int(v))
        return cls(*channels)

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        r, g, b, a = self._value
        return f"{self.__class__.__name__}(r={r}, g={g}, b={b}, a={a})"

    def __iter__(self) -> Iterator[Byte]:
        return iter(self._value)

    def __len__(self) -> int:
        return len(self._value)

    def __copy__(self) -> Color:
        return self

    def __deepcopy__(self, memo) -> Color:
        return self

    def __reduce__(self):
        return (self.__class__, self._value)

