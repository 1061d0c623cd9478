"""Named colors, built once at import time from the integer constructors."""

from __future__ import annotations
from typing import Dict
from .color import Color

TRANSPARENT = Color.rgba(0, 0, 0, 0)
RED = Color.rgb(0xff, 0, 0)
GREEN = Color.rgb(0, 0xff, 0)
BLUE = Color.rgb(0, 0, 0xff)
CYAN = Color.rgb(0, 0xff, 0xff)
MAGENTA = Color.rgb(0xff, 0, 0xff)
YELLOW = Color.rgb(0xff, 0xff, 0)
WHITE = Color.rgb(0xff, 0xff, 0xff)
BLACK = Color.rgb(0, 0, 0)
GREY = Color.rgb(0x7f, 0x7f, 0x7f)

PALETTE: Dict[str, Color] = {
    "transparent": TRANSPARENT,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "cyan": CYAN,
    "magenta": MAGENTA,
    "yellow": YELLOW,
    "white": WHITE,
    "black": BLACK,
    "grey": GREY,
}

for _name, _color in PALETTE.items():
    setattr(Color, _name.upper(), _color)
del _name, _color


def named(name: str) -> Color:
    """
    Look up a palette color by name, case-insensitively.

    Raises:
        KeyError: If ``name`` is not in the palette.
    """
    try:
        return PALETTE[name.lower()]
    except KeyError:
        raise KeyError(f"Unknown color name {name!r}; expected one of {sorted(PALETTE)}") from None
