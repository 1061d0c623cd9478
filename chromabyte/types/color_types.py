from __future__ import annotations
from typing import Literal, Tuple

Byte = int
ByteTuple = Tuple[Byte, Byte, Byte, Byte]
ChannelName = Literal["red", "green", "blue", "alpha"]

# Wire and export order of the four channels
CHANNELS: Tuple[ChannelName, ...] = ("red", "green", "blue", "alpha")
BYTE_MAX = 255
