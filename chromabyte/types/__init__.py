from .color_types import Byte, ByteTuple, ChannelName, CHANNELS, BYTE_MAX
from .format_type import FormatType, bytes_to_format

__all__ = [
    "Byte",
    "ByteTuple",
    "ChannelName",
    "CHANNELS",
    "BYTE_MAX",
    "FormatType",
    "bytes_to_format",
]
