"""Endianness support for hexpeek: type, normalization, and decoding."""

from __future__ import annotations

import struct
from typing import Literal

from hexpeek.core.errors import ConfigError

# Type alias for endianness
Endian = Literal["little", "big"]

DEFAULT_ENDIAN: Endian = "little"


def normalize_endian(value: str | None) -> Endian | None:
    """Normalize an endian value from configuration or the command line.

    Accepts 'little'/'big' in any case, plus the short forms 'le'/'be'.

    Returns:
        Normalized Endian value, or None if input was None

    Raises:
        ConfigError: If value is not a recognized byte order
    """
    if value is None:
        return None

    value_lower = str(value).strip().lower()
    if value_lower in ("little", "le"):
        return "little"
    if value_lower in ("big", "be"):
        return "big"
    raise ConfigError(f"Invalid endian '{value}'. Expected 'little' or 'big'.")


def flip_endian(endian: Endian) -> Endian:
    return "big" if endian == "little" else "little"


def endian_label(endian: Endian) -> str:
    return f"{endian} endian"


def decode_int(data: bytes, endian: Endian, signed: bool) -> int:
    """Decode integer from bytes with specified endianness.

    Args:
        data: Bytes to decode
        endian: Byte order ('little' or 'big')
        signed: Whether the integer is signed (two's complement)

    Returns:
        Decoded integer value
    """
    return int.from_bytes(data, byteorder=endian, signed=signed)


def decode_float32(data: bytes, endian: Endian) -> float:
    """Decode 32-bit IEEE-754 float from exactly 4 bytes."""
    format_char = "<f" if endian == "little" else ">f"
    return struct.unpack(format_char, data)[0]


def decode_float64(data: bytes, endian: Endian) -> float:
    """Decode 64-bit IEEE-754 float (double) from exactly 8 bytes."""
    format_char = "<d" if endian == "little" else ">d"
    return struct.unpack(format_char, data)[0]
