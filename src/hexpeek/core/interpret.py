from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from hexpeek.core.endian import Endian, decode_float32, decode_float64, decode_int

# (name, width in bytes, kind) in display order
SCALAR_TYPES: tuple[tuple[str, int, str], ...] = (
    ("i8", 1, "int"),
    ("u8", 1, "uint"),
    ("i16", 2, "int"),
    ("u16", 2, "uint"),
    ("i32", 4, "int"),
    ("u32", 4, "uint"),
    ("i64", 8, "int"),
    ("u64", 8, "uint"),
    ("f32", 4, "float"),
    ("f64", 8, "float"),
)

SCALAR_WIDTHS: dict[str, int] = {name: width for (name, width, _kind) in SCALAR_TYPES}

# Widest scalar; the cursor window the renderer asks the buffer for
MAX_SCALAR_WIDTH = max(SCALAR_WIDTHS.values())


@dataclass(frozen=True)
class Scalar:
    name: str
    size: int
    value: int | float
    raw: int  # unsigned bit pattern in the selected byte order

    def decimal(self) -> str:
        if isinstance(self.value, float):
            return format_float(self.value, bits=self.size * 8)
        return str(self.value)

    def hex(self) -> str:
        return f"0x{self.raw:0{self.size * 2}x}"


@dataclass(frozen=True)
class ScalarView:
    """Typed interpretations of the bytes at the cursor.

    A field is None when fewer bytes than its width remain before EOF.
    """

    endian: Endian
    i8: Scalar | None = None
    u8: Scalar | None = None
    i16: Scalar | None = None
    u16: Scalar | None = None
    i32: Scalar | None = None
    u32: Scalar | None = None
    i64: Scalar | None = None
    u64: Scalar | None = None
    f32: Scalar | None = None
    f64: Scalar | None = None

    def get(self, name: str) -> Scalar | None:
        if name not in SCALAR_WIDTHS:
            raise KeyError(name)
        return getattr(self, name)

    def available(self, name: str) -> bool:
        return self.get(name) is not None

    def value(self, name: str) -> int | float | None:
        sc = self.get(name)
        return sc.value if sc is not None else None

    def __iter__(self) -> Iterator[tuple[str, Scalar | None]]:
        for name, _width, _kind in SCALAR_TYPES:
            yield name, getattr(self, name)


def interpret(data: bytes, endian: Endian) -> ScalarView:
    """Decode the leading bytes of `data` as every supported scalar type.

    Byte order only reorders bytes before the numeric decode. Scalars wider
    than `data` are left unavailable; nothing is zero-padded.
    """
    fields: dict[str, Scalar] = {}
    for name, width, kind in SCALAR_TYPES:
        if len(data) < width:
            continue
        chunk = bytes(data[:width])
        raw = decode_int(chunk, endian, signed=False)
        if kind == "float":
            value: int | float = (
                decode_float32(chunk, endian) if width == 4 else decode_float64(chunk, endian)
            )
        elif kind == "int":
            value = decode_int(chunk, endian, signed=True)
        else:
            value = raw
        fields[name] = Scalar(name=name, size=width, value=value, raw=raw)
    return ScalarView(endian=endian, **fields)


def format_float(val: float, *, bits: int) -> str:
    if math.isnan(val) or math.isinf(val):
        return str(val)
    # Compact formatting
    if bits == 32:
        return f"{val:.7g}"
    return f"{val:.15g}"
