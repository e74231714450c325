from __future__ import annotations

import math
import struct

import pytest

from hexpeek.core.endian import flip_endian
from hexpeek.core.interpret import SCALAR_WIDTHS, interpret


def test_u16_byte_order() -> None:
    data = bytes([0x01, 0x02])
    assert interpret(data, "little").value("u16") == 0x0201 == 513
    assert interpret(data, "big").value("u16") == 0x0102 == 258


def test_png_signature_u32() -> None:
    data = bytes([0x89, 0x50, 0x4E, 0x47])
    le = interpret(data, "little")
    be = interpret(data, "big")
    assert le.value("u32") == 0x474E5089 == 1196314761
    assert be.value("u32") == 0x89504E47 == 2303741511
    # Signed view of the same bits
    assert be.value("i32") == 2303741511 - 2**32
    assert le.value("u8") == 0x89
    assert le.value("i8") == 0x89 - 256


def test_three_bytes_left() -> None:
    view = interpret(b"\x01\x02\x03", "little")
    for name in ("i8", "u8", "i16", "u16"):
        assert view.available(name)
    for name in ("i32", "u32", "i64", "u64", "f32", "f64"):
        assert not view.available(name)
        assert view.get(name) is None


def test_empty_input_has_nothing() -> None:
    view = interpret(b"", "big")
    assert all(sc is None for _name, sc in view)
    assert view.endian == "big"


@pytest.mark.parametrize("endian", ["little", "big"])
def test_double_flip_is_identity(endian) -> None:
    data = bytes(range(0xF0, 0xF8))
    assert interpret(data, flip_endian(flip_endian(endian))) == interpret(data, endian)


def test_floats() -> None:
    le = interpret(struct.pack("<d", 2.5), "little")
    assert le.value("f64") == 2.5
    assert le.get("f64").decimal() == "2.5"
    f32 = interpret(struct.pack(">f", 1.5) + b"\x00" * 4, "big")
    assert f32.value("f32") == 1.5
    assert f32.get("f32").hex() == "0x3fc00000"


def test_float_nan_formatting() -> None:
    view = interpret(b"\x7f\xc0\x00\x00", "big")
    assert math.isnan(view.value("f32"))
    assert view.get("f32").decimal() == "nan"


def test_hex_form_is_bit_pattern() -> None:
    view = interpret(b"\xff\xfe" + b"\x00" * 6, "little")
    assert view.value("i16") == -257
    assert view.get("i16").hex() == "0xfeff"
    assert view.get("u64").hex() == "0x000000000000feff"


def test_iteration_order_and_widths() -> None:
    view = interpret(bytes(8), "little")
    names = [name for name, _sc in view]
    assert names == ["i8", "u8", "i16", "u16", "i32", "u32", "i64", "u64", "f32", "f64"]
    for name, sc in view:
        assert sc is not None and sc.size == SCALAR_WIDTHS[name]


def test_unknown_scalar_name() -> None:
    with pytest.raises(KeyError):
        interpret(b"\x00", "little").get("u128")
