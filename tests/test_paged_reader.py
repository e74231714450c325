from __future__ import annotations

from pathlib import Path

import pytest

from hexpeek.core.errors import StartupError
from hexpeek.core.io import PagedReader, open_buffer


def make_fixture_file(tmp_path: Path, size: int = 5000) -> Path:
    # Deterministic content: 0..255 repeating
    data = bytes(i % 256 for i in range(size))
    p = tmp_path / "fixture.bin"
    p.write_bytes(data)
    return p


@pytest.mark.parametrize("use_mmap", [True, False])
def test_read_exact_ranges(tmp_path: Path, use_mmap: bool) -> None:
    path = make_fixture_file(tmp_path, size=5000)
    with PagedReader(str(path), use_mmap=use_mmap) as r:
        assert r.length() == 5000
        assert r.read(0, 16) == bytes(range(16))

        off, ln = 1234, 77
        assert r.read(off, ln) == bytes(i % 256 for i in range(off, off + ln))


@pytest.mark.parametrize("use_mmap", [True, False])
def test_read_crosses_page_boundary(tmp_path: Path, use_mmap: bool) -> None:
    path = make_fixture_file(tmp_path, size=300)
    with PagedReader(str(path), page_size=64, cache_pages=2, use_mmap=use_mmap) as r:
        assert r.read(60, 10) == bytes(range(60, 70))
        # Revisit an evicted page
        assert r.read(250, 50) == bytes(i % 256 for i in range(250, 300))
        assert r.read(0, 4) == bytes(range(4))


@pytest.mark.parametrize("use_mmap", [True, False])
def test_read_past_eof_truncated(tmp_path: Path, use_mmap: bool) -> None:
    path = make_fixture_file(tmp_path, size=4097)
    with PagedReader(str(path), use_mmap=use_mmap) as r:
        start = r.size - 10
        out = r.read(start, 100)
        assert len(out) == 10
        assert out == bytes(i % 256 for i in range(start, r.size))
        assert r.read(r.size, 10) == b""


@pytest.mark.parametrize("use_mmap", [True, False])
def test_out_of_range_input_never_raises(tmp_path: Path, use_mmap: bool) -> None:
    path = make_fixture_file(tmp_path, size=100)
    with PagedReader(str(path), use_mmap=use_mmap) as r:
        assert r.read(-1, 1) == b""
        assert r.read(0, -1) == b""
        assert r.read(0, 0) == b""
        assert r.read(10_000, 8) == b""
        assert r.byte_at(-5) is None
        assert r.byte_at(r.size) is None
        assert r.byte_at(99) == 99


def test_empty_file(tmp_path: Path) -> None:
    p = tmp_path / "empty.bin"
    p.write_bytes(b"")
    with PagedReader(str(p)) as r:
        assert r.size == 0
        assert not r.uses_mmap
        assert r.read(0, 8) == b""
        assert r.byte_at(0) is None


def test_open_buffer_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.bin"
    with pytest.raises(StartupError) as info:
        open_buffer(str(missing))
    assert "not found" in str(info.value)
    assert info.value.path == str(missing)


def test_open_buffer_directory(tmp_path: Path) -> None:
    with pytest.raises(StartupError):
        open_buffer(str(tmp_path))
