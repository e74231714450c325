from __future__ import annotations

from pathlib import Path

import pytest

from hexpeek.cli import build_parser, main


def test_missing_file_exit_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    rc = main([str(tmp_path / "missing.bin")])
    assert rc == 2
    assert "hexpeek: file not found" in capsys.readouterr().err


def test_bad_row_width_exit_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("APPDATA", str(tmp_path))
    p = tmp_path / "d.bin"
    p.write_bytes(b"\x00")
    rc = main([str(p), "--bytes-per-row", "0"])
    assert rc == 2
    assert capsys.readouterr().err.startswith("hexpeek: ")


def test_parser_options() -> None:
    args = build_parser().parse_args(["f.bin", "--endian", "big", "--bytes-per-row", "8"])
    assert args.path == "f.bin"
    assert args.endian == "big"
    assert args.bytes_per_row == 8
    with pytest.raises(SystemExit):
        build_parser().parse_args(["f.bin", "--endian", "middle"])


def test_bad_config_keys_exit_code(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    p = tmp_path / "d.bin"
    p.write_bytes(b"\x00")
    cfg = tmp_path / "config.yaml"
    cfg.write_text("1: 2\nfoo: 3\n", encoding="utf-8")
    rc = main([str(p), "--config", str(cfg)])
    assert rc == 2
    assert "unknown config keys: 1, foo" in capsys.readouterr().err
