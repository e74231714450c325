"""Viewer configuration: defaults, optional YAML config file, command-line overrides."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

import yaml

from hexpeek.core.endian import DEFAULT_ENDIAN, Endian, normalize_endian
from hexpeek.core.errors import ConfigError
from hexpeek.core.layout import DEFAULT_BYTES_PER_ROW

logger = logging.getLogger(__name__)

MAX_BYTES_PER_ROW = 64


@dataclass(frozen=True)
class ViewerConfig:
    """Startup options; read once and never re-parsed."""

    endian: Endian = DEFAULT_ENDIAN
    bytes_per_row: int = DEFAULT_BYTES_PER_ROW

    def __post_init__(self) -> None:
        validate_bytes_per_row(self.bytes_per_row)
        if self.endian not in ("little", "big"):
            raise ConfigError(f"Invalid endian '{self.endian}'. Expected 'little' or 'big'.")

    def with_overrides(
        self, *, endian: str | None = None, bytes_per_row: int | None = None
    ) -> ViewerConfig:
        out = self
        if endian is not None:
            out = replace(out, endian=normalize_endian(endian))
        if bytes_per_row is not None:
            out = replace(out, bytes_per_row=bytes_per_row)
        return out


def validate_bytes_per_row(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"bytes_per_row must be an integer, got {value!r}")
    if not 1 <= value <= MAX_BYTES_PER_ROW:
        raise ConfigError(f"bytes_per_row must be between 1 and {MAX_BYTES_PER_ROW}, got {value}")
    return value


def get_user_config_path() -> Path:
    """Get platform-appropriate user config file path."""
    if os.name == "nt":  # Windows
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
        return Path(base) / "hexpeek" / "config.yaml"
    else:  # macOS, Linux
        return Path.home() / ".config" / "hexpeek" / "config.yaml"


def parse_config(text: str) -> ViewerConfig:
    """Build a config from YAML text with optional `endian` and `bytes_per_row` keys."""
    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid config YAML: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("config must be a mapping")

    unknown = sorted(str(k) for k in set(data) - {"endian", "bytes_per_row"})
    if unknown:
        raise ConfigError(f"unknown config keys: {', '.join(unknown)}")

    cfg = ViewerConfig()
    if "endian" in data:
        cfg = replace(cfg, endian=normalize_endian(data["endian"]))
    if "bytes_per_row" in data:
        cfg = replace(cfg, bytes_per_row=validate_bytes_per_row(data["bytes_per_row"]))
    return cfg


def load_config(path: str | Path | None = None) -> ViewerConfig:
    """Load configuration from `path`, or the user config file if present.

    An explicit `path` that does not exist is an error; a missing default file is not.
    """
    explicit = path is not None
    cfg_path = Path(path) if path is not None else get_user_config_path()
    if not cfg_path.is_file():
        if explicit:
            raise ConfigError(f"config file not found: {cfg_path}")
        return ViewerConfig()
    try:
        text = cfg_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {cfg_path}: {exc}") from exc
    cfg = parse_config(text)
    logger.debug("loaded config from %s: %s", cfg_path, cfg)
    return cfg
