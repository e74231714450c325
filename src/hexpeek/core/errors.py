from __future__ import annotations


class StartupError(Exception):
    """Raised when the viewer cannot start, e.g. the file cannot be opened."""

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigError(ValueError):
    """Raised for invalid configuration values (endianness, row width, config file)."""
