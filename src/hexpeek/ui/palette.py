from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Palette:
    hex_offset_fg: str
    hex_byte_fg: str
    hex_zero_fg: str
    hex_ascii_fg: str
    hex_placeholder_fg: str
    hex_cursor_bg: str
    hex_selected_fg: str
    inspector_label: str
    inspector_value: str
    inspector_dim: str
    inspector_header: str
    inspector_accent: str


DEFAULT = Palette(
    hex_offset_fg="#8892a0",
    hex_byte_fg="#9cdcfe",
    hex_zero_fg="#6b7280",
    hex_ascii_fg="#d7ba7d",
    hex_placeholder_fg="#6b7280",
    hex_cursor_bg="#b36b00",
    hex_selected_fg="#ffffff",
    inspector_label="#8892a0",
    inspector_value="#ffffff",
    inspector_dim="#6b7280",
    inspector_header="#4c75c6",
    inspector_accent="#5ea1ff",
)

# Selected palette for now
PALETTE = DEFAULT
