from __future__ import annotations

from dataclasses import dataclass

DEFAULT_BYTES_PER_ROW = 16
# Lines below the hex grid used by the interpretation panel
INFO_PANEL_HEIGHT = 6
# Extra blank column after every group of this many hex cells
HEX_GROUP = 8


@dataclass(frozen=True)
class RowDescriptor:
    row_offset: int
    row_byte_count: int

    @property
    def end(self) -> int:
        return self.row_offset + self.row_byte_count


def total_rows(size: int, bytes_per_row: int) -> int:
    if size <= 0:
        return 0
    return -(-size // bytes_per_row)


def last_top_row(size: int, bytes_per_row: int, rows: int) -> int:
    """Largest top row that still fills the viewport (0 for short files)."""
    return max(0, total_rows(size, bytes_per_row) - rows)


def viewport_rows(terminal_rows: int, *, reserved: int = INFO_PANEL_HEIGHT) -> int:
    return max(1, int(terminal_rows) - reserved)


def compute_rows(
    size: int, bytes_per_row: int, rows_per_viewport: int, top: int
) -> list[RowDescriptor]:
    """Describe the visible rows starting at row index `top`.

    The last row may be partial when it reaches EOF; an empty file has no rows.
    """
    out: list[RowDescriptor] = []
    start = top * bytes_per_row
    stop = min(size, (top + rows_per_viewport) * bytes_per_row)
    for row_offset in range(start, stop, bytes_per_row):
        out.append(RowDescriptor(row_offset, min(bytes_per_row, size - row_offset)))
    return out


def address_width(size: int) -> int:
    # Offsets beyond 32 bits need a wider address column
    return 10 if size > 0xFFFFFFFF else 8


def hex_column(index: int, *, address_digits: int = 8) -> int:
    """Screen column of the hex cell for byte `index` within a row."""
    return address_digits + 2 + index * 3 + index // HEX_GROUP


def ascii_column(index: int, bytes_per_row: int, *, address_digits: int = 8) -> int:
    """Screen column of the ASCII cell for byte `index` within a row."""
    hex_end = hex_column(bytes_per_row, address_digits=address_digits)
    # The trailing group gap only exists between groups, not after the last one
    if bytes_per_row % HEX_GROUP == 0:
        hex_end -= 1
    return hex_end + 1 + index
