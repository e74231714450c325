from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from hexpeek.core.endian import Endian, endian_label
from hexpeek.core.interpret import Scalar, ScalarView
from hexpeek.core.io import PagedReader
from hexpeek.core.layout import RowDescriptor, address_width, ascii_column, hex_column

PLACEHOLDER = "."
UNAVAILABLE = "--"


def printable(b: int) -> str:
    return chr(b) if 32 <= b <= 126 else PLACEHOLDER


@dataclass(frozen=True)
class Cell:
    """One positioned piece of text on the abstract draw grid."""

    line: int
    column: int
    text: str
    kind: str  # address|hex|ascii|panel
    cursor: bool = False


@dataclass(frozen=True)
class HexRow:
    offset: int
    data: bytes
    bytes_per_row: int
    address_digits: int = 8
    cursor_index: int | None = None  # index into `data` of the highlighted byte

    @property
    def address(self) -> str:
        return f"{self.offset:0{self.address_digits}X}"

    @property
    def hex_cells(self) -> list[str]:
        return [f"{b:02X}" for b in self.data]

    @property
    def ascii_cells(self) -> list[str]:
        return [printable(b) for b in self.data]

    def cells(self, line: int) -> Iterator[Cell]:
        yield Cell(line, 0, self.address, "address")
        for i, text in enumerate(self.hex_cells):
            col = hex_column(i, address_digits=self.address_digits)
            yield Cell(line, col, text, "hex", i == self.cursor_index)
        for i, ch in enumerate(self.ascii_cells):
            col = ascii_column(i, self.bytes_per_row, address_digits=self.address_digits)
            yield Cell(line, col, ch, "ascii", i == self.cursor_index)

    def text(self) -> str:
        """Plain single-line rendering; partial rows are blank-padded."""
        bpr = self.bytes_per_row
        width = ascii_column(bpr, bpr, address_digits=self.address_digits)
        buf = [" "] * width
        for cell in self.cells(0):
            buf[cell.column : cell.column + len(cell.text)] = list(cell.text)
        return "".join(buf)


@dataclass(frozen=True)
class InterpretationPanel:
    offset: int
    size: int
    endian: Endian
    scalars: ScalarView
    address_digits: int = 8

    def header(self) -> str:
        return (
            f"  @0x{self.offset:0{self.address_digits}x}  @{self.offset:<20}"
            f"  size: {self.size:<20}  {endian_label(self.endian)}"
        )

    def _int_line(self, bits: int) -> str:
        signed = self.scalars.get(f"i{bits}")
        unsigned = self.scalars.get(f"u{bits}")
        sdec = signed.decimal() if signed is not None else UNAVAILABLE
        udec = unsigned.decimal() if unsigned is not None else UNAVAILABLE
        hx = unsigned.hex() if unsigned is not None else UNAVAILABLE
        return f"  {f'i{bits}':<3}: {sdec:<20}  {f'u{bits}':<3}: {udec:<20}  {hx}"

    def _float_line(self) -> str:
        def parts(sc: Scalar | None) -> tuple[str, str]:
            if sc is None:
                return UNAVAILABLE, UNAVAILABLE
            return sc.decimal(), sc.hex()

        d32, h32 = parts(self.scalars.f32)
        d64, h64 = parts(self.scalars.f64)
        return f"  f32: {d32:<14} {h32:<10}  f64: {d64:<22} {h64}"

    def lines(self) -> list[str]:
        return [
            self.header(),
            self._int_line(8),
            self._int_line(16),
            self._int_line(32),
            self._int_line(64),
            self._float_line(),
        ]


@dataclass(frozen=True)
class Frame:
    rows: list[HexRow]
    panel: InterpretationPanel

    def lines(self) -> list[str]:
        return [row.text() for row in self.rows] + self.panel.lines()

    def cells(self, *, panel_line: int | None = None) -> Iterator[Cell]:
        """Positioned cells for the grid, then the panel.

        The panel starts at `panel_line`, defaulting to just below the last row.
        """
        for line, row in enumerate(self.rows):
            yield from row.cells(line)
        start = len(self.rows) if panel_line is None else panel_line
        for i, text in enumerate(self.panel.lines()):
            yield Cell(start + i, 0, text, "panel")


def render_rows(
    reader: PagedReader, descriptors: list[RowDescriptor], *, bytes_per_row: int, cursor: int
) -> list[HexRow]:
    digits = address_width(reader.size)
    rows: list[HexRow] = []
    for desc in descriptors:
        data = reader.read(desc.row_offset, desc.row_byte_count)
        idx = cursor - desc.row_offset if desc.row_offset <= cursor < desc.end else None
        rows.append(HexRow(desc.row_offset, data, bytes_per_row, digits, idx))
    return rows


def render_panel(reader: PagedReader, cursor: int, scalars: ScalarView) -> InterpretationPanel:
    return InterpretationPanel(
        offset=cursor,
        size=reader.size,
        endian=scalars.endian,
        scalars=scalars,
        address_digits=address_width(reader.size),
    )
