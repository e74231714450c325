from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from hexpeek.core.endian import DEFAULT_ENDIAN, Endian, flip_endian
from hexpeek.core.layout import DEFAULT_BYTES_PER_ROW, last_top_row

logger = logging.getLogger(__name__)


class Command(str, Enum):
    MOVE_LEFT = "move-left"
    MOVE_RIGHT = "move-right"
    MOVE_UP = "move-up"
    MOVE_DOWN = "move-down"
    PAGE_UP = "page-up"
    PAGE_DOWN = "page-down"
    HOME = "home"
    END = "end"
    TOGGLE_ENDIAN = "toggle-endian"
    SET_LITTLE = "set-little"
    SET_BIG = "set-big"
    QUIT = "quit"


CURSOR_COMMANDS = frozenset(
    {
        Command.MOVE_LEFT,
        Command.MOVE_RIGHT,
        Command.MOVE_UP,
        Command.MOVE_DOWN,
        Command.PAGE_UP,
        Command.PAGE_DOWN,
        Command.HOME,
        Command.END,
    }
)


@dataclass
class NavigationState:
    """Cursor, viewport and byte order for one viewing session.

    Invariants, restored after every mutation:
    - ``0 <= cursor < max(size, 1)``
    - the cursor's row lies in ``[top_row, top_row + rows)``
    - ``0 <= top_row <= max(0, total_rows - rows)``
    """

    size: int
    bytes_per_row: int = DEFAULT_BYTES_PER_ROW
    rows: int = 1
    cursor: int = 0
    top_row: int = 0
    endian: Endian = DEFAULT_ENDIAN
    finished: bool = False

    def __post_init__(self) -> None:
        if self.bytes_per_row <= 0:
            raise ValueError("bytes_per_row must be positive")
        self.size = max(0, int(self.size))
        self.rows = max(1, int(self.rows))
        self.cursor = self._clamp_cursor(self.cursor)
        self.ensure_cursor_visible()

    @property
    def top_offset(self) -> int:
        return self.top_row * self.bytes_per_row

    @property
    def cursor_row(self) -> int:
        return self.cursor // self.bytes_per_row

    @property
    def page_bytes(self) -> int:
        return self.rows * self.bytes_per_row

    def _clamp_cursor(self, offset: int) -> int:
        if self.size == 0:
            return 0
        return max(0, min(int(offset), self.size - 1))

    def ensure_cursor_visible(self) -> None:
        """Scroll the minimum amount needed to keep the cursor row on screen."""
        row = self.cursor_row
        top = self.top_row
        if row < top:
            top = row
        elif row > top + self.rows - 1:
            top = row - self.rows + 1
        self.top_row = max(0, min(top, last_top_row(self.size, self.bytes_per_row, self.rows)))

    def move_cursor(self, delta: int) -> None:
        self.set_cursor(self.cursor + delta)

    def set_cursor(self, offset: int) -> None:
        if self.size == 0:
            return
        self.cursor = self._clamp_cursor(offset)
        self.ensure_cursor_visible()

    def resize(self, rows: int) -> None:
        """Change the viewport height without moving the cursor."""
        self.rows = max(1, int(rows))
        self.ensure_cursor_visible()

    def set_endian(self, endian: Endian) -> None:
        self.endian = endian

    def apply(self, command: Command) -> bool:
        """Apply one command; returns False once the session should stop."""
        if self.finished:
            return False
        if command is Command.QUIT:
            self.finished = True
            return False

        if command is Command.MOVE_LEFT:
            self.move_cursor(-1)
        elif command is Command.MOVE_RIGHT:
            self.move_cursor(1)
        elif command is Command.MOVE_UP:
            self.move_cursor(-self.bytes_per_row)
        elif command is Command.MOVE_DOWN:
            self.move_cursor(self.bytes_per_row)
        elif command is Command.PAGE_UP:
            self.move_cursor(-self.page_bytes)
        elif command is Command.PAGE_DOWN:
            self.move_cursor(self.page_bytes)
        elif command is Command.HOME:
            self.set_cursor(0)
        elif command is Command.END:
            self.set_cursor(self.size - 1)
        elif command is Command.TOGGLE_ENDIAN:
            self.set_endian(flip_endian(self.endian))
        elif command is Command.SET_LITTLE:
            self.set_endian("little")
        elif command is Command.SET_BIG:
            self.set_endian("big")
        else:  # pragma: no cover - exhaustive over Command
            raise ValueError(f"unknown command: {command!r}")

        logger.debug(
            "%s -> cursor=%d top_row=%d endian=%s",
            command.value,
            self.cursor,
            self.top_row,
            self.endian,
        )
        return True
