from __future__ import annotations

import logging
from dataclasses import dataclass

from hexpeek.core.config import ViewerConfig
from hexpeek.core.dispatch import KEYMAP, dispatch, resolve_key
from hexpeek.core.interpret import MAX_SCALAR_WIDTH, ScalarView, interpret
from hexpeek.core.io import PagedReader
from hexpeek.core.layout import INFO_PANEL_HEIGHT, compute_rows, viewport_rows
from hexpeek.core.navigation import Command, NavigationState
from hexpeek.core.render import Frame, render_panel, render_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    columns: int
    rows: int


Event = KeyEvent | ResizeEvent


class Session:
    """One file being viewed: the buffer, its navigation state, and the render pipeline.

    Every event is applied synchronously; `frame()` re-renders from scratch.
    """

    def __init__(
        self,
        reader: PagedReader,
        config: ViewerConfig | None = None,
        *,
        rows: int = 24,
        reserved_rows: int = INFO_PANEL_HEIGHT,
        keymap=KEYMAP,
    ) -> None:
        self.reader = reader
        self.config = config or ViewerConfig()
        self.reserved_rows = reserved_rows
        self.keymap = keymap
        self.state = NavigationState(
            size=reader.size,
            bytes_per_row=self.config.bytes_per_row,
            rows=viewport_rows(rows, reserved=reserved_rows),
            endian=self.config.endian,
        )

    @property
    def finished(self) -> bool:
        return self.state.finished

    def handle(self, event: Event) -> bool:
        """Apply one input event; returns False once the session has quit."""
        if self.state.finished:
            return False
        if isinstance(event, ResizeEvent):
            self.resize(event.columns, event.rows)
            return True
        command = resolve_key(event.key, self.keymap)
        if command is None:
            return True
        return self.apply(command)

    def apply(self, command: Command) -> bool:
        return dispatch(self.state, command)

    def resize(self, columns: int, rows: int) -> None:
        self.state.resize(viewport_rows(rows, reserved=self.reserved_rows))
        logger.debug(
            "resize %dx%d -> rows=%d top_row=%d", columns, rows, self.state.rows, self.state.top_row
        )

    def scalars(self) -> ScalarView:
        data = self.reader.read(self.state.cursor, MAX_SCALAR_WIDTH)
        return interpret(data, self.state.endian)

    def frame(self) -> Frame:
        st = self.state
        descriptors = compute_rows(st.size, st.bytes_per_row, st.rows, st.top_row)
        rows = render_rows(
            self.reader, descriptors, bytes_per_row=st.bytes_per_row, cursor=st.cursor
        )
        return Frame(rows=rows, panel=render_panel(self.reader, st.cursor, self.scalars()))
