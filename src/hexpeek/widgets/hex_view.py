from __future__ import annotations

from rich.style import Style
from rich.text import Text
from textual.binding import Binding
from textual.message import Message
from textual.widget import Widget

from hexpeek.core.dispatch import KEY_LABELS, KEYMAP
from hexpeek.core.layout import HEX_GROUP
from hexpeek.core.navigation import Command
from hexpeek.core.render import Frame, HexRow
from hexpeek.core.session import ResizeEvent, Session
from hexpeek.ui.palette import PALETTE


def _bindings() -> list[Binding]:
    out: list[Binding] = []
    for key, command in KEYMAP.items():
        label = KEY_LABELS.get(key, command.value)
        out.append(Binding(key, f"command('{command.value}')", label, show=key in KEY_LABELS))
    return out


class HexView(Widget):
    """Hex/ASCII grid for a `Session`.

    - Renders only the rows the session's viewport covers.
    - Keys are bound from the session key map; every command re-renders.
    - Widget height is the viewport height (the panel lives in a separate widget).
    """

    can_focus = True

    BINDINGS = _bindings()

    class Changed(Message):
        """Posted after any command or resize so siblings can re-render."""

        def __init__(self, frame: Frame) -> None:
            super().__init__()
            self.frame = frame

    def __init__(self, session: Session, *, id: str | None = None) -> None:
        super().__init__(id=id)
        self.session = session

    def action_command(self, name: str) -> None:
        command = Command(name)
        running = self.session.apply(command)
        self._changed()
        if not running:
            self.app.exit()

    def on_resize(self, event) -> None:  # type: ignore[override]
        self.session.handle(ResizeEvent(event.size.width, event.size.height))
        self._changed()

    def _changed(self) -> None:
        self.refresh()
        self.post_message(self.Changed(self.session.frame()))

    # ---- Rendering ----
    def render(self) -> Text:
        frame = self.session.frame()
        if not frame.rows:
            return Text("<empty file>", style=PALETTE.hex_placeholder_fg)
        text = Text()
        for i, row in enumerate(frame.rows):
            if i:
                text.append("\n")
            text.append(render_row(row))
        return text


def render_row(row: HexRow) -> Text:
    cursor_style = Style(bgcolor=PALETTE.hex_cursor_bg, color=PALETTE.hex_selected_fg)
    line = Text(f"{row.address}  ", style=PALETTE.hex_offset_fg)
    bpr = row.bytes_per_row
    for idx, cell in enumerate(row.hex_cells):
        if idx == row.cursor_index:
            style = cursor_style
        elif row.data[idx] == 0:
            style = Style(color=PALETTE.hex_zero_fg)
        else:
            style = Style(color=PALETTE.hex_byte_fg)
        line.append(cell, style=style)
        line.append(" ")
        if (idx + 1) % HEX_GROUP == 0 and idx + 1 < bpr:
            line.append(" ")
    # Pad remaining hex cells
    for pad in range(len(row.data), bpr):
        line.append("   ")
        if (pad + 1) % HEX_GROUP == 0 and pad + 1 < bpr:
            line.append(" ")

    # ASCII gutter
    line.append(" ")
    for idx, ch in enumerate(row.ascii_cells):
        if idx == row.cursor_index:
            style = cursor_style
        elif 32 <= row.data[idx] <= 126:
            style = Style(color=PALETTE.hex_ascii_fg)
        else:
            style = Style(color=PALETTE.hex_placeholder_fg)
        line.append(ch, style=style)
    return line
