from __future__ import annotations

from rich.text import Text
from textual.widgets import Static

from hexpeek.core.render import InterpretationPanel
from hexpeek.ui.palette import PALETTE


class Inspector(Static):
    """Scalar interpretations of the bytes at the hex cursor."""

    def __init__(self, *, id: str | None = None) -> None:
        super().__init__(Text("Inspector"), id=id)
        self._panel: InterpretationPanel | None = None

    @property
    def panel(self) -> InterpretationPanel | None:
        return self._panel

    def update_panel(self, panel: InterpretationPanel) -> None:
        self._panel = panel
        self.update(render_panel_text(panel))


def render_panel_text(panel: InterpretationPanel) -> Text:
    lines = panel.lines()
    t = Text(lines[0], style=PALETTE.inspector_header)
    for line in lines[1:]:
        row = Text(line, style=PALETTE.inspector_value)
        row.highlight_regex(r"[iuf]\d+\s*:", style=PALETTE.inspector_label)
        row.highlight_regex(r"0x[0-9a-f]+", style=PALETTE.inspector_accent)
        row.highlight_regex(r"(?<!\S)--(?!\S)", style=PALETTE.inspector_dim)
        t.append("\n")
        t.append(row)
    return t
