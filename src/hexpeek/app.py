from __future__ import annotations

import os

from rich.text import Text
from textual.app import App, ComposeResult
from textual.widgets import Footer, Header, Static

from hexpeek.core.config import ViewerConfig
from hexpeek.core.io import PagedReader, open_buffer
from hexpeek.core.render import Frame
from hexpeek.core.session import Session
from hexpeek.widgets.hex_view import HexView
from hexpeek.widgets.inspector import Inspector


class HexpeekApp(App):
    """Textual application shell for hexpeek."""

    CSS_PATH = "ui/theme.tcss"

    def __init__(
        self,
        path: str,
        config: ViewerConfig | None = None,
        *,
        reader: PagedReader | None = None,
    ) -> None:
        super().__init__()
        self._path = path
        self._config = config or ViewerConfig()
        # Opening happens up front: startup failures surface before the UI runs
        self._reader = reader if reader is not None else open_buffer(path)
        # The widget reports its own height, so no rows are reserved for the panel
        self.session = Session(self._reader, self._config, reserved_rows=0)
        self.hex_view: HexView | None = None
        self.inspector: Inspector | None = None
        self.status = Static(id="status")
        self.title = f"hexpeek — {os.path.basename(path)}"

    def compose(self) -> ComposeResult:  # noqa: D401 - Textual API
        self.hex_view = HexView(self.session, id="hex")
        self.inspector = Inspector(id="inspector")
        yield Header(show_clock=False, id="header")
        yield self.hex_view
        yield self.inspector
        yield self.status
        yield Footer(id="footer")

    def on_mount(self) -> None:
        self.refresh_panels()
        if self.hex_view is not None:
            self.set_focus(self.hex_view)

    def on_unmount(self) -> None:
        self._reader.close()

    def on_hex_view_changed(self, message: HexView.Changed) -> None:
        self.refresh_panels(message.frame)

    def refresh_panels(self, frame: Frame | None = None) -> None:
        if frame is None:
            frame = self.session.frame()
        if self.inspector is not None:
            self.inspector.update_panel(frame.panel)
        self.update_status()

    # ---- Status ----
    def update_status(self) -> None:
        st = self.session.state
        name = os.path.basename(self._path)
        size = st.size
        percent = (st.top_offset / size * 100.0) if size else 0.0
        self.status.update(
            Text(
                f"{name} | {size} bytes | top: 0x{st.top_offset:08X} | "
                f"cursor: 0x{st.cursor:08X}  {percent:5.1f}%  {st.endian} endian"
            )
        )
