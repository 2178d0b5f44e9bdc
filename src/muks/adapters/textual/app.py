"""Textual application hosting one editing session."""

from __future__ import annotations

from typing import Optional, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from muks.modes.mode_manager import create_default_manager
from muks.render import Frame
from muks.session import EditorSession

from .controller import TextualEditorAdapter, TextualUIHooks
from .keys import normalize_key

CURSOR_STYLE = "reverse"


def frame_to_text(frame: Frame, session: EditorSession) -> Text:
    """Render the text rows of ``frame`` with per-category colours."""

    config = session.config
    text = Text(no_wrap=True, overflow="crop")
    for y, row in enumerate(frame.rows):
        if y:
            text.append("\n")
        for x, cell in enumerate(row):
            style = config.style_for(cell.category)
            if frame.cursor == (y, x):
                style = f"{style} {CURSOR_STYLE}"
            text.append(cell.char, style=style)
        if frame.cursor is not None and frame.cursor == (y, len(row)):
            text.append(" ", style=CURSOR_STYLE)
    return text


class MuksApp(App[int], inherit_bindings=False):
    """Full-screen editor; only ``:q``-family commands end the session."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		overflow: hidden;
	}

	#status-line {
		height: 1;
	}

	#message-line {
		height: 1;
	}
	"""

    BINDINGS = []

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._message_widget: Static | None = None

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        self._message_widget = Static("", id="message-line")
        yield self._buffer_widget
        yield self._status_widget
        yield self._message_widget

    def on_mount(self) -> None:
        manager = create_default_manager(self.session)
        hooks = TextualUIHooks(
            paint=self._paint,
            grid_size=self._grid_size,
            exit=self._exit_session,
        )
        self.adapter = TextualEditorAdapter(manager, hooks)
        self.adapter.refresh()

    def on_resize(self, event: events.Resize) -> None:
        del event
        if self.adapter:
            self.adapter.refresh()

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        if not self.adapter:
            return
        key, text, modifiers = normalize_key(event.key, event.character)
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)

    def _grid_size(self) -> Tuple[int, int]:
        return (self.size.height, self.size.width)

    def _paint(self, frame: Frame) -> None:
        if self._buffer_widget:
            self._buffer_widget.update(frame_to_text(frame, self.session))
        if self._status_widget:
            self._status_widget.update(
                Text(frame.status, style=self.session.config.status_style)
            )
        if self._message_widget:
            self._message_widget.update(Text(frame.message))

    def _exit_session(self, code: int) -> None:
        self.exit(result=code, return_code=code)


def run_app(session: EditorSession) -> int:
    app = MuksApp(session)
    result: Optional[int] = app.run()
    return app.return_code if app.return_code is not None else (result or 0)


__all__ = ["MuksApp", "frame_to_text", "run_app"]
