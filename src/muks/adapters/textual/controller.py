"""Host-side render loop step: reconcile, highlight, compose, paint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from muks.buffer import reconcile_viewport
from muks.modes import KeyInput, ModeResult
from muks.modes.mode_manager import ModeManager
from muks.render import Frame, compose_frame
from muks.runtime import telemetry
from muks.syntax import classify_buffer


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the controller uses to reach the host UI."""

    paint: Callable[[Frame], None]
    grid_size: Callable[[], Tuple[int, int]]
    exit: Callable[[int], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Feeds host key events to the ``ModeManager`` and repaints after each one."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self.frame: Optional[Frame] = None
        self._subscribe_events()

    @property
    def session(self):
        return self.manager.session

    def refresh(self) -> Frame:
        """Run one render step against the current grid size."""

        height, width = self.hooks.grid_size()
        session = self.session
        with telemetry.span(
            "render::frame",
            metadata={"height": height, "width": width},
        ):
            reconcile_viewport(session.viewport, session.cursor, height, width)
            classify_buffer(session.buffer)
            self.frame = compose_frame(session, height, width)
        self.hooks.paint(self.frame)
        return self.frame

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Dispatch one normalized key, then exit or repaint."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        if self.session.exit_requested:
            self.hooks.exit(self.session.exit_code or 0)
        else:
            self.refresh()
        return result

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "buffer.line_appended",
            "command.start",
            "command.end",
            "command.submit",
            "command.write",
            "command.quit",
            "command.error",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "mode": session.mode.value,
            "cursor": session.cursor.as_tuple(),
            "command": session.command.text,
            "dirty": session.dirty,
            "lines": session.buffer.num_lines,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
