"""Command-line mode: builds the ``:`` command string."""

from __future__ import annotations

from typing import Optional

from .base_mode import KeyInput, ModeResult
from .keymap_mode import KeymapMode


class CommandMode(KeymapMode):
    name = "command"

    def on_enter(self, previous: Optional[str]) -> None:
        del previous
        self.context.session.command.reset()
        self.context.bus.emit("command.start", self.current_command)

    def on_exit(self, next_mode: Optional[str]) -> None:
        super().on_exit(next_mode)
        self.context.session.command.clear()
        self.context.bus.emit("command.end", None)

    @property
    def current_command(self) -> str:
        return self.context.session.command.text

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if not key.text or key.modifiers:
            return ModeResult(consumed=False, status="miss")
        if not self.context.session.command.append(key.text):
            return ModeResult(consumed=True, status="command_full")
        return ModeResult(consumed=True, status="editing")
