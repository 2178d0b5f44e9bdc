"""Insert mode: typed characters go straight into the buffer."""

from __future__ import annotations

from muks.actions.editing import insert_text

from .base_mode import KeyInput, ModeResult
from .keymap_mode import KeymapMode


class InsertMode(KeymapMode):
    name = "insert"

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = super().handle_key(key)
        self.context.session.clamp()
        return result

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        if not key.text or key.modifiers:
            return ModeResult(consumed=False, status="miss")
        return insert_text(self.context, key.text)
