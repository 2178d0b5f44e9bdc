"""Normal mode: cursor motion and entry into the other modes."""

from __future__ import annotations

from .base_mode import KeyInput, ModeResult
from .keymap_mode import KeymapMode


class NormalMode(KeymapMode):
    name = "normal"

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = super().handle_key(key)
        self.context.session.clamp()
        return result
