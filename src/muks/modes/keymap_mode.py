"""Shared dispatch for modes whose keys are resolved through the keymap."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from muks.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult
from .keymap_helpers import key_to_token, require_keymap_resolver

if TYPE_CHECKING:  # pragma: no cover
    from muks.keymaps import ResolutionMatch


class KeymapMode(Mode):
    """Resolves each key against the mode's bindings.

    Keys with no binding go to ``handle_unbound``. Multi-key bindings are
    collected in ``_pending`` until they match or miss; there is no timeout.
    """

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)
        self._pending: List[str] = []

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode
        self._pending.clear()

    def handle_key(self, key: KeyInput) -> ModeResult:
        self._pending.append(key_to_token(key))
        result = self._resolver.resolve(self.name, tuple(self._pending))

        if result.status == "match" and result.match:
            self._pending.clear()
            return self._execute_match(result.match)

        if result.status == "pending":
            return ModeResult(
                consumed=True, status="pending", message="awaiting_sequence"
            )

        self._pending.clear()
        return self.handle_unbound(key)

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        del key
        return ModeResult(consumed=False, status="miss")

    def _execute_match(self, match: "ResolutionMatch") -> ModeResult:
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"binding_id": match.binding.id, "action": match.action.id},
        ):
            outcome = match.action(self.context, match)

        if isinstance(outcome, ModeResult):
            return outcome
        return ModeResult(consumed=True)


__all__ = ["KeymapMode"]
