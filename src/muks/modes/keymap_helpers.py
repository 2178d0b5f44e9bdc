"""Helper utilities for keymap-driven modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base_mode import KeyInput, ModeContext

if TYPE_CHECKING:  # pragma: no cover
    from muks.keymaps import KeymapResolver


def key_to_token(key: KeyInput) -> str:
    if key.modifiers:
        return "+".join(key.modifiers + (key.key,))
    return key.key


def require_keymap_resolver(context: ModeContext) -> "KeymapResolver":
    resolver = context.extras.get("keymap_resolver")
    if resolver is None or not hasattr(resolver, "resolve"):
        raise RuntimeError("ModeContext.extras missing 'keymap_resolver'")
    return resolver  # type: ignore[return-value]


__all__ = ["key_to_token", "require_keymap_resolver"]
