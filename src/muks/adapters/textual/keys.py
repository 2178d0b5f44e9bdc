"""Translation of Textual key names into the editor's key tokens."""

from __future__ import annotations

from typing import NamedTuple, Optional, Tuple

_NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "ctrl+h": "BACKSPACE",
    "up": "UP",
    "down": "DOWN",
    "left": "LEFT",
    "right": "RIGHT",
}


class NormalizedKey(NamedTuple):
    key: str
    text: Optional[str]
    modifiers: Tuple[str, ...]


def normalize_key(key: str, character: Optional[str] = None) -> NormalizedKey:
    """Map a Textual ``(key, character)`` pair to ``(token, text, modifiers)``.

    Printable characters (and tab) use the character itself as the token so
    that ``:`` matches the ``:`` binding rather than Textual's ``colon``.
    Control chords carry a ``CTRL`` modifier and type nothing.
    """

    named = _NAMED_KEYS.get(key)
    if named is not None:
        return NormalizedKey(named, None, ())
    if key.startswith("ctrl+"):
        return NormalizedKey(key[len("ctrl+") :].upper(), None, ("CTRL",))
    if (
        character
        and len(character) == 1
        and (character.isprintable() or character == "\t")
    ):
        return NormalizedKey(character, character, ())
    return NormalizedKey(key.upper(), None, ())


__all__ = ["NormalizedKey", "normalize_key"]
