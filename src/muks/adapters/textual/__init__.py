"""Textual host for the editor."""

from .controller import TextualEditorAdapter, TextualUIHooks
from .keys import NormalizedKey, normalize_key

__all__ = [
    "NormalizedKey",
    "TextualEditorAdapter",
    "TextualUIHooks",
    "normalize_key",
]
