"""Text storage, cursor and viewport primitives."""

from .buffer import Buffer
from .cursor import Cursor, clamp_cursor
from .errors import LineOutOfRangeError, StorageError
from .line import Line, SyntaxCategory
from .storage import load_buffer, save_buffer
from .viewport import RESERVED_ROWS, Viewport, reconcile_viewport, text_rows

__all__ = [
    "Buffer",
    "Cursor",
    "Line",
    "LineOutOfRangeError",
    "RESERVED_ROWS",
    "StorageError",
    "SyntaxCategory",
    "Viewport",
    "clamp_cursor",
    "load_buffer",
    "reconcile_viewport",
    "save_buffer",
    "text_rows",
]
