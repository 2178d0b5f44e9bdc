"""Character insertion and deletion at the cursor."""

from __future__ import annotations

from muks.modes.base_mode import ModeContext, ModeResult


def insert_text(context: ModeContext, text: str) -> ModeResult:
    """Insert ``text`` at the cursor and leave the cursor after it."""

    cursor = context.cursor
    for ch in text:
        cursor.col = context.buffer.insert_char(cursor.row, cursor.col, ch) + 1
    return ModeResult(consumed=True, status="insert")


def delete_before_cursor(context: ModeContext, match: object) -> ModeResult:
    """Backspace. A no-op at column 0: lines are never joined."""

    del match
    cursor = context.cursor
    if cursor.col == 0:
        return ModeResult(consumed=True, status="noop")
    context.buffer.delete_char(cursor.row, cursor.col - 1)
    cursor.col -= 1
    return ModeResult(consumed=True, status="delete")


__all__ = ["delete_before_cursor", "insert_text"]
