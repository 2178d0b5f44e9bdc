"""Cursor motions.

Normal-mode motions move unconditionally and rely on the clamp that runs
after every key. Insert-mode motions check bounds themselves; moving down
from the last line appends an empty line and lands on it.
"""

from __future__ import annotations

from muks.modes.base_mode import ModeContext, ModeResult


def _moved(context: ModeContext, d_row: int = 0, d_col: int = 0) -> ModeResult:
    context.cursor.move(d_row, d_col)
    return ModeResult(consumed=True, status="motion")


def move_left(context: ModeContext, match: object) -> ModeResult:
    del match
    return _moved(context, d_col=-1)


def move_right(context: ModeContext, match: object) -> ModeResult:
    del match
    return _moved(context, d_col=1)


def move_up(context: ModeContext, match: object) -> ModeResult:
    del match
    return _moved(context, d_row=-1)


def move_down(context: ModeContext, match: object) -> ModeResult:
    del match
    return _moved(context, d_row=1)


def line_start(context: ModeContext, match: object) -> ModeResult:
    del match
    context.cursor.col = 0
    return ModeResult(consumed=True, status="motion")


def line_end(context: ModeContext, match: object) -> ModeResult:
    del match
    context.cursor.col = len(context.session.current_line())
    return ModeResult(consumed=True, status="motion")


def insert_left(context: ModeContext, match: object) -> ModeResult:
    del match
    if context.cursor.col > 0:
        context.cursor.col -= 1
    return ModeResult(consumed=True, status="motion")


def insert_right(context: ModeContext, match: object) -> ModeResult:
    del match
    if context.cursor.col < len(context.session.current_line()):
        context.cursor.col += 1
    return ModeResult(consumed=True, status="motion")


def insert_up(context: ModeContext, match: object) -> ModeResult:
    del match
    if context.cursor.row > 0:
        context.cursor.row -= 1
    return ModeResult(consumed=True, status="motion")


def insert_down(context: ModeContext, match: object) -> ModeResult:
    del match
    target = context.cursor.row + 1
    if target >= context.buffer.num_lines:
        context.buffer.ensure_line_exists(target)
        context.bus.emit("buffer.line_appended", target)
    context.cursor.row = target
    return ModeResult(consumed=True, status="motion")


__all__ = [
    "insert_down",
    "insert_left",
    "insert_right",
    "insert_up",
    "line_end",
    "line_start",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
]
