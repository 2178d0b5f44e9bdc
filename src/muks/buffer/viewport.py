"""Visible window over the buffer."""

from __future__ import annotations

from dataclasses import dataclass

from .cursor import Cursor

RESERVED_ROWS = 2


def text_rows(height: int) -> int:
    """Rows left for buffer text once the status and message rows are reserved."""

    return max(height - RESERVED_ROWS, 1)


@dataclass(slots=True)
class Viewport:
    """Top-left buffer coordinate shown at the grid origin."""

    row_offset: int = 0
    col_offset: int = 0


def reconcile_viewport(
    viewport: Viewport, cursor: Cursor, height: int, width: int
) -> Viewport:
    """Slide ``viewport`` the minimum distance needed to show ``cursor``.

    Only the offsets carry over between frames; ``height`` and ``width``
    are read from the grid each time.
    """

    rows = text_rows(height)
    if cursor.row < viewport.row_offset:
        viewport.row_offset = cursor.row
    elif cursor.row >= viewport.row_offset + rows:
        viewport.row_offset = cursor.row - rows + 1

    cols = max(width, 1)
    if cursor.col < viewport.col_offset:
        viewport.col_offset = cursor.col
    elif cursor.col >= viewport.col_offset + cols:
        viewport.col_offset = cursor.col - cols + 1
    return viewport


__all__ = ["RESERVED_ROWS", "Viewport", "reconcile_viewport", "text_rows"]
