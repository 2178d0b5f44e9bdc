"""Logical cursor position and the clamp that keeps it inside the buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .buffer import Buffer


@dataclass(slots=True)
class Cursor:
    """0-based ``(row, col)``; ``col == len(line)`` is the append position."""

    row: int = 0
    col: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def move(self, d_row: int = 0, d_col: int = 0) -> None:
        self.row += d_row
        self.col += d_col


def clamp_cursor(cursor: Cursor, buffer: Buffer) -> Cursor:
    """Pull ``cursor`` back inside ``buffer`` in place and return it."""

    if cursor.row >= buffer.num_lines:
        cursor.row = buffer.num_lines - 1
    if cursor.row < 0:
        cursor.row = 0
    length = len(buffer.line_at(cursor.row))
    if cursor.col > length:
        cursor.col = length
    if cursor.col < 0:
        cursor.col = 0
    return cursor


__all__ = ["Cursor", "clamp_cursor"]
