"""Ordered, growable collection of lines owned by one editing session."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

from muks.runtime import telemetry

from .errors import LineOutOfRangeError
from .line import Line


class Buffer:
    """Owns every ``Line`` of the session; row order is display order.

    Lines are only ever appended. Every character mutation marks the buffer
    dirty, and ``mark_clean`` is called after a successful save.
    """

    def __init__(self, *, name: str = "default") -> None:
        self.name = name
        self._lines: List[Line] = []
        self.dirty = False

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, name: str = "default") -> "Buffer":
        buffer = cls(name=name)
        for text in lines:
            buffer.append_line(text)
        if not buffer._lines:
            buffer.append_line()
        return buffer

    @property
    def num_lines(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    def snapshot(self) -> Sequence[str]:
        return tuple(line.text for line in self._lines)

    def append_line(self, text: str | None = None) -> int:
        """Append a copy of ``text`` (or an empty line) and return its row."""

        self._lines.append(Line.from_text(text))
        return len(self._lines) - 1

    def line_at(self, row: int) -> Line:
        if row < 0 or row >= len(self._lines):
            raise LineOutOfRangeError(row, len(self._lines))
        return self._lines[row]

    def insert_char(self, row: int, col: int, ch: str) -> int:
        """Insert ``ch`` at ``(row, col)``; ``col`` is clamped, never rejected."""

        line = self.line_at(row)
        with telemetry.span(
            "buffer::insert_char",
            component="buffer",
            metadata={"buffer": self.name, "row": row, "col": col},
        ):
            used = line.insert(col, ch)
            self.dirty = True
        return used

    def delete_char(self, row: int, col: int) -> None:
        """Remove the character at ``(row, col)``; out-of-range columns are ignored."""

        line = self.line_at(row)
        with telemetry.span(
            "buffer::delete_char",
            component="buffer",
            metadata={"buffer": self.name, "row": row, "col": col},
        ):
            if line.delete(col):
                self.dirty = True

    def ensure_line_exists(self, row: int) -> None:
        while row >= len(self._lines):
            self.append_line()

    def mark_clean(self) -> None:
        self.dirty = False


__all__ = ["Buffer"]
