"""Frame composition: what each cell of the grid should show."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from muks.buffer import SyntaxCategory, text_rows
from muks.config import EditorMode
from muks.session import EditorSession

NO_FILENAME_LABEL = "[No FileName]"
DIRTY_MARKER = "[+]"
REPLACEMENT_CHAR = "\ufffd"


@dataclass(frozen=True, slots=True)
class Cell:
    char: str
    category: SyntaxCategory = SyntaxCategory.NORMAL


@dataclass(frozen=True, slots=True)
class Frame:
    """One painted screen: text rows, then the status and message rows.

    ``cursor`` is the on-grid ``(row, col)`` of the text cursor, or ``None``
    when it falls outside the text rows.
    """

    rows: Tuple[Tuple[Cell, ...], ...]
    status: str
    message: str
    cursor: Optional[Tuple[int, int]]

    def row_text(self, index: int) -> str:
        return "".join(cell.char for cell in self.rows[index])


def display_char(ch: str) -> str:
    """Undecodable bytes are held as lone surrogates; show them as U+FFFD."""

    return REPLACEMENT_CHAR if "\udc80" <= ch <= "\udcff" else ch


def status_text(session: EditorSession) -> str:
    """``MODE | filename | row,col | [+]`` with 1-based coordinates."""

    return " | ".join(
        (
            session.mode.label,
            session.filename or NO_FILENAME_LABEL,
            f"{session.cursor.row + 1},{session.cursor.col + 1}",
            DIRTY_MARKER if session.dirty else "",
        )
    )


def message_text(session: EditorSession) -> str:
    if session.mode is EditorMode.COMMAND:
        return session.command.text
    return session.status_message


def compose_frame(session: EditorSession, height: int, width: int) -> Frame:
    """Clip the buffer to the viewport; does not move the viewport itself."""

    width = max(width, 0)
    visible = text_rows(height)
    row_offset = session.viewport.row_offset
    col_offset = session.viewport.col_offset

    rows = []
    for y in range(visible):
        index = row_offset + y
        if index >= session.buffer.num_lines:
            rows.append(())
            continue
        line = session.buffer.line_at(index)
        text = line.text[col_offset : col_offset + width]
        classes = line.classification[col_offset : col_offset + width]
        rows.append(
            tuple(Cell(display_char(ch), cat) for ch, cat in zip(text, classes))
        )

    screen_row = session.cursor.row - row_offset
    screen_col = session.cursor.col - col_offset
    cursor: Optional[Tuple[int, int]] = None
    if 0 <= screen_row < visible and 0 <= screen_col < max(width, 1):
        cursor = (screen_row, screen_col)

    return Frame(
        rows=tuple(rows),
        status=status_text(session)[:width],
        message=message_text(session)[:width],
        cursor=cursor,
    )


__all__ = [
    "Cell",
    "Frame",
    "compose_frame",
    "display_char",
    "message_text",
    "status_text",
]
