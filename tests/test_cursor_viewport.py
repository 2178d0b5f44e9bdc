from __future__ import annotations

from muks.buffer import Buffer, Cursor, Viewport, clamp_cursor, reconcile_viewport
from muks.buffer.viewport import text_rows


def make_buffer(*lines: str) -> Buffer:
    return Buffer.from_lines(lines)


def test_clamp_pulls_row_and_column_into_range() -> None:
    buffer = make_buffer("abc", "de")
    cursor = Cursor(row=5, col=10)

    clamp_cursor(cursor, buffer)

    assert cursor.as_tuple() == (1, 2)


def test_clamp_handles_negative_coordinates() -> None:
    buffer = make_buffer("abc")
    cursor = Cursor(row=-3, col=-1)

    clamp_cursor(cursor, buffer)

    assert cursor.as_tuple() == (0, 0)


def test_clamp_allows_append_position() -> None:
    buffer = make_buffer("abc")
    cursor = Cursor(row=0, col=3)

    clamp_cursor(cursor, buffer)

    assert cursor.col == 3


def test_clamp_bounds_hold_for_every_motion() -> None:
    buffer = make_buffer("hello", "", "a much longer line")
    cursor = Cursor()
    moves = [(0, -1), (1, 0), (0, 4), (1, 0), (0, 30), (1, 0), (-5, 0), (0, -9)]

    for d_row, d_col in moves:
        cursor.move(d_row, d_col)
        clamp_cursor(cursor, buffer)
        assert 0 <= cursor.row < buffer.num_lines
        assert 0 <= cursor.col <= len(buffer.line_at(cursor.row))


def test_text_rows_reserves_status_and_message_rows() -> None:
    assert text_rows(24) == 22
    assert text_rows(2) == 1
    assert text_rows(0) == 1


def test_viewport_scrolls_down_to_reveal_cursor() -> None:
    viewport = Viewport()

    reconcile_viewport(viewport, Cursor(row=30, col=0), height=12, width=80)

    assert viewport.row_offset == 21
    assert viewport.row_offset <= 30 < viewport.row_offset + text_rows(12)


def test_viewport_scrolls_up_to_reveal_cursor() -> None:
    viewport = Viewport(row_offset=40, col_offset=0)

    reconcile_viewport(viewport, Cursor(row=5, col=0), height=12, width=80)

    assert viewport.row_offset == 5


def test_viewport_scrolls_horizontally() -> None:
    viewport = Viewport()

    reconcile_viewport(viewport, Cursor(row=0, col=100), height=10, width=40)
    assert viewport.col_offset == 61

    reconcile_viewport(viewport, Cursor(row=0, col=10), height=10, width=40)
    assert viewport.col_offset == 10


def test_viewport_keeps_offsets_when_cursor_visible() -> None:
    viewport = Viewport(row_offset=3, col_offset=2)

    reconcile_viewport(viewport, Cursor(row=5, col=6), height=12, width=20)

    assert (viewport.row_offset, viewport.col_offset) == (3, 2)
