from __future__ import annotations

from pathlib import Path

import pytest

from muks.buffer import Buffer
from muks.config import EditorConfig, EditorMode
from muks.session import BoundedText, CommandLine, EditorSession


def test_open_without_filename_starts_empty_unnamed_buffer() -> None:
    session = EditorSession.open(config=EditorConfig())

    assert session.filename is None
    assert session.buffer.snapshot() == ("",)
    assert session.dirty is False
    assert session.mode is EditorMode.NORMAL
    assert session.cursor.as_tuple() == (0, 0)


def test_open_existing_file(tmp_path: Path) -> None:
    path = tmp_path / "prog.c"
    path.write_text("int main;\n")

    session = EditorSession.open(str(path), config=EditorConfig())

    assert session.buffer.snapshot() == ("int main;",)
    assert session.status_message == ""
    assert session.dirty is False


def test_open_missing_file_keeps_filename(tmp_path: Path) -> None:
    path = tmp_path / "new.c"

    session = EditorSession.open(str(path), config=EditorConfig())

    assert session.filename == str(path)
    assert session.buffer.snapshot() == ("",)
    assert session.status_message == f"Failed to open: {path}"

    session.save()
    assert path.read_text() == "\n"


def test_save_without_filename_raises() -> None:
    session = EditorSession(buffer=Buffer.from_lines(["x"]), config=EditorConfig())

    with pytest.raises(ValueError):
        session.save()


def test_session_never_holds_an_empty_buffer() -> None:
    session = EditorSession(buffer=Buffer(), config=EditorConfig())

    assert session.buffer.num_lines == 1


def test_status_message_is_truncated_to_capacity() -> None:
    session = EditorSession(
        buffer=Buffer.from_lines(["x"]), config=EditorConfig(status_capacity=5)
    )

    session.set_status("abcdefgh")

    assert session.status_message == "abcde"


def test_request_exit_records_code() -> None:
    session = EditorSession(buffer=Buffer.from_lines(["x"]), config=EditorConfig())

    session.request_exit(0)

    assert session.exit_requested is True
    assert session.exit_code == 0


def test_bounded_text_guards_underflow_and_overflow() -> None:
    text = BoundedText(2)

    assert text.pop() is None
    assert text.append("a") is True
    assert text.append("b") is True
    assert text.append("c") is False
    assert str(text) == "ab"
    assert len(text) == 2

    with pytest.raises(ValueError):
        BoundedText(0)


def test_command_line_reset_restores_prompt() -> None:
    command = CommandLine(10, "junk")

    command.reset()

    assert command.text == ":"
