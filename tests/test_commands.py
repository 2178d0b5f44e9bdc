from __future__ import annotations

from pathlib import Path
from typing import Optional

from muks.actions import command as commands
from muks.buffer import Buffer
from muks.config import EditorConfig, EditorMode
from muks.modes import KeyInput
from muks.modes.mode_manager import ModeManager, create_default_manager
from muks.session import EditorSession


def make_manager(*lines: str, filename: Optional[str] = None) -> ModeManager:
    session = EditorSession(
        buffer=Buffer.from_lines(lines), config=EditorConfig(), filename=filename
    )
    return create_default_manager(session)


def run_command(manager: ModeManager, command: str) -> None:
    for ch in command:
        manager.handle_key(KeyInput.char(ch))
    manager.handle_key(KeyInput(key="ENTER"))


def make_dirty(manager: ModeManager) -> None:
    for key in ("i", "!"):
        manager.handle_key(KeyInput.char(key))
    manager.handle_key(KeyInput(key="ESC"))


def test_write_without_filename_reports_error() -> None:
    manager = make_manager("text")
    make_dirty(manager)

    run_command(manager, ":w")

    assert manager.session.status_message == commands.NO_FILENAME
    assert manager.session.mode is EditorMode.NORMAL
    assert manager.session.dirty is True


def test_write_saves_and_clears_dirty(tmp_path: Path) -> None:
    target = tmp_path / "out.c"
    manager = make_manager("int x;", filename=str(target))
    make_dirty(manager)
    writes: list[object] = []
    manager.context.bus.subscribe("command.write", writes.append)

    run_command(manager, ":w")

    assert target.read_text() == "!int x;\n"
    assert manager.session.dirty is False
    assert manager.session.status_message == commands.SAVED
    assert manager.session.mode is EditorMode.NORMAL
    assert manager.session.exit_requested is False
    assert writes == [str(target)]


def test_write_failure_keeps_buffer_dirty(tmp_path: Path) -> None:
    target = tmp_path / "missing-dir" / "out.c"
    manager = make_manager("x", filename=str(target))
    make_dirty(manager)

    run_command(manager, ":w")

    assert manager.session.status_message == commands.SAVE_FAILED
    assert manager.session.dirty is True
    assert manager.session.buffer.snapshot() == ("!x",)
    assert manager.session.mode is EditorMode.NORMAL


def test_quit_with_unsaved_changes_is_refused(tmp_path: Path) -> None:
    target = tmp_path / "keep.c"
    target.write_text("x\n")
    manager = make_manager("x", filename=str(target))
    make_dirty(manager)

    run_command(manager, ":q")

    assert manager.session.exit_requested is False
    assert manager.session.status_message == commands.UNSAVED_CHANGES
    assert manager.session.mode is EditorMode.NORMAL
    assert manager.session.buffer.snapshot() == ("!x",)
    assert target.read_text() == "x\n"


def test_force_quit_discards_changes(tmp_path: Path) -> None:
    target = tmp_path / "keep.c"
    target.write_text("x\n")
    manager = make_manager("x", filename=str(target))
    make_dirty(manager)
    quits: list[object] = []
    manager.context.bus.subscribe("command.quit", quits.append)

    run_command(manager, ":q!")

    assert manager.session.exit_code == 0
    assert manager.session.status_message == commands.EXIT_WITHOUT_SAVING
    assert target.read_text() == "x\n"
    assert quits == [{"force": True}]


def test_quit_without_changes_exits() -> None:
    manager = make_manager("x")

    run_command(manager, ":q")

    assert manager.session.exit_code == 0


def test_write_quit_saves_then_exits(tmp_path: Path) -> None:
    target = tmp_path / "done.c"
    manager = make_manager("a", "b", filename=str(target))
    make_dirty(manager)

    run_command(manager, ":wq")

    assert target.read_text() == "!a\nb\n"
    assert manager.session.exit_code == 0
    assert manager.session.status_message == commands.SAVED_AND_EXITING


def test_write_quit_without_filename_stays_running() -> None:
    manager = make_manager("a")

    run_command(manager, ":wq")

    assert manager.session.exit_requested is False
    assert manager.session.status_message == commands.NO_FILENAME


def test_unknown_command_sets_status() -> None:
    manager = make_manager("a")
    errors: list[object] = []
    manager.context.bus.subscribe("command.error", errors.append)

    run_command(manager, ":x")

    assert manager.session.status_message == commands.UNKNOWN_COMMAND
    assert manager.session.mode is EditorMode.NORMAL
    assert errors == [":x"]


def test_commands_are_exact_and_case_sensitive() -> None:
    manager = make_manager("a")

    for command in (":Q", ":q ", ":quit", ":w!"):
        run_command(manager, command)
        assert manager.session.status_message == commands.UNKNOWN_COMMAND
        assert manager.session.exit_requested is False


def test_empty_command_line_is_unknown() -> None:
    manager = make_manager("a")
    manager.handle_key(KeyInput.char(":"))
    manager.handle_key(KeyInput(key="BACKSPACE"))

    manager.handle_key(KeyInput(key="ENTER"))

    assert manager.session.status_message == commands.UNKNOWN_COMMAND
    assert manager.session.mode is EditorMode.NORMAL


def test_submit_publishes_command_text() -> None:
    manager = make_manager("a")
    submitted: list[object] = []
    manager.context.bus.subscribe("command.submit", submitted.append)

    run_command(manager, ":w")

    assert submitted == [":w"]


def test_write_after_opening_non_utf8_file_keeps_its_bytes(tmp_path: Path) -> None:
    original = b"/* caf\xe9 */\nint x = 1;\n"
    target = tmp_path / "latin1.c"
    target.write_bytes(original)
    manager = create_default_manager(
        EditorSession.open(str(target), config=EditorConfig())
    )

    run_command(manager, ":w")

    assert manager.session.status_message == commands.SAVED
    assert target.read_bytes() == original
