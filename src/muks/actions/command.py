"""Actions that edit and evaluate the ``:`` command line."""

from __future__ import annotations

from typing import Callable, Dict

from muks.buffer import StorageError
from muks.modes.base_mode import ModeContext, ModeResult
from muks.runtime import telemetry

CommandHandler = Callable[[ModeContext], ModeResult]

NO_FILENAME = "No filename to save."
SAVE_FAILED = "Error saving file!"
SAVED = "File saved!"
SAVED_AND_EXITING = "File saved and exiting!"
UNSAVED_CHANGES = "You have unsaved changes. Use :w to save."
EXIT_WITHOUT_SAVING = "Exiting without saving."
UNKNOWN_COMMAND = "Unknown command!"


def delete_last_char(context: ModeContext, match: object) -> ModeResult:
    del match
    context.session.command.pop()
    return ModeResult(consumed=True, status="editing")


def submit_command_line(context: ModeContext, match: object) -> ModeResult:
    """Run the command line exactly as typed; always returns to normal mode."""

    del match
    text = context.session.command.text
    context.bus.emit("command.submit", text)
    handler = _COMMAND_HANDLERS.get(text)
    if handler is None:
        return _unknown_command(context, text)
    return handler(context)


def _finish(context: ModeContext, status: str, message: str) -> ModeResult:
    context.session.set_status(message)
    return ModeResult(
        consumed=True, switch_to="normal", status=status, message=message
    )


def _save(context: ModeContext) -> str | None:
    """Write the buffer; return the failure message or ``None`` on success."""

    session = context.session
    if session.filename is None:
        return NO_FILENAME
    try:
        session.save()
    except StorageError as exc:
        telemetry.record_event(
            "command.save_failed",
            level="warning",
            data={"path": exc.path, "reason": str(exc.__cause__ or exc)},
        )
        return SAVE_FAILED
    context.bus.emit("command.write", session.filename)
    return None


def _handle_write(context: ModeContext) -> ModeResult:
    failure = _save(context)
    if failure is not None:
        return _finish(context, "command_error", failure)
    return _finish(context, "command_write", SAVED)


def _handle_write_quit(context: ModeContext) -> ModeResult:
    failure = _save(context)
    if failure is not None:
        return _finish(context, "command_error", failure)
    context.session.request_exit(0)
    context.bus.emit("command.quit", {"force": False})
    return _finish(context, "command_wq", SAVED_AND_EXITING)


def _handle_quit(context: ModeContext) -> ModeResult:
    if context.session.dirty:
        return _finish(context, "command_refused", UNSAVED_CHANGES)
    context.session.request_exit(0)
    context.bus.emit("command.quit", {"force": False})
    return ModeResult(consumed=True, switch_to="normal", status="command_quit")


def _handle_force_quit(context: ModeContext) -> ModeResult:
    context.session.request_exit(0)
    context.bus.emit("command.quit", {"force": True})
    return _finish(context, "command_quit_force", EXIT_WITHOUT_SAVING)


def _unknown_command(context: ModeContext, text: str) -> ModeResult:
    telemetry.record_event("command.unknown", data={"command": text})
    context.bus.emit("command.error", text)
    return _finish(context, "command_error", UNKNOWN_COMMAND)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    ":w": _handle_write,
    ":wq": _handle_write_quit,
    ":q": _handle_quit,
    ":q!": _handle_force_quit,
}


__all__ = [
    "EXIT_WITHOUT_SAVING",
    "NO_FILENAME",
    "SAVED",
    "SAVED_AND_EXITING",
    "SAVE_FAILED",
    "UNKNOWN_COMMAND",
    "UNSAVED_CHANGES",
    "delete_last_char",
    "submit_command_line",
]
