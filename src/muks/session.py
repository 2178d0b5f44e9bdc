"""State owned by one editing session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from muks.buffer import (
    Buffer,
    Cursor,
    Line,
    StorageError,
    Viewport,
    clamp_cursor,
    load_buffer,
    save_buffer,
)
from muks.config import EditorConfig, EditorMode, load_config
from muks.runtime import telemetry


class BoundedText:
    """Owned string that silently drops characters past ``capacity``."""

    def __init__(self, capacity: int, text: str = "") -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._chars: List[str] = list(text[:capacity])

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.text

    def append(self, ch: str) -> bool:
        if len(self._chars) >= self.capacity:
            return False
        self._chars.append(ch)
        return True

    def pop(self) -> Optional[str]:
        if not self._chars:
            return None
        return self._chars.pop()

    def set(self, text: str) -> None:
        self._chars[:] = text[: self.capacity]

    def clear(self) -> None:
        self._chars.clear()


class CommandLine(BoundedText):
    """Command-mode input; always starts out as the ``:`` prompt."""

    PROMPT = ":"

    def reset(self) -> None:
        self.set(self.PROMPT)


class StatusLine(BoundedText):
    """Last feedback message shown on the message row."""


@dataclass
class EditorSession:
    """Aggregate of buffer, cursor, viewport and per-session flags.

    Built once at startup and mutated only by key dispatch.
    """

    buffer: Buffer
    config: EditorConfig = field(default_factory=load_config)
    filename: Optional[str] = None
    cursor: Cursor = field(default_factory=Cursor)
    viewport: Viewport = field(default_factory=Viewport)
    mode: EditorMode = EditorMode.NORMAL
    exit_code: Optional[int] = None
    command: CommandLine = field(init=False)
    status: StatusLine = field(init=False)

    def __post_init__(self) -> None:
        self.command = CommandLine(self.config.command_capacity)
        self.status = StatusLine(self.config.status_capacity)
        if self.buffer.num_lines == 0:
            self.buffer.append_line()

    @classmethod
    def open(
        cls, filename: Optional[str] = None, *, config: Optional[EditorConfig] = None
    ) -> "EditorSession":
        """Start a session on ``filename``, or on an unnamed empty buffer.

        A file that cannot be read still becomes the session's filename so
        that ``:w`` creates it.
        """

        config = config or load_config()
        if filename is None:
            return cls(buffer=Buffer.from_lines([]), config=config)

        message = ""
        try:
            buffer = load_buffer(filename)
        except StorageError as exc:
            telemetry.record_event(
                "buffer.load_failed",
                level="warning",
                data={"path": exc.path, "reason": str(exc.__cause__ or exc)},
            )
            buffer = Buffer.from_lines([], name=filename)
            message = f"Failed to open: {filename}"
        session = cls(buffer=buffer, config=config, filename=filename)
        session.buffer.mark_clean()
        session.set_status(message)
        return session

    @property
    def dirty(self) -> bool:
        return self.buffer.dirty

    @property
    def status_message(self) -> str:
        return self.status.text

    @property
    def exit_requested(self) -> bool:
        return self.exit_code is not None

    def current_line(self) -> Line:
        return self.buffer.line_at(self.cursor.row)

    def clamp(self) -> Cursor:
        return clamp_cursor(self.cursor, self.buffer)

    def set_status(self, message: str) -> None:
        self.status.set(message)

    def save(self) -> None:
        """Write the buffer to ``filename``.

        Raises ``StorageError`` on write failure and ``ValueError`` when the
        session has no filename; the buffer is untouched in both cases.
        """

        if self.filename is None:
            raise ValueError("No filename to save.")
        save_buffer(self.buffer, self.filename)

    def request_exit(self, code: int = 0) -> None:
        telemetry.record_event("session.exit", data={"code": code})
        self.exit_code = code


__all__ = ["BoundedText", "CommandLine", "EditorSession", "StatusLine"]
