"""Exceptions raised by the buffer layer."""

from __future__ import annotations


class LineOutOfRangeError(IndexError):
    """Raised when a caller asks for a row the buffer does not hold."""

    def __init__(self, row: int, num_lines: int) -> None:
        super().__init__(f"Row {row} out of range (buffer has {num_lines} lines)")
        self.row = row
        self.num_lines = num_lines


class StorageError(RuntimeError):
    """Raised when a buffer cannot be read from or written to disk."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["LineOutOfRangeError", "StorageError"]
