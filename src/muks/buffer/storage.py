"""Plain-text persistence: one buffer line per newline-terminated record.

Files are decoded as UTF-8 with ``surrogateescape`` so that bytes which are
not valid UTF-8 survive a load/save cycle unchanged.
"""

from __future__ import annotations

from typing import List

from muks.runtime import telemetry

from .buffer import Buffer
from .errors import StorageError

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def split_records(text: str) -> List[str]:
    """Split on ``\\n`` only, dropping one trailing ``\\r`` from each record.

    A lone ``\\r`` inside a record is kept as text.
    """

    records = text.split("\n")
    if text.endswith("\n"):
        records.pop()
    return [record[:-1] if record.endswith("\r") else record for record in records]


def load_buffer(path: str, *, name: str | None = None) -> Buffer:
    """Read ``path`` into a new buffer, normalizing ``\\r\\n`` and ``\\n`` endings.

    An empty file yields a buffer holding one empty line.
    """

    with telemetry.span(
        "buffer::load", component="storage", metadata={"path": path}
    ):
        try:
            with open(
                path, "r", encoding=ENCODING, errors=ERRORS, newline=""
            ) as handle:
                records = split_records(handle.read())
        except OSError as exc:
            raise StorageError(f"Failed to open: {path}", path=path) from exc

        buffer = Buffer.from_lines(records, name=name or path)
    telemetry.record_event(
        "buffer.load", data={"path": path, "lines": buffer.num_lines}
    )
    return buffer


def save_buffer(buffer: Buffer, path: str) -> None:
    """Write every line of ``buffer`` followed by a single ``\\n``.

    On failure the buffer, including its dirty flag, is left untouched.
    """

    with telemetry.span(
        "buffer::save", component="storage", metadata={"path": path}
    ):
        try:
            with open(
                path, "w", encoding=ENCODING, errors=ERRORS, newline="\n"
            ) as handle:
                for text in buffer.snapshot():
                    handle.write(text)
                    handle.write("\n")
        except OSError as exc:
            raise StorageError(f"Error saving file: {path}", path=path) from exc
        buffer.mark_clean()
    telemetry.record_event(
        "buffer.save", data={"path": path, "lines": buffer.num_lines}
    )


__all__ = ["load_buffer", "save_buffer", "split_records"]
