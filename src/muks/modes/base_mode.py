"""Base classes and shared types for editor modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Tuple

from muks.buffer import Buffer, Cursor
from muks.session import EditorSession


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes.

    ``key`` is the binding token (``"h"``, ``"ESC"``, ``"UP"``); ``text`` is
    the character the key types, or ``None`` for keys that type nothing.
    """

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @classmethod
    def char(cls, ch: str) -> "KeyInput":
        return cls(key=ch, text=ch)


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


class ModeBus:
    """Minimal event bus letting modes and hosts exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode and action can access."""

    session: EditorSession
    bus: ModeBus = field(default_factory=ModeBus)
    extras: Dict[str, object] = field(default_factory=dict)

    @property
    def buffer(self) -> Buffer:
        return self.session.buffer

    @property
    def cursor(self) -> Cursor:
        return self.session.cursor


class Mode:
    """Base class all concrete editor modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:
        del previous

    def on_exit(self, next_mode: Optional[str]) -> None:
        del next_mode

    def handle_key(self, key: KeyInput) -> ModeResult:  # pragma: no cover
        raise NotImplementedError


__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
]
