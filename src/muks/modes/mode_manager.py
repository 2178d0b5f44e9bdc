"""Mode manager owning the active mode and key dispatch."""

from __future__ import annotations

from typing import Dict, Optional, Type

from muks.config import EditorMode
from muks.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps
from muks.runtime import telemetry
from muks.session import EditorSession

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .command_mode import CommandMode
from .insert_mode import InsertMode
from .normal_mode import NormalMode


class ModeManager:
    """Owns the active mode, handles transitions and dispatches key events.

    The first registered mode becomes active. Every transition is mirrored
    into ``session.mode`` so renderers never need to ask the manager.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="muks.keymaps"
        )
        if load_defaults and keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="muks.keymaps"
        )
        self.context.extras.setdefault("keymap_registry", self.keymap_registry)
        self.context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self.context.extras.setdefault("mode_manager", self)

    @property
    def session(self) -> EditorSession:
        return self.context.session

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            self.session.mode = EditorMode(mode.name)
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self.session.mode = EditorMode(name)
        self._modes[name].on_enter(previous.name if previous else None)
        telemetry.record_event(
            "mode.switch",
            data={"mode": name, "from": previous.name if previous else None},
            logger_name="muks.modes",
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.key, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result


def create_default_manager(session: EditorSession) -> ModeManager:
    """Build a manager with Normal, Insert and Command modes and default keys."""

    registry = KeymapRegistry(logger_name="muks.keymaps")
    load_default_keymaps(registry)
    resolver = KeymapResolver(registry, logger_name="muks.keymaps")
    context = ModeContext(session=session, bus=ModeBus(), extras={})
    manager = ModeManager(
        context,
        keymap_registry=registry,
        keymap_resolver=resolver,
        load_defaults=False,
    )
    manager.register_mode(NormalMode)
    manager.register_mode(InsertMode)
    manager.register_mode(CommandMode)
    return manager


__all__ = ["ModeManager", "create_default_manager"]
