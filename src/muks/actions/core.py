"""Mode-switching actions shared across modes."""

from __future__ import annotations

from muks.modes.base_mode import ModeContext, ModeResult


def enter_insert_mode(context: ModeContext, match: object) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def enter_command_mode(context: ModeContext, match: object) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="command", message="enter_command")


def exit_to_normal_mode(context: ModeContext, match: object) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, switch_to="normal", message="exit_to_normal")


__all__ = ["enter_command_mode", "enter_insert_mode", "exit_to_normal_mode"]
