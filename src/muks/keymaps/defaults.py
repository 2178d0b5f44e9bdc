"""Built-in actions and the keys bound to them in each mode."""

from __future__ import annotations

from typing import Iterable, Sequence

from muks.actions import command as command_actions
from muks.actions import core as core_actions
from muks.actions import editing as editing_actions
from muks.actions import motion as motion_actions

from .models import ActionRef, Binding, KeySequence
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id="core.enter_insert",
        handler=core_actions.enter_insert_mode,
        description="Enter insert mode",
    ),
    ActionRef(
        id="core.enter_command",
        handler=core_actions.enter_command_mode,
        description="Enter command-line mode",
    ),
    ActionRef(
        id="core.exit_to_normal",
        handler=core_actions.exit_to_normal_mode,
        description="Return to normal mode",
    ),
    ActionRef(
        id="motion.left",
        handler=motion_actions.move_left,
        description="Move one column left",
    ),
    ActionRef(
        id="motion.right",
        handler=motion_actions.move_right,
        description="Move one column right",
    ),
    ActionRef(
        id="motion.up",
        handler=motion_actions.move_up,
        description="Move one line up",
    ),
    ActionRef(
        id="motion.down",
        handler=motion_actions.move_down,
        description="Move one line down",
    ),
    ActionRef(
        id="motion.line_start",
        handler=motion_actions.line_start,
        description="Jump to column 0",
    ),
    ActionRef(
        id="motion.line_end",
        handler=motion_actions.line_end,
        description="Jump past the last character",
    ),
    ActionRef(
        id="insert.left",
        handler=motion_actions.insert_left,
        description="Move left within the line",
    ),
    ActionRef(
        id="insert.right",
        handler=motion_actions.insert_right,
        description="Move right within the line",
    ),
    ActionRef(
        id="insert.up",
        handler=motion_actions.insert_up,
        description="Move to the previous line",
    ),
    ActionRef(
        id="insert.down",
        handler=motion_actions.insert_down,
        description="Move to the next line, appending one at the end",
    ),
    ActionRef(
        id="insert.backspace",
        handler=editing_actions.delete_before_cursor,
        description="Delete the character left of the cursor",
    ),
    ActionRef(
        id="command.backspace",
        handler=command_actions.delete_last_char,
        description="Delete the last command-line character",
    ),
    ActionRef(
        id="command.submit_line",
        handler=command_actions.submit_command_line,
        description="Run the command line",
    ),
)


def _bind(binding_id: str, mode: str, key: str, action_id: str) -> Binding:
    return Binding(
        id=binding_id,
        mode=mode,
        sequence=KeySequence.from_strings(key),
        action_id=action_id,
    )


DEFAULT_BINDINGS: tuple[Binding, ...] = (
    _bind("normal.left", "normal", "h", "motion.left"),
    _bind("normal.left_arrow", "normal", "LEFT", "motion.left"),
    _bind("normal.down", "normal", "j", "motion.down"),
    _bind("normal.down_arrow", "normal", "DOWN", "motion.down"),
    _bind("normal.up", "normal", "k", "motion.up"),
    _bind("normal.up_arrow", "normal", "UP", "motion.up"),
    _bind("normal.right", "normal", "l", "motion.right"),
    _bind("normal.right_arrow", "normal", "RIGHT", "motion.right"),
    _bind("normal.line_start", "normal", "1", "motion.line_start"),
    _bind("normal.line_end", "normal", "2", "motion.line_end"),
    _bind("normal.enter_insert", "normal", "i", "core.enter_insert"),
    _bind("normal.enter_command", "normal", ":", "core.enter_command"),
    _bind("insert.exit_escape", "insert", "ESC", "core.exit_to_normal"),
    _bind("insert.backspace", "insert", "BACKSPACE", "insert.backspace"),
    _bind("insert.left", "insert", "LEFT", "insert.left"),
    _bind("insert.right", "insert", "RIGHT", "insert.right"),
    _bind("insert.up", "insert", "UP", "insert.up"),
    _bind("insert.down", "insert", "DOWN", "insert.down"),
    _bind("command.exit_escape", "command", "ESC", "core.exit_to_normal"),
    _bind("command.backspace", "command", "BACKSPACE", "command.backspace"),
    _bind("command.submit_enter", "command", "ENTER", "command.submit_line"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and bindings for every mode."""

    excluded = set(exclude_bindings or ())
    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = ["DEFAULT_ACTIONS", "DEFAULT_BINDINGS", "load_default_keymaps"]
