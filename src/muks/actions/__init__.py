"""Editing verbs bound to keys by the default keymap."""

from .core import enter_command_mode, enter_insert_mode, exit_to_normal_mode
from .editing import delete_before_cursor, insert_text
from .motion import (
    insert_down,
    insert_left,
    insert_right,
    insert_up,
    line_end,
    line_start,
    move_down,
    move_left,
    move_right,
    move_up,
)
from .command import delete_last_char, submit_command_line

__all__ = [
    "delete_before_cursor",
    "delete_last_char",
    "enter_command_mode",
    "enter_insert_mode",
    "exit_to_normal_mode",
    "insert_down",
    "insert_left",
    "insert_right",
    "insert_text",
    "insert_up",
    "line_end",
    "line_start",
    "move_down",
    "move_left",
    "move_right",
    "move_up",
    "submit_command_line",
]
