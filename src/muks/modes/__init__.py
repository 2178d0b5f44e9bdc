"""Editor modes and their key dispatch."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .keymap_mode import KeymapMode
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .command_mode import CommandMode

__all__ = [
    "KeyInput",
    "KeymapMode",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "CommandMode",
]
