"""Editor settings and colour theme."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from muks.buffer.line import SyntaxCategory
from muks.buffer.viewport import RESERVED_ROWS
from muks.syntax.tokenizer import WORD_CAPACITY

ENV_PREFIX = "MUKS_"
DEFAULT_COMMAND_CAPACITY = 255
DEFAULT_STATUS_CAPACITY = 255


class EditorMode(str, Enum):
    """Input modes of the editor; the value doubles as the mode's registry name."""

    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"

    @property
    def label(self) -> str:
        return self.value.upper()


DEFAULT_THEME: Mapping[SyntaxCategory, str] = MappingProxyType(
    {
        SyntaxCategory.NORMAL: "white",
        SyntaxCategory.KEYWORD: "yellow",
        SyntaxCategory.STRING: "green",
        SyntaxCategory.COMMENT: "cyan",
        SyntaxCategory.NUMBER: "magenta",
    }
)


@dataclass(frozen=True)
class EditorConfig:
    """Settings read once at startup."""

    command_capacity: int = DEFAULT_COMMAND_CAPACITY
    status_capacity: int = DEFAULT_STATUS_CAPACITY
    theme: Mapping[SyntaxCategory, str] = field(default_factory=lambda: DEFAULT_THEME)
    background: str = "black"
    status_style: str = "reverse"

    word_capacity: int = WORD_CAPACITY
    reserved_rows: int = RESERVED_ROWS

    def style_for(self, category: SyntaxCategory) -> str:
        color = self.theme.get(category, self.theme[SyntaxCategory.NORMAL])
        return f"{color} on {self.background}"


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


def load_config(env: Optional[Mapping[str, str]] = None) -> EditorConfig:
    """Build an ``EditorConfig`` from ``MUKS_*`` environment variables."""

    source = os.environ if env is None else env
    return EditorConfig(
        command_capacity=_env_int(
            source, "COMMAND_CAPACITY", DEFAULT_COMMAND_CAPACITY
        ),
        status_capacity=_env_int(source, "STATUS_CAPACITY", DEFAULT_STATUS_CAPACITY),
    )


__all__ = [
    "DEFAULT_THEME",
    "EditorConfig",
    "EditorMode",
    "load_config",
]
