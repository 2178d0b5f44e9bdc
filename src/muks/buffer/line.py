"""Single editable row paired with its highlight classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Sequence


class SyntaxCategory(IntEnum):
    """Highlight category of one character. Only the renderer reads it."""

    NORMAL = 0
    KEYWORD = 1
    STRING = 2
    COMMENT = 3
    NUMBER = 4


@dataclass(slots=True)
class Line:
    """Mutable text row.

    ``classification[i]`` describes ``text[i]``; both lists are always
    resized together so their lengths never differ.
    """

    _chars: List[str] = field(default_factory=list)
    _classes: List[SyntaxCategory] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str | None = None) -> "Line":
        chars = list(text or "")
        return cls(_chars=chars, _classes=[SyntaxCategory.NORMAL] * len(chars))

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def classification(self) -> Sequence[SyntaxCategory]:
        return tuple(self._classes)

    def __len__(self) -> int:
        return len(self._chars)

    def char_at(self, col: int) -> str:
        return self._chars[col]

    def insert(self, col: int, ch: str) -> int:
        """Insert ``ch`` at ``col`` clamped into ``[0, len]``; return the column used."""

        col = max(0, min(col, len(self._chars)))
        self._chars.insert(col, ch)
        self._classes.insert(col, SyntaxCategory.NORMAL)
        return col

    def delete(self, col: int) -> bool:
        if col < 0 or col >= len(self._chars):
            return False
        del self._chars[col]
        del self._classes[col]
        return True

    def set_classification(self, classes: Sequence[SyntaxCategory]) -> None:
        if len(classes) != len(self._chars):
            raise ValueError(
                f"classification length {len(classes)} does not match "
                f"text length {len(self._chars)}"
            )
        self._classes[:] = classes


__all__ = ["Line", "SyntaxCategory"]
