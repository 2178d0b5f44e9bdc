"""Single-pass highlighter for C-like source lines.

Every call starts from a clean lexer state: comments and string literals
never carry over from one line to the next, so a ``/*`` left open on line
*n* does not colour line *n + 1*.
"""

from __future__ import annotations

import string
from typing import Iterable, List

from muks.buffer.line import Line, SyntaxCategory

from .keywords import is_keyword

WORD_CAPACITY = 31

_WORD_START = frozenset(string.ascii_letters + "_")
_DIGITS = frozenset(string.digits)
_IDENT = _WORD_START | _DIGITS
_QUOTES = frozenset("\"'")


def classify_text(text: str) -> List[SyntaxCategory]:
    """Return one ``SyntaxCategory`` per character of ``text``."""

    length = len(text)
    classes = [SyntaxCategory.NORMAL] * length
    in_block_comment = False
    quote: str | None = None
    word: List[str] = []
    word_start = -1

    def finish_word(end: int) -> None:
        nonlocal word_start
        if word_start >= 0 and is_keyword("".join(word)):
            classes[word_start:end] = [SyntaxCategory.KEYWORD] * (end - word_start)
        word.clear()
        word_start = -1

    i = 0
    while i < length:
        ch = text[i]
        nxt = text[i + 1] if i + 1 < length else ""

        if in_block_comment:
            classes[i] = SyntaxCategory.COMMENT
            if ch == "*" and nxt == "/":
                classes[i + 1] = SyntaxCategory.COMMENT
                in_block_comment = False
                i += 1
            i += 1
            continue

        if quote is not None:
            classes[i] = SyntaxCategory.STRING
            if ch == "\\" and nxt:
                classes[i + 1] = SyntaxCategory.STRING
                i += 2
                continue
            if ch == quote:
                quote = None
            i += 1
            continue

        if word_start >= 0:
            if ch in _IDENT:
                if len(word) < WORD_CAPACITY:
                    word.append(ch)
                i += 1
                continue
            finish_word(i)

        if ch in _QUOTES:
            quote = ch
            classes[i] = SyntaxCategory.STRING
        elif ch == "/" and nxt == "*":
            classes[i] = classes[i + 1] = SyntaxCategory.COMMENT
            in_block_comment = True
            i += 1
        elif ch == "/" and nxt == "/":
            classes[i:] = [SyntaxCategory.COMMENT] * (length - i)
            return classes
        elif ch in _DIGITS and (i == 0 or text[i - 1] not in _IDENT):
            end = i
            while end < length and text[end] in _DIGITS:
                end += 1
            if end == length or text[end] not in _WORD_START:
                classes[i:end] = [SyntaxCategory.NUMBER] * (end - i)
            else:
                # "1a" and "2_int" stay Normal up to the end of the identifier.
                while end < length and text[end] in _IDENT:
                    end += 1
            i = end
            continue
        elif ch in _WORD_START:
            word_start = i
            word.append(ch)
        i += 1

    finish_word(length)
    return classes


def classify(line: Line) -> Line:
    """Recompute ``line``'s classification in place from its current text."""

    line.set_classification(classify_text(line.text))
    return line


def classify_buffer(lines: Iterable[Line]) -> None:
    for line in lines:
        classify(line)


__all__ = ["WORD_CAPACITY", "classify", "classify_buffer", "classify_text"]
