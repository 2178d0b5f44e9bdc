"""Per-line syntax classification."""

from .keywords import C_KEYWORDS, is_keyword
from .tokenizer import WORD_CAPACITY, classify, classify_buffer, classify_text

__all__ = [
    "C_KEYWORDS",
    "WORD_CAPACITY",
    "classify",
    "classify_buffer",
    "classify_text",
    "is_keyword",
]
