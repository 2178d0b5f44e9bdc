"""Reserved words highlighted by the tokenizer."""

from __future__ import annotations

C_KEYWORDS: frozenset[str] = frozenset(
    {
        # C keywords.
        "auto",
        "break",
        "case",
        "char",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extern",
        "float",
        "for",
        "goto",
        "if",
        "inline",
        "int",
        "long",
        "register",
        "restrict",
        "return",
        "short",
        "signed",
        "sizeof",
        "static",
        "struct",
        "switch",
        "typedef",
        "typeof",
        "typeof_unqual",
        "union",
        "unsigned",
        "void",
        "volatile",
        "while",
        # Preprocessor directives.
        "define",
        "include",
    }
)


def is_keyword(word: str) -> bool:
    return word in C_KEYWORDS


__all__ = ["C_KEYWORDS", "is_keyword"]
