"""ferrolex: a byte-level lexer for a small Rust-like language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ferrolex.lexer import Source
    from ferrolex.tokens import Token

__version__ = "0.1.0"


def lex(source: Source) -> list[Token]:
    """Tokenize *source* and return every token, ending with EOF."""
    from ferrolex.lexer import tokenize

    return tokenize(source)
