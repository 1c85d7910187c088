"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from ferrolex.lexer import tokenize
from ferrolex.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens (excluding EOF)."""

    def _lex(source: str | bytes) -> list[Token]:
        tokens = tokenize(source)
        # Strip trailing EOF for convenience
        return [t for t in tokens if t.type != TokenType.EOF]

    return _lex


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def ident(text: str) -> Token:
    return Token(TokenType.IDENT, text)


def int_lit(text: str) -> Token:
    return Token(TokenType.INT, text)


def tok(tt: TokenType) -> Token:
    return Token(tt)
