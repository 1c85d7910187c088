"""Token stream dumps for the CLI and for debugging."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from ferrolex.tokens import DATA_TYPES, Token


def format_token(tok: Token) -> str:
    """Return a one-line rendering: ``LET``, ``IDENT 'five'``."""
    if tok.type in DATA_TYPES:
        return f"{tok.type.name} {tok.text!r}"
    return tok.type.name


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one token per line to *file*."""
    for tok in tokens:
        file.write(format_token(tok) + "\n")


def tokens_to_json(tokens: list[Token]) -> list[dict[str, Any]]:
    """Convert tokens to JSON-ready dicts. Marker tokens have no "text" key."""
    out: list[dict[str, Any]] = []
    for tok in tokens:
        item: dict[str, Any] = {"type": tok.type.name}
        if tok.type in DATA_TYPES:
            item["text"] = tok.text
        out.append(item)
    return out
