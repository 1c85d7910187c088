"""Error types with formatted token context."""

from __future__ import annotations

from ferrolex.debug import format_token
from ferrolex.tokens import Token, TokenType

# Tokens shown on each side of the offending one
_CONTEXT = 4


class IllegalTokenError(Exception):
    """Raised by strict checking on the first ILLEGAL token in a stream."""

    def __init__(
        self,
        message: str,
        index: int,
        tokens: list[Token],
        filename: str = "<input>",
    ) -> None:
        self.message = message
        self.index = index
        self.tokens = tokens
        self.filename = filename
        super().__init__(self.format())

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename

        lo = max(0, self.index - _CONTEXT)
        hi = min(len(self.tokens), self.index + _CONTEXT + 1)
        window = [format_token(t) for t in self.tokens[lo:hi]]
        if lo > 0:
            window.insert(0, "...")
        if hi < len(self.tokens):
            window.append("...")

        # Column of the offending token within the joined window
        target = self.index - lo + (1 if lo > 0 else 0)
        pad = " " * sum(len(s) + 1 for s in window[:target])
        carets = "^" * len(window[target])

        return (
            f"error: {self.message}\n"
            f"  --> {filename}: token {self.index + 1}\n"
            f"   |\n"
            f"   | {' '.join(window)}\n"
            f"   | {pad}{carets}"
        )


def check_tokens(tokens: list[Token], filename: str = "<input>") -> None:
    """Raise IllegalTokenError if any token in *tokens* is ILLEGAL."""
    for i, tok in enumerate(tokens):
        if tok.type == TokenType.ILLEGAL:
            raise IllegalTokenError("unrecognized input", i, tokens, filename)
