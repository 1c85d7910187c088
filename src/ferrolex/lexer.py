"""ferrolex lexer: converts source text into a flat token stream, one token per call."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ferrolex.tokens import (
    Token,
    TokenType,
    is_digit,
    is_ident_char,
    is_ident_start,
    is_whitespace,
    lookup_ident,
)

# Current-byte value once the cursor has moved past the end of input
_SENTINEL = 0

Source = str | bytes | bytearray | memoryview

SINGLE_BYTE_TOKENS: dict[int, TokenType] = {
    ord("{"): TokenType.LBRACE,
    ord("}"): TokenType.RBRACE,
    ord("("): TokenType.LPAREN,
    ord(")"): TokenType.RPAREN,
    ord(","): TokenType.COMMA,
    ord(";"): TokenType.SEMICOLON,
    ord('"'): TokenType.DQUOTE,
    ord("'"): TokenType.SQUOTE,
}


@dataclass(frozen=True, slots=True)
class OperatorRule:
    """Maximal-munch rule for one operator leader byte.

    The scanner consumes the leader, then following bytes found in
    ``followers``, and looks the run up in ``runs``. A greedy rule takes every
    follower byte and turns a run with no entry into ``fallback``. A non-greedy
    rule stops at the longest legal run and leaves the rest for the next token.
    """

    followers: bytes
    runs: dict[str, TokenType]
    fallback: TokenType
    greedy: bool = True


OPERATOR_RULES: dict[int, OperatorRule] = {
    ord("+"): OperatorRule(
        b"+=",
        {"+": TokenType.PLUS, "+=": TokenType.PLUS_EQUAL},
        TokenType.PLUS,
    ),
    ord("-"): OperatorRule(
        b"-=>",
        {"-": TokenType.MINUS, "-=": TokenType.MINUS_EQUAL, "->": TokenType.ARROW},
        TokenType.MINUS,
    ),
    ord("."): OperatorRule(
        b".=",
        {
            ".": TokenType.PERIOD,
            "..": TokenType.RANGE,
            "..=": TokenType.RANGE_INCLUSIVE,
            "...": TokenType.DEFAULT_FIELDS,
        },
        TokenType.ILLEGAL,
    ),
    ord(":"): OperatorRule(
        b":",
        {":": TokenType.COLON, "::": TokenType.DOUBLE_COLON},
        TokenType.COLON,
    ),
    ord("="): OperatorRule(
        b"=>",
        {"=": TokenType.EQUAL, "==": TokenType.EQUAL_EQUAL, "=>": TokenType.FAT_ARROW},
        TokenType.EQUAL,
        greedy=False,
    ),
    ord("!"): OperatorRule(
        b"=",
        {"!": TokenType.BANG, "!=": TokenType.BANG_EQUAL},
        TokenType.BANG,
        greedy=False,
    ),
    ord("&"): OperatorRule(
        b"&",
        {"&": TokenType.AMPERSAND, "&&": TokenType.AMPERSAND_AMPERSAND},
        TokenType.AMPERSAND,
        greedy=False,
    ),
    ord("|"): OperatorRule(
        b"|",
        {"|": TokenType.PIPE, "||": TokenType.PIPE_PIPE},
        TokenType.PIPE,
        greedy=False,
    ),
}


class Lexer:
    """Scan a complete source buffer into Token objects, one per next_token() call.

    The scanner never raises on malformed input: unrecognized bytes come back
    as ILLEGAL tokens. Once the input is exhausted every further call returns
    EOF.
    """

    def __init__(self, source: Source) -> None:
        if isinstance(source, str):
            data = source.encode("utf-8")
        elif isinstance(source, (bytes, bytearray, memoryview)):
            data = bytes(source)
        else:
            raise TypeError(f"source must be str or bytes, not {type(source).__name__}")
        self._input = data
        self._position = 0
        self._read_position = 0
        self._ch = _SENTINEL
        self._read_char()

    def next_token(self) -> Token:
        """Advance past the next token and return it."""
        self._skip_whitespace()

        ch = self._ch

        if self._at_end():
            return Token(TokenType.EOF)

        tt = SINGLE_BYTE_TOKENS.get(ch)
        if tt is not None:
            self._read_char()
            return Token(tt)

        rule = OPERATOR_RULES.get(ch)
        if rule is not None:
            return self._lex_operator(rule)

        if is_ident_start(ch):
            return lookup_ident(self._read_while(is_ident_char))

        if is_digit(ch):
            return Token(TokenType.INT, self._read_while(is_digit))

        # Embedded NUL, non-ASCII, and any other unhandled byte
        self._read_char()
        return Token(TokenType.ILLEGAL)

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _read_char(self) -> None:
        if self._read_position >= len(self._input):
            self._ch = _SENTINEL
        else:
            self._ch = self._input[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def _at_end(self) -> bool:
        # A literal NUL byte inside the input also reads as the sentinel
        return self._ch == _SENTINEL and self._position >= len(self._input)

    def _skip_whitespace(self) -> None:
        while is_whitespace(self._ch):
            self._read_char()

    def _read_while(self, pred: Callable[[int], bool]) -> str:
        """Consume bytes while pred(current byte) holds and return the consumed run."""
        start = self._position
        while pred(self._ch):
            self._read_char()
        return self._input[start : self._position].decode("ascii")

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def _lex_operator(self, rule: OperatorRule) -> Token:
        start = self._position
        self._read_char()  # leader
        run = self._input[start : self._position].decode("ascii")
        while self._ch in rule.followers:
            longer = run + chr(self._ch)
            if not rule.greedy and not any(r.startswith(longer) for r in rule.runs):
                break
            self._read_char()
            run = longer
        return Token(rule.runs.get(run, rule.fallback))


def tokenize(source: Source) -> list[Token]:
    """Convenience function: tokenize source text and return the token list, ending in EOF."""
    lexer = Lexer(source)
    tokens: list[Token] = []
    while True:
        tok = lexer.next_token()
        tokens.append(tok)
        if tok.type == TokenType.EOF:
            return tokens
