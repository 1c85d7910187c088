"""Token types, the token value, reserved words, and byte classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Data-carrying
    IDENT = auto()  # [A-Za-z_][A-Za-z0-9_]*
    INT = auto()  # [0-9]+

    ILLEGAL = auto()
    EOF = auto()

    # Punctuation (single byte)
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    DQUOTE = auto()  # "
    SQUOTE = auto()  # '

    # Operators
    EQUAL = auto()  # =
    EQUAL_EQUAL = auto()  # ==
    FAT_ARROW = auto()  # =>
    PLUS = auto()  # +
    PLUS_EQUAL = auto()  # +=
    MINUS = auto()  # -
    MINUS_EQUAL = auto()  # -=
    ARROW = auto()  # ->
    BANG = auto()  # !
    BANG_EQUAL = auto()  # !=
    AMPERSAND = auto()  # &
    AMPERSAND_AMPERSAND = auto()  # &&
    PIPE = auto()  # |
    PIPE_PIPE = auto()  # ||
    PERIOD = auto()  # .
    RANGE = auto()  # ..
    RANGE_INCLUSIVE = auto()  # ..=
    DEFAULT_FIELDS = auto()  # ...
    COLON = auto()  # :
    DOUBLE_COLON = auto()  # ::

    # Keywords
    FUNCTION = auto()  # fn
    LET = auto()
    CONST = auto()
    STATIC = auto()
    MOD = auto()
    PUB = auto()
    CRATE = auto()
    USE = auto()
    AS = auto()
    EXTERN = auto()
    SELF_TYPE = auto()  # Self
    SELF = auto()  # self
    FOR = auto()
    IN = auto()
    IF = auto()
    ELSE = auto()
    MATCH = auto()
    WHILE = auto()
    LOOP = auto()
    CONTINUE = auto()
    BREAK = auto()
    RETURN = auto()
    MUT = auto()
    DEFAULT = auto()
    TYPE = auto()
    STRUCT = auto()
    ENUM = auto()
    TRAIT = auto()
    IMPL = auto()

    # Primitive types
    I8 = auto()
    U8 = auto()
    I16 = auto()
    U16 = auto()
    I32 = auto()
    U32 = auto()
    I64 = auto()
    U64 = auto()
    I128 = auto()
    U128 = auto()
    ISIZE = auto()
    USIZE = auto()
    F32 = auto()
    F64 = auto()
    BOOL = auto()
    CHAR = auto()
    STR = auto()

    # Boolean literals
    TRUE = auto()
    FALSE = auto()


# Variants whose token carries the matched source text
DATA_TYPES = frozenset({TokenType.IDENT, TokenType.INT})


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token. Only IDENT and INT carry text; every other type is a bare marker."""

    type: TokenType
    text: str = ""

    def __post_init__(self) -> None:
        if self.type in DATA_TYPES:
            if not self.text:
                raise ValueError(f"{self.type.name} token requires text")
        elif self.text:
            raise ValueError(f"{self.type.name} token cannot carry text (got {self.text!r})")


KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "const": TokenType.CONST,
    "static": TokenType.STATIC,
    "mod": TokenType.MOD,
    "pub": TokenType.PUB,
    "crate": TokenType.CRATE,
    "use": TokenType.USE,
    "as": TokenType.AS,
    "extern": TokenType.EXTERN,
    "Self": TokenType.SELF_TYPE,
    "self": TokenType.SELF,
    "for": TokenType.FOR,
    "in": TokenType.IN,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "match": TokenType.MATCH,
    "while": TokenType.WHILE,
    "loop": TokenType.LOOP,
    "continue": TokenType.CONTINUE,
    "break": TokenType.BREAK,
    "return": TokenType.RETURN,
    "mut": TokenType.MUT,
    "i8": TokenType.I8,
    "u8": TokenType.U8,
    "i16": TokenType.I16,
    "u16": TokenType.U16,
    "i32": TokenType.I32,
    "u32": TokenType.U32,
    "i64": TokenType.I64,
    "u64": TokenType.U64,
    "i128": TokenType.I128,
    "u128": TokenType.U128,
    "isize": TokenType.ISIZE,
    "usize": TokenType.USIZE,
    "f32": TokenType.F32,
    "f64": TokenType.F64,
    "bool": TokenType.BOOL,
    "char": TokenType.CHAR,
    "str": TokenType.STR,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "default": TokenType.DEFAULT,
    "type": TokenType.TYPE,
    "struct": TokenType.STRUCT,
    "enum": TokenType.ENUM,
    "trait": TokenType.TRAIT,
    "impl": TokenType.IMPL,
}


def lookup_ident(text: str) -> Token:
    """Return the reserved-word token for *text*, or an IDENT token carrying it."""
    tt = KEYWORDS.get(text)
    if tt is not None:
        return Token(tt)
    return Token(TokenType.IDENT, text)


# Byte classification. Bytes are ints, as produced by indexing a bytes object.

# Rust's is_ascii_whitespace: no vertical tab
_WHITESPACE = frozenset(b" \t\n\r\x0c")


def is_whitespace(b: int) -> bool:
    return b in _WHITESPACE


def is_digit(b: int) -> bool:
    return 0x30 <= b <= 0x39


def is_letter(b: int) -> bool:
    return 0x41 <= b <= 0x5A or 0x61 <= b <= 0x7A


def is_ident_start(b: int) -> bool:
    """Return True if *b* may begin an identifier (ASCII letter or underscore)."""
    return is_letter(b) or b == 0x5F


def is_ident_char(b: int) -> bool:
    """Return True if *b* may continue an identifier."""
    return is_ident_start(b) or is_digit(b)
