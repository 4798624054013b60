"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    # Literals and names
    IDENTIFIER = auto()  # letters and underscores, value is the name
    INTEGER = auto()  # decimal digits, value is the parsed int
    STRING = auto()  # "...", value is the content between the quotes

    # Keywords
    FUNCTION = auto()  # fn
    LET = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()
    TRUE = auto()
    FALSE = auto()

    # Operators (single-character)
    ASSIGN = auto()  # =
    PLUS = auto()  # +
    MINUS = auto()  # -
    SLASH = auto()  # /
    ASTERISK = auto()  # *
    BANG = auto()  # !
    LT = auto()  # <
    GT = auto()  # >

    # Operators (two-character)
    EQ = auto()  # ==
    NOT_EQ = auto()  # !=

    # Punctuation
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    COLON = auto()  # :
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LBRACKET = auto()  # [
    RBRACKET = auto()  # ]

    ILLEGAL = auto()  # unrecognized character, value is the character
    EOF = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token.

    Equality only looks at ``type`` and ``value``; ``offset`` records where the
    token starts in the source for diagnostics.
    """

    type: TokenType
    value: str | int | None = None
    offset: int = field(default=0, compare=False, repr=False)


KEYWORDS: dict[str, TokenType] = {
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
}

# Tokens that are always exactly one character wide
SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "*": TokenType.ASTERISK,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    ":": TokenType.COLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
}

# Sentinel for "no character": past the end of the input
EOF_CHAR = ""

_IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_DIGITS = frozenset("0123456789")


def lookup_ident(name: str) -> TokenType:
    """Return the keyword type for name, or IDENTIFIER."""
    return KEYWORDS.get(name, TokenType.IDENTIFIER)


def is_ident_start(ch: str) -> bool:
    """Return True if ch can begin an identifier (ASCII letter or underscore)."""
    return ch in _IDENT_START


def is_ident_char(ch: str) -> bool:
    """Return True if ch can continue an identifier."""
    return ch.isalpha() or ch == "_"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII decimal digit."""
    return ch in _DIGITS


def is_whitespace(ch: str) -> bool:
    return ch.isspace()


class LineIndex:
    """Convert character offsets into 1-based line/column positions."""

    def __init__(self, source: str) -> None:
        self._line_starts = [0]
        for i, ch in enumerate(source):
            if ch == "\n":
                self._line_starts.append(i + 1)

    def position(self, offset: int) -> Position:
        line_idx = bisect_right(self._line_starts, offset) - 1
        column = offset - self._line_starts[line_idx] + 1
        return Position(line_idx + 1, column, offset)
