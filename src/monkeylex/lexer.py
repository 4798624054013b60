"""Monkey lexer: scans source text into tokens, one token per call."""

from __future__ import annotations

from collections.abc import Iterator

from monkeylex.errors import LexError, LexErrorKind
from monkeylex.tokens import (
    EOF_CHAR,
    SINGLE_CHAR_TOKENS,
    LineIndex,
    Token,
    TokenType,
    is_digit,
    is_ident_char,
    is_ident_start,
    is_whitespace,
    lookup_ident,
)

# Integer literals are 32-bit signed
MAX_INTEGER = 2**31 - 1
_MAX_INTEGER_DIGITS = len(str(MAX_INTEGER))


class Lexer:
    """Pull-based scanner over a Monkey source string.

    Each ``next_token()`` call skips leading whitespace, returns exactly one
    token and leaves the cursor at the start of whatever follows it. Once the
    input is exhausted every call returns an EOF token.
    """

    def __init__(self, source: str, filename: str = "input.monkey") -> None:
        self._source = source
        self._filename = filename
        self._line_index: LineIndex | None = None  # built on first error
        self._ch = EOF_CHAR
        self._position = 0
        self._next_position = 0
        self._read_char()

    def next_token(self) -> Token:
        """Scan and return the next token.

        Raises LexError for an unterminated string or an integer literal that
        does not fit in 32 bits. The cursor is already past the offending
        text when that happens, so scanning may continue.
        """
        self._skip_whitespace()

        start = self._position
        ch = self._ch

        tt = SINGLE_CHAR_TOKENS.get(ch)
        if tt is not None:
            self._read_char()
            return Token(tt, offset=start)

        if ch == "=":
            if self._peek_char() == "=":
                self._read_char()
                self._read_char()
                return Token(TokenType.EQ, offset=start)
            self._read_char()
            return Token(TokenType.ASSIGN, offset=start)

        if ch == "!":
            if self._peek_char() == "=":
                self._read_char()
                self._read_char()
                return Token(TokenType.NOT_EQ, offset=start)
            self._read_char()
            return Token(TokenType.BANG, offset=start)

        if is_ident_start(ch):
            name = self._read_identifier()
            tt = lookup_ident(name)
            if tt is TokenType.IDENTIFIER:
                return Token(tt, name, start)
            return Token(tt, offset=start)

        if is_digit(ch):
            return Token(TokenType.INTEGER, self._read_integer(), start)

        if ch == '"':
            return Token(TokenType.STRING, self._read_string(), start)

        if ch == EOF_CHAR:
            return Token(TokenType.EOF, offset=start)

        self._read_char()
        return Token(TokenType.ILLEGAL, ch, start)

    def tokenize(self) -> list[Token]:
        """Scan the remaining input and return the token list, EOF included."""
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            tok = self.next_token()
            yield tok
            if tok.type is TokenType.EOF:
                return

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def _read_char(self) -> None:
        if self._next_position < len(self._source):
            self._ch = self._source[self._next_position]
        else:
            self._ch = EOF_CHAR
        self._position = self._next_position
        self._next_position += 1

    def _peek_char(self) -> str:
        if self._next_position < len(self._source):
            return self._source[self._next_position]
        return EOF_CHAR

    def _skip_whitespace(self) -> None:
        while is_whitespace(self._ch):
            self._read_char()

    def _error(self, message: str, kind: LexErrorKind, start: int) -> LexError:
        if self._line_index is None:
            self._line_index = LineIndex(self._source)
        position = self._line_index.position(start)
        text = self._source[start : self._position]
        return LexError(message, kind, position, self._source, text, self._filename)

    # ------------------------------------------------------------------
    # Sub-scans
    # ------------------------------------------------------------------

    def _read_identifier(self) -> str:
        start = self._position
        while is_ident_char(self._ch):
            self._read_char()
        return self._source[start : self._position]

    def _read_integer(self) -> int:
        start = self._position
        while is_digit(self._ch):
            self._read_char()
        text = self._source[start : self._position]
        # Length first: int() refuses very long digit strings
        significant = text.lstrip("0") or "0"
        if len(significant) > _MAX_INTEGER_DIGITS or int(significant) > MAX_INTEGER:
            raise self._error(
                f"integer literal '{text}' does not fit in a 32-bit signed integer",
                LexErrorKind.MALFORMED_INTEGER,
                start,
            )
        return int(significant)

    def _read_string(self) -> str:
        start = self._position
        while True:
            self._read_char()
            if self._ch == '"':
                break
            if self._ch == EOF_CHAR:
                raise self._error(
                    "input ended before closing quote of string",
                    LexErrorKind.UNTERMINATED_STRING,
                    start,
                )
        content = self._source[start + 1 : self._position]
        self._read_char()  # closing quote
        return content


def tokenize(source: str, filename: str = "input.monkey") -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, filename).tokenize()


def tokenize_all(
    source: str, filename: str = "input.monkey"
) -> tuple[list[Token], list[LexError]]:
    """Tokenize the whole source, collecting errors instead of stopping at the first.

    Tokens whose scan failed are left out of the token list.
    """
    lexer = Lexer(source, filename)
    tokens: list[Token] = []
    errors: list[LexError] = []
    while True:
        try:
            tok = lexer.next_token()
        except LexError as exc:
            errors.append(exc)
            continue
        tokens.append(tok)
        if tok.type is TokenType.EOF:
            return tokens, errors
