"""Lexical scanner for the Monkey programming language."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monkeylex.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str, filename: str = "input.monkey") -> list[Token]:
    """Scan Monkey source into a token list ending with EOF."""
    from monkeylex.lexer import tokenize as _tokenize

    return _tokenize(source, filename)
