"""Token stream dumps for the CLI: a text listing and JSON."""

from __future__ import annotations

import json
import sys
from typing import Any, TextIO

from monkeylex.tokens import LineIndex, Token


def dump_tokens(tokens: list[Token], source: str, *, file: TextIO = sys.stderr) -> None:
    """Print one ``line:col  TYPE  value`` row per token to *file*."""
    index = LineIndex(source)
    for tok in tokens:
        pos = index.position(tok.offset)
        loc = f"{pos.line}:{pos.column}"
        if tok.value is None:
            file.write(f"{loc:<8} {tok.type.name}\n")
        else:
            file.write(f"{loc:<8} {tok.type.name:<10} {tok.value!r}\n")


def token_to_dict(tok: Token, index: LineIndex) -> dict[str, Any]:
    pos = index.position(tok.offset)
    return {
        "type": tok.type.name,
        "value": tok.value,
        "line": pos.line,
        "column": pos.column,
    }


def tokens_to_json(tokens: list[Token], source: str) -> str:
    index = LineIndex(source)
    return json.dumps([token_to_dict(t, index) for t in tokens], indent=2) + "\n"
