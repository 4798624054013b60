"""Error types with formatted source context."""

from __future__ import annotations

from enum import Enum

from monkeylex.tokens import Position


class LexErrorKind(Enum):
    UNTERMINATED_STRING = "unterminated-string"
    MALFORMED_INTEGER = "malformed-integer"


class LexError(Exception):
    """Raised when the input cannot be scanned, with position and source context.

    ``text`` holds the offending source text: the digit run for a malformed
    integer, or the partial literal (opening quote included) for an
    unterminated string.
    """

    def __init__(
        self,
        message: str,
        kind: LexErrorKind,
        position: Position,
        source: str,
        text: str = "",
        filename: str = "input.monkey",
    ) -> None:
        self.message = message
        self.kind = kind
        self.position = position
        self.source = source
        self.text = text
        self.filename = filename
        super().__init__(message)

    def __str__(self) -> str:
        return self.format()

    def format(self, filename: str | None = None) -> str:
        if filename is None:
            filename = self.filename
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        # Build the source line (strip trailing newline for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        # Underline the offending text, clipped to the end of the line
        underline_len = max(1, min(len(self.text), len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )
