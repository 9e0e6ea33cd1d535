"""Lexical error records and the opt-in exception that wraps them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class LexErrorKind(Enum):
    UNEXPECTED_CHARACTER = auto()
    UNTERMINATED_STRING = auto()


@dataclass(frozen=True, slots=True)
class LexError:
    """One rejected character or unterminated construct.

    Scanning records these and carries on; they are never raised.
    """

    kind: LexErrorKind
    message: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"[line {self.line}] {self.message}"

    def format(self, source: str, filename: str = "<input>") -> str:
        # Only "\n" starts a new line, matching the scanner's line count
        lines = source.split("\n")
        line_idx = self.line - 1
        col = max(1, self.column)

        # Build the source line (drop a CRLF carriage return for display)
        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].removesuffix("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )


class ScanError(Exception):
    """Raised by ScanResult.raise_for_errors() when a scan recorded errors."""

    def __init__(self, errors: list[LexError], source: str, filename: str = "<input>") -> None:
        self.errors = errors
        self.source = source
        self.filename = filename
        super().__init__(self.format())

    def format(self) -> str:
        return "\n\n".join(err.format(self.source, self.filename) for err in self.errors)
