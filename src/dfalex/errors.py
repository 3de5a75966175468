"""Diagnostics and error types with formatted source context."""

from __future__ import annotations

from dataclasses import dataclass

from dfalex.tokens import Position


@dataclass(frozen=True, slots=True)
class UnrecognizedCharacter:
    """A non-blank character that starts no token and was dropped by the scanner."""

    char: str
    position: Position

    @property
    def message(self) -> str:
        return f"unrecognized character {self.char!r}"


class LexError(Exception):
    """Raised by a strict lexer on the first unrecognized character."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.dfl") -> str:
        lines = self.source.splitlines(keepends=True)
        line_idx = self.position.line - 1
        col = self.position.column

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx].rstrip("\n").rstrip("\r")
        else:
            source_line = ""

        pad = " " * (col - 1)

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}^"
        )

    @classmethod
    def from_diagnostic(cls, diag: UnrecognizedCharacter, source: str) -> LexError:
        return cls(diag.message, diag.position, source)
