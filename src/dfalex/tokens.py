"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    IDENTIFIER = auto()  # letter (letter | digit)*
    INT_LITERAL = auto()  # digit+
    INT = auto()  # keyword int

    # Operators
    ASSIGNMENT = auto()  # =
    GT = auto()  # >
    GE = auto()  # >=


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position (end is exclusive)."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: its type and the exact matched lexeme."""

    type: TokenType
    text: str
    span: Span


# Reserved words and the token type each one closes as.
KEYWORDS: dict[str, TokenType] = {
    "int": TokenType.INT,
}

_LETTERS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")
_DIGITS = frozenset("0123456789")
_BLANKS = frozenset(" \t\n\r")


def is_alpha(ch: str) -> bool:
    """Return True if ch is an ASCII letter."""
    return ch in _LETTERS


def is_digit(ch: str) -> bool:
    """Return True if ch is a decimal digit."""
    return ch in _DIGITS


def is_blank(ch: str) -> bool:
    """Return True if ch is a space, tab, or line break."""
    return ch in _BLANKS
