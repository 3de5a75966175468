"""Cursor over a token list, for parsers that need lookahead and backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Protocol

from dfalex.tokens import Token


class TokenReader(Protocol):
    def read(self) -> Token | None: ...

    def peek(self) -> Token | None: ...

    def unread(self) -> None: ...

    def get_position(self) -> int: ...

    def set_position(self, pos: int) -> bool: ...


class SimpleTokenReader:
    """Read-only cursor over a fixed token sequence.

    The cursor ``pos`` always satisfies ``0 <= pos <= len(tokens)``.
    ``read()`` and ``peek()`` return None once the tokens are exhausted.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tuple(tokens)
        self._pos = 0
        self._marked = 0

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        while (tok := self.read()) is not None:
            yield tok

    def read(self) -> Token | None:
        if self._pos < len(self._tokens):
            tok = self._tokens[self._pos]
            self._pos += 1
            return tok
        return None

    def peek(self) -> Token | None:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def unread(self) -> None:
        if self._pos > 0:
            self._pos -= 1

    def get_position(self) -> int:
        return self._pos

    def set_position(self, pos: int) -> bool:
        """Move the cursor to pos and return True.

        An out-of-range pos leaves the cursor where it is and returns False.
        The end position ``len(tokens)`` is in range.
        """
        if 0 <= pos <= len(self._tokens):
            self._pos = pos
            return True
        return False

    def mark(self) -> None:
        self._marked = self._pos

    def reset(self) -> None:
        self._pos = self._marked
