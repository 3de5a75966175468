"""Character reader and token text buffer used by the scanner."""

from __future__ import annotations

from dfalex.tokens import Position


class CharReader:
    """Sequential, markable reader over a source string.

    ``read()`` returns ``""`` once the input is exhausted; the position never
    moves past the end of the input.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self.position = 0
        self.marked_position = 0
        self._line = 1
        self._col = 1
        self._marked_line = 1
        self._marked_col = 1

    def __len__(self) -> int:
        return len(self._source)

    def read(self) -> str:
        if self.position >= len(self._source):
            return ""
        ch = self._source[self.position]
        self.position += 1
        if ch == "\n":
            self._line += 1
            self._col = 1
        else:
            self._col += 1
        return ch

    def peek(self) -> str:
        if self.position >= len(self._source):
            return ""
        return self._source[self.position]

    def ready(self) -> bool:
        return self.position < len(self._source)

    def skip(self, n: int) -> None:
        """Advance by n characters, stopping at the end of the input."""
        for _ in range(max(0, n)):
            if not self.read():
                break

    def mark(self) -> None:
        self.marked_position = self.position
        self._marked_line = self._line
        self._marked_col = self._col

    def reset(self) -> None:
        self.position = self.marked_position
        self._line = self._marked_line
        self._col = self._marked_col

    def current_pos(self) -> Position:
        """Position of the next unread character."""
        return Position(self._line, self._col, self.position)


class TokenBuffer:
    """Characters of the token currently being recognized."""

    def __init__(self) -> None:
        self._chars: list[str] = []

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def append(self, ch: str) -> TokenBuffer:
        self._chars.append(ch)
        return self

    def clear(self) -> None:
        self._chars.clear()
