"""dfalex lexer — drives the scanner automaton over source text."""

from __future__ import annotations

from collections.abc import Callable

from dfalex.cursor import CharReader
from dfalex.dfa import DfaState, ScanContext, flush, transition
from dfalex.errors import LexError, UnrecognizedCharacter
from dfalex.tokens import Token

Tracer = Callable[[DfaState, str, DfaState], None]


class Lexer:
    """Tokenize dfalex source text into a list of Token objects.

    By default characters that begin no token are dropped and collected in
    ``diagnostics``. With ``strict=True`` the first one raises ``LexError``.
    """

    def __init__(
        self,
        source: str,
        filename: str = "input.dfl",
        *,
        strict: bool = False,
        trace: Tracer | None = None,
    ) -> None:
        self._source = source
        self._filename = filename
        self._strict = strict
        self._trace = trace
        self._reader = CharReader(source)
        self._ctx = ScanContext()

    @property
    def diagnostics(self) -> list[UnrecognizedCharacter]:
        return list(self._ctx.dropped)

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while self._reader.ready():
            pos = self._reader.current_pos()
            ch = self._reader.read()
            before = self._ctx.state
            after = transition(self._ctx, ch, pos)
            if self._trace is not None:
                self._trace(before, ch, after)
            if self._strict and self._ctx.dropped:
                raise LexError.from_diagnostic(self._ctx.dropped[0], self._source)

        flush(self._ctx, self._reader.current_pos())
        return list(self._ctx.tokens)


def tokenize(source: str, filename: str = "input.dfl", *, strict: bool = False) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return Lexer(source, filename, strict=strict).tokenize()
