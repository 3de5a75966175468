"""--debug token dump and transition trace to stderr."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from dfalex.dfa import DfaState
from dfalex.lexer import Tracer
from dfalex.tokens import Token


def dump_tokens(tokens: Sequence[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*."""
    file.write(f"Tokens ({len(tokens)})\n")
    for tok in tokens:
        start = tok.span.start
        file.write(f"  {tok.type.name:<12} {tok.text!r} @ {start.line}:{start.column}\n")


def trace_printer(*, file: TextIO = sys.stderr) -> Tracer:
    """Return a lexer trace callback that prints every state transition."""

    def _trace(before: DfaState, ch: str, after: DfaState) -> None:
        file.write(f"  {before.name} --{ch!r}--> {after.name}\n")

    return _trace
