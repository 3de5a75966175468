"""The scanner automaton: states, scan context, and the transition function.

Each call to ``transition`` consumes exactly one character. A token is never
closed eagerly: it stays pending until the first character that cannot extend
it arrives, and that character is then re-dispatched through ``init_token`` to
start the next token. This gives maximal munch with one character of
lookahead.

Keywords are recognized speculatively. An identifier whose text is still a
prefix of some entry in ``KEYWORDS`` stays in ``ID_KEYWORD``; the moment it
diverges it is demoted to ``ID``. When an ``ID_KEYWORD`` token closes, its
type is looked up in ``KEYWORDS`` so that ``int`` becomes ``TokenType.INT``
while ``in`` (an incomplete prefix) stays an identifier.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from dfalex.cursor import TokenBuffer
from dfalex.errors import UnrecognizedCharacter
from dfalex.tokens import KEYWORDS, Position, Span, Token, TokenType, is_alpha, is_blank, is_digit


class DfaState(Enum):
    INITIAL = auto()
    ID = auto()
    ID_KEYWORD = auto()  # text so far is a prefix of a keyword
    INT_LITERAL = auto()
    GT = auto()
    GE = auto()
    ASSIGNMENT = auto()


# Every non-empty prefix of every keyword, e.g. "i", "in", "int".
_KEYWORD_PREFIXES = frozenset(
    word[:i] for word in KEYWORDS for i in range(1, len(word) + 1)
)


@dataclass
class ScanContext:
    """Pending-token state owned by a single scan."""

    state: DfaState = DfaState.INITIAL
    buffer: TokenBuffer = field(default_factory=TokenBuffer)
    pending_type: TokenType | None = None
    start: Position | None = None
    tokens: list[Token] = field(default_factory=list)
    dropped: list[UnrecognizedCharacter] = field(default_factory=list)

    @property
    def has_pending(self) -> bool:
        return len(self.buffer) > 0


def _close(ctx: ScanContext, end: Position) -> None:
    text = str(ctx.buffer)
    if ctx.state is DfaState.ID_KEYWORD:
        ctx.pending_type = KEYWORDS.get(text, TokenType.IDENTIFIER)
    if ctx.pending_type is None or ctx.start is None:
        raise RuntimeError("internal error: pending token without type or start")
    ctx.tokens.append(Token(ctx.pending_type, text, Span(ctx.start, end)))
    ctx.buffer.clear()
    ctx.pending_type = None
    ctx.start = None


def _start(ctx: ScanContext, tt: TokenType, ch: str, pos: Position) -> None:
    ctx.pending_type = tt
    ctx.start = pos
    ctx.buffer.append(ch)


def init_token(ctx: ScanContext, ch: str, pos: Position) -> DfaState:
    """Close any pending token, then start a new one from ch.

    Characters that cannot begin a token are consumed and dropped; non-blank
    ones are recorded in ``ctx.dropped``.
    """
    if ctx.has_pending:
        _close(ctx, pos)

    if is_alpha(ch):
        state = DfaState.ID_KEYWORD if ch in _KEYWORD_PREFIXES else DfaState.ID
        _start(ctx, TokenType.IDENTIFIER, ch, pos)
    elif is_digit(ch):
        state = DfaState.INT_LITERAL
        _start(ctx, TokenType.INT_LITERAL, ch, pos)
    elif ch == "=":
        state = DfaState.ASSIGNMENT
        _start(ctx, TokenType.ASSIGNMENT, ch, pos)
    elif ch == ">":
        state = DfaState.GT
        _start(ctx, TokenType.GT, ch, pos)
    else:
        state = DfaState.INITIAL
        if ch and not is_blank(ch):
            ctx.dropped.append(UnrecognizedCharacter(ch, pos))

    ctx.state = state
    return state


def transition(ctx: ScanContext, ch: str, pos: Position) -> DfaState:
    """Feed one character at pos into the automaton and return the new state."""
    state = ctx.state

    if state is DfaState.ID:
        if is_alpha(ch) or is_digit(ch):
            ctx.buffer.append(ch)
            return state
        return init_token(ctx, ch, pos)

    if state is DfaState.ID_KEYWORD:
        if is_alpha(ch) or is_digit(ch):
            ctx.buffer.append(ch)
            if str(ctx.buffer) not in _KEYWORD_PREFIXES:
                ctx.state = DfaState.ID
            return ctx.state
        return init_token(ctx, ch, pos)

    if state is DfaState.INT_LITERAL:
        if is_digit(ch):
            ctx.buffer.append(ch)
            return state
        return init_token(ctx, ch, pos)

    if state is DfaState.GT:
        if ch == "=":
            ctx.pending_type = TokenType.GE
            ctx.buffer.append(ch)
            ctx.state = DfaState.GE
            return ctx.state
        return init_token(ctx, ch, pos)

    # INITIAL, plus the single-step ASSIGNMENT and GE states: whatever
    # arrives starts the next token.
    return init_token(ctx, ch, pos)


def flush(ctx: ScanContext, end: Position) -> None:
    """Finalize the pending token, if any, once the input is exhausted."""
    if ctx.has_pending:
        _close(ctx, end)
    ctx.state = DfaState.INITIAL
