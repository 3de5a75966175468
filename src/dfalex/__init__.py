"""DFA-driven lexer for a small scripting language."""

from __future__ import annotations

from dfalex.lexer import Lexer, tokenize
from dfalex.stream import SimpleTokenReader, TokenReader
from dfalex.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = ["Lexer", "SimpleTokenReader", "Token", "TokenReader", "TokenType", "tokenize"]


def read_tokens(source: str, *, strict: bool = False) -> SimpleTokenReader:
    """Tokenize source and wrap the result in a reader for a parser."""
    return SimpleTokenReader(tokenize(source, strict=strict))
