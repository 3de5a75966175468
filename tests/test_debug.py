"""Test the token dump and transition trace."""

import io

from dfalex.debug import dump_tokens, trace_printer
from dfalex.lexer import Lexer, tokenize


def test_dump_tokens():
    buf = io.StringIO()
    dump_tokens(tokenize("int x"), file=buf)
    lines = buf.getvalue().splitlines()
    assert lines[0] == "Tokens (2)"
    assert lines[1].split() == ["INT", "'int'", "@", "1:1"]
    assert lines[2].split() == ["IDENTIFIER", "'x'", "@", "1:5"]


def test_trace_printer():
    buf = io.StringIO()
    Lexer(">=", trace=trace_printer(file=buf)).tokenize()
    assert buf.getvalue().splitlines() == [
        "  INITIAL --'>'--> GT",
        "  GT --'='--> GE",
    ]
