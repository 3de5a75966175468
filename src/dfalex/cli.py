"""Command-line interface for dfalex."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dfalex.errors import LexError
from dfalex.tokens import Token

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None reads stdin
    output_file: Path | None
    output_format: str
    strict: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="dfalex",
        description="Tokenize dfalex source and print the token stream",
    )
    p.add_argument("input", help="Input source file ('-' for stdin)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on the first unrecognized character",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover dfalex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump transitions and tokens to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "dfalex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = None if args.input == "-" else Path(args.input)
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    # Strict mode: config < CLI
    strict = False
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_strict = cfg_lexer.get("strict")
        if isinstance(cfg_strict, bool):
            strict = cfg_strict
    if args.strict is not None:
        strict = args.strict

    # Output format: config < CLI
    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r}"
                )
            output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        strict=strict,
        debug=args.debug,
    )


def format_tokens(tokens: list[Token], output_format: str) -> str:
    """Render tokens as tab-separated lines or a JSON array."""
    if output_format == "json":
        data = [
            {
                "type": tok.type.name,
                "text": tok.text,
                "line": tok.span.start.line,
                "column": tok.span.start.column,
            }
            for tok in tokens
        ]
        return json.dumps(data, indent=2) + "\n"

    lines = []
    for tok in tokens:
        start = tok.span.start
        lines.append(f"{tok.type.name}\t{tok.text}\t{start.line}:{start.column}\n")
    return "".join(lines)


def tokenize_file(options: CliOptions) -> str:
    """Read and tokenize the input, returning the formatted token stream."""
    from dfalex.debug import dump_tokens, trace_printer
    from dfalex.lexer import Lexer

    if options.input_file is None:
        source = sys.stdin.read()
        filename = "<stdin>"
    else:
        source = options.input_file.read_text(encoding="utf-8")
        filename = str(options.input_file)

    trace = trace_printer(file=sys.stderr) if options.debug else None
    lexer = Lexer(source, filename, strict=options.strict, trace=trace)
    tokens = lexer.tokenize()

    for diag in lexer.diagnostics:
        pos = diag.position
        print(f"warning: {diag.message} at {filename}:{pos.line}:{pos.column}", file=sys.stderr)

    if options.debug:
        dump_tokens(tokens, file=sys.stderr)

    return format_tokens(tokens, options.output_format)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        output = tokenize_file(options)
    except LexError as exc:
        filename = str(options.input_file) if options.input_file else "<stdin>"
        print(exc.format(filename), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
