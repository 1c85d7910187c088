"""Command-line interface for ferrolex."""

from __future__ import annotations

import argparse
import io
import json
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ferrolex.errors import IllegalTokenError

FORMATS = ("text", "json")

STDIN = Path("-")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    format: str
    strict: bool
    eof: bool
    watch: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="ferrolex",
        description="Tokenize a source file and print the token stream",
    )
    p.add_argument("input", help="Input source file, or - for stdin")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        default=None,
        help="Output format: text or json (default: text)",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail with exit code 1 on the first unrecognized token",
    )
    p.add_argument(
        "--no-eof",
        dest="eof",
        action="store_false",
        default=None,
        help="Omit the trailing EOF token from the output",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover ferrolex.toml)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and re-lex")
    return p


def parse_format_arg(s: str) -> str:
    """Validate an output format name."""
    if s not in FORMATS:
        raise argparse.ArgumentTypeError(
            f"invalid format {s!r} (expected one of: {', '.join(FORMATS)})"
        )
    return s


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "ferrolex.toml"

    if not path.is_file():
        return {}

    try:
        data = path.read_bytes()
    except OSError as exc:
        raise argparse.ArgumentTypeError(f"cannot read config file {path}: {exc}") from exc

    try:
        return tomllib.loads(data.decode("utf-8"))
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise argparse.ArgumentTypeError(f"invalid config file {path}: {exc}") from exc


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    if input_file == STDIN:
        input_dir = Path(".")
    else:
        input_dir = input_file.parent
        if not input_dir.parts:
            input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    cfg_output = config.get("output")
    if not isinstance(cfg_output, dict):
        cfg_output = {}
    cfg_lexer = config.get("lexer")
    if not isinstance(cfg_lexer, dict):
        cfg_lexer = {}

    # Output format: config < CLI
    fmt = "text"
    cfg_format = cfg_output.get("format")
    if isinstance(cfg_format, str):
        fmt = parse_format_arg(cfg_format)
    if args.format is not None:
        fmt = parse_format_arg(args.format)

    # Trailing EOF: config < CLI
    eof = True
    cfg_eof = cfg_output.get("eof")
    if isinstance(cfg_eof, bool):
        eof = cfg_eof
    if args.eof is not None:
        eof = args.eof

    # Strict mode: config < CLI
    strict = False
    cfg_strict = cfg_lexer.get("strict")
    if isinstance(cfg_strict, bool):
        strict = cfg_strict
    if args.strict is not None:
        strict = args.strict

    if args.watch and input_file == STDIN:
        raise argparse.ArgumentTypeError("--watch cannot be used with stdin input")

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        format=fmt,
        strict=strict,
        eof=eof,
        watch=args.watch,
    )


def read_source(options: CliOptions) -> bytes:
    """Read the raw input bytes, from stdin when the input is ``-``."""
    if options.input_file == STDIN:
        return sys.stdin.buffer.read()
    return options.input_file.read_bytes()


def lex_file(options: CliOptions) -> str:
    """Read and tokenize the input, returning the rendered token stream."""
    from ferrolex.debug import dump_tokens, tokens_to_json
    from ferrolex.errors import check_tokens
    from ferrolex.lexer import tokenize
    from ferrolex.tokens import TokenType

    tokens = tokenize(read_source(options))

    if options.strict:
        check_tokens(tokens, str(options.input_file))

    if not options.eof:
        tokens = [t for t in tokens if t.type != TokenType.EOF]

    if options.format == "json":
        return json.dumps(tokens_to_json(tokens), indent=2) + "\n"

    buf = io.StringIO()
    dump_tokens(tokens, file=buf)
    return buf.getvalue()


def write_output(options: CliOptions, text: str) -> None:
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, re-lex on each modification."""
    last_mtime = 0.0
    print(f"Watching {options.input_file} for changes...", file=sys.stderr)
    try:
        while True:
            try:
                mtime = options.input_file.stat().st_mtime
            except OSError:
                time.sleep(0.5)
                continue
            if mtime != last_mtime:
                last_mtime = mtime
                try:
                    write_output(options, lex_file(options))
                    print(f"Lexed {options.input_file}", file=sys.stderr)
                except IllegalTokenError as exc:
                    print(str(exc), file=sys.stderr)
                except OSError as exc:
                    print(f"error: {exc}", file=sys.stderr)
            time.sleep(0.5)
    except KeyboardInterrupt:
        pass


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.watch:
        watch_loop(options)
        return 0

    try:
        text = lex_file(options)
    except IllegalTokenError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        write_output(options, text)
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    return 0
