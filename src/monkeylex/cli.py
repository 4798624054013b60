"""Command-line interface for monkeylex."""

from __future__ import annotations

import argparse
import io
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from monkeylex.errors import LexError
from monkeylex.lexer import tokenize, tokenize_all
from monkeylex.tokens import Token

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    output_format: str
    keep_going: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="monkeylex",
        description="Tokenize Monkey source and print the token stream",
    )
    p.add_argument("input", help="Input source file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "-k",
        "--keep-going",
        action="store_true",
        default=None,
        help="Report every lexing error instead of stopping at the first",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover monkeylex.toml)",
    )
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "monkeylex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, input_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    # Output format: config < CLI
    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in OUTPUT_FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r}"
                    f" (expected one of {', '.join(OUTPUT_FORMATS)})"
                )
            output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    # Keep going: config < CLI
    keep_going = False
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_keep_going = cfg_lexer.get("keep_going")
        if isinstance(cfg_keep_going, bool):
            keep_going = cfg_keep_going
    if args.keep_going is not None:
        keep_going = args.keep_going

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        output_format=output_format,
        keep_going=keep_going,
    )


def render_tokens(tokens: list[Token], source: str, output_format: str) -> str:
    """Render a token list in the requested output format."""
    from monkeylex.debug import dump_tokens, tokens_to_json

    if output_format == "json":
        return tokens_to_json(tokens, source)
    buf = io.StringIO()
    dump_tokens(tokens, source, file=buf)
    return buf.getvalue()


def lex_file(options: CliOptions) -> tuple[str, list[LexError]]:
    """Read and tokenize a file, returning the rendered output and any errors.

    Without keep_going the first LexError propagates.
    """
    source = options.input_file.read_text(encoding="utf-8")
    filename = str(options.input_file)

    if options.keep_going:
        tokens, errors = tokenize_all(source, filename)
    else:
        tokens, errors = tokenize(source, filename), []

    return render_tokens(tokens, source, options.output_format), errors


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    filename = str(options.input_file)
    try:
        output, errors = lex_file(options)
    except OSError as exc:
        print(f"error: cannot read {filename}: {exc.strerror or exc}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as exc:
        print(f"error: cannot read {filename}: {exc}", file=sys.stderr)
        return 2
    except LexError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    for err in errors:
        print(str(err), file=sys.stderr)

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 1 if errors else 0
