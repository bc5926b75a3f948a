"""Command-line interface for the Monkey front end."""

from __future__ import annotations

import argparse
import io
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from monkey.errors import Diagnostic


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    tokens: bool
    debug: bool
    max_diagnostics: int | None
    watch: bool
    repl: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="monkey",
        description="Tokenize and parse Monkey source",
    )
    p.add_argument("input", nargs="?", help="Input .mk file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--tokens",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print the token stream instead",
    )
    p.add_argument(
        "--debug",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Dump AST to stderr",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover monkey.toml)",
    )
    p.add_argument(
        "--max-diagnostics",
        default=None,
        metavar="N",
        help="Report at most N diagnostics (default: all)",
    )
    p.add_argument("--watch", action="store_true", help="Watch for changes and reparse")
    p.add_argument("--repl", action="store_true", help="Start an interactive session")
    return p


def parse_limit_arg(s: str) -> int:
    """Parse a non-negative diagnostic limit."""
    try:
        value = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid diagnostic limit (expected integer): {s}"
        ) from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"diagnostic limit must not be negative: {s}")
    return value


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "monkey.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    if args.input is None and not args.repl:
        raise argparse.ArgumentTypeError("an input file is required unless --repl is given")

    input_file = Path(args.input) if args.input else None
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Output switches: config < CLI (--no-tokens / --no-debug turn a config value off)
    tokens = False
    debug = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        if isinstance(cfg_output.get("tokens"), bool):
            tokens = cfg_output["tokens"]
        if isinstance(cfg_output.get("debug"), bool):
            debug = cfg_output["debug"]
    if args.tokens is not None:
        tokens = args.tokens
    if args.debug is not None:
        debug = args.debug

    # Diagnostic limit: config < CLI
    max_diagnostics: int | None = None
    cfg_diags = config.get("diagnostics")
    if isinstance(cfg_diags, dict):
        cfg_max = cfg_diags.get("max")
        if isinstance(cfg_max, int) and not isinstance(cfg_max, bool):
            max_diagnostics = parse_limit_arg(str(cfg_max))
    if args.max_diagnostics is not None:
        max_diagnostics = parse_limit_arg(args.max_diagnostics)

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        tokens=tokens,
        debug=debug,
        max_diagnostics=max_diagnostics,
        watch=args.watch,
        repl=args.repl,
    )


def compile_file(options: CliOptions) -> tuple[str, list[Diagnostic]]:
    """Read and parse a Monkey file; return the rendered output and the diagnostics."""
    from monkey.debug import dump_ast, dump_tokens
    from monkey.lexer import tokenize
    from monkey.parser import parse

    if options.input_file is None:
        raise ValueError("compile_file requires an input file")

    source = options.input_file.read_text(encoding="utf-8")
    program, diagnostics = parse(source)

    if options.debug:
        dump_ast(program, file=sys.stderr)

    if options.tokens:
        buf = io.StringIO()
        dump_tokens(tokenize(source), file=buf)
        return buf.getvalue(), diagnostics

    text = str(program)
    return (text + "\n" if text else ""), diagnostics


def report_diagnostics(
    diagnostics: list[Diagnostic], filename: str, limit: int | None = None
) -> None:
    """Print formatted diagnostics to stderr, honouring an optional limit."""
    shown = diagnostics if limit is None else diagnostics[:limit]
    for diag in shown:
        print(diag.format(filename), file=sys.stderr)
    hidden = len(diagnostics) - len(shown)
    if hidden > 0:
        print(f"... {hidden} more not shown", file=sys.stderr)
    noun = "error" if len(diagnostics) == 1 else "errors"
    print(f"{len(diagnostics)} {noun} in {filename}", file=sys.stderr)


def _write_output(options: CliOptions, text: str) -> None:
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def watch_loop(options: CliOptions) -> None:
    """Poll input file for changes, reparse on each modification."""
    assert options.input_file is not None
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
                    text, diagnostics = compile_file(options)
                except (OSError, UnicodeDecodeError) as exc:
                    print(f"error: {exc}", file=sys.stderr)
                else:
                    _write_output(options, text)
                    if diagnostics:
                        report_diagnostics(
                            diagnostics, str(options.input_file), options.max_diagnostics
                        )
                    print(f"Parsed {options.input_file}", file=sys.stderr)
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
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    if options.repl:
        from monkey.repl import start

        start(tokens=options.tokens)
        return 0

    if options.watch:
        watch_loop(options)
        return 0

    try:
        text, diagnostics = compile_file(options)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=sys.stderr)
        return 2

    _write_output(options, text)

    if diagnostics:
        report_diagnostics(diagnostics, str(options.input_file), options.max_diagnostics)
        return 1

    return 0
