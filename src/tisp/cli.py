"""Command-line interface for Tisp: scan a file or run an interactive prompt."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from tisp.debug import dump_errors, dump_json, dump_tokens
from tisp.scanner import ScanResult, Scanner

logger = logging.getLogger(__name__)

FORMATS = ("text", "json")
EXIT_WORDS = frozenset({"exit", "quit"})
DEFAULT_PROMPT = "> "
CONFIG_NAME = "tisp.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_format: str
    prompt: str
    log_level: int


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="tisp",
        description="Tisp scanner: print the tokens of a file, or start a prompt",
    )
    p.add_argument("input", nargs="?", help="Input file (default: interactive prompt)")
    p.add_argument(
        "-f",
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--prompt",
        default=None,
        metavar="STR",
        help=f"Prompt string for interactive mode (default: {DEFAULT_PROMPT!r})",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p


def parse_log_level(s: str) -> int:
    """Parse a logging level name such as ``"info"`` into its numeric value."""
    level = logging.getLevelName(s.upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"invalid log level: {s}")
    return level


def load_config(config_path: Path | None, base_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else base_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    logger.debug("loading config from %s", path)
    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    input_file = Path(args.input) if args.input else None
    base_dir = input_file.parent if input_file is not None else Path(".")
    if not base_dir.parts:
        base_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    try:
        config = load_config(config_path, base_dir)
    except tomllib.TOMLDecodeError as exc:
        raise argparse.ArgumentTypeError(f"invalid config file: {exc}") from exc

    # Output format: config < CLI
    output_format = "text"
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r} "
                    f"(expected one of {', '.join(FORMATS)})"
                )
            output_format = cfg_format
    if args.format is not None:
        output_format = args.format

    # Prompt: config < CLI
    prompt = DEFAULT_PROMPT
    cfg_repl = config.get("repl")
    if isinstance(cfg_repl, dict):
        cfg_prompt = cfg_repl.get("prompt")
        if isinstance(cfg_prompt, str):
            prompt = cfg_prompt
    if args.prompt is not None:
        prompt = args.prompt

    # Log level: config < --verbose
    log_level = logging.WARNING
    cfg_logging = config.get("logging")
    if isinstance(cfg_logging, dict):
        cfg_level = cfg_logging.get("level")
        if isinstance(cfg_level, str):
            log_level = parse_log_level(cfg_level)
    if args.verbose:
        log_level = logging.DEBUG

    return CliOptions(
        input_file=input_file,
        output_format=output_format,
        prompt=prompt,
        log_level=log_level,
    )


def print_result(
    result: ScanResult,
    source: str,
    options: CliOptions,
    filename: str,
    stdout: TextIO,
    stderr: TextIO,
) -> None:
    """Write tokens, then errors, in the configured format."""
    if options.output_format == "json":
        dump_json(result, file=stdout)
        return
    dump_tokens(result.tokens, file=stdout)
    dump_errors(result.errors, source, filename, file=stderr)


def run_file(
    options: CliOptions,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Scan a whole file in one pass. Returns 0 clean, 1 lex errors, 2 unreadable."""
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr
    if options.input_file is None:
        raise ValueError("run_file() needs an input file")

    try:
        source = options.input_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {options.input_file}: {exc}", file=stderr)
        return 2

    logger.debug("scanning %s (%d characters)", options.input_file, len(source))
    result = Scanner(source).scan()
    print_result(result, source, options, str(options.input_file), stdout, stderr)
    return 0 if result.ok else 1


def run_prompt(
    options: CliOptions,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Read-scan-print loop. Each line gets a fresh Scanner; nothing carries over."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    while True:
        stdout.write(options.prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        expr = line.rstrip("\r\n")
        if not expr:
            continue
        if expr in EXIT_WORDS:
            break
        result = Scanner(expr).scan()
        print_result(result, expr, options, "<stdin>", stdout, stderr)
    return 0


def configure_logging(level: int) -> None:
    """Send log records to stderr at *level*."""
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    configure_logging(options.log_level)

    if options.input_file is None:
        return run_prompt(options)
    return run_file(options)
