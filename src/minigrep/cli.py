from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, TextIO

from .config import DEFAULT_CONFIG_FILE, Config, load_config, normalize_log_level
from .errors import ConfigError, PatternSyntaxError, UsageError
from .patterns import compile_pattern
from .version import __version__

logger = logging.getLogger(__name__)


def _load(config_path: str | None) -> Config:
    if config_path:
        return load_config(Path(config_path), required=True)
    return load_config(Path.cwd() / DEFAULT_CONFIG_FILE)


def _setup_logging(level: str, stream: TextIO) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        stream=stream,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def cmd_match(args: argparse.Namespace, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    cfg = _load(args.config)
    level = normalize_log_level(args.log_level, source="--log-level") if args.log_level else cfg.log_level
    _setup_logging(level, stderr)
    if cfg.source:
        logger.debug("loaded config from %s", cfg.source)

    if not args.pattern:
        raise UsageError("empty pattern")

    compiled = compile_pattern(args.pattern)

    if args.explain:
        for t in compiled.tokens:
            print(t.describe(), file=stderr)

    # One line only, newline kept: the end anchor treats it as end of input.
    line = stdin.readline()
    found = compiled.matches(line)

    quiet = cfg.quiet if args.quiet is None else args.quiet
    if not quiet:
        print(cfg.messages.matched if found else cfg.messages.not_matched, file=stdout)
    return 0 if found else 1


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _split_pattern(argv: list[str]) -> tuple[str | None, list[str]]:
    """Pull the value after the first ``-E`` out of ``argv``.

    The value is taken verbatim, so patterns starting with ``-`` still work.
    """
    if "-E" not in argv:
        return None, list(argv)
    i = argv.index("-E")
    if i + 1 >= len(argv):
        raise UsageError("argument -E: expected one argument")
    return argv[i + 1], argv[:i] + argv[i + 2 :]


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="minigrep",
        description="Test whether one line of stdin contains a pattern",
        epilog="Usage: echo <input_text> | minigrep -E <pattern>",
    )
    p.add_argument("-E", dest="pattern", metavar="PATTERN", default=None, help="Pattern to search for")
    p.add_argument(
        "-q",
        "--quiet",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Print nothing; report the result by exit status only",
    )
    p.add_argument("--explain", action="store_true", help="Print the compiled tokens to stderr")
    p.add_argument("--config", default=None, help=f"Path to a YAML config file (default: ./{DEFAULT_CONFIG_FILE} if present)")
    p.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ERROR or CRITICAL")
    p.add_argument("--version", action="version", version=f"minigrep {__version__}")
    return p


def run(
    argv: list[str],
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    try:
        pattern, rest = _split_pattern(argv)
        args = build_parser().parse_args(rest)
        if pattern is None:
            raise UsageError("expected -E PATTERN")
        args.pattern = pattern
        return cmd_match(args, stdin, stdout, stderr)
    except PatternSyntaxError as e:
        print(e, file=stderr)
        return 1
    except UsageError as e:
        print(f"error: {e}", file=stderr)
        return 2
    except ConfigError as e:
        print(f"config error: {e}", file=stderr)
        return 2


def main(argv: list[str] | None = None) -> None:
    argv = argv if argv is not None else sys.argv[1:]

    try:
        rc = run(argv)
    except KeyboardInterrupt:
        rc = 130

    raise SystemExit(rc)
