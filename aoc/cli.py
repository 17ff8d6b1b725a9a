"""aoc.cli
===========

Command-line entry point: ``aoc <year> <day>`` runs one puzzle against the
input stored under ``$ADVENT_INPUT_ROOT/<year>/<DD>.txt``.

Usage and configuration problems abort with their own exit status; anything
that goes wrong inside the puzzle itself is reported by the runner and the
process still exits cleanly.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .constants import EXIT_ENVIRONMENT, EXIT_OK, EXIT_USAGE, FAIL_LOG, INPUT_ROOT_ENV
from .errors import InvalidArguments, MissingConfiguration
from .inputs import input_directory, resolve_input_root
from .runner import run_puzzle


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser raising :class:`InvalidArguments` instead of exiting."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise InvalidArguments(message)


def parse_year(token: str) -> str:
    token = token.strip()
    if not token.isdigit():
        raise argparse.ArgumentTypeError(f"year must be a number, got {token!r}")
    return token


def parse_day(token: str) -> str:
    """Normalise a day token such as ``"5"`` or ``"05"`` to ``"05"``."""

    try:
        number = int(token)
    except ValueError:
        raise argparse.ArgumentTypeError(f"day must be a valid number, got {token!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"day must be positive, got {number}")
    return f"{number:02d}"


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        "aoc",
        description=f"Run one advent puzzle. Inputs are read from ${INPUT_ROOT_ENV}/<year>/<DD>.txt.",
    )
    parser.add_argument("year", type=parse_year, help="Puzzle year, e.g. 2023")
    parser.add_argument("day", type=parse_day, help="Puzzle day, e.g. 5")
    parser.add_argument(
        "--fail-log",
        nargs="?",
        const=FAIL_LOG,
        default=None,
        help=f"Append failed runs as JSON lines (default file: {FAIL_LOG})",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse CLI arguments and run the requested puzzle."""

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        root = resolve_input_root()
    except InvalidArguments as exc:
        parser.print_usage(sys.stderr)
        print(f"Usage error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except MissingConfiguration as exc:
        print(f"Environment error: {exc}", file=sys.stderr)
        return EXIT_ENVIRONMENT

    run_puzzle(args.year, args.day, input_directory(args.year, root), fail_log=args.fail_log)
    return EXIT_OK


__all__ = ["main", "build_parser", "parse_year", "parse_day"]
