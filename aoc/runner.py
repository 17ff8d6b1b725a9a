"""aoc.runner
=============

Runs one registered puzzle end to end: load, parse, solve both parts, report.
This is the only place where puzzle-level failures are caught; each one is
turned into a single console line and recorded on the returned
:class:`~aoc.types.PuzzleRun`.
"""

from __future__ import annotations

from pathlib import Path
from time import perf_counter
from typing import Dict, Optional, Type

from .errors import (
    AdventError,
    EmptyInput,
    InvalidState,
    IOFailure,
    MalformedInput,
    NoSolutionFound,
    UnknownPuzzle,
)
from .logging_utils import log_failure
from .registry import get_puzzle
from .types import PuzzleRun

ERROR_LABELS: Dict[Type[AdventError], str] = {
    UnknownPuzzle: "Unknown puzzle",
    IOFailure: "Input error",
    MalformedInput: "Invalid input error",
    EmptyInput: "Empty input error",
    NoSolutionFound: "No solution error",
    InvalidState: "Invalid state error",
}


def error_label(exc: Exception) -> str:
    for kind, label in ERROR_LABELS.items():
        if isinstance(exc, kind):
            return label
    return "Unexpected error"


def run_puzzle(
    year: str,
    day: str,
    input_dir: Path,
    fail_log: Optional[str | Path] = None,
) -> PuzzleRun:
    """Run the puzzle registered for ``(year, day)`` against ``input_dir``.

    Parameters
    ----------
    year, day:
        Registry key; ``day`` is the zero-padded two digit token.
    input_dir:
        Directory holding this year's input files.
    fail_log:
        When given, failed runs are appended there as JSON lines.

    Returns
    -------
    PuzzleRun
        Answers computed before any failure, elapsed time and error details.
    """

    run = PuzzleRun(year=year, day=day)
    try:
        puzzle = get_puzzle(year, day)
    except UnknownPuzzle as exc:
        print(f"{error_label(exc)}: {exc}")
        run.error_kind, run.error = type(exc).__name__, str(exc)
        if fail_log is not None:
            log_failure(run, fail_log)
        return run

    print(f"Running advent {puzzle.year} day {puzzle.day}")
    start = perf_counter()
    try:
        data = puzzle.parse(puzzle.load(input_dir))
        for part, solve in enumerate((puzzle.part1, puzzle.part2), start=1):
            answer = solve(data)
            run.answers.append(answer)
            print(f"The answer to part {part} is {answer}")
    except Exception as exc:
        print(f"{error_label(exc)}: {exc}")
        run.error_kind, run.error = type(exc).__name__, str(exc)
    run.elapsed = perf_counter() - start
    print(f"Elapsed time: {run.elapsed:.6f}s\n")

    if not run.ok and fail_log is not None:
        log_failure(run, fail_log)
    return run


__all__ = ["ERROR_LABELS", "error_label", "run_puzzle"]
