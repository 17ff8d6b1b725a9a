"""aoc.types
=============

Shared type aliases and the record describing one puzzle run. The module stays
definitions-only so importing it never triggers runtime side effects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

# ---------------------------------------------------------------------------
# Core representations
# ---------------------------------------------------------------------------
Coord = Tuple[int, int]
Answer = int
PuzzleKey = Tuple[str, str]


@dataclass
class PuzzleRun:
    """Outcome of running a single (year, day) puzzle.

    Parameters
    ----------
    year, day:
        Identifiers as typed on the command line, ``day`` zero padded.
    answers:
        Answers produced so far, in part order. A failing part 2 still leaves
        the part 1 answer here.
    elapsed:
        Wall-clock seconds spent on load, parse and solve.
    error_kind, error:
        Exception class name and message when the run failed, otherwise
        ``None``.
    """

    year: str
    day: str
    answers: List[Answer] = field(default_factory=list)
    elapsed: float = 0.0
    error_kind: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


__all__ = ["Coord", "Answer", "PuzzleKey", "PuzzleRun"]
