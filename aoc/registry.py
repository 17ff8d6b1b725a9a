"""aoc.registry
================

Central registry mapping ``(year, day)`` to the puzzle that solves it. The
runner looks puzzles up here; keeping the mapping in one module means adding a
day is a one-line change in :mod:`aoc.solutions`.
"""

from __future__ import annotations

from typing import Dict, List

from .errors import UnknownPuzzle
from .puzzle import Puzzle
from .solutions import ALL_PUZZLES
from .types import PuzzleKey

PUZZLE_REGISTRY: Dict[PuzzleKey, Puzzle] = {puzzle.key: puzzle for puzzle in (cls() for cls in ALL_PUZZLES)}


def registered_keys() -> List[str]:
    return [f"{year}/{day}" for year, day in sorted(PUZZLE_REGISTRY)]


def get_puzzle(year: str, day: str) -> Puzzle:
    """Lookup ``(year, day)`` in :data:`PUZZLE_REGISTRY` with a helpful error."""

    try:
        return PUZZLE_REGISTRY[(year, day)]
    except KeyError as exc:
        raise UnknownPuzzle(
            f"Invalid year/day ({year}/{day}). Registered: {', '.join(registered_keys())}"
        ) from exc


__all__ = ["PUZZLE_REGISTRY", "get_puzzle", "registered_keys"]
