from __future__ import annotations

from typing import FrozenSet, List, Sequence, Tuple

import numpy as np

from .types import Coord

# ---------------------------------------------------------------------------
# Character grids
# ---------------------------------------------------------------------------
DIGITS = tuple("0123456789")


def dims(lines: Sequence[str]) -> Tuple[int, int]:
    """Return the height and width of a text grid.

    Ragged rows are allowed; the width is that of the longest row. Empty input
    returns ``(0, 0)``.
    """

    if not lines:
        return 0, 0
    return len(lines), max(len(line) for line in lines)


def char_grid(lines: Sequence[str], fill: str = ".") -> np.ndarray:
    """Return ``lines`` as a 2D numpy array of single characters.

    Short rows are padded on the right with ``fill`` so the array is
    rectangular.
    """

    height, width = dims(lines)
    grid = np.full((height, width), fill, dtype="<U1")
    for r, line in enumerate(lines):
        if line:
            grid[r, : len(line)] = list(line)
    return grid


def symbol_cells(grid: np.ndarray, blank: str = ".") -> List[Tuple[Coord, str]]:
    """Return ``((row, column), char)`` for every cell that is neither blank nor a digit."""

    mask = (grid != blank) & ~np.isin(grid, DIGITS)
    return [((int(r), int(c)), str(grid[r, c])) for r, c in np.argwhere(mask)]


# ---------------------------------------------------------------------------
# Neighbourhoods
# ---------------------------------------------------------------------------
def span_boundary(row: int, start_column: int, end_column: int) -> FrozenSet[Coord]:
    """Return the 8-neighbourhood ring around a horizontal span.

    The span covers ``start_column..end_column`` inclusive on ``row``. The
    ring includes the diagonal corners and may contain negative coordinates;
    callers only ever intersect it with real cell positions.
    """

    ring = set()
    for column in range(start_column - 1, end_column + 2):
        ring.add((row - 1, column))
        ring.add((row + 1, column))
    ring.add((row, start_column - 1))
    ring.add((row, end_column + 1))
    return frozenset(ring)


__all__ = [
    "DIGITS",
    "dims",
    "char_grid",
    "symbol_cells",
    "span_boundary",
]
