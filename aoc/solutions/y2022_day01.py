"""Calorie counting: sums of blank-line-separated groups of integers."""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from ..errors import EmptyInput
from ..puzzle import Puzzle

CalorieGroups = Tuple[Tuple[int, ...], ...]


def _to_int(token: str) -> int | None:
    try:
        return int(token)
    except ValueError:
        return None


def parse_calorie_groups(text: str) -> CalorieGroups:
    """Split ``text`` into groups of integers.

    Groups are separated by blank lines. Lines that are not integers are
    dropped from their group rather than rejected.
    """

    normalised = text.replace("\r\n", "\n").strip()
    if not normalised:
        return ()
    groups: List[Tuple[int, ...]] = []
    for chunk in normalised.split("\n\n"):
        values = (_to_int(line.strip()) for line in chunk.split("\n"))
        groups.append(tuple(value for value in values if value is not None))
    return tuple(groups)


def group_sums(groups: CalorieGroups) -> np.ndarray:
    # object dtype keeps the totals as unbounded Python ints
    return np.array([sum(group) for group in groups], dtype=object)


def top_sum(groups: CalorieGroups, count: int) -> int:
    """Return the sum of the ``count`` largest group totals."""

    if not groups:
        raise EmptyInput("No calorie groups found")
    sums = np.sort(group_sums(groups))[::-1]
    return int(sums[:count].sum())


def part1(groups: CalorieGroups) -> int:
    return top_sum(groups, 1)


def part2(groups: CalorieGroups) -> int:
    return top_sum(groups, 3)


class CalorieCounting(Puzzle):
    year = "2022"
    day = "01"
    title = "Calorie Counting"

    def parse(self, raw: str) -> CalorieGroups:
        return parse_calorie_groups(raw)

    def part1(self, data: CalorieGroups) -> int:
        return part1(data)

    def part2(self, data: CalorieGroups) -> int:
        return part2(data)


__all__ = ["CalorieCounting", "parse_calorie_groups", "group_sums", "top_sum", "part1", "part2"]
