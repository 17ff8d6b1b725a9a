"""Trebuchet calibration values."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from ..errors import MalformedInput
from ..puzzle import Puzzle

# Each replacement keeps the word's first and last letter so that overlapping
# words such as "eightwo" are both still found by later passes.
WORD_REPLACEMENTS = {
    "one": "o1e",
    "two": "t2o",
    "three": "t3e",
    "four": "f4r",
    "five": "f5e",
    "six": "s6x",
    "seven": "s7n",
    "eight": "e8t",
    "nine": "n9e",
}


def calibration_value(line: str) -> int:
    """Return ten times the first digit of ``line`` plus its last digit."""

    digits = [int(ch) for ch in line if "0" <= ch <= "9"]
    if not digits:
        raise MalformedInput(f"Line contained no digits: {line!r}")
    return 10 * digits[0] + digits[-1]


def convert_digit_words(line: str) -> str:
    for word, replacement in WORD_REPLACEMENTS.items():
        line = line.replace(word, replacement)
    return line


def part1(lines: Sequence[str]) -> int:
    return sum(calibration_value(line) for line in lines)


def part2(lines: Sequence[str]) -> int:
    return sum(calibration_value(convert_digit_words(line)) for line in lines)


class Trebuchet(Puzzle):
    year = "2023"
    day = "01"
    title = "Trebuchet?!"
    line_input = True

    def parse(self, raw: List[str]) -> Tuple[str, ...]:
        return tuple(raw)

    def part1(self, data: Tuple[str, ...]) -> int:
        return part1(data)

    def part2(self, data: Tuple[str, ...]) -> int:
        return part2(data)


__all__ = ["Trebuchet", "WORD_REPLACEMENTS", "calibration_value", "convert_digit_words", "part1", "part2"]
