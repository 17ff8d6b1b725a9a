"""Gear ratios: numbers and symbols laid out on an engine schematic grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from ..errors import InvalidState
from ..grid_utils import char_grid, span_boundary, symbol_cells
from ..puzzle import Puzzle
from ..types import Coord

GEAR = "*"


@dataclass(frozen=True)
class GridNumber:
    """A run of digits on one row, with its neighbourhood precomputed."""

    row: int
    start_column: int
    end_column: int
    value: int
    adjacent: FrozenSet[Coord] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "adjacent",
            span_boundary(self.row, self.start_column, self.end_column),
        )


@dataclass(frozen=True)
class GridSymbol:
    coord: Coord
    char: str


@dataclass(frozen=True)
class Schematic:
    numbers: Tuple[GridNumber, ...]
    symbols: Tuple[GridSymbol, ...]


def parse_numbers(lines: Sequence[str]) -> List[GridNumber]:
    """Scan each row left to right, collecting contiguous digit runs."""

    numbers: List[GridNumber] = []
    accumulator: Optional[int] = None
    start_column: Optional[int] = None

    def finalize(row: int, end_column: int) -> None:
        nonlocal accumulator, start_column
        if accumulator is None:
            raise InvalidState("No value accumulated")
        if start_column is None:
            raise InvalidState("Accumulated value with missing start column")
        numbers.append(GridNumber(row, start_column, end_column, accumulator))
        accumulator = None
        start_column = None

    for row, line in enumerate(lines):
        for column, ch in enumerate(line):
            if "0" <= ch <= "9":
                if start_column is None:
                    start_column = column
                accumulator = 10 * (accumulator or 0) + int(ch)
            elif accumulator is not None:
                finalize(row, column - 1)
        if accumulator is not None:
            finalize(row, len(line) - 1)
    return numbers


def parse_symbols(lines: Sequence[str]) -> List[GridSymbol]:
    if not lines:
        return []
    return [GridSymbol(coord, ch) for coord, ch in symbol_cells(char_grid(lines))]


def parse_schematic(lines: Sequence[str]) -> Schematic:
    return Schematic(tuple(parse_numbers(lines)), tuple(parse_symbols(lines)))


def part1(schematic: Schematic) -> int:
    """Sum every number touching at least one symbol."""

    symbol_coords = {symbol.coord for symbol in schematic.symbols}
    return sum(number.value for number in schematic.numbers if number.adjacent & symbol_coords)


def gear_pairs(schematic: Schematic) -> Dict[Coord, Tuple[GridNumber, GridNumber]]:
    """Map each gear position to the two numbers it touches.

    Gears touching any other number of values are left out.
    """

    pairs: Dict[Coord, Tuple[GridNumber, GridNumber]] = {}
    for symbol in schematic.symbols:
        if symbol.char != GEAR:
            continue
        touching = [number for number in schematic.numbers if symbol.coord in number.adjacent]
        if len(touching) == 2:
            pairs[symbol.coord] = (touching[0], touching[1])
    return pairs


def part2(schematic: Schematic) -> int:
    return sum(first.value * second.value for first, second in gear_pairs(schematic).values())


class GearRatios(Puzzle):
    year = "2023"
    day = "03"
    title = "Gear Ratios"
    line_input = True

    def parse(self, raw: List[str]) -> Schematic:
        return parse_schematic(raw)

    def part1(self, data: Schematic) -> int:
        return part1(data)

    def part2(self, data: Schematic) -> int:
        return part2(data)


__all__ = [
    "GEAR",
    "GridNumber",
    "GridSymbol",
    "Schematic",
    "GearRatios",
    "parse_numbers",
    "parse_symbols",
    "parse_schematic",
    "gear_pairs",
    "part1",
    "part2",
]
