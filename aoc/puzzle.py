"""aoc.puzzle
=============

The capability every registered solution provides: read its input, parse it
into an intermediate representation, and compute two answers from that same
representation.

Subclasses set :attr:`Puzzle.year` / :attr:`Puzzle.day`, choose whether they
consume the whole text or its non-empty lines via :attr:`Puzzle.line_input`, and
implement :meth:`parse`, :meth:`part1` and :meth:`part2`. Solution modules keep
their real logic in module-level functions; the subclass only wires them up.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Tuple, Union

from .inputs import input_path, read_lines, read_text, split_lines
from .types import Answer

RawInput = Union[str, List[str]]


class Puzzle:
    """Base class for a single day's solution."""

    year: str = ""
    day: str = ""
    title: str = ""
    line_input: bool = False

    @property
    def key(self) -> Tuple[str, str]:
        return self.year, self.day

    def load(self, input_dir: Path) -> RawInput:
        """Read this day's input file from ``input_dir``."""

        path = input_path(input_dir, self.day)
        if self.line_input:
            return read_lines(path)
        return read_text(path)

    def prepare(self, text: str) -> RawInput:
        """Shape in-memory ``text`` the same way :meth:`load` shapes a file."""

        return split_lines(text) if self.line_input else text

    def parse(self, raw: RawInput) -> Any:
        raise NotImplementedError

    def part1(self, data: Any) -> Answer:
        raise NotImplementedError

    def part2(self, data: Any) -> Answer:
        raise NotImplementedError

    def solve(self, text: str) -> Tuple[Answer, Answer]:
        """Parse ``text`` and return both answers. Mostly useful in tests."""

        data = self.parse(self.prepare(text))
        return self.part1(data), self.part2(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(year={self.year!r}, day={self.day!r})"


__all__ = ["Puzzle", "RawInput"]
