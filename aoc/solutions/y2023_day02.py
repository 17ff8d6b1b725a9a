"""Cube conundrum: per-colour maxima drawn from a bag over several rounds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..errors import MalformedInput
from ..puzzle import Puzzle

COLOURS = ("red", "green", "blue")
BAG_LIMITS = {"red": 12, "green": 13, "blue": 14}


@dataclass(frozen=True)
class Game:
    id: int
    red: int = 0
    green: int = 0
    blue: int = 0

    @property
    def power(self) -> int:
        return self.red * self.green * self.blue

    def fits(self, limits: Dict[str, int]) -> bool:
        return all(getattr(self, colour) <= limits[colour] for colour in COLOURS)


def _parse_int(token: str, what: str, line: str) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise MalformedInput(f"Invalid {what} {token!r} in {line!r}") from exc


def parse_game(line: str) -> Game:
    """Parse ``"Game 7: 3 blue, 4 red; 1 red, 2 green"`` into a :class:`Game`.

    Draws are folded into a running maximum per colour as they are read.
    """

    header, sep, body = line.partition(":")
    label = header.split()
    if not sep or len(label) != 2 or label[0] != "Game":
        raise MalformedInput(f"Invalid game header: {line!r}")
    game_id = _parse_int(label[1], "game id", line)

    maxima = dict.fromkeys(COLOURS, 0)
    for draw in body.split(";"):
        for pull in draw.split(","):
            parts = pull.split()
            if len(parts) != 2:
                raise MalformedInput(f"Invalid draw {pull.strip()!r} in {line!r}")
            count = _parse_int(parts[0], "cube count", line)
            if count < 0:
                raise MalformedInput(f"Negative cube count {parts[0]!r} in {line!r}")
            colour = parts[1]
            if colour not in maxima:
                raise MalformedInput(f"Unrecognized color: {colour!r}")
            maxima[colour] = max(maxima[colour], count)
    return Game(game_id, **maxima)


def parse_games(lines: Sequence[str]) -> Tuple[Game, ...]:
    return tuple(parse_game(line) for line in lines)


def part1(games: Sequence[Game]) -> int:
    return sum(game.id for game in games if game.fits(BAG_LIMITS))


def part2(games: Sequence[Game]) -> int:
    return sum(game.power for game in games)


class CubeConundrum(Puzzle):
    year = "2023"
    day = "02"
    title = "Cube Conundrum"
    line_input = True

    def parse(self, raw: List[str]) -> Tuple[Game, ...]:
        return parse_games(raw)

    def part1(self, data: Tuple[Game, ...]) -> int:
        return part1(data)

    def part2(self, data: Tuple[Game, ...]) -> int:
        return part2(data)


__all__ = ["Game", "CubeConundrum", "BAG_LIMITS", "COLOURS", "parse_game", "parse_games", "part1", "part2"]
