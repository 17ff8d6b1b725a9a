"""Rock paper scissors strategy guide.

Each line pairs an opponent move with a response code. Part 1 reads the code as
the move to play, part 2 as the outcome to aim for.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Sequence, Tuple

from ..errors import InvalidState, MalformedInput
from ..puzzle import Puzzle


class Move(Enum):
    """Member order defines dominance: each move beats the one before it."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def score(self) -> int:
        return self.value


class Outcome(Enum):
    LOSE = 0
    DRAW = 3
    WIN = 6

    @property
    def score(self) -> int:
        return self.value


_MOVES: Tuple[Move, ...] = tuple(Move)

OPPONENT_CODES = {"A": Move.ROCK, "B": Move.PAPER, "C": Move.SCISSORS}
MOVE_CODES = {"X": Move.ROCK, "Y": Move.PAPER, "Z": Move.SCISSORS}
OUTCOME_CODES = {"X": Outcome.LOSE, "Y": Outcome.DRAW, "Z": Outcome.WIN}


def winner_against(move: Move) -> Move:
    return _MOVES[(_MOVES.index(move) + 1) % len(_MOVES)]


def loser_against(move: Move) -> Move:
    return _MOVES[(_MOVES.index(move) - 1) % len(_MOVES)]


def outcome(move: Move, opponent: Move) -> Outcome:
    """Return how ``move`` fares against ``opponent``."""

    if move is opponent:
        return Outcome.DRAW
    if move is winner_against(opponent):
        return Outcome.WIN
    if move is loser_against(opponent):
        return Outcome.LOSE
    raise InvalidState(f"Could not determine outcome of {move.name} vs. {opponent.name}")


def score(move: Move, opponent: Move) -> int:
    return move.score + outcome(move, opponent).score


def counter_move(opponent: Move, wanted: Outcome) -> Move:
    if wanted is Outcome.WIN:
        return winner_against(opponent)
    if wanted is Outcome.LOSE:
        return loser_against(opponent)
    return opponent


@dataclass(frozen=True)
class Round:
    opponent: Move
    code: str


def parse_round(line: str) -> Round:
    tokens = line.split()
    if len(tokens) != 2:
        raise MalformedInput(f"Expected two codes per round: {line!r}")
    opponent_code, code = tokens
    if opponent_code not in OPPONENT_CODES:
        raise MalformedInput(f"Unrecognized move code: {opponent_code!r}")
    if code not in MOVE_CODES:
        raise MalformedInput(f"Unrecognized response code: {code!r}")
    return Round(OPPONENT_CODES[opponent_code], code)


def parse_rounds(lines: Sequence[str]) -> Tuple[Round, ...]:
    return tuple(parse_round(line) for line in lines)


def play(rounds: Sequence[Round], strategy: Callable[[Round], Move]) -> int:
    return sum(score(strategy(rnd), rnd.opponent) for rnd in rounds)


def part1(rounds: Sequence[Round]) -> int:
    return play(rounds, lambda rnd: MOVE_CODES[rnd.code])


def part2(rounds: Sequence[Round]) -> int:
    return play(rounds, lambda rnd: counter_move(rnd.opponent, OUTCOME_CODES[rnd.code]))


class RockPaperScissors(Puzzle):
    year = "2022"
    day = "02"
    title = "Rock Paper Scissors"
    line_input = True

    def parse(self, raw: List[str]) -> Tuple[Round, ...]:
        return parse_rounds(raw)

    def part1(self, data: Tuple[Round, ...]) -> int:
        return part1(data)

    def part2(self, data: Tuple[Round, ...]) -> int:
        return part2(data)


__all__ = [
    "Move",
    "Outcome",
    "Round",
    "RockPaperScissors",
    "winner_against",
    "loser_against",
    "outcome",
    "score",
    "counter_move",
    "parse_round",
    "parse_rounds",
    "part1",
    "part2",
]
