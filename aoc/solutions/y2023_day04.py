"""Scratchcards: matching numbers and the copy cascade they trigger."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Sequence, Tuple

from ..errors import MalformedInput
from ..puzzle import Puzzle


@dataclass(frozen=True)
class Card:
    id: int
    winning: FrozenSet[int]
    owned: FrozenSet[int]
    matches: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "matches", len(self.winning & self.owned))

    @property
    def points(self) -> int:
        return 1 << (self.matches - 1) if self.matches else 0


def _parse_numbers(chunk: str, line: str) -> FrozenSet[int]:
    try:
        return frozenset(int(token) for token in chunk.split())
    except ValueError as exc:
        raise MalformedInput(f"Invalid number in {line!r}") from exc


def parse_card(line: str) -> Card:
    """Parse ``"Card 1: 41 48 | 83 86 6"`` into a :class:`Card`."""

    header, sep, body = line.partition(":")
    id_digits = header[len(header.rstrip("0123456789")):]
    if not sep or not id_digits:
        raise MalformedInput(f"No card ID found: {line!r}")
    winning, bar, owned = body.partition("|")
    if not bar:
        raise MalformedInput(f"Missing '|' separator: {line!r}")
    return Card(int(id_digits), _parse_numbers(winning, line), _parse_numbers(owned, line))


def parse_cards(lines: Sequence[str]) -> Tuple[Card, ...]:
    return tuple(parse_card(line) for line in lines)


def part1(cards: Sequence[Card]) -> int:
    return sum(card.points for card in cards)


def count_cascade(cards: Sequence[Card]) -> int:
    """Count every card held once all won copies have been processed.

    A card with ``n`` matches wins one copy of each of the next ``n`` cards.
    Copies win in turn, so each queued id is processed once per copy held.
    """

    by_id: Dict[int, Card] = {card.id: card for card in cards}
    queue = deque(card.id for card in cards)
    total = len(cards)
    while queue:
        card = by_id[queue.popleft()]
        for won_id in range(card.id + 1, card.id + card.matches + 1):
            if won_id in by_id:
                queue.append(won_id)
                total += 1
    return total


def part2(cards: Sequence[Card]) -> int:
    return count_cascade(cards)


class Scratchcards(Puzzle):
    year = "2023"
    day = "04"
    title = "Scratchcards"
    line_input = True

    def parse(self, raw: List[str]) -> Tuple[Card, ...]:
        return parse_cards(raw)

    def part1(self, data: Tuple[Card, ...]) -> int:
        return part1(data)

    def part2(self, data: Tuple[Card, ...]) -> int:
        return part2(data)


__all__ = ["Card", "Scratchcards", "parse_card", "parse_cards", "count_cascade", "part1", "part2"]
