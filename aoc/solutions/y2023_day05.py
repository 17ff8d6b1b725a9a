"""Seed almanac: chained piecewise-linear range maps.

An almanac lists seeds followed by tables translating ids from one category to
the next (``seed -> soil -> ... -> location``). Within a table the source
ranges are pairwise disjoint and so are the destination ranges; that makes
every table a bijection on its covered ids, and it is checked while parsing
instead of assumed.

Part 2 reinterprets the seed list as ``(start, length)`` pairs. Rather than
scanning locations upwards until one maps back into a seed range (kept here as
:func:`lowest_location_by_reverse_scan`, capped), the answer is computed by
pushing whole intervals through each table, splitting them at entry
boundaries.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from ..constants import REVERSE_SCAN_LIMIT
from ..errors import EmptyInput, MalformedInput, NoSolutionFound
from ..puzzle import Puzzle

START_CATEGORY = "seed"
END_CATEGORY = "location"

# Half-open ``[start, end)`` interval of ids.
Interval = Tuple[int, int]


def _intervals_overlap(start1: int, length1: int, start2: int, length2: int) -> bool:
    return start1 < start2 + length2 and start2 < start1 + length1


@dataclass(frozen=True)
class MapEntry:
    destination_start: int
    source_start: int
    length: int

    @property
    def source_end(self) -> int:
        return self.source_start + self.length

    @property
    def destination_end(self) -> int:
        return self.destination_start + self.length

    @property
    def offset(self) -> int:
        return self.destination_start - self.source_start

    def overlaps(self, other: "MapEntry") -> bool:
        """True when either the source or the destination ranges intersect."""

        return _intervals_overlap(
            self.source_start, self.length, other.source_start, other.length
        ) or _intervals_overlap(
            self.destination_start, self.length, other.destination_start, other.length
        )


@dataclass(frozen=True)
class AlmanacMap:
    source: str
    destination: str
    entries: Tuple[MapEntry, ...]

    def forward(self, value: int) -> int:
        for entry in self.entries:
            if entry.source_start <= value < entry.source_end:
                return value + entry.offset
        return value

    def backward(self, value: int) -> int:
        for entry in self.entries:
            if entry.destination_start <= value < entry.destination_end:
                return value - entry.offset
        return value

    def forward_intervals(self, intervals: Iterable[Interval]) -> List[Interval]:
        """Translate ``intervals``, splitting them wherever an entry begins or ends.

        Pieces not covered by any entry pass through unchanged.
        """

        mapped: List[Interval] = []
        pending = list(intervals)
        for entry in self.entries:
            remaining: List[Interval] = []
            for start, end in pending:
                lo = max(start, entry.source_start)
                hi = min(end, entry.source_end)
                if lo >= hi:
                    remaining.append((start, end))
                    continue
                mapped.append((lo + entry.offset, hi + entry.offset))
                if start < lo:
                    remaining.append((start, lo))
                if hi < end:
                    remaining.append((hi, end))
            pending = remaining
        return mapped + pending


@dataclass(frozen=True)
class Almanac:
    seeds: Tuple[int, ...]
    maps: Tuple[AlmanacMap, ...]
    by_source: Dict[str, AlmanacMap] = field(init=False, repr=False, compare=False)
    by_destination: Dict[str, AlmanacMap] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "by_source", {m.source: m for m in self.maps})
        object.__setattr__(self, "by_destination", {m.destination: m for m in self.maps})

    def forward_chain(self) -> List[AlmanacMap]:
        """Tables to apply, in order, to turn a seed into a location."""

        chain: List[AlmanacMap] = []
        category = START_CATEGORY
        while category != END_CATEGORY:
            table = self.by_source.get(category)
            if table is None:
                raise MalformedInput(f"No map for source {category!r}")
            chain.append(table)
            if len(chain) > len(self.maps):
                raise MalformedInput(f"Maps from {START_CATEGORY!r} never reach {END_CATEGORY!r}")
            category = table.destination
        return chain

    def reverse_chain(self) -> List[AlmanacMap]:
        """Tables to undo, in order, to turn a location back into a seed."""

        chain: List[AlmanacMap] = []
        category = END_CATEGORY
        while category != START_CATEGORY:
            table = self.by_destination.get(category)
            if table is None:
                raise MalformedInput(f"No map for destination {category!r}")
            chain.append(table)
            if len(chain) > len(self.maps):
                raise MalformedInput(f"Maps into {END_CATEGORY!r} never reach {START_CATEGORY!r}")
            category = table.source
        return chain


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------
def _parse_id(token: str, context: str) -> int:
    try:
        value = int(token)
    except ValueError as exc:
        raise MalformedInput(f"Invalid number {token!r} in {context!r}") from exc
    if value < 0:
        raise MalformedInput(f"Negative number {token!r} in {context!r}")
    return value


def parse_map_label(line: str) -> Tuple[str, str]:
    """Return ``(source, destination)`` from a ``"seed-to-soil map:"`` header."""

    name = line.split()[0] if line.split() else ""
    parts = name.split("-")
    if len(parts) != 3 or parts[1] != "to" or not parts[0] or not parts[2]:
        raise MalformedInput(f"Invalid map label: {line!r}")
    return parts[0], parts[2]


def parse_map_entry(line: str) -> MapEntry:
    tokens = line.split()
    if len(tokens) != 3:
        raise MalformedInput(f"Expected destination, source and length: {line!r}")
    destination, source, length = (_parse_id(token, line) for token in tokens)
    if length == 0:
        raise MalformedInput(f"Zero-length range: {line!r}")
    return MapEntry(destination, source, length)


def check_no_overlaps(source: str, destination: str, entries: Sequence[MapEntry]) -> None:
    for idx, entry in enumerate(entries):
        for other in entries[idx + 1:]:
            if entry.overlaps(other):
                raise MalformedInput(
                    f"Map from {source} to {destination} has overlapping ranges, so it is not 1:1"
                )


def parse_almanac_map(chunk: str) -> AlmanacMap:
    lines = [line.strip() for line in chunk.strip().splitlines()]
    source, destination = parse_map_label(lines[0])
    entries = tuple(parse_map_entry(line) for line in lines[1:] if line)
    check_no_overlaps(source, destination, entries)
    return AlmanacMap(source, destination, entries)


def parse_almanac(text: str) -> Almanac:
    chunks = [c for c in re.split(r"\n[ \t]*\n", text.replace("\r\n", "\n").strip()) if c.strip()]
    if not chunks:
        raise MalformedInput("Almanac is empty")
    label, sep, seed_tokens = chunks[0].partition(":")
    if not sep or label.strip() != "seeds":
        raise MalformedInput(f"Expected a 'seeds:' line, got {chunks[0].splitlines()[0]!r}")
    seeds = tuple(_parse_id(token, chunks[0]) for token in seed_tokens.split())

    maps = tuple(parse_almanac_map(chunk) for chunk in chunks[1:])
    for attr in ("source", "destination"):
        seen = set()
        for table in maps:
            category = getattr(table, attr)
            if category in seen:
                raise MalformedInput(f"More than one map with {attr} {category!r}")
            seen.add(category)
    return Almanac(seeds, maps)


# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------
def location_for_seed(seed: int, almanac: Almanac) -> int:
    value = seed
    for table in almanac.forward_chain():
        value = table.forward(value)
    return value


def seed_for_location(location: int, almanac: Almanac) -> int:
    value = location
    for table in almanac.reverse_chain():
        value = table.backward(value)
    return value


def seed_ranges(almanac: Almanac) -> List[Interval]:
    """Read the seed list as ``(start, length)`` pairs."""

    seeds = almanac.seeds
    if len(seeds) % 2:
        raise MalformedInput(f"Seed list has an odd number of values ({len(seeds)})")
    ranges = [(seeds[i], seeds[i] + seeds[i + 1]) for i in range(0, len(seeds), 2) if seeds[i + 1]]
    if not ranges:
        raise EmptyInput("No seed ranges found")
    return ranges


def lowest_location(seeds: Iterable[int], almanac: Almanac) -> int:
    chain = almanac.forward_chain()
    best = None
    for seed in seeds:
        value = seed
        for table in chain:
            value = table.forward(value)
        if best is None or value < best:
            best = value
    if best is None:
        raise EmptyInput("No seeds found")
    return best


def lowest_location_for_ranges(ranges: Sequence[Interval], almanac: Almanac) -> int:
    intervals: List[Interval] = list(ranges)
    for table in almanac.forward_chain():
        intervals = table.forward_intervals(intervals)
    if not intervals:
        raise EmptyInput("No seed ranges found")
    return min(start for start, _ in intervals)


def lowest_location_by_reverse_scan(almanac: Almanac, limit: int = REVERSE_SCAN_LIMIT) -> int:
    """Return the first location, counting up from zero, that maps back into a seed range.

    Raises :class:`~aoc.errors.NoSolutionFound` once ``limit`` locations have
    been tried without success.
    """

    ranges = seed_ranges(almanac)
    chain = almanac.reverse_chain()
    for location in range(limit):
        seed = location
        for table in chain:
            seed = table.backward(seed)
        if any(start <= seed < end for start, end in ranges):
            return location
    raise NoSolutionFound(f"No location below {limit} maps back into a seed range")


def part1(almanac: Almanac) -> int:
    return lowest_location(almanac.seeds, almanac)


def part2(almanac: Almanac) -> int:
    return lowest_location_for_ranges(seed_ranges(almanac), almanac)


class SeedAlmanac(Puzzle):
    year = "2023"
    day = "05"
    title = "If You Give A Seed A Fertilizer"

    def parse(self, raw: str) -> Almanac:
        return parse_almanac(raw)

    def part1(self, data: Almanac) -> int:
        return part1(data)

    def part2(self, data: Almanac) -> int:
        return part2(data)


__all__ = [
    "START_CATEGORY",
    "END_CATEGORY",
    "MapEntry",
    "AlmanacMap",
    "Almanac",
    "SeedAlmanac",
    "parse_map_label",
    "parse_map_entry",
    "parse_almanac_map",
    "parse_almanac",
    "check_no_overlaps",
    "location_for_seed",
    "seed_for_location",
    "seed_ranges",
    "lowest_location",
    "lowest_location_for_ranges",
    "lowest_location_by_reverse_scan",
    "part1",
    "part2",
]
