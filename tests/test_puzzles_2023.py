from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aoc.errors import EmptyInput, MalformedInput, NoSolutionFound
from aoc.solutions import y2023_day01 as trebuchet
from aoc.solutions import y2023_day02 as cubes
from aoc.solutions import y2023_day03 as gears
from aoc.solutions import y2023_day04 as cards
from aoc.solutions import y2023_day05 as almanac_mod

SCHEMATIC_EXAMPLE = """\
467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598..
"""

CARDS_EXAMPLE = """\
Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11
"""

ALMANAC_EXAMPLE = """\
seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""

# Every table covers 0..99 exactly, so the chain is a bijection on that range.
PERMUTATION_ALMANAC = """\
seeds: 0 100

seed-to-soil map:
50 0 50
0 50 50

soil-to-location map:
10 0 90
0 90 10
"""


def make_card(card_id: int, matches: int) -> cards.Card:
    owned = frozenset(range(matches)) | {100 + card_id}
    return cards.Card(card_id, frozenset(range(matches)), owned)


# ---------------------------------------------------------------------------
# 2023 day 01
# ---------------------------------------------------------------------------
def test_calibration_part1_example():
    lines = ["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]
    assert trebuchet.part1(lines) == 142


def test_calibration_part2_example():
    lines = [
        "two1nine",
        "eightwothree",
        "abcone2threexyz",
        "xtwone3four",
        "4nineeightseven2",
        "zoneight234",
        "7pqrstsixteen",
    ]
    assert trebuchet.part2(lines) == 281


@pytest.mark.parametrize(
    "line, expected",
    [("eightwo", 82), ("sevenine", 79), ("oneight", 18), ("twone", 21)],
)
def test_overlapping_digit_words_both_count(line, expected):
    assert trebuchet.calibration_value(trebuchet.convert_digit_words(line)) == expected


def test_line_without_digits_is_malformed():
    with pytest.raises(MalformedInput):
        trebuchet.part1(["12", "abc"])


# ---------------------------------------------------------------------------
# 2023 day 02
# ---------------------------------------------------------------------------
GAMES_EXAMPLE = """\
Game 1: 3 blue, 4 red; 1 red, 2 green, 6 blue; 2 green
Game 2: 1 blue, 2 green; 3 green, 4 blue, 1 red; 1 green, 1 blue
Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red
Game 4: 1 green, 3 red, 6 blue; 3 green, 6 red; 3 green, 15 blue, 14 red
Game 5: 6 red, 1 blue, 3 green; 2 blue, 1 red, 2 green
"""


def test_games_example_answers():
    assert cubes.CubeConundrum().solve(GAMES_EXAMPLE) == (8, 2286)


def test_game_folds_running_maximum():
    game = cubes.parse_game("Game 3: 8 green, 6 blue, 20 red; 5 blue, 4 red, 13 green; 5 green, 1 red")
    assert (game.id, game.red, game.green, game.blue) == (3, 20, 13, 6)
    assert not game.fits(cubes.BAG_LIMITS)


@pytest.mark.parametrize(
    "line",
    [
        "Game 1: 3 purple",
        "Game x: 3 red",
        "Game 1: three red",
        "Game 1 3 red",
        "Game 1: 3 red, blue",
        "Game 1: -3 red",
    ],
)
def test_games_reject_malformed_lines(line):
    with pytest.raises(MalformedInput):
        cubes.parse_game(line)


# ---------------------------------------------------------------------------
# 2023 day 03
# ---------------------------------------------------------------------------
def test_schematic_example_answers():
    assert gears.GearRatios().solve(SCHEMATIC_EXAMPLE) == (4361, 467835)


def test_numbers_are_finalized_at_row_end():
    numbers = gears.parse_numbers(["..12", "3..."])
    assert [(n.row, n.start_column, n.end_column, n.value) for n in numbers] == [
        (0, 2, 3, 12),
        (1, 0, 0, 3),
    ]


def test_isolated_number_never_counts():
    schematic = gears.parse_schematic(["467..", ".....", "..*.."])
    assert [n.value for n in schematic.numbers] == [467]
    assert gears.part1(schematic) == 0
    assert gears.part2(schematic) == 0


def test_gear_needs_exactly_two_numbers():
    schematic = gears.parse_schematic(["1.2", ".*.", "3.."])
    assert gears.gear_pairs(schematic) == {}
    schematic = gears.parse_schematic(["4.5", ".*.", "..."])
    assert gears.part2(schematic) == 20


def test_symbols_skip_blanks_and_digits():
    symbols = gears.parse_symbols(["1#.", ".$*"])
    assert [(s.coord, s.char) for s in symbols] == [((0, 1), "#"), ((1, 1), "$"), ((1, 2), "*")]


# ---------------------------------------------------------------------------
# 2023 day 04
# ---------------------------------------------------------------------------
def test_cards_example_answers():
    assert cards.Scratchcards().solve(CARDS_EXAMPLE) == (13, 30)


def test_card_matches_are_cached_at_construction():
    parsed = cards.parse_cards(CARDS_EXAMPLE.splitlines())
    assert [card.matches for card in parsed] == [4, 2, 2, 1, 0, 0]
    assert [card.points for card in parsed] == [8, 2, 2, 1, 0, 0]


def test_cascade_without_matches_counts_base_cards():
    deck = [make_card(i, 0) for i in range(1, 6)]
    assert cards.count_cascade(deck) == 5


def test_cascade_grows_with_matches():
    previous = 0
    for extra in range(4):
        deck = [make_card(1, extra)] + [make_card(i, 1) for i in range(2, 6)]
        total = cards.count_cascade(deck)
        assert total >= previous
        previous = total


@pytest.mark.parametrize("line", ["Card : 1 | 2", "Card 1 1 2 | 3", "Card 1: 1 2 3", "Card 1: 1 x | 2"])
def test_cards_reject_malformed_lines(line):
    with pytest.raises(MalformedInput):
        cards.parse_card(line)


# ---------------------------------------------------------------------------
# 2023 day 05
# ---------------------------------------------------------------------------
def test_almanac_example_answers():
    assert almanac_mod.SeedAlmanac().solve(ALMANAC_EXAMPLE) == (35, 46)


def test_almanac_location_for_example_seeds():
    almanac = almanac_mod.parse_almanac(ALMANAC_EXAMPLE)
    assert [almanac_mod.location_for_seed(seed, almanac) for seed in almanac.seeds] == [82, 43, 86, 35]


def test_reverse_scan_agrees_with_interval_search():
    almanac = almanac_mod.parse_almanac(ALMANAC_EXAMPLE)
    assert almanac_mod.lowest_location_by_reverse_scan(almanac) == almanac_mod.part2(almanac)


def test_reverse_scan_respects_limit():
    almanac = almanac_mod.parse_almanac(ALMANAC_EXAMPLE)
    with pytest.raises(NoSolutionFound):
        almanac_mod.lowest_location_by_reverse_scan(almanac, limit=46)


def test_forward_then_backward_round_trips():
    almanac = almanac_mod.parse_almanac(PERMUTATION_ALMANAC)
    for seed in range(100):
        location = almanac_mod.location_for_seed(seed, almanac)
        assert almanac_mod.seed_for_location(location, almanac) == seed


def test_single_table_round_trips_inside_source_ranges():
    almanac = almanac_mod.parse_almanac(ALMANAC_EXAMPLE)
    for table in almanac.maps:
        for entry in table.entries:
            for value in (entry.source_start, entry.source_end - 1):
                assert table.backward(table.forward(value)) == value


def test_forward_intervals_split_at_entry_edges():
    table = almanac_mod.parse_almanac_map("seed-to-soil map:\n50 98 2\n52 50 48")
    assert sorted(table.forward_intervals([(45, 100)])) == [(45, 50), (50, 52), (52, 100)]


def test_overlapping_source_ranges_are_rejected():
    with pytest.raises(MalformedInput, match="not 1:1"):
        almanac_mod.parse_almanac_map("seed-to-soil map:\n50 98 2\n10 97 3")


def test_overlapping_destination_ranges_are_rejected():
    with pytest.raises(MalformedInput, match="not 1:1"):
        almanac_mod.parse_almanac_map("seed-to-soil map:\n10 0 5\n12 20 5")


@pytest.mark.parametrize("label", ["seed-soil map:", "seed-from-soil map:", "map:", "-to-soil map:"])
def test_bad_map_labels_are_rejected(label):
    with pytest.raises(MalformedInput):
        almanac_mod.parse_map_label(label)


@pytest.mark.parametrize("row", ["1 2", "1 2 x", "1 -2 3", "1 2 0"])
def test_bad_map_rows_are_rejected(row):
    with pytest.raises(MalformedInput):
        almanac_mod.parse_map_entry(row)


def test_missing_table_is_reported():
    almanac = almanac_mod.parse_almanac("seeds: 1 2\n\nseed-to-soil map:\n0 1 1\n")
    with pytest.raises(MalformedInput, match="soil"):
        almanac_mod.part1(almanac)


def test_seed_reductions_need_seeds():
    almanac = almanac_mod.parse_almanac("seeds:\n\n" + PERMUTATION_ALMANAC.split("\n\n", 1)[1])
    with pytest.raises(EmptyInput):
        almanac_mod.part1(almanac)
    with pytest.raises(EmptyInput):
        almanac_mod.part2(almanac)


def test_odd_seed_count_breaks_part2_only():
    almanac = almanac_mod.parse_almanac("seeds: 1 2 3\n\n" + PERMUTATION_ALMANAC.split("\n\n", 1)[1])
    assert almanac_mod.part1(almanac) == almanac_mod.location_for_seed(1, almanac)
    with pytest.raises(MalformedInput):
        almanac_mod.part2(almanac)
