import pytest

from aoc2025.day01 import parse, part1, part2

EXAMPLE = "\n".join(
    ["L68", "L30", "R48", "L5", "R60", "L55", "L1", "L99", "R14", "L82"]
)


def test_parse_signs_directions():
    assert parse("L68\nR48\nL5") == [-68, 48, -5]


def test_parse_ignores_trailing_newline():
    assert parse("R14\nL82\n") == parse("R14\nL82")


def test_parse_rejects_unknown_direction():
    with pytest.raises(ValueError):
        parse("X5")


def test_parse_rejects_missing_amount():
    with pytest.raises(ValueError):
        parse("L")


def test_part1_example():
    assert part1(EXAMPLE) == 3


def test_part2_example():
    assert part2(EXAMPLE) == 6


def test_part2_counts_at_least_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


@pytest.mark.parametrize("turns", [1, 2, 5])
def test_full_turns_pass_zero_once_each(turns):
    assert part2("R100\n" * turns) == turns


def test_landing_on_zero_is_symmetric():
    assert part1("R50") == part1("L50")


def test_single_landing_counts_same_in_both_parts():
    assert part2("L50") == part1("L50")