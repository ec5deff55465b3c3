import pytest

from aoc2025.day05 import Range, parse, part1, part2

EXAMPLE = "\n".join(
    ["3-5", "10-14", "16-20", "12-18", "", "1", "5", "8", "11", "17", "32"]
)


def test_range_contains_bounds():
    r = Range(3, 5)
    assert 3 in r
    assert 5 in r
    assert 6 not in r


def test_range_rejects_reversed_bounds():
    with pytest.raises(ValueError):
        Range(5, 3)


def test_single_value_range_size_matches_part2():
    assert Range(7, 7).size == part2("7-7")


def test_parse_splits_ranges_and_ids():
    ranges, ids = parse(EXAMPLE)
    assert ranges[:2] == [Range(3, 5), Range(10, 14)]
    assert ids == [1, 5, 8, 11, 17, 32]


def test_parse_without_ids():
    assert parse("1-2\n") == ([Range(1, 2)], [])


def test_part1_example():
    assert part1(EXAMPLE) == 3


def test_part2_example():
    assert part2(EXAMPLE) == 14


def test_overlapping_ranges_merge():
    assert part2("1-10\n5-15") == part2("1-15")


def test_nested_range_adds_nothing():
    assert part2("1-10\n2-3") == part2("1-10")


def test_disjoint_ranges_add_up():
    assert part2("1-2\n5-6") == part2("1-2") + part2("5-6")


def test_order_of_ranges_does_not_matter():
    assert part2("12-18\n3-5\n16-20\n10-14") == part2(EXAMPLE)