import pytest

from aoc2025.day06 import part1, part2

EXAMPLE = "\n".join(
    [
        "123 328  51 64 ",
        " 45 64  387 23 ",
        "  6 98  215 314",
        "*   +   *   +  ",
    ]
)


def test_part1_example():
    assert part1(EXAMPLE) == 4277556


def test_part2_example():
    assert part2(EXAMPLE) == 3263827


def test_part1_columns_add_up():
    assert part1("7 8\n5 6\n+ +") == part1("7\n5\n+") + part1("8\n6\n+")


def test_part1_product_is_order_independent():
    assert part1("4\n9\n*") == part1("9\n4\n*")


def test_single_digit_rows_agree_between_parts():
    assert part2("7 8\n* +") == part1("7 8\n* +")


def test_part2_problems_add_up():
    assert part2("12 34\n+  * ") == part2("12\n+ ") + part2("34\n* ")


def test_part2_reads_numbers_down_columns():
    assert part2("1\n2\n+") == part1("12\n+")


def test_part1_rejects_unknown_operation():
    with pytest.raises(ValueError):
        part1("1 2\n3 4\n- +")


def test_part2_rejects_unknown_operation():
    with pytest.raises(ValueError):
        part2("1\n2\n/")