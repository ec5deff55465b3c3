import pytest

from aoc2025 import day09

EXAMPLE = """\
7,1
11,1
11,7
9,7
9,5
2,5
2,3
7,3
"""

L_SHAPE = """\
0,0
10,0
10,4
4,4
4,10
0,10
"""

RECTANGLE = "0,0\n10,0\n10,5\n0,5"


def test_parse():
    assert day09.parse("7,1\n11,1") == [(7, 1), (11, 1)]


def test_part1_example():
    assert day09.part1(EXAMPLE) == 50


def test_part2_rectangle_is_whole_rectangle():
    assert day09.part2(RECTANGLE) == day09.part1(RECTANGLE)


def test_part2_l_shape_excludes_the_notch():
    full = day09.part1(L_SHAPE)
    inside = day09.part2(L_SHAPE)
    assert inside < full
    assert inside == 55


def test_part2_never_exceeds_part1():
    assert day09.part2(EXAMPLE) <= day09.part1(EXAMPLE)


def test_part2_diagonal_raises():
    with pytest.raises(ValueError):
        day09.part2("0,0\n1,1")


def test_empty_input_raises():
    with pytest.raises(ValueError):
        day09.part1("")


def test_render_square():
    points = day09.parse("0,0\n4,0\n4,4\n0,4")
    lines = day09.render_outline(points, 1).split("\n")
    assert len(lines) == 7
    assert all(len(line) == 7 for line in lines)
    assert lines[0].strip() == ""
    assert lines[1] == " +---+ "
    assert lines[3] == " |   | "
    assert lines[5] == " +---+ "


def test_render_scales_down():
    small = day09.parse("0,0\n4,0\n4,4\n0,4")
    large = [(x * 1000, y * 1000) for x, y in small]
    assert day09.render_outline(large) == day09.render_outline(small, 1)


def test_render_diagonal_raises():
    with pytest.raises(ValueError):
        day09.render_outline([(0, 0), (3, 3)], 1)


def test_render_empty_raises():
    with pytest.raises(ValueError):
        day09.render_outline([], 1)