import pytest

from aoc2025.structs import DisjointSets, Edge, Point


def test_dist_exact():
    assert Point(0, 0, 0).dist(Point(3, 4, 0)) == 5


def test_dist_rounds_down():
    assert Point(0, 0, 0).dist(Point(1, 1, 0)) == Point(0, 0, 0).dist(Point(1, 0, 0))


def test_dist_is_symmetric():
    a = Point(162, 817, 812)
    b = Point(57, 618, 57)
    assert a.dist(b) == b.dist(a)


def test_dist_to_self_is_zero():
    p = Point(7, 8, 9)
    assert p.dist(p) == 0


def test_edges_order_by_distance():
    near = Edge((5, 6), 1)
    far = Edge((0, 1), 9)
    assert near < far
    assert far > near
    assert sorted([far, near]) == [near, far]


def test_edges_with_same_distance_compare_equal_in_order():
    a = Edge((0, 1), 4)
    b = Edge((2, 3), 4)
    assert a <= b and b <= a
    assert not a < b
    assert a != b


def test_unite_reports_merge():
    sets = DisjointSets(4)
    assert sets.unite(0, 1) is True
    assert sets.unite(1, 0) is False
    assert sets.find_parent(0) == sets.find_parent(1)


def test_find_parent_of_singleton_is_itself():
    sets = DisjointSets(3)
    assert [sets.find_parent(i) for i in range(3)] == [0, 1, 2]


def test_transitive_union():
    sets = DisjointSets(5)
    sets.unite(0, 1)
    sets.unite(2, 3)
    sets.unite(1, 3)
    roots = {sets.find_parent(i) for i in range(4)}
    assert len(roots) == 1
    assert sets.find_parent(4) == 4
    assert sets.unite(0, 2) is False


def test_len():
    assert len(DisjointSets(6)) == 6


def test_out_of_range_raises():
    with pytest.raises(IndexError):
        DisjointSets(2).find_parent(5)