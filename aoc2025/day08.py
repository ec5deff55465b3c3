"""Day 8: wiring junction boxes into circuits, shortest connections first."""

import math
from collections import Counter

from aoc2025.structs import DisjointSets, Edge, Point

CONNECTIONS = 10


def parse(text):
    """Return one point per ``x,y,z`` line."""
    points = []
    for line in text.splitlines():
        x, y, z = (int(value) for value in line.split(",")[:3])
        points.append(Point(x, y, z))
    return points


def edges(points):
    """Every pair of points as an edge, shortest first, ties in index order."""
    pairs = [
        Edge((i, j), first.dist(second))
        for i, first in enumerate(points)
        for j, second in enumerate(points[i + 1 :], start=i + 1)
    ]
    return sorted(pairs, key=lambda edge: edge.dist)


def _require_points(text):
    points = parse(text)
    if not points:
        raise ValueError("no junction boxes given")
    return points


def part1(text, connections=CONNECTIONS):
    """Product of the three largest circuit sizes after the shortest connections."""
    points = _require_points(text)
    ordered = edges(points)
    if connections > len(ordered):
        raise ValueError(f"only {len(ordered)} connections are possible")
    sets = DisjointSets(len(points))
    for edge in ordered[:connections]:
        sets.unite(*edge.points)
    sizes = sorted(
        Counter(sets.find_parent(i) for i in range(len(points))).values(),
        reverse=True,
    )
    if len(sizes) < 3:
        raise ValueError("fewer than three circuits remain")
    return math.prod(sizes[:3])


def part2(text):
    """Product of the X coordinates of the last pair that joins everything."""
    points = _require_points(text)
    sets = DisjointSets(len(points))
    result = 0
    merges = 0
    for edge in edges(points):
        first, second = edge.points
        if sets.unite(first, second):
            merges += 1
            result = points[first].x * points[second].x
        if merges == len(points) - 1:
            break
    return result