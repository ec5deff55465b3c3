"""Day 7: following tachyon beams through a manifold of splitters."""

SPLITTER = "^"
SOURCE = "S"


def _parse(text):
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty manifold")
    origin, *rows = lines
    start = origin.find(SOURCE)
    if start < 0:
        raise ValueError(f"no beam source {SOURCE!r} in the first line")
    return origin, start, rows


def _is_splitter(row, column):
    if column >= len(row):
        raise ValueError(f"row {row!r} is too short for a beam at column {column}")
    return row[column] == SPLITTER


def part1(text):
    """Count how many times a beam hits a splitter."""
    _, start, rows = _parse(text)
    beams = {start}
    hits = 0
    for row in rows:
        for column in sorted(beams):
            if not _is_splitter(row, column):
                continue
            hits += 1
            if column < len(row) - 1:
                beams.add(column + 1)
            if column > 0:
                beams.add(column - 1)
            beams.discard(column)
    return hits


def part2(text):
    """Count the timelines a single particle can end up in."""
    origin, start, rows = _parse(text)
    counts = [0] * len(origin)
    counts[start] = 1
    for row in rows:
        following = counts.copy()
        for column, count in enumerate(counts):
            if not count or not _is_splitter(row, column):
                continue
            if column > 0:
                following[column - 1] += count
            if column < len(row) - 1:
                following[column + 1] += count
            following[column] -= count
        counts = following
    return sum(counts)