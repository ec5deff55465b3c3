"""Day 11: counting paths through a reactor's device network."""

import math

START = "you"
EXIT = "out"
ROUTES = (
    (("svr", "fft"), ("fft", "dac"), ("dac", "out")),
    (("svr", "dac"), ("dac", "fft"), ("fft", "out")),
)


def parse(text):
    """Return the devices as a mapping of each device to the devices it feeds."""
    adjacency = {EXIT: []}
    for line in text.splitlines():
        node, separator, targets = line.partition(":")
        if not separator:
            raise ValueError(f"missing ':' in {line!r}")
        adjacency[node] = targets.split()
    return adjacency


def _successors(adjacency, node):
    try:
        return adjacency[node]
    except KeyError:
        raise ValueError(f"unknown device {node!r}") from None


def count_simple_paths(adjacency):
    """Count the paths from ``you`` to ``out`` that visit no device twice."""
    visited = set()

    def walk(node):
        visited.add(node)
        count = 0
        for target in _successors(adjacency, node):
            if target not in adjacency:
                raise ValueError(f"unknown device {target!r}")
            if target in visited:
                continue
            if target == EXIT:
                count += 1
                continue
            count += walk(target)
        visited.discard(node)
        return count

    return walk(START)


def count_paths(adjacency, start, dest):
    """Count the paths from ``start`` to ``dest`` in an acyclic network."""
    known = {dest: 1}

    def walk(node):
        if node in known:
            return known[node]
        total = sum(walk(target) for target in _successors(adjacency, node))
        known[node] = total
        return total

    return walk(start)


def part1(text):
    """Number of paths from ``you`` to ``out``."""
    return count_simple_paths(parse(text))


def part2(text):
    """Number of paths from ``svr`` to ``out`` passing both ``fft`` and ``dac``."""
    adjacency = parse(text)
    return sum(
        math.prod(count_paths(adjacency, start, dest) for start, dest in route)
        for route in ROUTES
    )