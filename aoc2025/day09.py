"""Day 9: largest rectangles between red tiles on a movie theatre floor."""

DEFAULT_SCALE = 1000


def parse(text):
    """Return one ``(x, y)`` tile per ``x,y`` line."""
    points = []
    for line in text.splitlines():
        x, y = (int(value) for value in line.split(",")[:2])
        points.append((x, y))
    return points


def _require_points(text):
    points = parse(text)
    if not points:
        raise ValueError("no tiles given")
    return points


def _outline(points):
    """Split the closed loop into horizontal ``(y, lo, hi)`` and vertical ``(x, lo, hi)`` edges."""
    horizontal = []
    vertical = []
    for index, (x1, y1) in enumerate(points):
        x2, y2 = points[(index + 1) % len(points)]
        if x1 == x2:
            vertical.append((x1, min(y1, y2), max(y1, y2)))
        elif y1 == y2:
            horizontal.append((y1, min(x1, x2), max(x1, x2)))
        else:
            raise ValueError(f"tiles {(x1, y1)} and {(x2, y2)} are not in line")
    return horizontal, vertical


def _area(x1, y1, x2, y2):
    return (x2 - x1 + 1) * (y2 - y1 + 1)


def part1(text):
    """Largest rectangle with two tiles at opposite corners."""
    points = _require_points(text)
    best = 0
    for i, (x1, y1) in enumerate(points):
        for x2, y2 in points[i + 1 :]:
            if x1 == x2 or y1 == y2:
                continue
            best = max(best, (abs(x1 - x2) + 1) * (abs(y1 - y2) + 1))
    return best


def _crosses_horizontal(edges, x1, y1, x2, y2):
    return any(
        y1 < y < y2 and (lo <= x1 < hi or lo < x2 <= hi) for y, lo, hi in edges
    )


def _crosses_vertical(edges, x1, y1, x2, y2):
    return any(
        x1 < x < x2 and (lo <= y1 < hi or lo < y2 <= hi) for x, lo, hi in edges
    )


def part2(text):
    """Largest rectangle between two tiles that no outline edge cuts into."""
    points = _require_points(text)
    horizontal, vertical = _outline(points)
    best = 0
    for i, first in enumerate(points):
        for second in points[i + 1 :]:
            x1, x2 = sorted((first[0], second[0]))
            y1, y2 = sorted((first[1], second[1]))
            if x1 == x2 or y1 == y2:
                continue
            if _crosses_horizontal(horizontal, x1, y1, x2, y2):
                continue
            if _crosses_vertical(vertical, x1, y1, x2, y2):
                break
            best = max(best, _area(x1, y1, x2, y2))
    return best


def render_outline(points, scale=DEFAULT_SCALE):
    """Draw the loop scaled down by ``scale``: ``+`` tiles, ``-`` and ``|`` edges."""
    if not points:
        raise ValueError("no tiles given")
    horizontal, vertical = _outline(points)
    scaled = {(x // scale, y // scale) for x, y in points}
    horizontal = [(y // scale, lo // scale, hi // scale) for y, lo, hi in horizontal]
    vertical = [(x // scale, lo // scale, hi // scale) for x, lo, hi in vertical]
    xs = [x for x, _ in points]
    ys = [y for _, y in points]

    def symbol(column, row):
        if any(column == x and lo < row < hi for x, lo, hi in vertical):
            return "|"
        if any(row == y and lo < column < hi for y, lo, hi in horizontal):
            return "-"
        if (column, row) in scaled:
            return "+"
        return " "

    columns = range(min(xs) // scale - 1, max(xs) // scale + 2)
    rows = range(min(ys) // scale - 1, max(ys) // scale + 2)
    return "\n".join(
        "".join(symbol(column, row) for column in columns) for row in rows
    )