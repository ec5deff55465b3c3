"""Day 4: finding paper rolls a forklift can reach."""

_CELLS = {".": False, "@": True}


def parse_grid(text):
    """Return the grid as rows of booleans, True where a roll of paper stands."""
    try:
        return [[_CELLS[char] for char in line] for line in text.splitlines()]
    except KeyError as error:
        raise ValueError(f"invalid grid cell {error.args[0]!r}") from None


def accessible_rolls(grid):
    """Return the (row, column) of every roll with fewer than four roll neighbours."""
    height = len(grid)
    found = []
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if not cell:
                continue
            neighbours = sum(
                grid[y][x]
                for y in range(max(i - 1, 0), min(i + 2, height))
                for x in range(max(j - 1, 0), min(j + 2, len(grid[y])))
                if (y, x) != (i, j)
            )
            if neighbours < 4:
                found.append((i, j))
    return found


def part1(text):
    """Count the rolls that are accessible right away."""
    return len(accessible_rolls(parse_grid(text)))


def part2(text):
    """Count the rolls removed by repeatedly taking away every accessible one."""
    grid = parse_grid(text)
    removed = 0
    while rolls := accessible_rolls(grid):
        removed += len(rolls)
        for i, j in rolls:
            grid[i][j] = False
    return removed