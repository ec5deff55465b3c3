"""Day 10: configuring factory machines with as few button presses as possible."""

from dataclasses import dataclass
from itertools import combinations

EPSILON = 1e-9


@dataclass(frozen=True)
class Machine:
    """A machine's light diagram, button wiring and joltage requirements."""

    lights: tuple
    wiring: tuple
    joltages: tuple


def _unwrap(token, opening, closing):
    if len(token) < 2 or token[0] != opening or token[-1] != closing:
        raise ValueError(f"expected {opening}...{closing}, got {token!r}")
    return token[1:-1]


def _numbers(body):
    return tuple(int(number) for number in body.split(","))


def parse_machine(line):
    """Parse ``[.#..] (0,1) (2) {3,4,5}`` into a Machine."""
    tokens = line.split()
    if len(tokens) < 2:
        raise ValueError(f"incomplete machine description {line!r}")
    lights = tuple(light == "#" for light in _unwrap(tokens[0], "[", "]"))
    wiring = tuple(_numbers(_unwrap(token, "(", ")")) for token in tokens[1:-1])
    joltages = _numbers(_unwrap(tokens[-1], "{", "}"))
    return Machine(lights, wiring, joltages)


def _machines(text):
    return [parse_machine(line) for line in text.splitlines()]


def all_combinations(items):
    """Combinations of ``items`` grouped by size, from one up to one fewer than all."""
    items = list(items)
    return [list(combinations(items, size)) for size in range(1, len(items))]


def _toggle(count, buttons):
    lights = [False] * count
    for button in buttons:
        for wire in button:
            lights[wire] = not lights[wire]
    return tuple(lights)


def _fewest_toggles(machine):
    for group in all_combinations(machine.wiring):
        for buttons in group:
            if _toggle(len(machine.lights), buttons) == machine.lights:
                return len(buttons)
    return 0


def part1(text):
    """Total presses needed to match every machine's light diagram."""
    return sum(_fewest_toggles(machine) for machine in _machines(text))


class Matrix:
    """The button/counter system reduced to row echelon form."""

    def __init__(self, wiring, joltages):
        self.rows = len(joltages)
        self.cols = len(wiring)
        self.data = [[0.0] * (self.cols + 1) for _ in range(self.rows)]
        for column, button in enumerate(wiring):
            for row in button:
                if 0 <= row < self.rows:
                    self.data[row][column] = 1.0
        for row, value in zip(self.data, joltages):
            row[self.cols] = float(value)
        self.dependents = []
        self.independents = []
        self._eliminate()

    def _eliminate(self):
        pivot = 0
        column = 0
        while pivot < self.rows and column < self.cols:
            best = max(
                range(pivot, self.rows), key=lambda row: abs(self.data[row][column])
            )
            if abs(self.data[best][column]) < EPSILON:
                column += 1
                continue

            self.data[pivot], self.data[best] = self.data[best], self.data[pivot]
            self.dependents.append(column)

            pivot_row = self.data[pivot]
            divisor = pivot_row[column]
            pivot_row[column:] = [value / divisor for value in pivot_row[column:]]

            for index, row in enumerate(self.data):
                if index == pivot:
                    continue
                factor = row[column]
                row[column:] = [
                    value - factor * base
                    for value, base in zip(row[column:], pivot_row[column:])
                ]
            pivot += 1
            column += 1

        pivots = set(self.dependents)
        self.independents = [c for c in range(self.cols) if c not in pivots]

    def valid(self, values):
        """Total presses for these free-button values, or None if they give no solution."""
        total = sum(values)
        for row in self.data[: len(self.dependents)]:
            value = row[self.cols]
            for column, presses in zip(self.independents, values):
                value -= row[column] * presses
            if value < -EPSILON:
                return None
            rounded = round(value)
            if abs(value - rounded) > EPSILON:
                return None
            total += int(rounded)
        return total


def min_presses(wiring, joltages):
    """Fewest button presses that bring every counter to its joltage requirement."""
    matrix = Matrix(wiring, joltages)
    limit = max(joltages) + 1
    values = [0] * len(matrix.independents)
    best = None

    def search(index):
        nonlocal best
        if index == len(values):
            total = matrix.valid(values)
            if total is not None and (best is None or total < best):
                best = total
            return
        current = sum(values[:index])
        for presses in range(limit):
            if best is not None and current + presses >= best:
                break
            values[index] = presses
            search(index + 1)

    search(0)
    if best is None:
        raise ValueError("no combination of presses meets the joltage requirements")
    return best


def part2(text):
    """Total presses needed to meet every machine's joltage requirements."""
    return sum(
        min_presses(machine.wiring, machine.joltages) for machine in _machines(text)
    )