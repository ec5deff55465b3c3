# aoc2025

Solutions to the Advent of Code 2025 puzzles, days 1 to 11. The package uses
only the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `aoc2025`. It solves one part of one day's
puzzle and prints the answer:

```
aoc2025 5 1
aoc2025 8 1 --connections 1000
aoc2025 3 2 --input my-input.txt
```

- `day` (positional, 1 to 11, default 11) picks the day.
- `part` (positional, 1 or 2, default 2) picks the part.
- `-i` / `--input` names the input file. Without it the input is read from
  `inputs/dayNN/input.txt` relative to the current directory, for example
  `inputs/day07/input.txt`.
- `--connections` sets how many shortest connections day 8, part 1 makes
  (default 10).

If the input file cannot be read, or the input is malformed, the command
prints a message to standard error and exits with status 1.

```
aoc2025 --help
```

lists these options.

## Library use

Each day lives in its own module, `aoc2025.day01` to `aoc2025.day11`. Every
module has `part1(text)` and `part2(text)`, which take the full puzzle input as
a string and return the answer. Malformed input raises `ValueError`.

```python
from pathlib import Path

from aoc2025 import day05

text = Path("inputs/day05/input.txt").read_text()
print(day05.part1(text))
print(day05.part2(text))
```

Day 8's first part also takes the number of shortest connections to make
(default 10):

```python
from aoc2025 import day08

print(day08.part1(text, 1000))
```

Some of the building blocks can be used on their own:

- `aoc2025.day02.is_doubled` and `is_repeated` test whether a number's digits
  are one block written twice, or two or more times.
- `aoc2025.day03.max_joltage(bank, length)` picks the largest number of the
  given length from a row of digits, keeping their order.
- `aoc2025.day04.accessible_rolls(grid)` returns the positions of rolls with
  fewer than four neighbouring rolls; `parse_grid(text)` builds the grid.
- `aoc2025.day05.Range` is an inclusive range of IDs supporting `in` and
  `size`.
- `aoc2025.structs` provides `Point` (with integer `dist`), `Edge` (ordered by
  distance) and a union-find `DisjointSets`.
- `aoc2025.day08.edges(points)` lists every pair of points as an edge, shortest
  first.
- `aoc2025.day09.render_outline(points, scale)` draws a scaled-down text
  picture of a polygon's outline: `+` for tiles, `-` and `|` for edges.
- `aoc2025.day10.parse_machine(line)` reads one machine description;
  `min_presses(wiring, joltages)` solves a machine's counters by Gaussian
  elimination (`Matrix`) and a bounded search over the free variables.
- `aoc2025.day11.count_paths(adjacency, start, dest)` counts the paths between
  two nodes of a directed acyclic graph; `count_simple_paths(adjacency)` counts
  the paths from `you` to `out` that visit no device twice.

## What it does not do

The package does not download puzzle inputs or submit answers; you supply
each day's input file yourself.