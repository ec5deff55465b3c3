"""Command line entry point: solve one part of one day's puzzle."""

import argparse
import sys
from pathlib import Path

from aoc2025 import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
)

_DAYS = {
    1: day01,
    2: day02,
    3: day03,
    4: day04,
    5: day05,
    6: day06,
    7: day07,
    8: day08,
    9: day09,
    10: day10,
    11: day11,
}
DEFAULT_DAY = 11
DEFAULT_PART = 2


def _default_input(day):
    return Path(f"inputs/day{day:02d}/input.txt")


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="aoc2025", description="Solve a part of a day's puzzle and print the answer."
    )
    parser.add_argument(
        "day", nargs="?", type=int, default=DEFAULT_DAY, choices=sorted(_DAYS)
    )
    parser.add_argument(
        "part", nargs="?", type=int, default=DEFAULT_PART, choices=(1, 2)
    )
    parser.add_argument(
        "-i",
        "--input",
        type=Path,
        help="puzzle input file (default: inputs/dayNN/input.txt)",
    )
    parser.add_argument(
        "--connections",
        type=int,
        default=day08.CONNECTIONS,
        help="connections to make in day 8, part 1",
    )
    return parser


def main(argv=None):
    """Run the chosen solver on its input file and print the result."""
    args = _build_parser().parse_args(argv)
    path = args.input or _default_input(args.day)
    try:
        text = path.read_text()
    except OSError as error:
        print(f"aoc2025: cannot read {path}: {error.strerror}", file=sys.stderr)
        return 1

    module = _DAYS[args.day]
    solver = module.part1 if args.part == 1 else module.part2
    try:
        if (args.day, args.part) == (8, 1):
            result = solver(text, args.connections)
        else:
            result = solver(text)
    except ValueError as error:
        print(f"aoc2025: {error}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())