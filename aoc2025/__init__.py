"""Solutions to the Advent of Code 2025 puzzles, days 1 to 11, with a command line runner."""

__version__ = "0.1.0"