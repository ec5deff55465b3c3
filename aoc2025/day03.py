"""Day 3: picking the largest joltage from banks of battery digits."""

import string


def max_digit(digits):
    """Return the largest digit and the index of its first occurrence."""
    best_value = 0
    best_index = 0
    for index, char in enumerate(digits):
        if len(char) != 1 or char not in string.digits:
            raise ValueError(f"not a digit: {char!r}")
        value = int(char)
        if value > best_value:
            best_value = value
            best_index = index
    return best_value, best_index


def max_joltage(bank, length):
    """Largest number formed by keeping ``length`` digits of ``bank`` in order."""
    if len(bank) < length:
        raise ValueError(f"bank {bank!r} has fewer than {length} batteries")
    joltage = 0
    start = 0
    for remaining in reversed(range(length)):
        value, offset = max_digit(bank[start : len(bank) - remaining])
        start += offset + 1
        joltage = joltage * 10 + value
    return joltage


def _total(text, length):
    return sum(max_joltage(line, length) for line in text.splitlines())


def part1(text):
    """Sum the best two-battery joltage of every bank."""
    return _total(text, 2)


def part2(text):
    """Sum the best twelve-battery joltage of every bank."""
    return _total(text, 12)