"""Day 2: summing product IDs made of repeated digit sequences."""


def parse(text):
    """Return the comma-separated ``low-high`` ranges as pairs of integers."""
    ranges = []
    for item in text.strip().split(","):
        low, high = item.split("-")
        ranges.append((int(low), int(high)))
    return ranges


def is_doubled(number):
    """True when the number's digits are one sequence written twice."""
    digits = str(number)
    half, odd = divmod(len(digits), 2)
    return not odd and digits[:half] == digits[half:]


def is_repeated(number):
    """True when the number's digits are one sequence written at least twice."""
    digits = str(number)
    length = len(digits)
    return any(
        length % width == 0 and digits == digits[:width] * (length // width)
        for width in range(1, length // 2 + 1)
    )


def _sum_matching(text, predicate):
    return sum(
        number
        for low, high in parse(text)
        for number in range(low, high + 1)
        if predicate(number)
    )


def part1(text):
    """Sum the IDs in all ranges that are a sequence repeated exactly twice."""
    return _sum_matching(text, is_doubled)


def part2(text):
    """Sum the IDs in all ranges that are a sequence repeated two or more times."""
    return _sum_matching(text, is_repeated)