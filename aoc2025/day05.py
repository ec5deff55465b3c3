"""Day 5: checking ingredient IDs against ranges of fresh IDs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Range:
    """An inclusive range of IDs."""

    low: int
    high: int

    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(f"range {self.low}-{self.high} is reversed")

    def __contains__(self, value):
        return self.low <= value <= self.high

    @property
    def size(self):
        """Number of IDs in the range."""
        return self.high - self.low + 1


def parse(text):
    """Return the fresh ranges and the available IDs, split at the first blank line."""
    lines = iter(text.splitlines())
    ranges = []
    for line in lines:
        if not line:
            break
        low, high = line.split("-")
        ranges.append(Range(int(low), int(high)))
    ids = [int(line) for line in lines]
    return ranges, ids


def part1(text):
    """Count the available IDs that fall in at least one fresh range."""
    ranges, ids = parse(text)
    return sum(1 for value in ids if any(value in r for r in ranges))


def part2(text):
    """Count the distinct IDs covered by the fresh ranges."""
    ranges, _ = parse(text)
    total = 0
    current = None
    for r in sorted(ranges, key=lambda item: item.low):
        if current is None or current.high < r.low:
            current = r
            total += r.size
        elif r.high > current.high:
            total += r.high - current.high
            current = Range(current.low, r.high)
    return total