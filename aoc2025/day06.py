"""Day 6: evaluating a worksheet of vertically written arithmetic problems."""

import math
import string

_OPERATIONS = {"+": sum, "*": math.prod}


def _operation(symbol):
    try:
        return _OPERATIONS[symbol]
    except KeyError:
        raise ValueError(f"invalid operation {symbol!r}") from None


def part1(text):
    """Sum the results of the problems read as whitespace-separated columns."""
    rows = [line.split() for line in text.splitlines()]
    symbols = rows.pop()
    return sum(
        _operation(symbol)(int(row[column]) for row in rows)
        for column, symbol in enumerate(symbols)
    )


def _column_groups(rows):
    """Yield the numbers of each problem, one number per character column."""
    width = max((len(row) for row in rows), default=0)
    group = []
    for column in range(width):
        digits = "".join(
            row[column]
            for row in rows
            if column < len(row) and row[column] in string.digits
        )
        if digits:
            group.append(int(digits))
        else:
            yield group
            group = []
    if group:
        yield group


def part2(text):
    """Sum the results of the problems with each number written down a column."""
    lines = text.splitlines()
    symbols = lines.pop().split()
    groups = _column_groups(lines)
    return sum(_operation(symbol)(next(groups, [])) for symbol in symbols)