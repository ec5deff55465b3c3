"""Day 1: counting how often a safe dial points at zero."""

DIAL_SIZE = 100
START_POSITION = 50


def parse(text):
    """Return the rotations as signed steps: left turns negative, right turns positive."""
    steps = []
    for line in text.splitlines():
        direction, amount = line[:1], line[1:]
        if direction == "L":
            sign = -1
        elif direction == "R":
            sign = 1
        else:
            raise ValueError(f"invalid direction in rotation {line!r}")
        steps.append(sign * int(amount))
    return steps


def part1(text):
    """Count the rotations that leave the dial pointing at zero."""
    position = START_POSITION
    zero_count = 0
    for step in parse(text):
        position = (position + step) % DIAL_SIZE
        if position == 0:
            zero_count += 1
    return zero_count


def part2(text):
    """Count every click at which the dial points at zero, during or after a rotation."""
    position = START_POSITION
    zero_count = 0
    for step in parse(text):
        full_turns, amount = divmod(abs(step), DIAL_SIZE)
        zero_count += full_turns
        new_position = position + amount if step > 0 else position - amount

        if new_position >= position:
            if new_position >= DIAL_SIZE:
                zero_count += 1
            position = new_position % DIAL_SIZE
        else:
            if new_position <= 0 and position > 0:
                zero_count += 1
            position = new_position + DIAL_SIZE if new_position < 0 else new_position
    return zero_count