"""Simulate robots patrolling a wrapping 101 x 103 room."""

import re
from collections import defaultdict
from math import prod

NROWS = 103
NCOLS = 101
SECONDS = 100

_INTEGER = re.compile(r"[+-]?[0-9]+")

Robot = tuple[int, int, int, int]


def _strip_prefix(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


def _parse_pair(text: str) -> tuple[int, int]:
    left, sep, right = text.partition(",")
    if not sep:
        raise ValueError(f"invalid pair format: {text!r}")
    if not (_INTEGER.fullmatch(left) and _INTEGER.fullmatch(right)):
        raise ValueError(f"invalid integer in pair: {text!r}")
    return int(left), int(right)


def parse_robot(line: str) -> Robot:
    """Parse ``p=X,Y v=VX,VY`` into (X, Y, VX, VY)."""
    position, sep, velocity = line.partition(" ")
    if not sep:
        raise ValueError(f"invalid input format: {line!r}")
    px, py = _parse_pair(_strip_prefix(position, "p="))
    vx, vy = _parse_pair(_strip_prefix(velocity, "v="))
    return px, py, vx, vy


def part1(inp: str) -> int:
    """Safety factor: product of robot counts per quadrant after 100 seconds."""
    quadrants = [0, 0, 0, 0]
    mid_row, mid_col = NROWS // 2, NCOLS // 2
    for line in inp.splitlines():
        col, row, v_col, v_row = parse_robot(line)
        new_row = (row + v_row * SECONDS) % NROWS
        new_col = (col + v_col * SECONDS) % NCOLS
        if new_row == mid_row or new_col == mid_col:
            continue
        quadrants[2 * (new_row > mid_row) + (new_col > mid_col)] += 1
    return prod(quadrants)


def _has_long_run(columns: set[int]) -> bool:
    streak = 0
    previous = None
    for col in sorted(columns):
        streak = streak + 1 if previous is not None and col == previous + 1 else 1
        if streak > 10:
            return True
        previous = col
    return False


def part2(inp: str) -> int:
    """First second at which more than ten robots stand side by side, or -1."""
    robots = [parse_robot(line) for line in inp.splitlines()]
    for second in range(1, NROWS * NCOLS + 1):
        rows: dict[int, set[int]] = defaultdict(set)
        for col, row, v_col, v_row in robots:
            rows[(row + v_row * second) % NROWS].add((col + v_col * second) % NCOLS)
        if any(_has_long_run(columns) for columns in rows.values()):
            return second
    return -1