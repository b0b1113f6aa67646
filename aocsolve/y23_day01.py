"""Recover calibration values from lines of amended text."""

from collections.abc import Iterable

_DIGITS = "0123456789"
_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}


def _digit_at(line: str, start: int) -> int | None:
    char = line[start]
    if char in _DIGITS:
        return int(char)
    for word, value in _WORDS.items():
        if line.startswith(word, start):
            return value
    return None


def _digit_ending_at(line: str, end: int) -> int | None:
    char = line[end - 1]
    if char in _DIGITS:
        return int(char)
    for word, value in _WORDS.items():
        if line.endswith(word, 0, end):
            return value
    return None


def part1(lines: Iterable[str]) -> int:
    """Sum of first and last digit pairs on each line."""
    total = 0
    for line in lines:
        digits = [int(c) for c in line if c in _DIGITS]
        if not digits:
            raise ValueError(f"no digit in line {line!r}")
        total += 10 * digits[0] + digits[-1]
    return total


def part2(lines: Iterable[str]) -> int:
    """Same as part1 but spelled-out digits count too."""
    total = 0
    for line in lines:
        first = next(
            (d for i in range(len(line)) if (d := _digit_at(line, i)) is not None), 0
        )
        last = next(
            (
                d
                for end in range(len(line), 0, -1)
                if (d := _digit_ending_at(line, end)) is not None
            ),
            0,
        )
        total += 10 * first + last
    return total