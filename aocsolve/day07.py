"""Find operator combinations that make calibration equations true."""

from collections.abc import Callable, Iterable

Operators = Callable[[int, int], Iterable[int]]


def _parse(line: str) -> tuple[int, list[int]]:
    goal, sep, rest = line.partition(":")
    if not sep:
        raise ValueError(f"missing ':' in line {line!r}")
    return int(goal), [int(n) for n in rest.split()]


def _add_mul(x: int, n: int) -> tuple[int, ...]:
    return x * n, x + n


def _add_mul_concat(x: int, n: int) -> tuple[int, ...]:
    return x * n, x + n, int(f"{x}{n}")


def _calibration(inp: str, operators: Operators) -> int:
    total = 0
    for line in inp.splitlines():
        goal, numbers = _parse(line)
        if not numbers:
            continue
        first, *rest = numbers
        results = [first]
        for n in rest:
            results = [value for x in results for value in operators(x, n)]
        if goal in results:
            total += goal
    return total


def part1(inp: str) -> int:
    """Sum the goals reachable with + and *."""
    return _calibration(inp, _add_mul)


def part2(inp: str) -> int:
    """Sum the goals reachable with +, * and digit concatenation."""
    return _calibration(inp, _add_mul_concat)