"""Check reactor reports for gradual monotone change."""

from itertools import pairwise

_ALLOWED = frozenset({1, 2, 3})


def _levels(line: str) -> list[int]:
    return [int(field) for field in line.split()]


def _is_safe(levels: list[int]) -> bool:
    diffs = [b - a for a, b in pairwise(levels)]
    return all(d in _ALLOWED for d in diffs) or all(-d in _ALLOWED for d in diffs)


def _is_safe_dampened(levels: list[int]) -> bool:
    return any(
        _is_safe(levels[:skip] + levels[skip + 1:]) for skip in range(len(levels))
    )


def part1(inp: str) -> int:
    """Count reports that are safe as they stand."""
    return sum(_is_safe(_levels(line)) for line in inp.splitlines())


def part2(inp: str) -> int:
    """Count reports that become safe after removing at most one level."""
    return sum(_is_safe_dampened(_levels(line)) for line in inp.splitlines())