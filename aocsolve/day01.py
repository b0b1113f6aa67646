"""Compare two columns of location ids."""

from collections import Counter
from collections.abc import Iterator


def _pairs(inp: str) -> Iterator[tuple[int, int]]:
    for line in inp.splitlines():
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"expected two columns in line {line!r}")
        yield int(fields[0]), int(fields[1])


def part1(inp: str) -> int:
    """Total distance between the sorted left and right columns."""
    pairs = list(_pairs(inp))
    left = sorted(a for a, _ in pairs)
    right = sorted(b for _, b in pairs)
    return sum(abs(b - a) for a, b in zip(left, right))


def part2(inp: str) -> int:
    """Similarity score: each left value times how often it occurs on the right."""
    pairs = list(_pairs(inp))
    left = Counter(a for a, _ in pairs)
    right = Counter(b for _, b in pairs)
    return sum(value * count * right[value] for value, count in left.items())