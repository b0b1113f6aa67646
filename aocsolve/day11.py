"""Simulate blinking at stones that split and multiply."""

from collections import Counter


def next_stones(stone: int) -> list[int]:
    """Return the stones that replace ``stone`` after one blink."""
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * 2024]


def blink(stones: dict[int, int], memo: dict[int, list[int]]) -> dict[int, int]:
    """Blink once over stone counts, caching each stone's successors in ``memo``."""
    result: Counter[int] = Counter()
    for stone, count in stones.items():
        successors = memo.get(stone)
        if successors is None:
            successors = memo[stone] = next_stones(stone)
        for new_stone in successors:
            result[new_stone] += count
    return dict(result)


def _parse(inp: str) -> dict[int, int]:
    stones = [int(field) for field in inp.split()]
    if any(stone < 0 for stone in stones):
        raise ValueError("stone numbers must not be negative")
    return dict.fromkeys(stones, 1)


def _count_after(inp: str, blinks: int) -> int:
    stones = _parse(inp)
    memo: dict[int, list[int]] = {}
    for _ in range(blinks):
        stones = blink(stones, memo)
    return sum(stones.values())


def part1(inp: str) -> int:
    """Number of stones after 25 blinks."""
    return _count_after(inp, 25)


def part2(inp: str) -> int:
    """Number of stones after 75 blinks."""
    return _count_after(inp, 75)