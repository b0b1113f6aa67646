"""Score hiking trails that climb from height 0 to height 9."""

from collections import Counter
from collections.abc import Iterator

from aocsolve.grid import to_digit_grid

Cell = tuple[int, int]


def _neighbours(cell: Cell, nrows: int, ncols: int) -> Iterator[Cell]:
    row, col = cell
    if row > 0:
        yield row - 1, col
    if col > 0:
        yield row, col - 1
    if row < nrows - 1:
        yield row + 1, col
    if col < ncols - 1:
        yield row, col + 1


def _trailheads(grid: list[list[int]]) -> Iterator[Cell]:
    for row, line in enumerate(grid):
        for col, height in enumerate(line):
            if height == 0:
                yield row, col


def part1(inp: str) -> int:
    """Sum over trailheads of the number of distinct peaks they reach."""
    grid = to_digit_grid(inp)
    nrows, ncols = len(grid), len(grid[0])
    total = 0
    for start in _trailheads(grid):
        frontier = {start}
        for height in range(1, 10):
            frontier = {
                (r, c)
                for cell in frontier
                for r, c in _neighbours(cell, nrows, ncols)
                if grid[r][c] == height
            }
        total += len(frontier)
    return total


def part2(inp: str) -> int:
    """Sum over trailheads of the number of distinct trails to any peak."""
    grid = to_digit_grid(inp)
    nrows, ncols = len(grid), len(grid[0])
    total = 0
    for start in _trailheads(grid):
        paths: Counter[Cell] = Counter({start: 1})
        for height in range(1, 10):
            step: Counter[Cell] = Counter()
            for cell, count in paths.items():
                for r, c in _neighbours(cell, nrows, ncols):
                    if grid[r][c] == height:
                        step[(r, c)] += count
            paths = step
        total += sum(paths.values())
    return total