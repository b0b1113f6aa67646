"""Helpers for turning puzzle text into grids and measuring lattice polygons."""

from collections.abc import Iterable, Sequence

_STEPS = {"R": (0, 1), "D": (1, 0), "L": (0, -1), "U": (-1, 0)}
_DIGITS = "0123456789"


def lines_to_char_grid(lines: Sequence[str]) -> list[list[str]]:
    """Build a rectangular grid of characters from a sequence of lines."""
    rows = [list(line) for line in lines]
    if not rows:
        raise ValueError("cannot build a grid from no lines")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("grid lines have different lengths")
    return rows


def to_char_grid(text: str) -> tuple[int, int, list[list[str]]]:
    """Return (rows, columns, grid) for a block of text."""
    grid = lines_to_char_grid(text.splitlines())
    return len(grid), len(grid[0]), grid


def to_digit_grid(text: str) -> list[list[int]]:
    """Return a grid of single-digit integers for a block of text."""
    grid = lines_to_char_grid(text.splitlines())
    for row in grid:
        for cell in row:
            if cell not in _DIGITS:
                raise ValueError(f"not a digit: {cell!r}")
    return [[int(cell) for cell in row] for row in grid]


def _truncating_half(value: int) -> int:
    half = abs(value) // 2
    return half if value >= 0 else -half


def flood_from_paths(paths: Iterable[tuple[int, str]], include_border: bool) -> int:
    """Count lattice points enclosed by a closed path of (distance, direction) steps.

    Directions are R, D, L and U. The border points are counted only when
    ``include_border`` is true.
    """
    twice_area = 0
    perimeter = 0
    row = col = 0
    for distance, direction in paths:
        try:
            d_row, d_col = _STEPS[direction]
        except KeyError:
            raise ValueError(f"unknown direction {direction!r}") from None
        new_row, new_col = row + d_row * distance, col + d_col * distance
        twice_area += row * new_col - col * new_row
        perimeter += distance
        row, col = new_row, new_col

    points = _truncating_half(abs(twice_area) - perimeter) + 1
    if include_border:
        points += perimeter
    return points