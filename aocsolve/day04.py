"""Word search for XMAS."""

from aocsolve.grid import to_char_grid

_DIRECTIONS = [
    (d_row, d_col)
    for d_row in (-1, 0, 1)
    for d_col in (-1, 0, 1)
    if (d_row, d_col) != (0, 0)
]
_DIAGONAL_ENDS = {("M", "S"), ("S", "M")}


def part1(inp: str) -> int:
    """Count XMAS in all eight directions."""
    nrows, ncols, grid = to_char_grid(inp)

    def spells_mas(row: int, col: int, d_row: int, d_col: int) -> bool:
        for step, letter in enumerate("MAS", start=1):
            r, c = row + step * d_row, col + step * d_col
            if not (0 <= r < nrows and 0 <= c < ncols) or grid[r][c] != letter:
                return False
        return True

    return sum(
        spells_mas(row, col, d_row, d_col)
        for row in range(nrows)
        for col in range(ncols)
        if grid[row][col] == "X"
        for d_row, d_col in _DIRECTIONS
    )


def part2(inp: str) -> int:
    """Count crossing pairs of MAS centred on an A."""
    nrows, ncols, grid = to_char_grid(inp)
    return sum(
        1
        for row in range(1, nrows - 1)
        for col in range(1, ncols - 1)
        if grid[row][col] == "A"
        and (grid[row - 1][col - 1], grid[row + 1][col + 1]) in _DIAGONAL_ENDS
        and (grid[row - 1][col + 1], grid[row + 1][col - 1]) in _DIAGONAL_ENDS
    )