"""Price the fencing needed around garden plot regions."""

from collections.abc import Iterable, Iterator

from aocsolve.grid import to_char_grid

Cell = tuple[int, int]

_SIDES = {"E": (0, 1), "S": (1, 0), "W": (0, -1), "N": (-1, 0)}


def _regions(grid: list[list[str]], nrows: int, ncols: int) -> Iterator[set[Cell]]:
    """Yield every connected region of equal plants as a set of cells."""
    checked: set[Cell] = set()
    for row in range(nrows):
        for col in range(ncols):
            if (row, col) in checked:
                continue
            plant = grid[row][col]
            region: set[Cell] = set()
            unchecked = [(row, col)]
            while unchecked:
                cell = unchecked.pop()
                if cell in checked:
                    continue
                checked.add(cell)
                region.add(cell)
                r, c = cell
                for d_row, d_col in _SIDES.values():
                    nr, nc = r + d_row, c + d_col
                    if (
                        0 <= nr < nrows
                        and 0 <= nc < ncols
                        and grid[nr][nc] == plant
                        and (nr, nc) not in checked
                    ):
                        unchecked.append((nr, nc))
            yield region


def _walls(region: set[Cell]) -> Iterator[tuple[str, int, int]]:
    """Yield (side, row, col) for every cell edge on the region's boundary."""
    for row, col in region:
        for side, (d_row, d_col) in _SIDES.items():
            if (row + d_row, col + d_col) not in region:
                yield side, row, col


def _count_runs(points: Iterable[tuple[int, int]]) -> int:
    """Count maximal runs of consecutive minor values sharing a major value."""
    runs = 0
    previous: tuple[int, int] | None = None
    for major, minor in sorted(points):
        if previous is None or not (major == previous[0] and minor == previous[1] + 1):
            runs += 1
        previous = (major, minor)
    return runs


def _sides(region: set[Cell]) -> int:
    walls = list(_walls(region))
    total = 0
    for side in ("E", "W"):
        total += _count_runs((col, row) for s, row, col in walls if s == side)
    for side in ("N", "S"):
        total += _count_runs((row, col) for s, row, col in walls if s == side)
    return total


def part1(inp: str) -> int:
    """Total price: area times perimeter for every region."""
    nrows, ncols, grid = to_char_grid(inp)
    return sum(
        len(region) * sum(1 for _ in _walls(region))
        for region in _regions(grid, nrows, ncols)
    )


def part2(inp: str) -> int:
    """Bulk-discount price: area times number of straight sides for every region."""
    nrows, ncols, grid = to_char_grid(inp)
    return sum(len(region) * _sides(region) for region in _regions(grid, nrows, ncols))