"""Simulate a warehouse robot pushing boxes around."""

from aocsolve.grid import lines_to_char_grid

Cell = tuple[int, int]
Grid = list[list[str]]

_MOVES = {">": (0, 1), "v": (1, 0), "<": (0, -1), "^": (-1, 0)}
_WIDE = {"#": "##", "O": "[]", ".": "..", "@": "@."}
_NARROW_BOXES = {"O": 1}
_WIDE_BOXES = {"[": 2, "]": 2}


def _cell(grid: Grid, row: int, col: int) -> str:
    if not (0 <= row < len(grid) and 0 <= col < len(grid[0])):
        raise IndexError(f"moved off the map at {(row, col)}")
    return grid[row][col]


def _parse(inp: str, wide: bool) -> tuple[Grid, str]:
    text = "".join(_WIDE.get(c, c) for c in inp) if wide else inp
    map_lines = []
    for line in text.splitlines():
        if not line:
            break
        map_lines.append(line)
    grid = lines_to_char_grid(map_lines)
    moves = "".join(c for c in inp if c in _MOVES)
    return grid, moves


def _find_robot(grid: Grid) -> Cell:
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char == "@":
                return row, col
    raise ValueError("no robot on the map")


def _push_line(grid: Grid, robot: Cell, delta: Cell, box_widths: dict[str, int]) -> bool:
    """Push along a straight line; return whether the robot moved."""
    row, col = robot
    d_row, d_col = delta
    reach = 0
    while True:
        char = _cell(grid, row + (reach + 1) * d_row, col + (reach + 1) * d_col)
        if char == ".":
            reach += 1
            break
        if char == "#":
            return False
        width = box_widths.get(char)
        if width is None:
            raise ValueError(f"unknown cell content {char!r}")
        reach += width

    for step in range(reach, 1, -1):
        previous = grid[row + (step - 1) * d_row][col + (step - 1) * d_col]
        if previous in box_widths:
            grid[row + step * d_row][col + step * d_col] = previous
    grid[row][col] = "."
    grid[row + d_row][col + d_col] = "@"
    return True


def _push_wide(grid: Grid, robot: Cell, d_row: int) -> bool:
    """Push wide boxes up or down; return whether the robot moved."""
    front: set[Cell] = {robot}
    to_move: set[Cell] = {robot}
    while True:
        new_front: set[Cell] = set()
        for row, col in front:
            next_row = row + d_row
            char = _cell(grid, next_row, col)
            if char == "#":
                return False
            if char == ".":
                continue
            if char == "[":
                partner = col + 1
            elif char == "]":
                partner = col - 1
            else:
                raise ValueError(f"unknown cell content {char!r}")
            new_front.update({(next_row, col), (next_row, partner)})
        to_move |= new_front
        if all(grid[r][c] == "." for r, c in new_front):
            break
        front = new_front

    for row, col in sorted(to_move, reverse=d_row > 0):
        char = grid[row][col]
        grid[row][col] = "."
        grid[row + d_row][col] = char
    return True


def _gps_sum(grid: Grid, box: str) -> int:
    return sum(
        100 * row + col
        for row, line in enumerate(grid)
        for col, char in enumerate(line)
        if char == box
    )


def _simulate(inp: str, wide: bool) -> Grid:
    grid, moves = _parse(inp, wide)
    robot = _find_robot(grid)
    for move in moves:
        d_row, d_col = _MOVES[move]
        if wide and d_row:
            moved = _push_wide(grid, robot, d_row)
        else:
            boxes = _WIDE_BOXES if wide else _NARROW_BOXES
            moved = _push_line(grid, robot, (d_row, d_col), boxes)
        if moved:
            robot = (robot[0] + d_row, robot[1] + d_col)
    return grid


def part1(inp: str) -> int:
    """Sum of box GPS coordinates after all moves."""
    return _gps_sum(_simulate(inp, wide=False), "O")


def part2(inp: str) -> int:
    """Sum of box GPS coordinates after all moves in the doubled-width warehouse."""
    return _gps_sum(_simulate(inp, wide=True), "[")