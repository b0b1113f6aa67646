"""Follow a closed loop of pipes and count the tiles it encloses."""

from collections.abc import Iterable, Iterator, Sequence

Cell = tuple[int, int]

_DELTAS = {"up": (-1, 0), "right": (0, 1), "down": (1, 0), "left": (0, -1)}

# Pipes that accept a connection from the start tile when entered in a direction.
_ENTRIES = {"up": "7|F", "right": "J-7", "down": "J|L", "left": "F-L"}

# For each pipe: direction of travel on entry -> direction of travel on exit.
_TURNS = {
    "|": {"up": "up", "down": "down"},
    "-": {"left": "left", "right": "right"},
    "F": {"up": "right", "left": "down"},
    "L": {"down": "right", "left": "up"},
    "J": {"down": "left", "right": "up"},
    "7": {"up": "left", "right": "down"},
}

_VERTICAL = "|"
_HORIZONTAL = "-"
_UP_CORNER = "U"
_DOWN_CORNER = "D"

_KINDS = {
    "|": _VERTICAL,
    "-": _HORIZONTAL,
    "L": _UP_CORNER,
    "J": _UP_CORNER,
    "F": _DOWN_CORNER,
    "7": _DOWN_CORNER,
}


def _find_start(rows: Sequence[str]) -> Cell:
    for row, line in enumerate(rows):
        col = line.find("S")
        if col >= 0:
            return row, col
    raise ValueError("no start tile 'S' on the map")


def _on_map(rows: Sequence[str], cell: Cell) -> bool:
    row, col = cell
    return 0 <= row < len(rows) and 0 <= col < len(rows[row])


def _step(cell: Cell, direction: str) -> Cell:
    d_row, d_col = _DELTAS[direction]
    return cell[0] + d_row, cell[1] + d_col


def _start_exits(rows: Sequence[str], start: Cell) -> list[str]:
    """Directions, in the order up, right, down, left, that lead out of the start."""
    exits = []
    for direction, accepted in _ENTRIES.items():
        neighbour = _step(start, direction)
        if _on_map(rows, neighbour) and rows[neighbour[0]][neighbour[1]] in accepted:
            exits.append(direction)
    return exits


def _walk(rows: Sequence[str], start: Cell, direction: str) -> Iterator[Cell]:
    """Yield every cell of the loop once, beginning with the start."""
    yield start
    cell = _step(start, direction)
    while cell != start:
        if not _on_map(rows, cell):
            raise ValueError(f"loop leaves the map at {cell}")
        pipe = rows[cell[0]][cell[1]]
        turns = _TURNS.get(pipe)
        if turns is None:
            raise ValueError(f"unknown pipe {pipe!r} at {cell}")
        if direction not in turns:
            raise ValueError(f"wrong direction {direction} into {pipe!r} at {cell}")
        yield cell
        direction = turns[direction]
        cell = _step(cell, direction)


def part1(lines: Iterable[str]) -> int:
    """Number of steps to the point of the loop farthest from the start."""
    rows = list(lines)
    start = _find_start(rows)
    exits = _start_exits(rows, start)
    if not exits:
        raise ValueError("couldn't find a starting path")
    return sum(1 for _ in _walk(rows, start, exits[0])) // 2


def _start_kind(first: str, second: str) -> str:
    pair = {first, second}
    if pair == {"up", "down"}:
        return _VERTICAL
    if pair == {"left", "right"}:
        return _HORIZONTAL
    if "up" in pair:
        return _UP_CORNER
    return _DOWN_CORNER


def part2(lines: Iterable[str]) -> int:
    """Number of tiles enclosed by the loop."""
    rows = list(lines)
    start = _find_start(rows)
    exits = _start_exits(rows, start)
    if len(exits) < 2:
        raise ValueError(f"start tile has too few connections: {exits}")
    first, second = exits[:2]

    kinds: dict[Cell, str] = {}
    for cell in _walk(rows, start, first):
        if cell != start:
            kinds[cell] = _KINDS[rows[cell[0]][cell[1]]]
    kinds[start] = _start_kind(first, second)

    enclosed = 0
    for row, line in enumerate(rows):
        inside = False
        corner: str | None = None
        for col, _ in enumerate(line):
            kind = kinds.get((row, col))
            if kind is None:
                if inside:
                    enclosed += 1
            elif kind == _VERTICAL:
                inside = not inside
            elif kind in (_UP_CORNER, _DOWN_CORNER):
                if corner is None:
                    corner = kind
                elif corner == kind:
                    corner = None
                else:
                    inside = not inside
                    corner = None
    return enclosed