"""Trace a patrolling guard and find obstructions that trap it in a loop."""

from __future__ import annotations

from dataclasses import dataclass, field

Cell = tuple[int, int]

_TURN = {"^": ">", ">": "v", "v": "<", "<": "^"}


@dataclass
class _Lab:
    nrows: int
    ncols: int
    by_row: dict[int, frozenset[int]] = field(default_factory=dict)
    by_col: dict[int, frozenset[int]] = field(default_factory=dict)

    def with_obstacle(self, row: int, col: int) -> _Lab:
        """Return a copy of the lab with one more obstacle."""
        by_row = dict(self.by_row)
        by_col = dict(self.by_col)
        by_row[row] = by_row.get(row, frozenset()) | {col}
        by_col[col] = by_col.get(col, frozenset()) | {row}
        return _Lab(self.nrows, self.ncols, by_row, by_col)

    def segment(self, pos: Cell, direction: str) -> list[Cell]:
        """Cells walked from ``pos`` (inclusive) up to the next obstacle or edge."""
        row, col = pos
        if direction == "^":
            top = max((r for r in self.by_col.get(col, ()) if r < row), default=-1)
            return [(r, col) for r in range(row, top, -1)]
        if direction == ">":
            right = min(
                (c for c in self.by_row.get(row, ()) if c > col), default=self.ncols
            )
            return [(row, c) for c in range(col, right)]
        if direction == "v":
            bottom = min(
                (r for r in self.by_col.get(col, ()) if r > row), default=self.nrows
            )
            return [(r, col) for r in range(row, bottom)]
        if direction == "<":
            left = max((c for c in self.by_row.get(row, ()) if c < col), default=-1)
            return [(row, c) for c in range(col, left, -1)]
        raise ValueError(f"unknown direction {direction!r}")

    def at_edge(self, cell: Cell, direction: str) -> bool:
        """True when stepping onto ``cell`` in ``direction`` reaches the lab's edge."""
        row, col = cell
        if direction == "^":
            return row == 0
        if direction == ">":
            return col == self.ncols - 1
        if direction == "v":
            return row == self.nrows - 1
        return col == 0


def _parse(inp: str) -> tuple[_Lab, list[tuple[Cell, str]]]:
    lines = inp.splitlines()
    if not lines:
        raise ValueError("empty map")
    rows: dict[int, set[int]] = {}
    cols: dict[int, set[int]] = {}
    guards: list[tuple[Cell, str]] = []
    for i, line in enumerate(lines):
        for j, char in enumerate(line):
            if char == "#":
                rows.setdefault(i, set()).add(j)
                cols.setdefault(j, set()).add(i)
            elif char in _TURN:
                guards.append(((i, j), char))
    if not guards:
        raise ValueError("no guard on the map")
    lab = _Lab(
        nrows=len(lines),
        ncols=len(lines[0]),
        by_row={k: frozenset(v) for k, v in rows.items()},
        by_col={k: frozenset(v) for k, v in cols.items()},
    )
    return lab, guards


def part1(inp: str) -> int:
    """Number of distinct cells the guard visits before leaving the map."""
    lab, guards = _parse(inp)
    stepped: set[Cell] = {cell for cell, _ in guards}
    pos, direction = guards[-1]
    while True:
        cells = lab.segment(pos, direction)
        stepped.update(cells)
        if any(lab.at_edge(cell, direction) for cell in cells):
            return len(stepped)
        pos = cells[-1]
        direction = _TURN[direction]


def _loops(
    lab: _Lab, stepped: dict[Cell, set[str]], pos: Cell, direction: str
) -> bool:
    """Whether a guard at ``pos`` heading ``direction`` ends up walking in circles."""
    local: dict[Cell, set[str]] = {}
    while True:
        cells = lab.segment(pos, direction)
        for cell in cells:
            if lab.at_edge(cell, direction):
                return False
            seen = local.get(cell)
            if seen is None:
                seen = local[cell] = set(stepped.get(cell, ()))
            if direction in seen:
                return True
            seen.add(direction)
        pos = cells[-1]
        direction = _TURN[direction]


def part2(inp: str) -> int:
    """Number of positions where one extra obstacle makes the guard loop."""
    lab, guards = _parse(inp)
    stepped: dict[Cell, set[str]] = {cell: {d} for cell, d in guards}
    pos, direction = guards[-1]

    tested: set[Cell] = set()
    loops = 0
    in_grid = True
    while in_grid:
        full = lab.segment(pos, direction)
        turned = _TURN[direction]
        for cell in full[1:]:
            if cell not in tested:
                tested.add(cell)
                if _loops(lab.with_obstacle(*cell), stepped, pos, turned):
                    loops += 1
            pos = cell
            stepped.setdefault(cell, set()).add(direction)
            if lab.at_edge(cell, direction):
                in_grid = False
        pos = full[-1]
        direction = turned
    return loops