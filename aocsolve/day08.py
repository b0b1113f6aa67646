"""Count antinodes produced by pairs of same-frequency antennas."""


def _parse(inp: str) -> tuple[int, str]:
    """Return the side length of the (square) map and its cells in reading order."""
    lines = inp.splitlines()
    return len(lines), "".join(lines)


def _antennas(cells: str):
    """Yield (index, earlier indices of the same frequency) for every antenna."""
    seen: dict[str, list[int]] = {}
    for index, char in enumerate(cells):
        if char == ".":
            continue
        earlier = seen.setdefault(char, [])
        yield index, list(earlier)
        earlier.append(index)


def part1(inp: str) -> int:
    """Antinodes one pair-distance beyond each antenna of a pair."""
    n, cells = _parse(inp)
    found: set[int] = set()
    for index, earlier in _antennas(cells):
        row, col = divmod(index, n)
        for other in earlier:
            o_row, o_col = divmod(other, n)
            if 2 * o_row - row >= 0 and 0 <= 2 * o_col - col < n:
                found.add(2 * other - index)
            if 2 * row - o_row < n and 0 <= 2 * col - o_col < n:
                found.add(2 * index - other)
    return len(found)


def part2(inp: str) -> int:
    """Antinodes at every grid point in line with a pair of antennas."""
    n, cells = _parse(inp)
    found: set[int] = set()
    for index, earlier in _antennas(cells):
        row, col = divmod(index, n)
        for other in earlier:
            o_row, o_col = divmod(other, n)
            if o_row == row:
                found.update(o_row + c for c in range(n))
            elif o_col == col:
                found.update(r + o_col for r in range(n))
            else:
                d_row, d_col = row - o_row, col - o_col
                r, c = o_row, o_col
                for _ in range(o_row):
                    r, c = r - d_row, c - d_col
                    if r >= 0 and 0 <= c < n:
                        found.add(n * r + c)
                    else:
                        break
                found.add(n * o_row + o_col)
                r, c = o_row, o_col
                for _ in range(o_row, n):
                    r, c = r + d_row, c + d_col
                    if r < n and 0 <= c < n:
                        found.add(n * r + c)
                    else:
                        break
    return len(found)