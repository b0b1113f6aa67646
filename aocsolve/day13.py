"""Find the cheapest button presses that reach each claw-machine prize."""

Pair = tuple[int, int]

_PRIZE_OFFSET = 10000000000000


def _number(text: str) -> int:
    return int("".join(c for c in text if c.isascii() and c.isdigit()))


def _parse_pair(line: str) -> Pair:
    left, sep, right = line.partition(",")
    if not sep:
        raise ValueError(f"missing ',' in line {line!r}")
    return _number(left), _number(right)


def find_combo(a: Pair, b: Pair, prize: Pair) -> int | None:
    """Token cost (3 per A press, 1 per B press) of reaching ``prize``, or None."""
    den_a = b[0] * a[1] - b[1] * a[0]
    den_b = a[0] * b[1] - a[1] * b[0]
    if den_a == 0 or den_b == 0:
        return None

    num_a = b[0] * prize[1] - b[1] * prize[0]
    num_b = a[0] * prize[1] - a[1] * prize[0]
    if num_a % den_a or num_b % den_b:
        return None

    presses_a = num_a // den_a
    presses_b = num_b // den_b
    if (
        a[0] * presses_a + b[0] * presses_b != prize[0]
        or a[1] * presses_a + b[1] * presses_b != prize[1]
    ):
        raise ArithmeticError("solution does not reproduce the prize")
    return 3 * presses_a + presses_b


def _total_tokens(inp: str, offset: int) -> int:
    a: Pair = (0, 0)
    b: Pair = (0, 0)
    total = 0
    for index, line in enumerate(inp.splitlines()):
        position = index % 4
        if position == 0:
            a = _parse_pair(line)
        elif position == 1:
            b = _parse_pair(line)
        elif position == 2:
            x, y = _parse_pair(line)
            cost = find_combo(a, b, (x + offset, y + offset))
            if cost is not None:
                total += cost
    return total


def part1(inp: str) -> int:
    """Fewest tokens to win every winnable prize."""
    return _total_tokens(inp, 0)


def part2(inp: str) -> int:
    """Same as part1 with every prize moved far out along both axes."""
    return _total_tokens(inp, _PRIZE_OFFSET)