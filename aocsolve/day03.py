"""Sum the valid multiplication instructions in corrupted memory."""

import re

_MUL = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)")
_INSTRUCTION = re.compile(r"mul\(([0-9]{1,3}),([0-9]{1,3})\)|do\(\)|don't\(\)")


def part1(inp: str) -> int:
    """Sum every mul(a,b) product."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(inp))


def part2(inp: str) -> int:
    """Sum mul(a,b) products, honouring do() and don't() switches."""
    total = 0
    enabled = True
    for match in _INSTRUCTION.finditer(inp):
        text = match.group(0)
        if text == "do()":
            enabled = True
        elif text == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total