import pytest

from aocsolve.day02 import part1, part2

EXAMPLE = "7 6 4 2 1\n1 2 7 8 9\n9 7 6 2 1\n1 3 2 4 5\n8 6 4 4 1\n1 3 6 7 9"


def _reverse_levels(text):
    return "\n".join(" ".join(reversed(line.split())) for line in text.splitlines())


def test_part1_example():
    assert part1(EXAMPLE) == 2


def test_part2_example():
    assert part2(EXAMPLE) == 4


def test_dampener_never_loses_reports():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_reversal_preserves_safety():
    assert part1(_reverse_levels(EXAMPLE)) == part1(EXAMPLE)
    assert part2(_reverse_levels(EXAMPLE)) == part2(EXAMPLE)


def test_unsafe_line_counts_less_than_safe_line():
    assert part1("1 5 9") < part1("1 4 7")


def test_bad_level():
    with pytest.raises(ValueError):
        part1("1 x 3")