import pytest

from aocsolve.day07 import part1, part2

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20"""


def test_part1_example():
    assert part1(EXAMPLE) == 3749


def test_part2_example():
    assert part2(EXAMPLE) == 11387


def test_multiplication_line():
    assert part1("190: 10 19") == 190


def test_concatenation_only_in_part2():
    assert part1("156: 15 6") == part1("")
    assert part2("156: 15 6") == 156


def test_part2_superset_of_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_line_without_numbers_counts_nothing():
    assert part1("7:") == part1("")


def test_missing_colon():
    with pytest.raises(ValueError):
        part1("190 10 19")