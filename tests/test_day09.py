import pytest

from aocsolve.day09 import part1, part2

EXAMPLE = "2333133121414131402"


def test_part1_example():
    assert part1(EXAMPLE) == 1928


def test_part2_example():
    assert part2(EXAMPLE) == 2858


def test_part2_nothing_fits():
    assert part2("12345") == 132


@pytest.mark.parametrize("disk", ["1", "7", "9"])
def test_single_file_has_zero_checksum(disk):
    assert part1(disk) == 0
    assert part2(disk) == 0


def test_part1_rejects_non_digits():
    with pytest.raises(ValueError):
        part1("1a3")


def test_part2_rejects_non_digits():
    with pytest.raises(ValueError):
        part2("12a")