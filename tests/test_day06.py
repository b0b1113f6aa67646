import pytest

from aocsolve import day06

EXAMPLE = "\n".join(
    [
        "....#.....",
        ".........#",
        "..........",
        "..#.......",
        ".......#..",
        "..........",
        ".#..^.....",
        "........#.",
        "#.........",
        "......#...",
    ]
)


def test_part1_example():
    assert day06.part1(EXAMPLE) == 41


def test_part2_example():
    assert day06.part2(EXAMPLE) == 6


def test_part1_straight_up_counts_cells_to_top():
    lines = [".....", ".....", "..^..", ".....", "....."]
    row = next(i for i, line in enumerate(lines) if "^" in line)
    assert day06.part1("\n".join(lines)) == row + 1


def test_part1_straight_right_counts_cells_to_edge():
    lines = ["......", ".>....", "......"]
    col = lines[1].index(">")
    assert day06.part1("\n".join(lines)) == len(lines[1]) - col


def test_part1_bounded_by_grid_size():
    lines = EXAMPLE.splitlines()
    result = day06.part1(EXAMPLE)
    assert 1 <= result <= len(lines) * len(lines[0])


def test_part2_no_obstacles_gives_no_loops():
    assert day06.part2("...\n.^.\n...") == 0


def test_part2_not_more_than_visited_cells():
    assert day06.part2(EXAMPLE) <= day06.part1(EXAMPLE)


@pytest.mark.parametrize("func", [day06.part1, day06.part2])
def test_missing_guard_raises(func):
    with pytest.raises(ValueError):
        func("...\n.#.\n...")


@pytest.mark.parametrize("func", [day06.part1, day06.part2])
def test_empty_input_raises(func):
    with pytest.raises(ValueError):
        func("")