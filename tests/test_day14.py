import pytest

from aocsolve.day14 import parse_robot, part1, part2

TOP_LEFT = "p=0,0 v=0,0"
TOP_RIGHT = "p=100,0 v=0,0"
BOTTOM_LEFT = "p=0,102 v=0,0"
BOTTOM_RIGHT = "p=100,102 v=0,0"
QUADRANTS = [TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT, BOTTOM_RIGHT]


def test_parse_robot():
    assert parse_robot("p=0,4 v=3,-3") == (0, 4, 3, -3)
    assert parse_robot("p=10,20 v=-1,+2") == (10, 20, -1, 2)


@pytest.mark.parametrize("line", ["p=0,4", "p=0;4 v=1,1", "p=a,4 v=1,1", "p=1,2 v=3"])
def test_parse_robot_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_robot(line)


def test_part1_doubling_one_quadrant_doubles_the_factor():
    base = "\n".join(QUADRANTS)
    doubled = "\n".join(QUADRANTS + [TOP_LEFT])
    assert part1(base) > 0
    assert part1(doubled) == 2 * part1(base)


def test_part1_robots_on_middle_lines_are_ignored():
    base = "\n".join(QUADRANTS)
    middle = "\n".join(QUADRANTS + ["p=50,3 v=0,0", "p=3,51 v=0,0"])
    assert part1(middle) == part1(base)


def test_part1_full_cycle_velocity_matches_stationary():
    stationary = "\n".join(QUADRANTS)
    cycling = "\n".join(QUADRANTS[1:] + ["p=0,0 v=101,103"])
    assert part1(cycling) == part1(stationary)


def test_part1_empty_quadrant_gives_zero():
    assert part1("\n".join([TOP_LEFT, TOP_RIGHT, BOTTOM_LEFT])) == 0


def test_part1_rejects_malformed_input():
    with pytest.raises(ValueError):
        part1("nonsense")


def test_part2_line_present_immediately():
    line = "\n".join(f"p={c},5 v=0,0" for c in range(11))
    assert part2(line) == 1


def test_part2_short_line_never_matches():
    line = "\n".join(f"p={c},5 v=0,0" for c in range(10))
    assert part2(line) == -1


def test_part2_robots_converge_into_a_line():
    robots = "\n".join(f"p={c},{3 * c} v=0,{-c}" for c in range(11))
    assert part2(robots) == 3


def test_part2_rejects_malformed_input():
    with pytest.raises(ValueError):
        part2("p=1,2")