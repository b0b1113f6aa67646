from aocsolve.day08 import part1, part2

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............"""


def test_part1_example():
    assert part1(EXAMPLE) == 14


def test_part2_example():
    assert part2(EXAMPLE) == 34


def test_relabelling_frequencies_changes_nothing():
    relabelled = EXAMPLE.replace("0", "x").replace("A", "y")
    assert part1(relabelled) == part1(EXAMPLE)
    assert part2(relabelled) == part2(EXAMPLE)


def test_part2_covers_at_least_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)


def test_empty_map_has_no_antinodes():
    grid = "\n".join(["...."] * 4)
    assert part1(grid) == 0
    assert part2(grid) == 0


def test_distinct_frequencies_do_not_interact():
    grid = "a...\n.b..\n..c.\n...d"
    assert part1(grid) == 0
    assert part2(grid) == 0


def test_trailing_newline_is_ignored():
    assert part1(EXAMPLE + "\n") == part1(EXAMPLE)
    assert part2(EXAMPLE + "\n") == part2(EXAMPLE)