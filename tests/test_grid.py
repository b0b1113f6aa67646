import pytest

from aocsolve.grid import (
    flood_from_paths,
    lines_to_char_grid,
    to_char_grid,
    to_digit_grid,
)

LAGOON = [
    (6, "R"), (5, "D"), (2, "L"), (2, "D"), (2, "R"), (2, "D"), (5, "L"),
    (2, "U"), (1, "L"), (2, "U"), (2, "R"), (3, "U"), (2, "L"), (2, "U"),
]

_OPPOSITE = {"R": "L", "L": "R", "U": "D", "D": "U"}


def test_lines_to_char_grid():
    assert lines_to_char_grid(["xy", "zw"]) == [["x", "y"], ["z", "w"]]


def test_to_char_grid_shape_and_content():
    assert to_char_grid("abc\ndef") == (2, 3, [["a", "b", "c"], ["d", "e", "f"]])


def test_ragged_grid_rejected():
    with pytest.raises(ValueError):
        to_char_grid("abc\nde")


def test_empty_grid_rejected():
    with pytest.raises(ValueError):
        lines_to_char_grid([])


def test_to_digit_grid():
    assert to_digit_grid("12\n34") == [[1, 2], [3, 4]]


def test_to_digit_grid_rejects_letters():
    with pytest.raises(ValueError):
        to_digit_grid("1a\n23")


def test_flood_with_border_example():
    assert flood_from_paths(LAGOON, True) == 62


def test_border_adds_perimeter():
    perimeter = sum(distance for distance, _ in LAGOON)
    assert flood_from_paths(LAGOON, True) - flood_from_paths(LAGOON, False) == perimeter


def test_reverse_traversal_gives_same_count():
    reverse = [(d, _OPPOSITE[direction]) for d, direction in reversed(LAGOON)]
    assert flood_from_paths(reverse, True) == flood_from_paths(LAGOON, True)
    assert flood_from_paths(reverse, False) == flood_from_paths(LAGOON, False)


def test_unknown_direction():
    with pytest.raises(ValueError):
        flood_from_paths([(1, "X")], False)