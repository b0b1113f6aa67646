import pytest

from aocsolve.day13 import find_combo, part1, part2

EXAMPLE = """Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279"""

OFFSET = 10000000000000


def _machine(a, b, prize):
    return (
        f"Button A: X+{a[0]}, Y+{a[1]}\n"
        f"Button B: X+{b[0]}, Y+{b[1]}\n"
        f"Prize: X={prize[0]}, Y={prize[1]}\n"
    )


def test_part1_example():
    assert part1(EXAMPLE) == 480


def test_find_combo_reaches_constructed_prize():
    a, b = (94, 34), (22, 67)
    presses_a, presses_b = 80, 40
    prize = (a[0] * presses_a + b[0] * presses_b, a[1] * presses_a + b[1] * presses_b)
    assert find_combo(a, b, prize) == 3 * presses_a + presses_b


def test_collinear_buttons_have_no_solution():
    assert find_combo((1, 2), (2, 4), (3, 6)) is None


def test_fractional_presses_rejected():
    assert find_combo((2, 0), (0, 2), (1, 1)) is None


def test_part2_shifts_prizes():
    a, b = (94, 34), (22, 67)
    far = _machine(a, b, (8400, 5400))
    near = _machine(a, b, (8400 + OFFSET, 5400 + OFFSET))
    assert part2(far) == part1(near)


def test_unwinnable_machine_adds_nothing():
    assert part1(_machine((1, 2), (2, 4), (3, 7))) == part1("")


def test_missing_comma():
    with pytest.raises(ValueError):
        part1("Button A: X+94 Y+34")