"""Command-line entry point that runs a puzzle solution on its input file."""

import argparse
import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from aocsolve import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    y23_day01,
    y23_day10,
)

_LATEST_MODULES = (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
)

_LATEST: dict[tuple[str, str], Callable[[str], int]] = {
    (f"day{number}", f"part{part}"): solver
    for number, module in enumerate(_LATEST_MODULES, start=1)
    for part, solver in ((1, module.part1), (2, module.part2))
}

_Y23: dict[tuple[str, str], Callable[[list[str]], int]] = {
    ("y23q1", "q1"): y23_day01.part1,
    ("y23q1", "q2"): y23_day01.part2,
    ("y23q10", "q1"): y23_day10.part1,
    ("y23q10", "q2"): y23_day10.part2,
}


def construct_input_path(day: str, part: str, year: str, example: bool) -> Path:
    """Location of the input file for a puzzle, relative to the working directory."""
    path = Path("inputs")
    if year != "latest":
        path /= year
    if example:
        return path / "tests" / f"{day}_{part}.txt"
    return path / f"{day}.txt"


def solve(day: str, part: str, year: str, inp: str) -> str:
    """Run the named puzzle part on ``inp`` and return its answer as text."""
    if year == "latest":
        solver = _LATEST.get((day, part))
        question = f"{day}_{part}"
        if solver is not None:
            return str(solver(inp))
    elif year == "y23":
        y23_solver = _Y23.get((day, part))
        question = f"{day}{part}"
        if y23_solver is not None:
            return str(y23_solver(inp.splitlines()))
    else:
        raise ValueError(
            f"Unknown year {year} - only 'latest' (default) and 'y23' are available"
        )
    raise ValueError(f"Question not implemented! Arguments: {question}")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aocsolve", description="Run a puzzle solution on its input file."
    )
    parser.add_argument("day", help="day name, e.g. day1")
    parser.add_argument("part", help="part name, e.g. part1")
    parser.add_argument(
        "-y", "--year", default=None, help="year, e.g. y23 (defaults to the latest)"
    )
    parser.add_argument(
        "-e", "--example", action="store_true", help="use the example input"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the chosen solution and print its result."""
    args = _parser().parse_args(argv)
    year = "latest" if args.year is None else args.year
    path = construct_input_path(args.day, args.part, year, args.example)
    print(f"Input file path: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"error: cannot read {path}: {exc}", file=sys.stderr)
        return 1

    if args.example:
        lines = text.splitlines()
        if lines:
            *rest, last = lines
            print(f"Expected result: {last.strip()}")
            text = "\n".join(rest)
        else:
            print("Error: Example file is empty or malformed")

    start = time.perf_counter()
    try:
        result = solve(args.day, args.part, year, text)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start

    print(f"Result: {result}")
    print(f"Time taken: {elapsed}")
    return 0


if __name__ == "__main__":
    sys.exit(main())