# aocsolve

Solutions to a set of daily programming puzzles, with a small command-line
runner that reads a puzzle input file and prints the answer together with the
time taken.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
aocsolve DAY PART [-y YEAR] [-e]
```

- `DAY` is the day name, for example `day1` or `day15`.
- `PART` is `part1` or `part2`.
- `-y` / `--year` picks the puzzle set. Without it the latest set is used.
  `y23` selects the earlier set, whose days are named `y23q1` and `y23q10`
  and whose parts are named `q1` and `q2`.
- `-e` / `--example` runs the example input. The last line of an example
  file holds the expected answer, which is printed before the result; the
  remaining lines are passed to the solution.

Input files are looked up relative to the current directory:

- `inputs/<day>.txt` for a real input,
- `inputs/tests/<day>_<part>.txt` for an example,
- with `<year>/` inserted after `inputs/` when a year is given.

The command prints the input path, the result and the time taken. It exits
with status 1 and a message on standard error when the input file cannot be
read, or when the day, part or year is not known.

For example:

```
aocsolve day11 part1
aocsolve day4 part2 --example
aocsolve y23q10 q2 --year y23
```

## Library use

Each day of the latest set is its own module, `aocsolve.day01` to
`aocsolve.day15`, with `part1` and `part2` functions that take the puzzle
input as text and return the answer as an integer:

```python
from aocsolve import day01

print(day01.part1("3   4\n4   3\n2   5\n1   3\n3   9\n3   3"))
```

A few modules expose their building blocks as well:

- `aocsolve.day11.next_stones(stone)` and `aocsolve.day11.blink(stones, memo)`,
- `aocsolve.day13.find_combo(a, b, prize)`,
- `aocsolve.day14.parse_robot(line)`.

The earlier puzzle set lives in `aocsolve.y23_day01` and
`aocsolve.y23_day10`, whose `part1` and `part2` functions take an iterable of
lines.

`aocsolve.cli.solve(day, part, year, inp)` dispatches to the right solver by
name and returns the answer as text; it raises `ValueError` for an unknown
day, part or year. `aocsolve.cli.construct_input_path(day, part, year,
example)` returns the input file path the command would read.

`aocsolve.grid` holds the shared helpers: `lines_to_char_grid`,
`to_char_grid`, `to_digit_grid`, and `flood_from_paths`, which counts the
lattice points enclosed by a closed path of `(distance, direction)` steps.

## Limitations

Of the earlier (`y23`) set only days `y23q1` and `y23q10` are included; the
command rejects any other day of that set as not implemented.