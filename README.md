# aoc2024

Solutions to the Advent of Code 2024 puzzles, days 1 through 19. Each day
reads its puzzle input and prints its answers.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install ".[test]"
```

## Puzzle input

Put your inputs in a directory, one file for each day. The files are named by
the day number with two digits: `01.txt`, `02.txt`, ... `19.txt`. By default
the program looks in `inp/` under the current directory; use `--input-dir` to
point it elsewhere.

## Usage

With no arguments the command runs day 19:

```
aoc2024
```

To run one particular day:

```
aoc2024 5
aoc2024 5 --input-dir path/to/inputs
```

To run every solved day in order:

```
aoc2024 all
```

Each day prints its title and then one line per part, such as
`Safe reports: 2`. If a day's input file cannot be read or parsed, the part
prints `Error: ...` and the run carries on. Some parts print a message instead
of an answer when none exists, such as `Path not found!` on day 16.

Days 20 to 25 are accepted as day numbers but have no solutions; asking for
one prints `Day is missing!` and the command exits with status 1.

A few answers are shown in their own form:

- Day 17 part two prints the value of register A that makes the program
  output itself.
- Day 18 part two prints the `x,y` position of the first byte that cuts off
  the exit.
- Day 19 part two prints one line per desired design with its number of
  arrangements, or `None` when it cannot be made.

## As a library

Each day is a module named `aoc2024.dayNN` (`day01` to `day19`). Each has
`solve_a(text)` and, except day 14, `solve_b(text)`. They take the puzzle
input as a string and return the answer. The parsing and solving functions
they use can also be called directly:

```python
from aoc2024 import day11

print(day11.step_stones([125, 17]))   # [253000, 1, 7]
print(day11.count_after(125, 25))
```

`aoc2024.common.read_input(day, input_dir)` reads the input file for a day.
Malformed input raises a subclass of `aoc2024.common.AdventError`.

`aoc2024.cli` holds the command: `run_day(day, input_dir)` prints and returns
the answers of one day, `run_all(input_dir)` does so for every solved day, and
`main(argv)` is the command line entry point.

## What it does not do

Day 14 solves only its first part, the safety factor. There is no viewer to
play the robots' movement forward and backward while looking for the picture
that the second part asks for; `aoc2024.day14.Robot` has `step()` and
`back()` for anyone who wants to build one.

## Tests

```
pytest
```