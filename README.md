# adventpuzzles

Solutions to daily programming puzzles from the 2019, 2023 and 2024 seasons,
plus a few reusable pieces they are built on:

- `adventpuzzles.intcode` – an Intcode computer (`Computer`, `decode`,
  `Instruction`, `Op`, `Mode`, `Signal`, `DecodeError`).
- `adventpuzzles.grid` – `Point`, `Direction`, `move` and a small `Grid`
  class with bounds checks, lookups (`value`, `find`, `find_all`), rows and
  columns.
- `adventpuzzles.inputs` – `read_lines`, `read_numbers` and `parse_int`.

Each puzzle lives in its own module, named `y<year>_day<day>`, for example
`adventpuzzles.y2023_day07`. Every module has `part01` and `part02` together
with the parsing helpers it needs, so the solutions can be used from Python
directly. The parsers take the puzzle text as a string:

```python
from adventpuzzles import y2024_day01

left, right = y2024_day01.parse_lists("3   4\n4   3\n2   5\n1   3\n3   9\n3   3")
print(y2024_day01.part01(left, right))  # 11
print(y2024_day01.part02(left, right))  # 31
```

## Installation

```
pip install .
```

With the test requirements:

```
pip install ".[test]"
```

## Command line

Every puzzle has a command of the form `aoc-<year>-<day>`. It reads the
puzzle input from the file given as its only argument, or from `input.txt`
in the current directory when none is given, and prints the answer to part
one followed by the answer to part two:

```
aoc-2019-01
aoc-2023-14 my-input.txt
aoc-2024-13
```

Commands exist for 2019 days 01–02, 2023 days 01–14 and 2024 days 01–13.
Puzzle inputs are not included; supply your own.

## Intcode

```python
from adventpuzzles.intcode import Computer

computer = Computer([3, 9, 8, 9, 10, 9, 4, 9, 99, -1, 8], [8])
computer.run()
print(computer.outputs)  # [1]
```

Inputs are drawn from any iterable of integers. Output values are appended to
`computer.outputs`, or passed to a callable given as the third argument.
`add_signal_handler` registers a callable that is told `Signal.IN` or
`Signal.OUT` before each input and output. Memory grows on demand when the
program reads or writes past its end.

Invalid opcodes raise `DecodeError`; reading an input after the inputs are
used up raises `EOFError`.

## Running the tests

```
pytest
```