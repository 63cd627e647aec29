# aocsolve

Solvers for daily programming puzzles. Each day lives in its own module and
takes the puzzle input as a string. The package has no dependencies outside
the standard library.

Days covered:

- 2015: days 1, 2 and 4 (`y2015_d01`, `y2015_d02`, `y2015_d04`)
- 2024: days 1 to 7, 9 to 13 and 15 to 24 (`y2024_d01` ... `y2024_d07`,
  `y2024_d09` ... `y2024_d13`, `y2024_d15` ... `y2024_d24`)

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using it from Python

Every day module has a `solve(text)` function. For most days it returns a
tuple with the answers to both parts; `y2024_d24.solve` returns the single
number formed by the circuit's `z` wires.

```python
from aocsolve import y2015_d01, y2024_d07

with open("input.txt") as fh:
    text = fh.read()

print(y2024_d07.solve(text))
print(y2015_d01.part_one("(()(()("))
```

Some days expose their building blocks as well, for example:

- `y2015_d02.paper(text)` and `y2015_d02.ribbon(text)` give the two totals
  for a list of `LxWxH` boxes.
- `y2024_d02.is_safe(levels)` and `y2024_d02.is_tolerable(levels)` check a
  single report.
- `y2024_d07.can_make(target, numbers, concat)` checks whether a list of
  numbers can be combined into a target value.
- `y2024_d09.compact_blocks(disk)` and `y2024_d09.compact_files(disk)` return
  the compacted block layout, with `None` for free space.
- `y2024_d11.count_stones(stones, blinks)` counts stones after a number of
  blinks.
- `y2024_d13.tokens(a, b, prize)` gives the token cost for one machine.
- `y2024_d17.run(registers, program)` runs a program on the small 3-bit
  machine and returns its output; `y2024_d17.find_quine(program)` finds the
  lowest register A value that makes the program print itself.
- `y2024_d18.solve(text, size=71, first=1024)` takes the grid size and the
  number of bytes that fall first, so it works on the small example as well
  as on the full input. `y2024_d18.shortest_path(walls, size)` returns the
  step count or `None`.
- `y2024_d19.count_arrangements(design, towels)` counts the ways to build one
  design.
- `y2024_d20.solve(text, threshold=100)` takes the minimum saving a cheat must
  give.
- `y2024_d21.keypad_paths(code)` and `y2024_d21.sequence_length(seq, depth)`
  work on the numeric and directional keypads.
- `y2024_d22.next_secret(secret)` advances a secret number one step.
- `y2024_d24.parse_circuit(text)` and `y2024_d24.evaluate(wire, values, gates)`
  evaluate individual wires.

Malformed input raises `ValueError`.

## What it does not do

There is no command-line program: the package does not read input files or
print answers by itself. Read the input yourself and pass the text to the
day's `solve` function. Days 3 of 2015 and 8 and 14 of 2024 have no solver.