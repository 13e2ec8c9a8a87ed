# aocsolver

Solutions for Advent of Code puzzles from 2019 and 2023, with a small
toolkit behind them: 2D/3D vectors (`aocsolver.vec`), a character grid
(`aocsolver.grid`), an IntCode computer (`aocsolver.intcode`), a number
extractor (`aocsolver.strings`) and a downloader that caches puzzle inputs
on disk (`aocsolver.download`).

## Installation

```
pip install .
```

## What is included

Each day lives in its own module with a solution class named after it,
for example `aocsolver.year2023.day15.Day15`.

- 2019: days 1, 2, 4, 5, 6, 7, 8 and 9
- 2023: days 1 to 19, 22 and 23

## Session cookie

Puzzle inputs are personal, so fetching them needs your Advent of Code
session cookie. `Downloader.from_env()` reads `SESSION_COOKIE` from the
environment, loading a `.env` file first if one is found:

```
SESSION_COOKIE=session=placeholder
```

Downloaded inputs are cached under `input/<year>/<day>`. If that file
exists already, no request is made. A `Downloader` can also be built
directly with a cookie and another cache directory:
`Downloader("session=placeholder", input_dir="cache")`. Failures to read,
fetch or store an input raise `aocsolver.download.DownloadError`.

## Solving a puzzle

```python
from aocsolver.download import Downloader
from aocsolver.puzzle import execute
from aocsolver.year2023.day15 import Day15

solution = Day15()
answer = execute(solution, Downloader.from_env())
print(answer.part1, answer.part2)
```

A solution can also be fed input directly. `run` turns `\r\n` into `\n`,
strips surrounding whitespace, solves, and returns the `Answer`, whose
`part1` and `part2` are strings, or `None` for a part with no answer:

```python
answer = Day15().run("rn=1,cm-,qp=3,cm=2,qp-,pc=4,ot=9,ab=5,pc-,pc=6,ot=7")
answer.part1   # '1320'
answer.part2   # '145'
```

Many days also expose their pieces as functions, such as
`aocsolver.year2023.day12.run` or `aocsolver.year2023.day18.shoelace`.

## Building blocks

```python
from aocsolver.intcode import run_program
from aocsolver.strings import nums

run_program([3, 9, 8, 9, 10, 9, 4, 9, 99, -1, 8], [8])   # [1]
list(nums("move 12 from 3 to 45"))                        # [12, 3, 45]
```

## What it does not do

There is no command-line program: puzzles are run from Python as shown
above. Answers are not submitted to the website; only inputs are fetched.

## Tests

```
pip install .[test]
pytest
```