# judgesolutions

This package has short solutions to three classic online-judge problems. You
can call each one as a Python function. Each one also has a command that reads
the problem's standard input format and prints the answer.

## Installation

```
pip install .
```

## Problems

### Build order (`judgesolutions.acmcraft`)

Each building takes a fixed time to construct. Some buildings can only start
once other buildings are finished. Buildings that do not depend on each other
are built in parallel.

`earliest_completion(times, rules, target)` returns the shortest time to finish
building `target`:

- `times` is the build time of each building, numbered from 1.
- `rules` is a list of `(before, after)` pairs.

It raises `ValueError` in two cases:

- a building number is outside `1..len(times)`;
- the rules contain a cycle.

```python
from judgesolutions.acmcraft import earliest_completion

earliest_completion([10, 1, 100, 10], [(1, 2), (1, 3), (2, 4), (3, 4)], 4)  # 120
```

The command first reads the number of test cases. Each case then gives:

1. `N K`
2. N build times
3. K rule pairs `X Y`
4. the target building

It prints one answer per line, with no newline after the last answer.

```
acmcraft < input.txt
```

### Warp drive (`judgesolutions.alpha_centauri`)

Each jump may differ from the previous jump by at most one light-year. The
first jump and the last jump are both exactly one light-year.

`min_warps(x, y)` returns the fewest jumps needed to go from `x` to `y`. It
raises `ValueError` unless `y` is greater than `x`.

```python
from judgesolutions.alpha_centauri import min_warps

min_warps(0, 3)  # 3
```

The command first reads the number of test cases, then one `x y` pair for each
case. It prints each answer on its own line.

```
alpha-centauri < input.txt
```

### Longest common subsequence (`judgesolutions.lcs`)

`lcs_length(a, b)` returns the length of the longest common subsequence of two
sequences, such as two strings.

```python
from judgesolutions.lcs import lcs_length

lcs_length("ACAYKP", "CAPCAK")  # 4
```

The command reads two whitespace-separated strings and prints the length:

```
echo "ACAYKP CAPCAK" | lcs-length
```

## Shared behaviour

Each module also provides `solve(text)`. It takes the whole input as a string
and returns what the command would print. If the input ends too early, it
raises `ValueError`.

The LCS functions give only the length. They do not return the subsequence
itself.

## Running the tests

```
pip install ".[test]"
pytest
```