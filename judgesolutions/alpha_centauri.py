"""Minimum number of warp-drive activations to travel between two points."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator


def min_warps(x: int, y: int) -> int:
    """Return the fewest activations to go from ``x`` to ``y``.

    Each jump may differ from the previous one by at most one light year,
    the first and the last jump are both exactly one light year.
    """
    distance = y - x
    if distance <= 0:
        raise ValueError("destination must lie beyond the start")
    root = math.isqrt(distance)
    remainder = distance - root * root
    return 2 * root - 1 + -(-remainder // root)


def _tokens(text: str) -> Iterator[int]:
    for token in text.split():
        yield int(token)


def _next(tokens: Iterator[int]) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def solve(text: str) -> str:
    """Solve every test case in ``text``; each answer ends with a newline."""
    tokens = _tokens(text)
    cases = _next(tokens)
    return "".join(
        f"{min_warps(_next(tokens), _next(tokens))}\n" for _ in range(cases)
    )


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print the answers."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())