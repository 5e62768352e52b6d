"""Length of the longest common subsequence of two strings."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def lcs_length(a: Sequence, b: Sequence) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    previous = [0] * (len(a) + 1)
    for item_b in b:
        current = [0]
        for i, item_a in enumerate(a, start=1):
            if item_a == item_b:
                current.append(previous[i - 1] + 1)
            else:
                current.append(max(previous[i], current[i - 1]))
        previous = current
    return previous[-1]


def solve(text: str) -> str:
    """Read two whitespace-separated words and return their LCS length."""
    words = text.split()
    if len(words) < 2:
        raise ValueError("expected two strings")
    return str(lcs_length(words[0], words[1]))


def main(argv: list[str] | None = None) -> int:
    """Read two strings from standard input and print their LCS length."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())