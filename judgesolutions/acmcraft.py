"""Earliest completion time of a building under prerequisite rules."""

from __future__ import annotations

import sys
from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence


def earliest_completion(
    times: Sequence[int],
    rules: Iterable[tuple[int, int]],
    target: int,
) -> int:
    """Return the minimum time needed to finish building ``target``.

    ``times`` holds each building's construction time (building ``i`` is
    ``times[i - 1]``). Each rule ``(before, after)`` means ``after`` can only
    be started once ``before`` is complete. Independent buildings are built
    in parallel.
    """
    count = len(times)

    def check(building: int) -> None:
        if not 1 <= building <= count:
            raise ValueError(f"building {building} is outside 1..{count}")

    check(target)
    prerequisites: dict[int, list[int]] = defaultdict(list)
    for before, after in rules:
        check(before)
        check(after)
        prerequisites[after].append(before)

    finished: dict[int, int] = {}
    in_progress: set[int] = set()
    stack: list[tuple[int, bool]] = [(target, False)]
    while stack:
        building, expanded = stack.pop()
        if building in finished:
            continue
        if expanded:
            in_progress.discard(building)
            ready_at = max(
                (finished[p] for p in prerequisites[building]), default=0
            )
            finished[building] = ready_at + times[building - 1]
            continue
        if building in in_progress:
            raise ValueError("construction rules contain a cycle")
        in_progress.add(building)
        stack.append((building, True))
        stack.extend(
            (p, False) for p in prerequisites[building] if p not in finished
        )
    return finished[target]


def _tokens(text: str) -> Iterator[int]:
    for token in text.split():
        yield int(token)


def _next(tokens: Iterator[int]) -> int:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def solve(text: str) -> str:
    """Solve every test case in ``text`` and return one answer per line."""
    tokens = _tokens(text)
    cases = _next(tokens)
    answers = []
    for _ in range(cases):
        buildings = _next(tokens)
        rule_count = _next(tokens)
        times = [_next(tokens) for _ in range(buildings)]
        rules = [(_next(tokens), _next(tokens)) for _ in range(rule_count)]
        target = _next(tokens)
        answers.append(str(earliest_completion(times, rules, target)))
    return "\n".join(answers)


def main(argv: list[str] | None = None) -> int:
    """Read test cases from standard input and print the answers."""
    sys.stdout.write(solve(sys.stdin.read()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())