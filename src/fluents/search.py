"""Small backtracking searches used by the command line and the tests.

Each search is a generator that explores alternatives depth first. A solution
found while no untried alternative remains anywhere on the current path is
yielded through ``last``, so a fluent reports it as final instead of needing
one more resumption to discover the end.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from fluents.computation import last


def queens(n: int) -> Iterator[Any]:
    """Place ``n`` non-attacking queens; each solution is a tuple of columns by row."""
    if n < 0:
        raise ValueError(f"board size must not be negative, got {n}")
    columns: list[int] = []

    def place(row: int, open_choices: bool) -> Iterator[Any]:
        if row == n:
            solution = tuple(columns)
            yield solution if open_choices else last(solution)
            return
        for col in range(n):
            if _attacked(columns, row, col):
                continue
            columns.append(col)
            yield from place(row + 1, open_choices or col < n - 1)
            columns.pop()

    yield from place(0, False)


def _attacked(columns: Sequence[int], row: int, col: int) -> bool:
    return any(c == col or abs(c - col) == row - r for r, c in enumerate(columns))


def subset_sums(values: Sequence[int], target: int) -> Iterator[Any]:
    """Subsets of ``values`` (as tuples, in input order) that add up to ``target``."""
    chosen: list[int] = []

    def choose(index: int, remaining: int, open_choices: bool) -> Iterator[Any]:
        if index == len(values):
            if remaining == 0:
                solution = tuple(chosen)
                yield solution if open_choices else last(solution)
            return
        chosen.append(values[index])
        yield from choose(index + 1, remaining - values[index], True)
        chosen.pop()
        yield from choose(index + 1, remaining, open_choices)

    yield from choose(0, target, False)


def permutations(items: Sequence[Any]) -> Iterator[Any]:
    """All orderings of ``items``; the final ordering is reported as the last alternative."""
    pool = list(items)
    prefix: list[Any] = []

    def extend(open_choices: bool) -> Iterator[Any]:
        if not pool:
            solution = tuple(prefix)
            yield solution if open_choices else last(solution)
            return
        for i in range(len(pool)):
            item = pool.pop(i)
            prefix.append(item)
            yield from extend(open_choices or i < len(pool))
            prefix.pop()
            pool.insert(i, item)

    yield from extend(False)
