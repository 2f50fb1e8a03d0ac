"""Helpers built on top of fluents."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import ExitStack
from typing import Any

from fluents.fluent import create
from fluents.worker import Template


def solutions(template: Template | None, computation: Any) -> Iterator[Any]:
    """Lazily yield every solution value; the fluent is destroyed when the generator ends."""
    with create(template, computation) as fluent:
        for solution in fluent:
            yield solution.value


def zip_solutions(*computations: Any) -> Iterator[tuple[Any, ...]]:
    """Yield tuples of solutions taken in lockstep, stopping at the shortest computation."""
    if not computations:
        return
    with ExitStack() as stack:
        fluents = [stack.enter_context(create(None, computation)) for computation in computations]
        while True:
            row = []
            for fluent in fluents:
                solution = fluent.get()
                if solution is None:
                    return
                row.append(solution.value)
            yield tuple(row)


def first_solution(template: Template | None, computation: Any, default: Any = None) -> Any:
    with create(template, computation) as fluent:
        solution = fluent.get()
    return default if solution is None else solution.value
