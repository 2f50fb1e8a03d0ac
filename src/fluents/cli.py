"""Command line front end: enumerate solutions of the bundled searches."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import partial
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from fluents import search
from fluents.computation import GeneratorComputation
from fluents.fluent import create
from fluents.logging_utils import configure_logging

app = typer.Typer(
    name="fluents",
    help="Pull solutions of backtracking searches one at a time.",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()

LimitOption = typer.Option(None, "--limit", "-n", min=0, help="Stop after this many solutions")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log the worker protocol"),
) -> None:
    if verbose:
        configure_logging(level="DEBUG", profile="cli")


def _render(title: str, factory: Callable[[], Iterable[Any]], limit: Optional[int]) -> None:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("Solution")
    table.add_column("Exit")

    count = 0
    with create(None, GeneratorComputation(factory)) as fluent:
        while limit is None or count < limit:
            solution = fluent.get()
            if solution is None:
                break
            count += 1
            table.add_row(str(count), " ".join(map(str, solution.value)), solution.exit_mode.value)

    if count == 0:
        console.print(f"[yellow]{title}: no solutions[/yellow]")
        return
    console.print(table)


@app.command()
def queens(
    size: int = typer.Argument(..., min=0, help="Board size"),
    limit: Optional[int] = LimitOption,
) -> None:
    """Place N non-attacking queens (columns listed by row)."""
    _render(f"{size}-queens", partial(search.queens, size), limit)


@app.command()
def subsets(
    target: int = typer.Argument(..., help="Sum to reach"),
    values: list[int] = typer.Argument(..., help="Candidate values"),
    limit: Optional[int] = LimitOption,
) -> None:
    """Subsets of VALUES adding up to TARGET."""
    _render(f"subsets summing to {target}", partial(search.subset_sums, values, target), limit)


@app.command()
def perms(
    items: list[str] = typer.Argument(..., help="Items to order"),
    limit: Optional[int] = LimitOption,
) -> None:
    """Permutations of ITEMS."""
    _render("permutations", partial(search.permutations, items), limit)
