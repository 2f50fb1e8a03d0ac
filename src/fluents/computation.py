"""Resumable computations driven by a fluent worker."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from fluents.types import EXHAUSTED, Step, Yielded


@runtime_checkable
class ResumableComputation(Protocol):
    """A search process producing one binding per resumption."""

    def resume(self) -> Step:
        """Produce the next binding, return ``EXHAUSTED``, or raise."""
        ...

    def close(self) -> None:
        """Discard any remaining alternatives."""
        ...


@dataclass(frozen=True)
class Last:
    """Marks a yielded value as the final alternative of a generator."""

    value: Any


def last(value: Any) -> Last:
    """Wrap ``value`` so the generator reports it as the last solution."""
    return Last(value)


class GeneratorComputation:
    """Drive a generator-producing factory one step per resumption.

    The factory is not called until the first ``resume``. Plain values are
    reported with more alternatives possible; values wrapped with ``last``
    are final and the generator is never resumed again. Closing it is left
    to ``close``.
    """

    def __init__(self, factory: Callable[[], Iterable[Any]]) -> None:
        self._factory = factory
        self._iterator: Iterator[Any] | None = None
        self._done = False

    @property
    def started(self) -> bool:
        return self._iterator is not None or self._done

    def resume(self) -> Step:
        if self._done:
            return EXHAUSTED
        if self._iterator is None:
            self._iterator = iter(self._factory())
        try:
            item = next(self._iterator)
        except StopIteration:
            self._done = True
            self._iterator = None
            return EXHAUSTED
        if isinstance(item, Last):
            self._done = True
            return Yielded(item.value, more_possible=False)
        return Yielded(item)

    def close(self) -> None:
        self._done = True
        iterator, self._iterator = self._iterator, None
        close = getattr(iterator, "close", None)
        if close is not None:
            close()


class SequenceComputation:
    """Walk a materialized sequence; the last element is final."""

    def __init__(self, values: Sequence[Any]) -> None:
        self._values = tuple(values)
        self._index = 0

    def resume(self) -> Step:
        if self._index >= len(self._values):
            return EXHAUSTED
        value = self._values[self._index]
        self._index += 1
        return Yielded(value, more_possible=self._index < len(self._values))

    def close(self) -> None:
        self._index = len(self._values)


def as_computation(source: Any) -> ResumableComputation:
    """Coerce ``source`` into a resumable computation."""
    if isinstance(source, ResumableComputation):
        return source
    if isinstance(source, (str, bytes)):
        raise TypeError(f"cannot build a computation from {type(source).__name__}")
    if isinstance(source, Sequence):
        return SequenceComputation(source)
    if isinstance(source, Iterable):
        return GeneratorComputation(lambda: source)
    if callable(source):
        return GeneratorComputation(source)
    raise TypeError(f"cannot build a computation from {type(source).__name__}")
