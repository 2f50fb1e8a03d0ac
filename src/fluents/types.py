"""Value types shared by the client and the worker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Final


class ExitMode(Enum):
    """Whether asking for another solution can be meaningful."""

    FINAL = "final"
    MORE_POSSIBLE = "more_possible"


@dataclass(frozen=True)
class Solution:
    """One solution delivered by a fluent."""

    value: Any
    exit_mode: ExitMode

    @property
    def final(self) -> bool:
        return self.exit_mode is ExitMode.FINAL


@dataclass(frozen=True)
class Yielded:
    """Outcome of a resumption that produced a binding."""

    value: Any
    more_possible: bool = True


class _Exhausted:
    __slots__ = ()

    def __repr__(self) -> str:
        return "EXHAUSTED"

    def __bool__(self) -> bool:
        return False


EXHAUSTED: Final = _Exhausted()

type Step = Yielded | _Exhausted
