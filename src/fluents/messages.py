"""Messages exchanged between a fluent and its worker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fluents.types import ExitMode


class Request(Enum):
    """Client to worker."""

    NEXT = "next"
    STOP = "stop"


@dataclass(frozen=True)
class SolutionResponse:
    value: Any
    exit_mode: ExitMode


@dataclass(frozen=True)
class ErrorResponse:
    error: Exception


@dataclass(frozen=True)
class EndResponse:
    pass


type Response = SolutionResponse | ErrorResponse | EndResponse

END = EndResponse()
