"""fluents - access all solutions of a search without backtracking."""

from loguru import logger

from .computation import GeneratorComputation, ResumableComputation, SequenceComputation, as_computation, last
from .errors import (
    ConcurrentAccessError,
    FluentDestroyedError,
    FluentError,
    ProtocolError,
    WorkerStartError,
)
from .fluent import Fluent, create, destroy, get
from .types import EXHAUSTED, ExitMode, Solution, Yielded

__version__ = "0.1.0"

logger.disable("fluents")

__all__ = [
    "EXHAUSTED",
    "ConcurrentAccessError",
    "ExitMode",
    "Fluent",
    "FluentDestroyedError",
    "FluentError",
    "GeneratorComputation",
    "ProtocolError",
    "ResumableComputation",
    "SequenceComputation",
    "Solution",
    "WorkerStartError",
    "Yielded",
    "as_computation",
    "create",
    "destroy",
    "get",
    "last",
]
