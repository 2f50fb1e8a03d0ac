"""Exception types raised by fluents."""

from __future__ import annotations


class FluentError(Exception):
    """Base exception for fluents."""


class FluentDestroyedError(FluentError):
    """Raised when a destroyed fluent is asked for another solution."""


class ConcurrentAccessError(FluentError):
    """Raised when two threads call ``get`` on the same fluent at once."""


class WorkerStartError(FluentError):
    """Raised when the worker thread backing a fluent cannot be started."""


class ChannelClosedError(FluentError):
    """Raised when sending to or receiving from a closed channel."""


class ProtocolError(FluentError):
    """Raised when an unexpected message crosses a fluent channel."""
