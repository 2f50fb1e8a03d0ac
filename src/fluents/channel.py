"""Capacity-one blocking channel used to link a fluent with its worker."""

from __future__ import annotations

import threading

from fluents.errors import ChannelClosedError


class Channel[T]:
    """One-way channel holding at most one message.

    ``send`` blocks while the slot is occupied and ``recv`` blocks while it is
    empty. ``close`` wakes every waiter: senders fail with
    ``ChannelClosedError`` and receivers still get a message already in the
    slot before failing.
    """

    def __init__(self, name: str = "channel") -> None:
        self.name = name
        self._cond = threading.Condition(threading.Lock())
        self._item: T | None = None
        self._full = False
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def send(self, item: T) -> None:
        with self._cond:
            while self._full and not self._closed:
                self._cond.wait()
            if self._closed:
                raise ChannelClosedError(f"send on closed channel {self.name!r}")
            self._item = item
            self._full = True
            self._cond.notify_all()

    def recv(self) -> T:
        with self._cond:
            while not self._full and not self._closed:
                self._cond.wait()
            if not self._full:
                raise ChannelClosedError(f"recv on closed channel {self.name!r}")
            item = self._item
            self._item = None
            self._full = False
            self._cond.notify_all()
            return item  # type: ignore[return-value]

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def __repr__(self) -> str:
        if self._closed:
            state = "closed"
        else:
            state = "full" if self._full else "empty"
        return f"<Channel {self.name} {state}>"
