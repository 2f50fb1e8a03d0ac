"""Client side of a fluent: create, get and destroy."""

from __future__ import annotations

import asyncio
import itertools
import threading
import weakref
from collections.abc import AsyncIterator, Iterator
from typing import Any

from loguru import logger

from fluents.channel import Channel
from fluents.computation import as_computation
from fluents.config import Settings, get_settings
from fluents.errors import (
    ChannelClosedError,
    ConcurrentAccessError,
    FluentDestroyedError,
    ProtocolError,
    WorkerStartError,
)
from fluents.messages import EndResponse, ErrorResponse, Request, Response, SolutionResponse
from fluents.types import Solution
from fluents.worker import FluentWorker, Template

_fluent_ids = itertools.count(1)


def _shutdown(name: str, requests: Channel[Request], responses: Channel[Response]) -> None:
    logger.debug("fluent.abandoned name={}", name)
    requests.close()
    responses.close()


class Fluent:
    """Pull solutions of a backtracking computation one at a time.

    The computation runs on a dedicated worker thread and is not started
    until the first ``get``. Always ``destroy`` a fluent (or use it as a
    context manager) once it is no longer needed.
    """

    def __init__(
        self,
        computation: Any,
        template: Template | None = None,
        *,
        settings: Settings | None = None,
    ) -> None:
        settings = settings or get_settings()
        self.name = f"{settings.thread_name_prefix}-{next(_fluent_ids)}"
        self._requests: Channel[Request] = Channel(f"{self.name}.requests")
        self._responses: Channel[Response] = Channel(f"{self.name}.responses")
        self._worker = FluentWorker(
            self.name,
            as_computation(computation),
            self._requests,
            self._responses,
            template=template,
            copy_results=settings.copy_results,
        )
        self._thread = threading.Thread(target=self._worker.run, name=self.name, daemon=settings.daemon_workers)
        self._get_lock = threading.Lock()
        self._destroy_lock = threading.Lock()
        self._destroyed = False
        try:
            self._thread.start()
        except RuntimeError as exc:
            self._release_channels()
            raise WorkerStartError(f"cannot start worker thread for {self.name}") from exc
        # Closing the channels of an unreachable fluent makes its worker exit.
        self._finalizer = weakref.finalize(self, _shutdown, self.name, self._requests, self._responses)
        logger.debug("fluent.create name={}", self.name)

    @classmethod
    def create(cls, template: Template | None, computation: Any, *, settings: Settings | None = None) -> Fluent:
        return cls(computation, template, settings=settings)

    @property
    def alive(self) -> bool:
        return not self._destroyed and self._thread.is_alive()

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def get(self) -> Solution | None:
        """Return the next solution, or ``None`` once there are no more.

        An exception raised by the computation is re-raised here, once, and
        the fluent is exhausted afterwards.
        """
        if self._destroyed:
            raise FluentDestroyedError(f"fluent {self.name} is destroyed")
        if not self._get_lock.acquire(blocking=False):
            raise ConcurrentAccessError(f"fluent {self.name} is already serving a get call")
        try:
            self._requests.send(Request.NEXT)
            response = self._responses.recv()
        except ChannelClosedError as exc:
            if self._destroyed:
                raise FluentDestroyedError(f"fluent {self.name} is destroyed") from exc
            raise FluentDestroyedError(f"worker of fluent {self.name} terminated unexpectedly") from exc
        finally:
            self._get_lock.release()
        return self._unpack(response)

    def _unpack(self, response: Response) -> Solution | None:
        if isinstance(response, SolutionResponse):
            return Solution(response.value, response.exit_mode)
        if isinstance(response, ErrorResponse):
            raise response.error
        if isinstance(response, EndResponse):
            return None
        raise ProtocolError(f"unexpected response {response!r} on fluent {self.name}")

    def destroy(self) -> None:
        """Stop the worker, wait for it and release the channels."""
        with self._destroy_lock:
            if self._destroyed:
                return
            self._destroyed = True
        self._finalizer.detach()
        try:
            self._requests.send(Request.STOP)
        except ChannelClosedError:
            logger.debug("fluent.destroy worker already gone name={}", self.name)
        self._thread.join()
        self._release_channels()
        logger.debug("fluent.destroy name={} resumptions={}", self.name, self._worker.resumptions)

    def _release_channels(self) -> None:
        self._requests.close()
        self._responses.close()

    async def aget(self) -> Solution | None:
        """Run ``get`` in a thread so an event loop is not blocked.

        Cancelling the call destroys the fluent: the thread still completes
        the step, and its solution cannot be handed to anyone.
        """
        try:
            return await asyncio.to_thread(self.get)
        except asyncio.CancelledError:
            logger.debug("fluent.aget.cancelled name={}", self.name)
            await asyncio.to_thread(self.destroy)
            raise

    def __iter__(self) -> Iterator[Solution]:
        while (solution := self.get()) is not None:
            yield solution

    async def __aiter__(self) -> AsyncIterator[Solution]:
        while (solution := await self.aget()) is not None:
            yield solution

    def __enter__(self) -> Fluent:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _ = (exc_type, exc, tb)
        self.destroy()

    def __repr__(self) -> str:
        state = "destroyed" if self._destroyed else self._worker.state.value
        return f"<Fluent {self.name} {state}>"


def create(template: Template | None, computation: Any, *, settings: Settings | None = None) -> Fluent:
    """Create a fluent that will deliver ``template`` projections of each solution.

    ``computation`` is not started here; see ``as_computation`` for the
    accepted shapes.
    """
    return Fluent.create(template, computation, settings=settings)


def get(fluent: Fluent) -> Solution | None:
    return fluent.get()


def destroy(fluent: Fluent) -> None:
    fluent.destroy()
