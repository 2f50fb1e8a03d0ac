"""Worker side of a fluent: owns and drives one resumable computation."""

from __future__ import annotations

import copy
from collections.abc import Callable
from enum import Enum
from typing import Any

from loguru import logger

from fluents.channel import Channel
from fluents.computation import ResumableComputation
from fluents.errors import ChannelClosedError, ProtocolError
from fluents.messages import END, ErrorResponse, Request, Response, SolutionResponse
from fluents.types import ExitMode, Yielded

type Template = Callable[[Any], Any]


class WorkerState(Enum):
    AWAITING_FIRST_REQUEST = "awaiting_first_request"
    PRODUCING = "producing"
    EXHAUSTED = "exhausted"
    TERMINATED = "terminated"


class FluentWorker:
    """Answer each ``NEXT`` request with exactly one response.

    The computation is only touched from ``run``, which executes on the
    worker thread. ``STOP`` is honored before the first resumption, between
    solutions and once the computation is exhausted.
    """

    def __init__(
        self,
        name: str,
        computation: ResumableComputation,
        requests: Channel[Request],
        responses: Channel[Response],
        *,
        template: Template | None = None,
        copy_results: bool = True,
    ) -> None:
        self.name = name
        self.state = WorkerState.AWAITING_FIRST_REQUEST
        self.resumptions = 0
        self._computation = computation
        self._requests = requests
        self._responses = responses
        self._template = template
        self._copy_results = copy_results
        self._computation_closed = False

    def run(self) -> None:
        logger.debug("fluent.worker.start name={}", self.name)
        try:
            while self.state is not WorkerState.TERMINATED:
                self._handle(self._requests.recv())
        except ChannelClosedError:
            logger.debug("fluent.worker.abandoned name={} state={}", self.name, self.state.value)
        except BaseException:
            logger.exception("fluent.worker.crashed name={} state={}", self.name, self.state.value)
            self._requests.close()
            self._responses.close()
            raise
        finally:
            self._set_state(WorkerState.TERMINATED)
            self._close_computation()
            logger.debug("fluent.worker.stop name={} resumptions={}", self.name, self.resumptions)

    def _handle(self, request: Request) -> None:
        if request is Request.STOP:
            self._set_state(WorkerState.TERMINATED)
            return
        if request is not Request.NEXT:
            raise ProtocolError(f"unexpected request {request!r} on fluent {self.name}")
        if self.state is WorkerState.EXHAUSTED:
            self._responses.send(END)
            return
        self._responses.send(self._step())

    def _step(self) -> Response:
        self.resumptions += 1
        try:
            outcome = self._computation.resume()
            if not isinstance(outcome, Yielded):
                self._exhaust()
                return END
            value = self._deliverable(outcome.value)
        except Exception as exc:
            logger.debug("fluent.worker.error name={} error={!r}", self.name, exc)
            self._exhaust()
            return ErrorResponse(exc)

        if outcome.more_possible:
            self._set_state(WorkerState.PRODUCING)
            return SolutionResponse(value, ExitMode.MORE_POSSIBLE)
        self._exhaust()
        return SolutionResponse(value, ExitMode.FINAL)

    def _deliverable(self, binding: Any) -> Any:
        value = self._template(binding) if self._template is not None else binding
        if self._copy_results:
            return copy.deepcopy(value)
        return value

    def _exhaust(self) -> None:
        self._set_state(WorkerState.EXHAUSTED)
        self._close_computation()

    def _close_computation(self) -> None:
        if self._computation_closed:
            return
        self._computation_closed = True
        try:
            self._computation.close()
        except Exception:
            logger.opt(exception=True).warning("fluent.worker.close_failed name={}", self.name)

    def _set_state(self, state: WorkerState) -> None:
        if state is self.state:
            return
        logger.debug("fluent.worker.state name={} {} -> {}", self.name, self.state.value, state.value)
        self.state = state
