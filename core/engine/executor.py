"""
Request Execution Engine

Executes one RequestDescription through an injected transport and returns a
ResponseOutcome. Status codes are data: a 404 or 500 from the origin is a
completed exchange. Transport failures are captured and normalized into the
same shape, so execute() does not raise for a validated description.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from core.engine.normalize import normalize_request
from core.engine.outcome import Completed, ExecutionResult, TransportFailed
from core.http.client import TransportFailure, TransportResponse
from core.schemas.exchange import (
    NormalizedOutboundRequest,
    RequestDescription,
    ResponseOutcome,
)


logger = logging.getLogger(__name__)


DEFAULT_TIMEOUT_MS = 30_000


class Transport(Protocol):
    """What the engine needs from an HTTP client."""

    def send(
        self,
        outbound: NormalizedOutboundRequest,
        timeout_ms: int,
    ) -> TransportResponse:
        ...


@dataclass
class Execution:
    """One finished execution: what was sent, how it ended, and the outcome."""
    outbound: NormalizedOutboundRequest
    result: ExecutionResult
    outcome: ResponseOutcome

    @property
    def succeeded(self) -> bool:
        return self.result.succeeded

    @property
    def error(self) -> Optional[str]:
        return self.result.error


class RequestExecutor:
    """
    Runs outbound requests with a fixed timeout and measures latency.

    Usage:
        executor = RequestExecutor(transport=HttpTransport())
        outcome = executor.execute(description)
    """

    def __init__(
        self,
        transport: Transport,
        *,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        """
        Args:
            transport: Object with send(outbound, timeout_ms)
            timeout_ms: Outbound timeout in milliseconds
            clock: Monotonic clock returning seconds
        """
        if timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")
        self.transport = transport
        self.timeout_ms = timeout_ms
        self.clock = clock

    def execute(self, description: RequestDescription) -> ResponseOutcome:
        """Execute a request and return its normalized outcome."""
        return self.run(description).outcome

    def run(self, description: RequestDescription) -> Execution:
        """Execute a request, keeping the success/failure variant alongside the outcome."""
        outbound = normalize_request(description)
        logger.debug(
            f"Dispatching {outbound.method.upper()} {outbound.url} "
            f"(bodyType={description.body_type.value}, timeout={self.timeout_ms}ms)"
        )

        started = self.clock()
        result = self._dispatch(outbound)
        elapsed_ms = int(round((self.clock() - started) * 1000))

        outcome = result.to_outcome(max(elapsed_ms, 0))
        if isinstance(result, TransportFailed):
            logger.warning(
                f"{outbound.method.upper()} {outbound.url} failed after "
                f"{outcome.time}ms: {result.message}"
            )
        else:
            logger.info(
                f"{outbound.method.upper()} {outbound.url} -> {outcome.status} "
                f"in {outcome.time}ms"
            )
        return Execution(outbound=outbound, result=result, outcome=outcome)

    def _dispatch(self, outbound: NormalizedOutboundRequest) -> ExecutionResult:
        try:
            response = self.transport.send(outbound, self.timeout_ms)
        except TransportFailure as e:
            return TransportFailed(
                message=e.message,
                status=e.status_code,
                status_text=e.reason,
                headers=e.headers,
                body=e.content,
                encoding=e.encoding,
            )
        except Exception as e:
            logger.exception(f"Transport raised unexpectedly for {outbound.url}")
            return TransportFailed(message=str(e) or type(e).__name__)

        return Completed(
            status=response.status_code,
            status_text=response.reason,
            headers=response.headers,
            body=response.content,
            encoding=response.encoding,
        )
