"""Background executor for handlers registered with mode=async.

Only used when ``events_async_dispatch_enabled`` is set. Work submitted here
is fire-and-forget: the dispatching caller does not wait for it and its
results are not part of the dispatch outcome.

Each submission runs inside a copy of the submitting thread's
``contextvars`` context, so ambient state bound by the caller (trace ids,
structlog contextvars) is visible to the handler.
"""

import contextvars
from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

from src.domain.protocols.logger_protocol import LoggerProtocol


class AsyncHandlerExecutor:
    """Thread pool wrapper with caller-context propagation.

    Attributes:
        _pool: Worker pool (threads named ``domain-event-async-*``).
        _logger: Logger for lifecycle messages.
    """

    def __init__(self, *, max_workers: int, logger: LoggerProtocol) -> None:
        self._pool = ThreadPoolExecutor(
            max_workers=max_workers,
            thread_name_prefix="domain-event-async",
        )
        self._logger = logger
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once shutdown() has been called."""
        return self._closed

    def submit(self, work: Callable[[], Any]) -> Future[Any]:
        """Schedule ``work`` on the pool with the caller's context copied.

        Raises:
            RuntimeError: If the executor was shut down.
        """
        if self._closed:
            raise RuntimeError("AsyncHandlerExecutor is shut down")
        context = contextvars.copy_context()
        return self._pool.submit(context.run, work)

    def shutdown(self, *, wait: bool = True) -> None:
        """Stop accepting work; optionally wait for queued handlers."""
        if self._closed:
            return
        self._closed = True
        self._pool.shutdown(wait=wait)
        self._logger.info("domain_event_async_executor_stopped", waited=wait)
