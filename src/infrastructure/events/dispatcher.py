"""Domain event handler dispatcher.

Executes an ordered handler snapshot for one event and aggregates the
results into a single Result. The dispatcher is stateless with respect to
events: it is invoked as a plain method call in the CALLER's thread, never
inside the registry or a bus-owned thread.

Algorithm:
    1. Stable sort entries by priority (ascending)
    2. Invoke each handler synchronously, one at a time
    3. Convert every non-ok outcome into a HandlerFailure:
        - Failure(reason)       -> reason reported as-is
        - raised Exception      -> HandlerCrashed (logged with traceback)
        - any other return      -> UnexpectedHandlerReturn
       None and Success(...) are ok.
    4. Success(None) when no failures, else Failure(DispatchFailed)

A crashing handler never stops the handlers after it.

ASYNC handlers:
    Without an AsyncHandlerExecutor they are executed inline exactly like
    SYNC handlers. With one, they are partitioned out after sorting, the
    SYNC subset runs as above, and each ASYNC entry is submitted to the
    executor; their results are logged, not returned. Once the executor is
    shut down, ASYNC entries fall back to inline execution and are aggregated
    like SYNC entries.
"""

from functools import partial

from src.core.result import OK, Failure, Result, Success
from src.domain.enums import HandlerMode
from src.domain.errors import (
    DispatchFailed,
    HandlerCrashed,
    HandlerFailure,
    UnexpectedHandlerReturn,
)
from src.domain.events.base_event import DomainEvent
from src.domain.events.handler_entry import HandlerEntry
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.events.async_executor import AsyncHandlerExecutor


class HandlerDispatcher:
    """Runs handler entries for an event and aggregates their results.

    Attributes:
        _logger: Logger for handler failures.
        _async_executor: Optional executor for ASYNC entries. None keeps
            ASYNC entries inline.
    """

    def __init__(
        self,
        *,
        logger: LoggerProtocol,
        async_executor: AsyncHandlerExecutor | None = None,
    ) -> None:
        self._logger = logger
        self._async_executor = async_executor

    @property
    def async_dispatch_enabled(self) -> bool:
        """True when ASYNC entries are handed to a background executor."""
        return self._async_executor is not None

    def execute(
        self,
        context: str,
        event: DomainEvent,
        entries: tuple[HandlerEntry, ...] | list[HandlerEntry],
    ) -> Result[None, DispatchFailed]:
        """Execute handlers for ``event`` in priority order.

        Args:
            context: Context id (for logging).
            event: Event passed to every handler.
            entries: Handler snapshot taken at lookup time.

        Returns:
            Success(None) if every inline handler succeeded, otherwise
            Failure(DispatchFailed) with failures in execution order.
        """
        # Registry snapshots are already sorted; entries may also come from callers
        ordered = sorted(entries, key=lambda entry: entry.sort_key)

        if self._async_executor is None or self._async_executor.closed:
            inline, deferred = ordered, []
        else:
            inline = [e for e in ordered if e.mode is HandlerMode.SYNC]
            deferred = [e for e in ordered if e.mode is HandlerMode.ASYNC]

        failures: list[HandlerFailure] = []
        for entry in inline:
            failure = self._invoke(context, entry, event)
            if failure is not None:
                failures.append(failure)

        for entry in deferred:
            failure = self._submit(context, entry, event)
            if failure is not None:
                failures.append(failure)

        if not failures:
            return OK

        return Failure(
            error=DispatchFailed(
                message=(
                    f"{len(failures)} of {len(inline)} handlers failed "
                    f"for {event.event_type!r}"
                ),
                event_type=event.event_type,
                failures=tuple(failures),
            )
        )

    def _invoke(
        self, context: str, entry: HandlerEntry, event: DomainEvent
    ) -> HandlerFailure | None:
        """Run one handler and translate its outcome."""
        try:
            returned = entry.handler(event)
        except Exception as exc:
            self._logger.error(
                "domain_event_handler_crashed",
                error=exc,
                context=context,
                event_type=event.event_type,
                event_id=str(event.event_id),
                handler_id=entry.handler_id,
                exc_info=exc,
            )
            reason: object = HandlerCrashed(
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
        else:
            match returned:
                case None | Success():
                    return None
                case Failure(error=error):
                    reason = error
                case _:
                    reason = UnexpectedHandlerReturn(returned=repr(returned))

        self._logger.warning(
            "domain_event_handler_failed",
            context=context,
            event_type=event.event_type,
            event_id=str(event.event_id),
            handler_id=entry.handler_id,
            reason=str(reason),
        )
        return HandlerFailure(
            handler_id=entry.handler_id,
            reason=reason,
            handler=entry.handler,
        )

    def _submit(
        self, context: str, entry: HandlerEntry, event: DomainEvent
    ) -> HandlerFailure | None:
        """Hand an ASYNC entry to the executor, or run it inline if rejected."""
        assert self._async_executor is not None
        try:
            self._async_executor.submit(partial(self._invoke, context, entry, event))
        except RuntimeError:
            # Executor shut down between the closed check and submit
            self._logger.warning(
                "domain_event_async_submit_rejected",
                context=context,
                event_type=event.event_type,
                handler_id=entry.handler_id,
            )
            return self._invoke(context, entry, event)
        return None
