"""Domain event bus protocol (port).

This module defines the DomainEventBusProtocol interface used by use cases
(producers) and by registration call sites. Following the Hexagonal
Architecture pattern, the domain defines the port and infrastructure
provides the adapter.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - One bus per bounded context, addressed by context id
    - Dispatch runs in the caller's thread and returns an aggregated Result

Implementations:
    - DomainEventBus: src/infrastructure/events/domain_event_bus.py

Usage:
    >>> from src.core.container import get_domain_event_bus
    >>> from src.domain.events import identity_events
    >>>
    >>> bus = get_domain_event_bus()
    >>> result = bus.dispatch("Identity", identity_events.child_data_anonymized("c-1"))
    >>> match result:
    ...     case Success():
    ...         pass
    ...     case Failure(error=error):
    ...         logger.warning("child_anonymization_dispatch_failed", error=str(error))
"""

from typing import Protocol

from src.core.result import Result
from src.domain.enums import HandlerMode
from src.domain.errors import DispatchFailed, UnknownContextError
from src.domain.events.base_event import DomainEvent
from src.domain.events.handler_entry import EventHandler


class DomainEventBusProtocol(Protocol):
    """Protocol for per-context domain event buses.

    Key Requirements:
        1. **Caller-side execution**: handlers run synchronously in the
           thread that called dispatch, never in a bus-owned thread.
        2. **Priority ordering**: ascending priority, registration order
           for ties.
        3. **Aggregated outcome**: every failing handler is reported, in
           execution order; a raising handler does not stop later ones.
        4. **Isolation**: events never reach another context's handlers.
        5. **Re-entrancy**: handlers may dispatch further events.

    Methods:
        dispatch: Run all handlers for an event and aggregate the results
        subscribe: Register a handler at runtime (tests, dynamic scenarios)
    """

    def dispatch(
        self, context: str, event: DomainEvent
    ) -> Result[None, DispatchFailed | UnknownContextError]:
        """Dispatch an event to the handlers registered in ``context``.

        Args:
            context: Bounded context id (str or BoundedContext member).
            event: Event to dispatch; routed on ``event.event_type``.

        Returns:
            Success(None) when every handler succeeded (or none is
            registered); Failure(DispatchFailed) listing each failed
            handler in execution order; Failure(UnknownContextError) when
            the context was never initialized.
        """
        ...

    def subscribe(
        self,
        context: str,
        event_type: str,
        handler: EventHandler,
        *,
        priority: int | None = None,
        mode: HandlerMode = HandlerMode.SYNC,
        name: str | None = None,
    ) -> Result[None, UnknownContextError]:
        """Register (or replace) a handler for an event type.

        Args:
            context: Bounded context id.
            event_type: Event type to react to.
            handler: Callable taking the event.
            priority: Lower runs earlier (default from settings, 100).
            mode: SYNC or ASYNC.
            name: Display name reported in failures.

        Returns:
            Success(None), or Failure(UnknownContextError) when the context
            was never initialized.
        """
        ...
