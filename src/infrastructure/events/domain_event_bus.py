"""Per-context domain event bus.

This module implements DomainEventBusProtocol. There is one ContextEventBus
per declared bounded context; DomainEventBus is the facade that addresses
them by context id.

Architecture:
    - Implements DomainEventBusProtocol (hexagonal adapter pattern)
    - Registry lookup is a cheap lock-free snapshot read (ContextRegistry)
    - Handlers execute in the CALLER's thread via HandlerDispatcher; the bus
      owns no dispatch thread and routes nothing through a coordinator
    - Sequential, priority-ordered execution; aggregated Result outcome
    - Contexts are isolated: each has its own registry

Usage:
    >>> bus = DomainEventBus.from_contexts(["Identity", "Messaging"], logger=logger)
    >>> bus.subscribe("Identity", "child_updated", invalidate_cache, priority=10)
    >>> result = bus.dispatch("Identity", identity_events.child_updated("c-1", {"name": "A"}))
    >>> isinstance(result, Success)
    True
    >>> bus.dispatch("Billing", event)
    Failure(error=UnknownContextError(...))
"""

from collections.abc import Iterable
from enum import Enum

from src.core.result import OK, Failure, Result, Success
from src.domain.enums import HandlerMode
from src.domain.errors import DispatchFailed, UnknownContextError
from src.domain.events.base_event import DomainEvent
from src.domain.events.handler_entry import (
    DEFAULT_PRIORITY,
    EventHandler,
    HandlerEntry,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.infrastructure.events.async_executor import AsyncHandlerExecutor
from src.infrastructure.events.context_registry import (
    ContextRegistry,
    HandlerRegistry,
    context_key,
)
from src.infrastructure.events.dispatcher import HandlerDispatcher


class ContextEventBus:
    """Domain event bus bound to a single bounded context.

    Attributes:
        context: Context id.
        _registry: This context's handler registry.
        _dispatcher: Shared stateless dispatcher.
        _logger: Logger bound with the context id.
    """

    def __init__(
        self,
        registry: ContextRegistry,
        *,
        dispatcher: HandlerDispatcher,
        logger: LoggerProtocol,
    ) -> None:
        self.context = registry.context
        self._registry = registry
        self._dispatcher = dispatcher
        self._logger = logger

    def dispatch(self, event: DomainEvent) -> Result[None, DispatchFailed]:
        """Dispatch an event to this context's handlers.

        Flow:
            1. Snapshot handlers for event.event_type (no lock held after)
            2. No handlers: return Success(None) immediately
            3. Execute handlers in the caller's thread, priority order
            4. Return the aggregated Result

        Raises:
            TypeError: If ``event`` is not a DomainEvent.
        """
        if not isinstance(event, DomainEvent):
            raise TypeError(
                f"dispatch expects a DomainEvent, got {type(event).__name__}"
            )

        entries = self._registry.handlers_for(event.event_type)
        if not entries:
            return OK

        self._logger.debug(
            "domain_event_dispatching",
            context=self.context,
            event_type=event.event_type,
            event_id=str(event.event_id),
            handler_count=len(entries),
        )
        return self._dispatcher.execute(self.context, event, entries)

    def subscribe(
        self,
        event_type: str,
        handler: EventHandler,
        *,
        priority: int | None = None,
        mode: HandlerMode = HandlerMode.SYNC,
        name: str | None = None,
    ) -> HandlerEntry:
        """Register (or replace) a handler in this context."""
        return self._registry.register(
            event_type, handler, priority=priority, mode=mode, name=name
        )

    def handlers_for(self, event_type: str) -> tuple[HandlerEntry, ...]:
        """Ordered handler snapshot for an event type."""
        return self._registry.handlers_for(event_type)


class DomainEventBus:
    """Facade over all per-context buses, addressed by context id.

    Implements DomainEventBusProtocol. Instances are created once at startup
    (see src/core/container/events.py) and injected into producers.

    Attributes:
        _registry: Context id -> ContextRegistry table.
        _buses: Context id -> ContextEventBus.
        _async_executor: Executor for ASYNC handlers (None when disabled).
        _logger: Logger for lifecycle and lookup failures.
    """

    def __init__(
        self,
        registry: HandlerRegistry,
        *,
        dispatcher: HandlerDispatcher,
        logger: LoggerProtocol,
        async_executor: AsyncHandlerExecutor | None = None,
    ) -> None:
        self._registry = registry
        self._logger = logger
        self._async_executor = async_executor
        self._buses: dict[str, ContextEventBus] = {}

        for context in registry.contexts:
            match registry.get(context):
                case Success(value=context_registry):
                    self._buses[context] = ContextEventBus(
                        context_registry,
                        dispatcher=dispatcher,
                        logger=logger,
                    )
            logger.info("domain_event_bus_started", context=context)

    @classmethod
    def from_contexts(
        cls,
        contexts: Iterable[str | Enum],
        *,
        logger: LoggerProtocol,
        default_priority: int = DEFAULT_PRIORITY,
        async_executor: AsyncHandlerExecutor | None = None,
    ) -> "DomainEventBus":
        """Build a bus with an empty registry for each context.

        Args:
            contexts: Context ids to initialize.
            logger: Logger shared by registry, dispatcher and bus.
            default_priority: Priority for handlers registered without one.
            async_executor: Enables background execution of ASYNC handlers.

        Returns:
            DomainEventBus: Ready-to-use bus.
        """
        registry = HandlerRegistry(
            contexts, logger=logger, default_priority=default_priority
        )
        dispatcher = HandlerDispatcher(logger=logger, async_executor=async_executor)
        return cls(
            registry,
            dispatcher=dispatcher,
            logger=logger,
            async_executor=async_executor,
        )

    @property
    def contexts(self) -> list[str]:
        """Initialized context ids."""
        return list(self._buses)

    @property
    def registry(self) -> HandlerRegistry:
        """The context id -> registry table."""
        return self._registry

    def for_context(
        self, context: str | Enum
    ) -> Result[ContextEventBus, UnknownContextError]:
        """Return the bus for one context.

        Returns:
            Success(ContextEventBus) or Failure(UnknownContextError).
        """
        key = context_key(context)
        bus = self._buses.get(key)
        if bus is None:
            self._logger.warning("domain_event_bus_unknown_context", context=key)
            return Failure(
                error=UnknownContextError(
                    message=f"Bounded context {key!r} was never initialized",
                    context=key,
                )
            )
        return Success(value=bus)

    def dispatch(
        self, context: str | Enum, event: DomainEvent
    ) -> Result[None, DispatchFailed | UnknownContextError]:
        """Dispatch an event within a context.

        Returns:
            Success(None), Failure(DispatchFailed) or
            Failure(UnknownContextError).
        """
        match self.for_context(context):
            case Failure() as failure:
                return failure
            case Success(value=bus):
                return bus.dispatch(event)

    def subscribe(
        self,
        context: str | Enum,
        event_type: str,
        handler: EventHandler,
        *,
        priority: int | None = None,
        mode: HandlerMode = HandlerMode.SYNC,
        name: str | None = None,
    ) -> Result[None, UnknownContextError]:
        """Register (or replace) a handler within a context.

        Returns:
            Success(None) or Failure(UnknownContextError).
        """
        match self.for_context(context):
            case Failure() as failure:
                return failure
            case Success(value=bus):
                bus.subscribe(event_type, handler, priority=priority, mode=mode, name=name)
                return OK

    def handlers_for(
        self, context: str | Enum, event_type: str
    ) -> Result[tuple[HandlerEntry, ...], UnknownContextError]:
        """Ordered handler snapshot for an event type in a context."""
        return self._registry.handlers_for(context, event_type)

    def shutdown(self, *, wait: bool = True) -> None:
        """Release the async executor (if any). Idempotent."""
        if self._async_executor is not None:
            self._async_executor.shutdown(wait=wait)
        self._logger.info("domain_event_bus_stopped", contexts=self.contexts)
