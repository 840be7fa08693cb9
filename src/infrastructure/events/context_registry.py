"""Handler registries for bounded contexts.

ContextRegistry holds, for ONE bounded context, the mapping from event type
to the ordered tuple of registered HandlerEntry records. HandlerRegistry is
the explicit ``context id -> ContextRegistry`` table built once at startup.

Concurrency:
    - Copy-on-write: every registration builds a new dict of new tuples and
      swaps the reference under a writer lock
    - Reads never take the lock; they return the tuple current at lookup
      time, so an in-flight dispatch works on a stable snapshot
    - No handler code ever runs inside the registry, and no lock is held
      once a lookup returns (handlers may re-enter dispatch freely)

Usage:
    >>> registry = ContextRegistry("Messaging", logger=logger)
    >>> registry.register("message_sent", notify, priority=50)
    >>> registry.handlers_for("message_sent")
    (HandlerEntry(event_type='message_sent', ..., priority=50, ...),)
    >>> registry.handlers_for("never_registered")
    ()
"""

import itertools
import threading
from collections.abc import Iterable
from enum import Enum

from src.core.result import Failure, Result, Success
from src.domain.enums import HandlerMode
from src.domain.errors import UnknownContextError
from src.domain.events.handler_entry import (
    DEFAULT_PRIORITY,
    EventHandler,
    HandlerEntry,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


def context_key(context: str | Enum) -> str:
    """Normalize a context id (str or BoundedContext member) to a plain str."""
    if isinstance(context, Enum):
        return str(context.value)
    return str(context)


class ContextRegistry:
    """Copy-on-write handler registry for a single bounded context.

    Attributes:
        context: Context id this registry belongs to.
    """

    def __init__(
        self,
        context: str,
        *,
        logger: LoggerProtocol,
        default_priority: int = DEFAULT_PRIORITY,
    ) -> None:
        self.context = context
        self._logger = logger
        self._default_priority = default_priority
        self._handlers: dict[str, tuple[HandlerEntry, ...]] = {}
        self._write_lock = threading.Lock()
        self._sequence = itertools.count()

    def register(
        self,
        event_type: str,
        handler: EventHandler,
        *,
        priority: int | None = None,
        mode: HandlerMode = HandlerMode.SYNC,
        name: str | None = None,
    ) -> HandlerEntry:
        """Store a handler entry, replacing any entry for the same handler.

        A replacement counts as a fresh registration: with equal priorities
        it runs after handlers registered before it.

        Args:
            event_type: Event type to react to.
            handler: Callable taking the event.
            priority: Lower runs earlier (default: registry default, 100).
            mode: SYNC or ASYNC.
            name: Display name reported in failures.

        Returns:
            HandlerEntry: The stored entry.
        """
        with self._write_lock:
            entry = HandlerEntry(
                event_type=event_type,
                handler=handler,
                priority=self._default_priority if priority is None else priority,
                mode=mode,
                handler_id=name or "",
                sequence=next(self._sequence),
            )
            current = self._handlers.get(event_type, ())
            kept = [
                existing
                for existing in current
                if not existing.matches(event_type, handler)
            ]
            replaced = len(kept) != len(current)

            handlers = dict(self._handlers)
            handlers[event_type] = tuple(
                sorted([*kept, entry], key=lambda e: e.sort_key)
            )
            self._handlers = handlers

        self._logger.debug(
            "domain_event_handler_registered",
            context=self.context,
            event_type=event_type,
            handler_id=entry.handler_id,
            priority=entry.priority,
            mode=entry.mode.value,
            replaced=replaced,
        )
        return entry

    def handlers_for(self, event_type: str) -> tuple[HandlerEntry, ...]:
        """Return registered entries for an event type.

        Ordered ascending by priority, registration order for ties. Empty
        tuple when nothing is registered.
        """
        return self._handlers.get(event_type, ())

    def event_types(self) -> list[str]:
        """Event types with at least one registered handler."""
        return sorted(self._handlers)

    def __len__(self) -> int:
        """Total number of registered entries across event types."""
        return sum(len(entries) for entries in self._handlers.values())


class HandlerRegistry:
    """Explicit table of per-context registries.

    Built once at startup from the declared contexts and injected into the
    bus; there is no global name-based lookup.
    """

    def __init__(
        self,
        contexts: Iterable[str | Enum],
        *,
        logger: LoggerProtocol,
        default_priority: int = DEFAULT_PRIORITY,
    ) -> None:
        self._registries: dict[str, ContextRegistry] = {}
        for context in contexts:
            key = context_key(context)
            self._registries[key] = ContextRegistry(
                key, logger=logger, default_priority=default_priority
            )

    @property
    def contexts(self) -> list[str]:
        """Initialized context ids, in declaration order."""
        return list(self._registries)

    def get(self, context: str | Enum) -> Result[ContextRegistry, UnknownContextError]:
        """Look up a context's registry.

        Returns:
            Success(ContextRegistry) or Failure(UnknownContextError).
        """
        key = context_key(context)
        registry = self._registries.get(key)
        if registry is None:
            return Failure(
                error=UnknownContextError(
                    message=f"Bounded context {key!r} was never initialized",
                    context=key,
                )
            )
        return Success(value=registry)

    def register(
        self,
        context: str | Enum,
        event_type: str,
        handler: EventHandler,
        *,
        priority: int | None = None,
        mode: HandlerMode = HandlerMode.SYNC,
        name: str | None = None,
    ) -> Result[HandlerEntry, UnknownContextError]:
        """Register a handler in a context's registry.

        Returns:
            Success(HandlerEntry) or Failure(UnknownContextError).
        """
        match self.get(context):
            case Failure() as failure:
                return failure
            case Success(value=registry):
                return Success(
                    value=registry.register(
                        event_type, handler, priority=priority, mode=mode, name=name
                    )
                )

    def handlers_for(
        self, context: str | Enum, event_type: str
    ) -> Result[tuple[HandlerEntry, ...], UnknownContextError]:
        """Return the ordered entries for an event type in a context.

        Returns:
            Success(entries) (possibly empty) or Failure(UnknownContextError).
        """
        match self.get(context):
            case Failure() as failure:
                return failure
            case Success(value=registry):
                return Success(value=registry.handlers_for(event_type))
