"""Handler registration record.

A HandlerEntry binds one callable to one event type within a bounded
context, together with its priority and execution mode. Entries are
immutable; registering the same handler again for the same event type
produces a new entry that replaces the old one.

Handler contract:
    A handler takes a single DomainEvent and returns one of:
        - None or Success(...): the handler succeeded
        - Failure(reason): the handler failed; ``reason`` is reported as-is
    Raising is allowed but is converted to a HandlerCrashed failure by the
    dispatcher. Each handler decides for itself whether to propagate a
    failure (return Failure) or swallow it (log and return Success).

Usage:
    >>> def update_cache(event: DomainEvent) -> Result[None, str]:
    ...     cache.invalidate(event.aggregate_id)
    ...     return Success(value=None)
    >>>
    >>> entry = HandlerEntry(event_type="child_updated", handler=update_cache)
    >>> entry.priority, entry.mode
    (100, <HandlerMode.SYNC: 'sync'>)
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from src.core.result import Result
from src.domain.enums import HandlerMode
from src.domain.events.base_event import DomainEvent

DEFAULT_PRIORITY = 100

# Type alias for domain event handler callables
EventHandler = Callable[[DomainEvent], "Result[Any, Any] | None"]
"""Type alias for domain event handlers.

Plain functions, bound methods and closures all qualify. Handlers are
called synchronously in the dispatching caller's thread.
"""


def handler_display_name(handler: Callable[..., Any]) -> str:
    """Derive a readable identifier for a handler callable.

    Bound methods render as ``ClassName.method``; functions and closures use
    their ``__qualname__``; other callables fall back to their type name.

    Args:
        handler: Registered callable.

    Returns:
        str: Display name used in logs and failure lists.
    """
    qualname = getattr(handler, "__qualname__", None)
    if qualname:
        return qualname
    return type(handler).__name__


@dataclass(frozen=True, slots=True, kw_only=True)
class HandlerEntry:
    """Registration record for one handler.

    Attributes:
        event_type: Event type the handler reacts to.
        handler: Callable invoked with the event.
        priority: Ordering key; lower values run earlier.
        mode: SYNC or ASYNC (see HandlerMode).
        handler_id: Display name reported in failures. Defaults to the
            callable's qualified name.
        sequence: Registration order within the owning registry, used to
            keep equal-priority handlers in registration order.
    """

    event_type: str
    handler: EventHandler = field(compare=False)
    priority: int = DEFAULT_PRIORITY
    mode: HandlerMode = HandlerMode.SYNC
    handler_id: str = ""
    sequence: int = 0

    def __post_init__(self) -> None:
        if not callable(self.handler):
            raise TypeError(f"Handler for {self.event_type!r} must be callable")
        if not self.handler_id:
            object.__setattr__(self, "handler_id", handler_display_name(self.handler))
        object.__setattr__(self, "mode", HandlerMode(self.mode))

    @property
    def sort_key(self) -> tuple[int, int]:
        """Stable ordering key: priority first, then registration order."""
        return (self.priority, self.sequence)

    def matches(self, event_type: str, handler: EventHandler) -> bool:
        """True if this entry registers ``handler`` for ``event_type``.

        Uses equality rather than identity so that two bound-method objects
        for the same instance and function are treated as one handler.
        """
        return self.event_type == event_type and self.handler == handler
