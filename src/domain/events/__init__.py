"""Domain events package.

Exports the event value types and the handler registration record.
Per-context event factories live in ``*_events.py`` modules; the startup
subscription declarations live in ``registry.py``.

Usage:
    >>> from src.domain.events import DomainEvent
    >>> from src.domain.events import messaging_events
    >>>
    >>> event = messaging_events.message_sent("conv-1", "msg-1", "user-1", "Hi")
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.handler_entry import (
    DEFAULT_PRIORITY,
    EventHandler,
    HandlerEntry,
)
from src.domain.events.integration_event import IntegrationEvent, build_topic

__all__ = [
    "DEFAULT_PRIORITY",
    "DomainEvent",
    "EventHandler",
    "HandlerEntry",
    "IntegrationEvent",
    "build_topic",
]
