"""Bounded contexts that own a domain event bus.

Each member names an isolated namespace of event types and handlers. An
event dispatched under one context never reaches handlers registered under
another, even for an identical event type string.

Usage:
    from src.domain.enums import BoundedContext

    bus.dispatch(BoundedContext.IDENTITY, event)
"""

from enum import Enum


class BoundedContext(str, Enum):
    """Declared bounded contexts.

    String Enum:
        Values are the context ids used as registry keys. Plain strings are
        accepted everywhere a context is expected; members are normalized
        to their value before lookup.
    """

    IDENTITY = "Identity"
    FAMILY = "Family"
    MESSAGING = "Messaging"
    COMMUNITY = "Community"
    SUPPORT = "Support"
    PARTICIPATION = "Participation"
