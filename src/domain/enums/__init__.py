"""Domain enums.

Available Enums:
    - BoundedContext: Declared contexts owning an event bus
    - HandlerMode: Handler execution mode (sync, async)
    - EventCriticality: Event criticality carried in metadata
"""

from src.domain.enums.bounded_context import BoundedContext
from src.domain.enums.event_criticality import EventCriticality
from src.domain.enums.handler_mode import HandlerMode

__all__ = [
    "BoundedContext",
    "EventCriticality",
    "HandlerMode",
]
