"""Infrastructure event handlers.

Handlers whose concern is purely technical (observability).
"""

from src.infrastructure.events.handlers.logging_event_handler import (
    LoggingEventHandler,
)

__all__ = ["LoggingEventHandler"]
