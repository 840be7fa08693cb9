"""Domain errors package.

Exports all domain-level error classes for convenient importing.

Usage:
    from src.domain.errors import DispatchFailed, UnknownContextError
"""

from src.domain.errors.event_bus_error import (
    DispatchFailed,
    HandlerCrashed,
    HandlerFailure,
    UnexpectedHandlerReturn,
    UnknownContextError,
)
from src.domain.errors.integration_event_error import IntegrationPublishError
from src.domain.errors.notification_error import NotificationError

__all__ = [
    # Event bus errors
    "DispatchFailed",
    "HandlerCrashed",
    "HandlerFailure",
    "UnexpectedHandlerReturn",
    "UnknownContextError",
    # Collaborator errors
    "IntegrationPublishError",
    "NotificationError",
]
