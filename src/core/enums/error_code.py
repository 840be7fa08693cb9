"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Event bus errors (UNKNOWN_CONTEXT, EVENT_DISPATCH_*)
- Handler errors (HANDLER_*)
- Integration event errors (INTEGRATION_EVENT_*)
- Notification errors (NOTIFICATION_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Event bus errors
    UNKNOWN_CONTEXT = "unknown_context"
    EVENT_DISPATCH_FAILED = "event_dispatch_failed"

    # Handler errors
    HANDLER_CRASHED = "handler_crashed"
    HANDLER_UNEXPECTED_RETURN = "handler_unexpected_return"

    # Integration event errors
    INTEGRATION_EVENT_PUBLISH_FAILED = "integration_event_publish_failed"

    # Notification errors
    NOTIFICATION_DELIVERY_FAILED = "notification_delivery_failed"
