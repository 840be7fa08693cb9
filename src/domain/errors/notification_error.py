"""UI notification error types."""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotificationError(DomainError):
    """Notification could not be delivered to a UI channel.

    Attributes:
        code: ErrorCode.NOTIFICATION_DELIVERY_FAILED by default.
        message: Human-readable message.
        channel: Channel the notification was addressed to.
    """

    code: ErrorCode = ErrorCode.NOTIFICATION_DELIVERY_FAILED
    channel: str | None = None
