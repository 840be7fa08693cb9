"""UI notification channel protocol (port).

Best-effort fan-out of domain events to connected user interfaces.
Used only by NotificationFanoutHandler.
"""

from typing import Any, Protocol

from src.core.result import Result
from src.domain.errors import NotificationError


class NotificationChannelProtocol(Protocol):
    """Pushes notifications to a named UI channel."""

    def notify(
        self, channel: str, notification: dict[str, Any]
    ) -> Result[None, NotificationError]:
        """Push one notification.

        Args:
            channel: Channel name (e.g. ``user:{user_id}``).
            notification: JSON-serializable notification body.

        Returns:
            Success(None) on delivery, Failure(NotificationError) otherwise.
        """
        ...
