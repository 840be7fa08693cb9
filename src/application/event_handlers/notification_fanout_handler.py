"""Notification fan-out handler.

Pushes UI notifications for domain events.

Failure policy: SWALLOW. UI notifications are best-effort; losing one must
not fail the use case that produced the event. Delivery failures (returned
or raised by the channel) are logged at warning level and the handler
always reports success.

Architecture:
    - Application layer (event -> notification mapping)
    - App-scoped singleton shared by all contexts
    - Registered with mode=async for message fan-out
"""

from typing import Any

from src.core.constants import NOTIFICATION_PREVIEW_LENGTH
from src.core.result import OK, Failure, Result
from src.domain.events.base_event import DomainEvent
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_channel_protocol import (
    NotificationChannelProtocol,
)


def user_channel(user_id: str) -> str:
    """Notification channel for a single user."""
    return f"user:{user_id}"


def aggregate_channel(aggregate_type: str | None, aggregate_id: str) -> str:
    """Notification channel for watchers of one aggregate."""
    return f"{aggregate_type or 'aggregate'}:{aggregate_id}"


class NotificationFanoutHandler:
    """Best-effort UI notification handler.

    Attributes:
        _channel: Notification transport.
        _logger: Logger for swallowed failures.
    """

    def __init__(
        self, *, channel: NotificationChannelProtocol, logger: LoggerProtocol
    ) -> None:
        self._channel = channel
        self._logger = logger

    def notify_recipients(self, event: DomainEvent) -> Result[None, Any]:
        """Notify every recipient listed in the payload except the sender.

        Expects ``recipient_ids`` (and optionally ``sender_id``, ``content``)
        in the payload; events without recipients are a no-op.
        """
        sender_id = event.payload.get("sender_id")
        recipients = [
            recipient
            for recipient in event.payload.get("recipient_ids", ())
            if recipient != sender_id
        ]
        notification = self._build_notification(event)
        for recipient in recipients:
            self._deliver(user_channel(recipient), notification, event)
        return OK

    def notify_aggregate(self, event: DomainEvent) -> Result[None, Any]:
        """Notify watchers of the event's aggregate."""
        channel = aggregate_channel(event.aggregate_type, event.aggregate_id)
        self._deliver(channel, self._build_notification(event), event)
        return OK

    def _build_notification(self, event: DomainEvent) -> dict[str, Any]:
        notification: dict[str, Any] = {
            "event_id": str(event.event_id),
            "event_type": event.event_type,
            "aggregate_id": event.aggregate_id,
            "occurred_at": event.occurred_at.isoformat(),
        }
        content = event.payload.get("content") or event.payload.get("comment_text")
        if isinstance(content, str):
            notification["preview"] = content[:NOTIFICATION_PREVIEW_LENGTH]
        return notification

    def _deliver(
        self, channel: str, notification: dict[str, Any], event: DomainEvent
    ) -> None:
        try:
            result = self._channel.notify(channel, notification)
        except Exception as e:
            # Swallow: best-effort side effect
            self._logger.warning(
                "notification_fanout_failed",
                channel=channel,
                event_type=event.event_type,
                event_id=str(event.event_id),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return

        if isinstance(result, Failure):
            self._logger.warning(
                "notification_fanout_failed",
                channel=channel,
                event_type=event.event_type,
                event_id=str(event.event_id),
                reason=str(result.error),
            )
