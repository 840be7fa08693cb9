"""Unit tests for NotificationFanoutHandler.

Tests cover:
- Recipient fan-out excluding the sender
- Aggregate channel notifications
- Content preview truncation
- Swallow failure policy (returned and raised channel errors)
"""

from unittest.mock import MagicMock

import pytest

from src.application.event_handlers import NotificationFanoutHandler
from src.core.constants import NOTIFICATION_PREVIEW_LENGTH
from src.core.result import Failure, Success
from src.domain.errors import NotificationError
from src.domain.events import community_events, messaging_events
from src.infrastructure.notifications.in_memory_channel import (
    InMemoryNotificationChannel,
)


@pytest.mark.unit
class TestNotificationFanoutDelivery:
    """Test who gets notified."""

    def test_notify_recipients_skips_sender(self, mock_logger):
        """Test every recipient except the sender gets a notification."""
        channel = InMemoryNotificationChannel()
        handler = NotificationFanoutHandler(channel=channel, logger=mock_logger)
        event = messaging_events.message_sent(
            "conv-1", "m-1", "u-1", "Hello", recipient_ids=["u-1", "u-2", "u-3"]
        )

        result = handler.notify_recipients(event)

        assert isinstance(result, Success)
        assert [name for name, _ in channel.sent()] == ["user:u-2", "user:u-3"]
        assert channel.sent("user:u-2")[0][1]["preview"] == "Hello"

    def test_notify_recipients_without_recipients(self, mock_logger):
        """Test events without recipients are a no-op."""
        channel = InMemoryNotificationChannel()
        handler = NotificationFanoutHandler(channel=channel, logger=mock_logger)

        handler.notify_recipients(
            messaging_events.message_sent("conv-1", "m-1", "u-1", "Hello")
        )

        assert channel.sent() == []

    def test_preview_truncated(self, mock_logger):
        """Test long content is truncated in the preview."""
        channel = InMemoryNotificationChannel()
        handler = NotificationFanoutHandler(channel=channel, logger=mock_logger)
        event = messaging_events.message_sent(
            "conv-1", "m-1", "u-1", "x" * 500, recipient_ids=["u-2"]
        )

        handler.notify_recipients(event)

        assert len(channel.sent()[0][1]["preview"]) == NOTIFICATION_PREVIEW_LENGTH

    def test_notify_aggregate_uses_aggregate_channel(self, mock_logger):
        """Test aggregate notifications go to {aggregate_type}:{aggregate_id}."""
        channel = InMemoryNotificationChannel()
        handler = NotificationFanoutHandler(channel=channel, logger=mock_logger)

        handler.notify_aggregate(community_events.comment_added("p-1", "alice", "Nice"))

        assert channel.sent()[0][0] == "post:p-1"


@pytest.mark.unit
class TestNotificationFanoutSwallowPolicy:
    """Test that delivery failures never fail the handler."""

    def test_returned_failure_swallowed(self, mock_logger):
        """Test Failure from the channel is logged and success returned."""
        channel = MagicMock()
        channel.notify.return_value = Failure(
            error=NotificationError(message="redis down", channel="post:p-1")
        )
        handler = NotificationFanoutHandler(channel=channel, logger=mock_logger)

        result = handler.notify_aggregate(
            community_events.comment_added("p-1", "alice", "Nice")
        )

        assert isinstance(result, Success)
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "notification_fanout_failed"

    def test_raised_exception_swallowed(self, mock_logger):
        """Test a raising channel is logged and the next recipient still notified."""
        channel = MagicMock()
        channel.notify.side_effect = [RuntimeError("socket closed"), Success(value=None)]
        handler = NotificationFanoutHandler(channel=channel, logger=mock_logger)
        event = messaging_events.message_sent(
            "conv-1", "m-1", "u-1", "Hi", recipient_ids=["u-2", "u-3"]
        )

        result = handler.notify_recipients(event)

        assert isinstance(result, Success)
        assert channel.notify.call_count == 2
        assert mock_logger.warning.call_args.kwargs["error_type"] == "RuntimeError"
