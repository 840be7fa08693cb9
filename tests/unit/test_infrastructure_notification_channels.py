"""Unit tests for notification channels.

Tests cover:
- InMemoryNotificationChannel recording and filtering
- RedisNotificationChannel channel naming and error handling
"""

import json
from unittest.mock import MagicMock

import pytest
from redis.exceptions import TimeoutError as RedisTimeoutError

from src.core.result import Failure, Success
from src.domain.errors import NotificationError
from src.infrastructure.notifications.in_memory_channel import (
    InMemoryNotificationChannel,
)
from src.infrastructure.notifications.redis_channel import RedisNotificationChannel


@pytest.mark.unit
class TestInMemoryNotificationChannel:
    """Test the in-memory channel."""

    def test_notify_records_notification(self):
        """Test notifications are recorded per channel."""
        channel = InMemoryNotificationChannel()

        result = channel.notify("user:u-2", {"event_type": "message_sent"})
        channel.notify("user:u-3", {"event_type": "message_sent"})

        assert isinstance(result, Success)
        assert channel.sent("user:u-2") == [("user:u-2", {"event_type": "message_sent"})]
        assert len(channel.sent()) == 2

    def test_history_keeps_most_recent(self):
        """Test recorded notifications are bounded by history_size."""
        channel = InMemoryNotificationChannel(history_size=2)

        for recipient in ("u-1", "u-2", "u-3"):
            channel.notify(f"user:{recipient}", {"event_type": "message_sent"})

        assert [name for name, _ in channel.sent()] == ["user:u-2", "user:u-3"]


@pytest.mark.unit
class TestRedisNotificationChannel:
    """Test the Redis channel with a mocked client."""

    def test_channel_name_prefixed(self):
        """Test Redis channel names carry the notifications prefix."""
        assert RedisNotificationChannel.redis_channel("user:u-1") == "notifications:user:u-1"

    def test_notify_publishes_json(self):
        """Test notifications are published as JSON."""
        redis_client = MagicMock()
        channel = RedisNotificationChannel(redis_client)

        result = channel.notify("post:p-1", {"preview": "Nice"})

        assert isinstance(result, Success)
        redis_client.publish.assert_called_once_with(
            "notifications:post:p-1", json.dumps({"preview": "Nice"})
        )

    def test_redis_error_becomes_failure(self):
        """Test Redis errors are returned as NotificationError."""
        redis_client = MagicMock()
        redis_client.publish.side_effect = RedisTimeoutError("slow")
        channel = RedisNotificationChannel(redis_client)

        result = channel.notify("user:u-1", {})

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotificationError)
        assert result.error.channel == "user:u-1"
