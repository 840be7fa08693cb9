"""Redis notification channel.

Publishes UI notifications as JSON to ``notifications:{channel}`` Redis
pub/sub channels. UI gateways (e.g. an SSE endpoint) subscribe to those
channels and push to connected clients.

Implementation intentionally does NOT inherit from
NotificationChannelProtocol (PEP 544 structural subtyping).
"""

import json
from typing import Any

from redis import Redis
from redis.exceptions import RedisError

from src.core.constants import NOTIFICATION_CHANNEL_PREFIX
from src.core.result import OK, Failure, Result
from src.domain.errors import NotificationError


class RedisNotificationChannel:
    """Redis pub/sub implementation of NotificationChannelProtocol.

    Attributes:
        _redis: Synchronous Redis client.
    """

    def __init__(self, redis_client: "Redis[bytes]") -> None:  # type: ignore[type-arg]
        self._redis = redis_client

    @staticmethod
    def redis_channel(channel: str) -> str:
        """Redis channel name for a notification channel.

        Example:
            >>> RedisNotificationChannel.redis_channel("user:u-1")
            'notifications:user:u-1'
        """
        return f"{NOTIFICATION_CHANNEL_PREFIX}:{channel}"

    def notify(
        self, channel: str, notification: dict[str, Any]
    ) -> Result[None, NotificationError]:
        """Publish one notification.

        Returns:
            Success(None), or Failure(NotificationError) on Redis errors.
            Logging is left to the caller, which owns the failure policy.
        """
        try:
            self._redis.publish(self.redis_channel(channel), json.dumps(notification))
        except RedisError as e:
            return Failure(
                error=NotificationError(
                    message=f"Redis publish failed: {type(e).__name__}: {e}",
                    channel=channel,
                )
            )
        return OK
