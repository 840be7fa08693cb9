"""UI notification channel adapters.

Adapters:
    - InMemoryNotificationChannel: records notifications (dev, tests)
    - RedisNotificationChannel: Redis pub/sub fan-out to UI subscribers
"""

from src.infrastructure.notifications.in_memory_channel import (
    InMemoryNotificationChannel,
)
from src.infrastructure.notifications.redis_channel import RedisNotificationChannel

__all__ = [
    "InMemoryNotificationChannel",
    "RedisNotificationChannel",
]
