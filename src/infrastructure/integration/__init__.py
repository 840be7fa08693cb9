"""Integration event publisher adapters.

Adapters:
    - InMemoryIntegrationEventPublisher: in-process delivery (dev, tests)
    - RedisIntegrationEventPublisher: Redis pub/sub transport
"""

from src.infrastructure.integration.in_memory_publisher import (
    InMemoryIntegrationEventPublisher,
)
from src.infrastructure.integration.redis_publisher import (
    RedisIntegrationEventPublisher,
)

__all__ = [
    "InMemoryIntegrationEventPublisher",
    "RedisIntegrationEventPublisher",
]
