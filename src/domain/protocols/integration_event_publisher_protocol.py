"""Integration event publisher protocol (port).

Handlers that promote domain events across bounded contexts depend on this
port. The domain event bus never calls it directly.

Implementations:
    - InMemoryIntegrationEventPublisher: src/infrastructure/integration/in_memory_publisher.py
    - RedisIntegrationEventPublisher: src/infrastructure/integration/redis_publisher.py
"""

from typing import Protocol

from src.core.result import Result
from src.domain.errors import IntegrationPublishError
from src.domain.events.integration_event import IntegrationEvent


class IntegrationEventPublisherProtocol(Protocol):
    """Publishes integration events to the cross-context transport."""

    def publish(self, event: IntegrationEvent) -> Result[None, IntegrationPublishError]:
        """Publish an event to its derived topic (``event.topic``).

        Args:
            event: Integration event to publish.

        Returns:
            Success(None) when the transport accepted the event,
            Failure(IntegrationPublishError) otherwise.
        """
        ...
