"""Redis integration event publisher.

Publishes integration events as JSON to Redis pub/sub channels named by the
integration topic (``integration:{source_context}:{event_type}``), so any
process subscribed to the topic receives them.

Implementation intentionally does NOT inherit from
IntegrationEventPublisherProtocol (PEP 544 structural subtyping).
"""

import json

from redis import Redis
from redis.exceptions import RedisError

from src.core.result import OK, Failure, Result
from src.domain.errors import IntegrationPublishError
from src.domain.events.integration_event import IntegrationEvent
from src.domain.protocols.logger_protocol import LoggerProtocol


class RedisIntegrationEventPublisher:
    """Redis pub/sub implementation of IntegrationEventPublisherProtocol.

    Attributes:
        _redis: Synchronous Redis client (called in the dispatching thread).
        _logger: Logger instance.
    """

    def __init__(self, redis_client: "Redis[bytes]", *, logger: LoggerProtocol) -> None:  # type: ignore[type-arg]
        self._redis = redis_client
        self._logger = logger

    def publish(self, event: IntegrationEvent) -> Result[None, IntegrationPublishError]:
        """Publish the event to its topic channel.

        Returns:
            Success(None) when Redis accepted the message (even with zero
            receivers), Failure(IntegrationPublishError) on Redis errors.
        """
        topic = event.topic
        try:
            receivers = self._redis.publish(topic, json.dumps(event.to_dict()))
        except RedisError as e:
            self._logger.warning(
                "integration_event_publish_failed",
                topic=topic,
                event_id=str(event.event_id),
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return Failure(
                error=IntegrationPublishError(
                    message=f"Redis publish failed: {e}",
                    topic=topic,
                )
            )

        self._logger.debug(
            "integration_event_published",
            topic=topic,
            event_id=str(event.event_id),
            receivers=receivers,
        )
        return OK
