"""In-memory integration event publisher.

Delivers integration events synchronously to in-process subscribers keyed by
topic, and keeps a bounded history of the most recent events. Suitable for
development and tests; swap to RedisIntegrationEventPublisher for
multi-process deployments.

Implementation intentionally does NOT inherit from
IntegrationEventPublisherProtocol (PEP 544 structural subtyping).
"""

import threading
from collections import defaultdict, deque
from collections.abc import Callable

from src.core.result import OK, Failure, Result
from src.domain.errors import IntegrationPublishError
from src.domain.events.integration_event import IntegrationEvent
from src.domain.protocols.logger_protocol import LoggerProtocol

IntegrationSubscriber = Callable[[IntegrationEvent], None]


class InMemoryIntegrationEventPublisher:
    """Topic-based in-process publisher.

    A subscriber that raises makes the publish fail; remaining subscribers
    still receive the event.

    Args:
        logger: Logger for delivery failures.
        history_size: Number of most recent events kept for published().
    """

    def __init__(self, *, logger: LoggerProtocol, history_size: int = 1000) -> None:
        if history_size < 1:
            raise ValueError("history_size must be at least 1")
        self._logger = logger
        self._subscribers: dict[str, list[IntegrationSubscriber]] = defaultdict(list)
        self._published: deque[IntegrationEvent] = deque(maxlen=history_size)
        self._lock = threading.Lock()

    def subscribe(self, topic: str, subscriber: IntegrationSubscriber) -> None:
        """Receive every event published to ``topic``."""
        with self._lock:
            self._subscribers[topic].append(subscriber)

    def publish(self, event: IntegrationEvent) -> Result[None, IntegrationPublishError]:
        """Record the event and deliver it to the topic's subscribers."""
        topic = event.topic
        with self._lock:
            self._published.append(event)
            subscribers = list(self._subscribers.get(topic, ()))

        errors: list[str] = []
        for subscriber in subscribers:
            try:
                subscriber(event)
            except Exception as exc:
                errors.append(f"{type(exc).__name__}: {exc}")

        if errors:
            self._logger.warning(
                "integration_event_delivery_failed",
                topic=topic,
                event_id=str(event.event_id),
                failed_subscribers=len(errors),
            )
            return Failure(
                error=IntegrationPublishError(
                    message="; ".join(errors),
                    topic=topic,
                )
            )

        self._logger.debug(
            "integration_event_published",
            topic=topic,
            event_id=str(event.event_id),
            subscriber_count=len(subscribers),
        )
        return OK

    def published(self, topic: str | None = None) -> list[IntegrationEvent]:
        """Published events, optionally filtered by topic. For testing."""
        with self._lock:
            if topic is None:
                return list(self._published)
            return [event for event in self._published if event.topic == topic]

    def clear(self) -> None:
        """Forget published history. For testing."""
        with self._lock:
            self._published.clear()
