"""Unit tests for integration events and their publishers.

Tests cover:
- IntegrationEvent promotion from a domain event (topic, metadata)
- InMemoryIntegrationEventPublisher delivery and failure reporting
- RedisIntegrationEventPublisher (mocked Redis client)
"""

import json
from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.core.result import Failure, Success
from src.domain.errors import IntegrationPublishError
from src.domain.events import identity_events
from src.domain.events.integration_event import IntegrationEvent, build_topic
from src.infrastructure.integration.in_memory_publisher import (
    InMemoryIntegrationEventPublisher,
)
from src.infrastructure.integration.redis_publisher import (
    RedisIntegrationEventPublisher,
)


def promoted_event():
    source = identity_events.child_data_anonymized("c-1", correlation_id="req-1")
    return source, IntegrationEvent.from_domain_event(source, source_context="Identity")


@pytest.mark.unit
class TestIntegrationEvent:
    """Test IntegrationEvent promotion and serialization."""

    def test_build_topic_lowercases_context(self):
        """Test topics are integration:{context}:{event_type}."""
        assert (
            build_topic("Identity", "child_data_anonymized")
            == "integration:identity:child_data_anonymized"
        )

    def test_from_domain_event_copies_fields(self):
        """Test promotion keeps ids, payload and metadata."""
        source, event = promoted_event()

        assert event.event_type == "child_data_anonymized"
        assert event.entity_type == "child"
        assert event.entity_id == "c-1"
        assert dict(event.payload) == {"child_id": "c-1"}
        assert event.metadata["correlation_id"] == "req-1"
        assert event.metadata["causation_id"] == str(source.event_id)
        assert event.metadata["criticality"] == "critical"
        assert event.version == 1

    def test_to_dict_is_json_serializable(self):
        """Test to_dict output round-trips through json."""
        _, event = promoted_event()

        data = json.loads(json.dumps(event.to_dict()))

        assert data["event_id"] == str(event.event_id)
        assert data["source_context"] == "Identity"

    def test_invalid_version_rejected(self):
        """Test version must be positive."""
        with pytest.raises(ValueError):
            IntegrationEvent(
                event_type="x", source_context="identity", entity_type="y",
                entity_id="1", version=0,
            )


@pytest.mark.unit
class TestInMemoryIntegrationEventPublisher:
    """Test the in-memory publisher."""

    def test_publish_delivers_to_topic_subscribers(self, mock_logger):
        """Test subscribers of the topic receive the event."""
        publisher = InMemoryIntegrationEventPublisher(logger=mock_logger)
        _, event = promoted_event()
        received = []
        publisher.subscribe(event.topic, received.append)
        publisher.subscribe("integration:messaging:other", received.append)

        result = publisher.publish(event)

        assert isinstance(result, Success)
        assert received == [event]
        assert publisher.published(event.topic) == [event]

    def test_subscriber_exception_becomes_failure(self, mock_logger):
        """Test a raising subscriber yields IntegrationPublishError."""
        publisher = InMemoryIntegrationEventPublisher(logger=mock_logger)
        _, event = promoted_event()

        def broken(received):
            raise RuntimeError("downstream unavailable")

        publisher.subscribe(event.topic, broken)

        result = publisher.publish(event)

        assert isinstance(result, Failure)
        assert isinstance(result.error, IntegrationPublishError)
        assert result.error.topic == event.topic
        assert "downstream unavailable" in result.error.message
        mock_logger.warning.assert_called_once()

    def test_clear_forgets_history(self, mock_logger):
        """Test clear() empties the published list."""
        publisher = InMemoryIntegrationEventPublisher(logger=mock_logger)
        _, event = promoted_event()
        publisher.publish(event)

        publisher.clear()

        assert publisher.published() == []

    def test_history_keeps_most_recent_events(self, mock_logger):
        """Test published() is bounded by history_size and drops the oldest."""
        publisher = InMemoryIntegrationEventPublisher(logger=mock_logger, history_size=2)
        events = [promoted_event()[1] for _ in range(3)]

        for event in events:
            publisher.publish(event)

        assert publisher.published() == events[1:]

    def test_history_size_must_be_positive(self, mock_logger):
        """Test a zero history_size is rejected."""
        with pytest.raises(ValueError, match="history_size"):
            InMemoryIntegrationEventPublisher(logger=mock_logger, history_size=0)


@pytest.mark.unit
class TestRedisIntegrationEventPublisher:
    """Test the Redis publisher with a mocked client."""

    def test_publish_sends_json_to_topic(self, mock_logger):
        """Test the event is published as JSON on its topic channel."""
        redis_client = MagicMock()
        redis_client.publish.return_value = 2
        publisher = RedisIntegrationEventPublisher(redis_client, logger=mock_logger)
        _, event = promoted_event()

        result = publisher.publish(event)

        assert isinstance(result, Success)
        channel, message = redis_client.publish.call_args.args
        assert channel == "integration:identity:child_data_anonymized"
        assert json.loads(message)["entity_id"] == "c-1"

    def test_redis_error_becomes_failure(self, mock_logger):
        """Test Redis errors are returned, not raised."""
        redis_client = MagicMock()
        redis_client.publish.side_effect = RedisConnectionError("refused")
        publisher = RedisIntegrationEventPublisher(redis_client, logger=mock_logger)
        _, event = promoted_event()

        result = publisher.publish(event)

        assert isinstance(result, Failure)
        assert isinstance(result.error, IntegrationPublishError)
        mock_logger.warning.assert_called_once()
