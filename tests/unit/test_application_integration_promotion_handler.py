"""Unit tests for IntegrationPromotionHandler.

Tests cover:
- Promotion publishes the integration counterpart of the event
- Publish failures are propagated (returned) and logged
"""

from unittest.mock import MagicMock

import pytest

from src.application.event_handlers import IntegrationPromotionHandler
from src.core.result import OK, Failure, Success
from src.domain.errors import IntegrationPublishError
from src.domain.events import identity_events
from src.domain.events.integration_event import IntegrationEvent


@pytest.mark.unit
class TestIntegrationPromotionHandler:
    """Test promotion and the propagate failure policy."""

    def test_promote_publishes_integration_event(self, mock_logger):
        """Test the promoted event is handed to the publisher."""
        publisher = MagicMock()
        publisher.publish.return_value = OK
        handler = IntegrationPromotionHandler(
            publisher=publisher, source_context="Identity", logger=mock_logger
        )
        event = identity_events.child_data_anonymized("c-1")

        result = handler.promote(event)

        assert isinstance(result, Success)
        published = publisher.publish.call_args.args[0]
        assert isinstance(published, IntegrationEvent)
        assert published.topic == "integration:identity:child_data_anonymized"
        assert published.metadata["causation_id"] == str(event.event_id)

    def test_source_context_lowercased(self, mock_logger):
        """Test the source context is stored lower-cased."""
        handler = IntegrationPromotionHandler(
            publisher=MagicMock(), source_context="Support", logger=mock_logger
        )

        assert handler.source_context == "support"

    def test_publish_failure_propagated(self, mock_logger):
        """Test publish failures are returned to the bus and logged."""
        error = IntegrationPublishError(message="broker down", topic="t")
        publisher = MagicMock()
        publisher.publish.return_value = Failure(error=error)
        handler = IntegrationPromotionHandler(
            publisher=publisher, source_context="Identity", logger=mock_logger
        )

        result = handler.promote(identity_events.child_data_anonymized("c-1"))

        assert result == Failure(error=error)
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "integration_event_promotion_failed"
        assert mock_logger.warning.call_args.kwargs["critical"] is True
