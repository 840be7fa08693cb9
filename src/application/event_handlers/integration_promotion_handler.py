"""Integration promotion handler.

Promotes domain events to cross-context integration events.

Failure policy: PROPAGATE. Promotion is not best-effort: downstream
contexts rely on these events for consistency guarantees (e.g. GDPR
anonymization must reach every context holding child data), so a publish
failure is returned to the bus and surfaces in the dispatch outcome.

Architecture:
    - Application layer (coordinates a domain event with an outbound port)
    - One instance per bounded context (carries the source context)
    - Subscribed at container startup from CONTEXT_REGISTRY
"""

from src.core.result import Failure, Result
from src.domain.errors import IntegrationPublishError
from src.domain.events.base_event import DomainEvent
from src.domain.events.integration_event import IntegrationEvent
from src.domain.protocols.integration_event_publisher_protocol import (
    IntegrationEventPublisherProtocol,
)
from src.domain.protocols.logger_protocol import LoggerProtocol


class IntegrationPromotionHandler:
    """Turns domain events into integration events and publishes them.

    Attributes:
        source_context: Publishing context, lower-cased in topics.
        _publisher: Integration event transport.
        _logger: Logger instance.

    Example:
        >>> handler = IntegrationPromotionHandler(
        ...     publisher=get_integration_event_publisher(),
        ...     source_context="Identity",
        ...     logger=get_logger(),
        ... )
        >>> bus.subscribe("Identity", "child_data_anonymized", handler.promote, priority=10)
    """

    def __init__(
        self,
        *,
        publisher: IntegrationEventPublisherProtocol,
        source_context: str,
        logger: LoggerProtocol,
    ) -> None:
        self.source_context = source_context.lower()
        self._publisher = publisher
        self._logger = logger

    def promote(self, event: DomainEvent) -> Result[None, IntegrationPublishError]:
        """Publish the integration counterpart of ``event``.

        Returns:
            The publisher's Result, unchanged.
        """
        integration_event = IntegrationEvent.from_domain_event(
            event, source_context=self.source_context
        )
        result = self._publisher.publish(integration_event)

        if isinstance(result, Failure):
            self._logger.warning(
                "integration_event_promotion_failed",
                source_context=self.source_context,
                event_type=event.event_type,
                event_id=str(event.event_id),
                critical=event.is_critical,
                reason=str(result.error),
            )
        else:
            self._logger.debug(
                "integration_event_promoted",
                topic=integration_event.topic,
                event_id=str(event.event_id),
            )
        return result
