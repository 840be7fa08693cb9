"""Logging event handler for domain events.

Writes one structured INFO line per observed domain event, bound with the
owning bounded context. Registered with a late priority (200) so it logs
after the handlers that do real work.

Failure policy: SWALLOW. Logging is observability only; a broken log
backend must not fail the use case.

Structured Fields:
    - context: Bounded context that dispatched the event
    - event_type: Event type string (e.g., "child_updated")
    - event_id: UUID for correlation and deduplication
    - aggregate_type / aggregate_id: Entity the event is about
    - occurred_at: ISO 8601 timestamp (UTC)
    - criticality: "critical" or "normal"
    - correlation_id: Request correlation id (when present)

Payload fields are NOT logged (they may hold personal data).
"""

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Structured logging of domain events for one bounded context.

    Attributes:
        context: Context id included in every log line.
        _logger: Logger protocol implementation (from container).

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger(), context="Identity")
        >>> bus.subscribe("Identity", "child_updated", handler.log_event, priority=200)
    """

    def __init__(self, *, logger: LoggerProtocol, context: str) -> None:
        self.context = context
        self._logger = logger

    def log_event(self, event: DomainEvent) -> None:
        """Log an observed domain event."""
        try:
            self._logger.info(
                "domain_event_observed",
                context=self.context,
                event_type=event.event_type,
                event_id=str(event.event_id),
                aggregate_type=event.aggregate_type,
                aggregate_id=event.aggregate_id,
                occurred_at=event.occurred_at.isoformat(),
                criticality=event.criticality.value,
                correlation_id=event.correlation_id,
            )
        except Exception:
            # Swallow: observability must never fail a use case
            return None
