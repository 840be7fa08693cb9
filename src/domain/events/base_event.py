"""Base domain event.

Domain events represent "things that happened" inside a bounded context and
are dispatched synchronously to the handlers registered on that context's
bus. Unlike integration events they never cross a context boundary on their
own; a handler may promote them.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Symbolic event_type string (e.g. "message_sent") used for routing
    - Read-only payload and metadata mappings (copied on construction)
    - The freeze is shallow: nested values are stored as given, so factories
      put sequences in tuples
    - Auto-generated event_id (UUID) and occurred_at (UTC)

Usage:
    >>> event = DomainEvent(
    ...     event_type="message_sent",
    ...     aggregate_id="conversation-1",
    ...     payload={"message_id": "m-1", "sender_id": "u-1"},
    ... )
    >>> event.payload["message_id"]
    'm-1'
    >>>
    >>> # Factory with metadata options
    >>> event = DomainEvent.new(
    ...     "child_data_anonymized",
    ...     "child-1",
    ...     "child",
    ...     {"child_id": "child-1"},
    ...     criticality=EventCriticality.CRITICAL,
    ... )
    >>> event.is_critical
    True
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any
from uuid import UUID, uuid4

from src.domain.enums import EventCriticality


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Immutable record of something that happened in a bounded context.

    The bus treats events as opaque typed payloads: it routes on
    ``event_type`` and never inspects or validates ``payload``.

    Attributes:
        event_type: Symbolic identifier used to look up handlers.
        aggregate_id: Identifier of the entity the event concerns.
        payload: Event-specific data. Stored as a read-only copy.
        aggregate_type: Optional entity kind (e.g. "child", "conversation").
        metadata: Read-only context (criticality, correlation_id,
            causation_id, user_id).
        event_id: Unique identifier for this event instance.
        occurred_at: UTC timestamp set at construction.

    Example:
        >>> event = DomainEvent(event_type="user_data_anonymized", aggregate_id="u-1")
        >>> event.payload
        mappingproxy({})
        >>> # event.payload["x"] = 1  # TypeError: read-only
    """

    event_type: str
    aggregate_id: str
    payload: Mapping[str, Any] = field(default_factory=dict)
    aggregate_type: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.event_type:
            raise ValueError("event_type must be a non-empty string")
        object.__setattr__(self, "aggregate_id", str(self.aggregate_id))
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))
        metadata = {"criticality": EventCriticality.NORMAL, **self.metadata}
        object.__setattr__(self, "metadata", MappingProxyType(metadata))

    @classmethod
    def new(
        cls,
        event_type: str,
        aggregate_id: str | int,
        aggregate_type: str | None,
        payload: Mapping[str, Any] | None = None,
        *,
        criticality: EventCriticality = EventCriticality.NORMAL,
        correlation_id: str | None = None,
        causation_id: str | None = None,
        user_id: str | None = None,
    ) -> "DomainEvent":
        """Create an event, building metadata from keyword options.

        Optional metadata keys are only included when a value is given.

        Args:
            event_type: Symbolic event identifier.
            aggregate_id: Entity identifier (coerced to str).
            aggregate_type: Entity kind.
            payload: Event data.
            criticality: Event criticality (default NORMAL).
            correlation_id: ID correlating related events.
            causation_id: ID of the event that caused this one.
            user_id: ID of the user who triggered the action.

        Returns:
            DomainEvent: New event with generated event_id and occurred_at.
        """
        metadata: dict[str, Any] = {"criticality": criticality}
        for key, value in (
            ("correlation_id", correlation_id),
            ("causation_id", causation_id),
            ("user_id", user_id),
        ):
            if value is not None:
                metadata[key] = value

        return cls(
            event_type=event_type,
            aggregate_id=str(aggregate_id),
            aggregate_type=aggregate_type,
            payload=payload or {},
            metadata=metadata,
        )

    @property
    def criticality(self) -> EventCriticality:
        """Criticality level (NORMAL unless set in metadata)."""
        return EventCriticality(self.metadata.get("criticality", EventCriticality.NORMAL))

    @property
    def is_critical(self) -> bool:
        """True if this event is marked CRITICAL."""
        return self.criticality == EventCriticality.CRITICAL

    @property
    def correlation_id(self) -> str | None:
        """Correlation id from metadata, if present."""
        return self.metadata.get("correlation_id")

    @property
    def causation_id(self) -> str | None:
        """Causation id from metadata, if present."""
        return self.metadata.get("causation_id")
