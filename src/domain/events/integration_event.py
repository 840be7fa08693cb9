"""Cross-context integration event.

Integration events are the public contract between bounded contexts. A
domain event handler promotes an internal DomainEvent into an
IntegrationEvent and hands it to the integration event publisher; the
domain event bus itself never publishes integration events.

Differences from DomainEvent:
    - ``source_context`` identifies the publishing bounded context
    - ``entity_type``/``entity_id`` instead of ``aggregate_type``/``aggregate_id``
    - ``version`` for schema evolution
    - ``payload`` should contain only JSON-serializable primitives

Topic convention:
    ``integration:{source_context}:{event_type}``, e.g.
    ``integration:identity:child_data_anonymized``.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from types import MappingProxyType
from typing import Any
from uuid import UUID, uuid4

from src.domain.events.base_event import DomainEvent

TOPIC_PREFIX = "integration"


def build_topic(source_context: str, event_type: str) -> str:
    """Build the integration topic for a context and event type.

    Args:
        source_context: Publishing context (case-insensitive).
        event_type: Event type.

    Returns:
        str: ``integration:{source_context}:{event_type}``.

    Example:
        >>> build_topic("Identity", "child_data_anonymized")
        'integration:identity:child_data_anonymized'
    """
    return f"{TOPIC_PREFIX}:{source_context.lower()}:{event_type}"


@dataclass(frozen=True, kw_only=True, slots=True)
class IntegrationEvent:
    """Immutable cross-context event.

    Attributes:
        event_type: Symbolic identifier.
        source_context: Context that published the event.
        entity_type: Public-facing entity name.
        entity_id: Public-facing entity id.
        payload: Read-only event data (primitives only).
        metadata: Read-only metadata copied from the source event.
        version: Schema version (default 1).
        event_id: Unique identifier.
        occurred_at: UTC timestamp.
    """

    event_type: str
    source_context: str
    entity_type: str
    entity_id: str
    payload: Mapping[str, Any] = field(default_factory=dict)
    metadata: Mapping[str, Any] = field(default_factory=dict)
    version: int = 1
    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if self.version < 1:
            raise ValueError("version must be a positive integer")
        object.__setattr__(self, "entity_id", str(self.entity_id))
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @property
    def topic(self) -> str:
        """Topic this event is published to."""
        return build_topic(self.source_context, self.event_type)

    @classmethod
    def from_domain_event(
        cls,
        event: DomainEvent,
        *,
        source_context: str,
        event_type: str | None = None,
        payload: Mapping[str, Any] | None = None,
        version: int = 1,
    ) -> "IntegrationEvent":
        """Promote a domain event.

        The promoted event keeps the source event's metadata and records the
        source event id as ``causation_id``.

        Args:
            event: Source domain event.
            source_context: Context the event is published from.
            event_type: Public event type (defaults to the domain event type).
            payload: Public payload (defaults to a copy of the domain payload).
            version: Schema version.

        Returns:
            IntegrationEvent: The promoted event.
        """
        metadata = {
            key: (value.value if hasattr(value, "value") else value)
            for key, value in event.metadata.items()
        }
        metadata["causation_id"] = str(event.event_id)

        return cls(
            event_type=event_type or event.event_type,
            source_context=source_context,
            entity_type=event.aggregate_type or "unknown",
            entity_id=event.aggregate_id,
            payload=dict(event.payload) if payload is None else payload,
            metadata=metadata,
            version=version,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dict."""
        return {
            "event_id": str(self.event_id),
            "event_type": self.event_type,
            "source_context": self.source_context,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "occurred_at": self.occurred_at.isoformat(),
            "payload": dict(self.payload),
            "metadata": dict(self.metadata),
            "version": self.version,
        }
