"""Identity context domain events.

Event types:
    - child_updated: child profile fields changed (cache invalidation)
    - child_data_anonymized: child PII anonymized; downstream contexts must
      clean their own copies (promoted to an integration event)
    - user_anonymized: all Identity-owned data for a user anonymized
"""

from collections.abc import Mapping
from typing import Any

from src.domain.enums import EventCriticality
from src.domain.events.base_event import DomainEvent

CHILD_UPDATED = "child_updated"
CHILD_DATA_ANONYMIZED = "child_data_anonymized"
USER_ANONYMIZED = "user_anonymized"


def child_updated(child_id: str, changes: Mapping[str, Any]) -> DomainEvent:
    """Child profile fields changed."""
    return DomainEvent.new(
        CHILD_UPDATED,
        child_id,
        "child",
        {"child_id": child_id, "changed_fields": tuple(sorted(changes))},
    )


def child_data_anonymized(child_id: str, *, correlation_id: str | None = None) -> DomainEvent:
    """Child PII anonymized.

    Marked CRITICAL: losing the promotion would leave un-anonymized copies
    in downstream contexts.
    """
    return DomainEvent.new(
        CHILD_DATA_ANONYMIZED,
        child_id,
        "child",
        {"child_id": child_id},
        criticality=EventCriticality.CRITICAL,
        correlation_id=correlation_id,
    )


def user_anonymized(user_id: str, *, correlation_id: str | None = None) -> DomainEvent:
    """All Identity-owned personal data for a user anonymized."""
    return DomainEvent.new(
        USER_ANONYMIZED,
        user_id,
        "user",
        {"user_id": user_id},
        criticality=EventCriticality.CRITICAL,
        correlation_id=correlation_id,
    )
