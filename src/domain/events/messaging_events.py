"""Messaging context domain events.

Event types:
    - conversation_created
    - message_sent: fanned out to participants' UI channels
    - messages_read
    - user_data_anonymized: user's messaging data anonymized (promoted)
"""

from collections.abc import Sequence
from datetime import UTC, datetime

from src.domain.events.base_event import DomainEvent

CONVERSATION_CREATED = "conversation_created"
MESSAGE_SENT = "message_sent"
MESSAGES_READ = "messages_read"
USER_DATA_ANONYMIZED = "user_data_anonymized"

_AGGREGATE_TYPE = "conversation"


def conversation_created(
    conversation_id: str,
    conversation_type: str,
    provider_id: str,
    participant_ids: Sequence[str],
) -> DomainEvent:
    """Conversation created (direct or program broadcast)."""
    return DomainEvent.new(
        CONVERSATION_CREATED,
        conversation_id,
        _AGGREGATE_TYPE,
        {
            "conversation_id": conversation_id,
            "type": conversation_type,
            "provider_id": provider_id,
            "participant_ids": tuple(participant_ids),
        },
    )


def message_sent(
    conversation_id: str,
    message_id: str,
    sender_id: str,
    content: str,
    *,
    message_type: str = "text",
    recipient_ids: Sequence[str] = (),
    sent_at: datetime | None = None,
) -> DomainEvent:
    """Message sent in a conversation."""
    return DomainEvent.new(
        MESSAGE_SENT,
        conversation_id,
        _AGGREGATE_TYPE,
        {
            "conversation_id": conversation_id,
            "message_id": message_id,
            "sender_id": sender_id,
            "content": content,
            "message_type": message_type,
            "recipient_ids": tuple(recipient_ids),
            "sent_at": (sent_at or datetime.now(UTC)).isoformat(),
        },
        user_id=sender_id,
    )


def messages_read(conversation_id: str, user_id: str, read_at: datetime) -> DomainEvent:
    """User marked messages in a conversation as read."""
    return DomainEvent.new(
        MESSAGES_READ,
        conversation_id,
        _AGGREGATE_TYPE,
        {
            "conversation_id": conversation_id,
            "user_id": user_id,
            "read_at": read_at.isoformat(),
        },
        user_id=user_id,
    )


def user_data_anonymized(user_id: str) -> DomainEvent:
    """User's messaging data anonymized."""
    return DomainEvent.new(
        USER_DATA_ANONYMIZED,
        user_id,
        "user",
        {"user_id": user_id},
    )
