"""Integration event publishing error types.

Usage:
    from src.core.result import Failure
    from src.domain.errors import IntegrationPublishError

    return Failure(error=IntegrationPublishError(
        message="Broker unavailable",
        topic="integration:identity:child_data_anonymized",
    ))
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class IntegrationPublishError(DomainError):
    """Integration event could not be handed to the transport.

    Attributes:
        code: ErrorCode.INTEGRATION_EVENT_PUBLISH_FAILED by default.
        message: Human-readable message.
        topic: Topic the event was published to.
    """

    code: ErrorCode = ErrorCode.INTEGRATION_EVENT_PUBLISH_FAILED
    topic: str | None = None
