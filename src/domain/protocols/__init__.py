"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import DomainEventBusProtocol, LoggerProtocol
"""

from src.domain.protocols.event_bus_protocol import DomainEventBusProtocol
from src.domain.protocols.integration_event_publisher_protocol import (
    IntegrationEventPublisherProtocol,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_channel_protocol import (
    NotificationChannelProtocol,
)

__all__ = [
    "DomainEventBusProtocol",
    "IntegrationEventPublisherProtocol",
    "LoggerProtocol",
    "NotificationChannelProtocol",
]
