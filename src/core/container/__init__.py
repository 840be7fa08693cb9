"""Container module - Centralized dependency injection.

Re-exports the factory functions so callers import from one place:

    from src.core.container import get_domain_event_bus, get_logger

The container is organized into modules:
- infrastructure: Core services (logging, Redis, publishers, channels)
- events: Domain event bus and startup subscriptions
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_integration_event_publisher,
    get_logger,
    get_notification_channel,
    get_redis_client,
)

# Event bus
from src.core.container.events import (
    build_domain_event_bus,
    default_handler_groups,
    get_domain_event_bus,
)

__all__ = [
    "build_domain_event_bus",
    "default_handler_groups",
    "get_domain_event_bus",
    "get_integration_event_publisher",
    "get_logger",
    "get_notification_channel",
    "get_redis_client",
]
