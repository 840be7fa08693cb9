"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Redis client (integration/notification transport)
- Integration event publisher (in-memory/Redis)
- Notification channel (in-memory/Redis)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from redis import Redis

    from src.domain.protocols.integration_event_publisher_protocol import (
        IntegrationEventPublisherProtocol,
    )
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.notification_channel_protocol import (
        NotificationChannelProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_redis_client() -> "Redis[bytes]":  # type: ignore[type-arg]
    """Get Redis client singleton (app-scoped).

    Connection pool is shared by the integration publisher and the
    notification channel.

    Returns:
        Redis: Synchronous Redis client.
    """
    from redis import ConnectionPool, Redis

    pool = ConnectionPool.from_url(
        get_settings().redis_url,
        max_connections=50,
        decode_responses=False,
        socket_connect_timeout=5,
        socket_timeout=5,
        retry_on_timeout=True,
    )
    return Redis(connection_pool=pool)


@lru_cache()
def get_integration_event_publisher() -> "IntegrationEventPublisherProtocol":
    """Get integration event publisher singleton (app-scoped).

    Returns correct adapter based on INTEGRATION_EVENTS_BACKEND:
        - 'in-memory': InMemoryIntegrationEventPublisher (single process)
        - 'redis': RedisIntegrationEventPublisher (pub/sub)

    Raises:
        ValueError: If the backend is unsupported.
    """
    backend = get_settings().integration_events_backend

    if backend == "redis":
        from src.infrastructure.integration.redis_publisher import (
            RedisIntegrationEventPublisher,
        )

        return RedisIntegrationEventPublisher(get_redis_client(), logger=get_logger())

    elif backend == "in-memory":
        from src.infrastructure.integration.in_memory_publisher import (
            InMemoryIntegrationEventPublisher,
        )

        return InMemoryIntegrationEventPublisher(logger=get_logger())

    else:
        raise ValueError(
            f"Unsupported INTEGRATION_EVENTS_BACKEND: {backend}. "
            f"Supported: 'in-memory', 'redis'"
        )


@lru_cache()
def get_notification_channel() -> "NotificationChannelProtocol":
    """Get notification channel singleton (app-scoped).

    Follows INTEGRATION_EVENTS_BACKEND: Redis pub/sub when 'redis',
    otherwise the in-memory channel.
    """
    if get_settings().integration_events_backend == "redis":
        from src.infrastructure.notifications.redis_channel import (
            RedisNotificationChannel,
        )

        return RedisNotificationChannel(get_redis_client())

    from src.infrastructure.notifications.in_memory_channel import (
        InMemoryNotificationChannel,
    )

    return InMemoryNotificationChannel()
