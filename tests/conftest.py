"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Custom markers are registered
2. Cached settings and container singletons never leak between tests
3. Common test doubles (logger, bus) are available as fixtures
"""

from unittest.mock import MagicMock

import pytest

from src.domain.enums import BoundedContext


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a fully wired bus"
    )


@pytest.fixture(autouse=True)
def clear_cached_singletons():
    """Reset lru_cache'd settings and container factories around each test."""
    from src.core.config import get_settings
    from src.core.container import events, infrastructure

    caches = (
        get_settings,
        infrastructure.get_logger,
        infrastructure.get_redis_client,
        infrastructure.get_integration_event_publisher,
        infrastructure.get_notification_channel,
        events.get_domain_event_bus,
    )
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


# =============================================================================
# Reusable Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    MagicMock accepts every LoggerProtocol call; bind() returns the same mock
    so bound loggers can be asserted on directly.

    Usage:
        def test_something(mock_logger):
            bus = DomainEventBus.from_contexts(["Identity"], logger=mock_logger)
            mock_logger.info.assert_called()
    """
    logger = MagicMock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def event_bus(mock_logger):
    """Provide a bus with every declared bounded context and no handlers."""
    from src.infrastructure.events.domain_event_bus import DomainEventBus

    return DomainEventBus.from_contexts(list(BoundedContext), logger=mock_logger)


@pytest.fixture
def logged_events():
    """Collect log event names from a mock logger.

    Usage:
        def test_something(mock_logger, logged_events):
            ...
            assert "domain_event_handler_failed" in logged_events(mock_logger.warning)
    """

    def collect(method: MagicMock) -> list[str]:
        return [call.args[0] for call in method.call_args_list]

    return collect
