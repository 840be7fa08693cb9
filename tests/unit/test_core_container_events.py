"""Unit tests for domain event bus container wiring.

Tests cover:
- Registry compliance: every declared handler method exists
- Startup wiring of declared subscriptions (priority, mode, names)
- Every declared context initialized, including empty ones
- Strict mode fails fast on missing handlers; graceful mode skips them
- Async executor creation when async dispatch is enabled
- get_domain_event_bus() singleton
"""

from unittest.mock import MagicMock

import pytest

from src.application.event_handlers import (
    IntegrationPromotionHandler,
    NotificationFanoutHandler,
)
from src.core.config import Settings
from src.core.container.events import build_domain_event_bus, get_domain_event_bus
from src.domain.enums import BoundedContext, HandlerMode
from src.domain.events.registry import (
    CONTEXT_REGISTRY,
    ContextDeclaration,
    EventSubscription,
    get_declared_contexts,
    get_subscriptions,
)
from src.infrastructure.events.domain_event_bus import DomainEventBus
from src.infrastructure.events.handlers import LoggingEventHandler
from src.infrastructure.notifications.in_memory_channel import (
    InMemoryNotificationChannel,
)

HANDLER_GROUP_CLASSES = {
    "integration": IntegrationPromotionHandler,
    "notifications": NotificationFanoutHandler,
    "logging": LoggingEventHandler,
}


def handler_groups_factory(logger):
    publisher = MagicMock()
    notifications = NotificationFanoutHandler(
        channel=InMemoryNotificationChannel(), logger=logger
    )

    def factory(context):
        return {
            "integration": IntegrationPromotionHandler(
                publisher=publisher, source_context=context, logger=logger
            ),
            "notifications": notifications,
            "logging": LoggingEventHandler(logger=logger, context=context),
        }

    return factory


@pytest.mark.unit
class TestContextRegistryCompliance:
    """Every declared subscription must resolve to a real handler method."""

    @pytest.mark.parametrize(
        "context,subscription",
        [
            (declaration.context.value, subscription)
            for declaration in CONTEXT_REGISTRY
            for subscription in declaration.subscriptions
        ],
    )
    def test_declared_handler_method_exists(self, context, subscription):
        """Test the handler group implements the declared method."""
        handler_class = HANDLER_GROUP_CLASSES[subscription.handler_group]

        assert callable(getattr(handler_class, subscription.method_name, None)), (
            f"{context}: {handler_class.__name__}.{subscription.method_name} "
            f"missing for {subscription.event_type}"
        )

    def test_every_bounded_context_declared(self):
        """Test each BoundedContext has exactly one declaration."""
        assert sorted(get_declared_contexts()) == sorted(c.value for c in BoundedContext)

    def test_get_subscriptions_for_empty_context(self):
        """Test contexts without subscriptions return an empty tuple."""
        assert get_subscriptions("Family") == ()
        assert get_subscriptions("Billing") == ()


@pytest.mark.unit
class TestBuildDomainEventBus:
    """Test registry-driven wiring."""

    def test_all_declared_contexts_initialized(self, mock_logger):
        """Test even empty contexts get a bus."""
        bus = build_domain_event_bus(
            CONTEXT_REGISTRY,
            logger=mock_logger,
            settings=Settings(),
            handler_groups_factory=handler_groups_factory(mock_logger),
        )

        assert bus.contexts == get_declared_contexts()
        assert "Family" in bus.contexts

    def test_declared_subscriptions_registered(self, mock_logger):
        """Test subscriptions are wired with declared priority and mode."""
        bus = build_domain_event_bus(
            CONTEXT_REGISTRY,
            logger=mock_logger,
            settings=Settings(),
            handler_groups_factory=handler_groups_factory(mock_logger),
        )

        entries = bus.handlers_for("Messaging", "message_sent").value
        ids = [entry.handler_id for entry in entries]
        assert ids == ["notifications.notify_recipients", "logging.log_event"]
        assert entries[0].mode is HandlerMode.ASYNC
        assert entries[0].priority == 50

    def test_promotion_runs_before_logging(self, mock_logger):
        """Test promotion priority precedes logging priority."""
        bus = build_domain_event_bus(
            CONTEXT_REGISTRY,
            logger=mock_logger,
            settings=Settings(),
            handler_groups_factory=handler_groups_factory(mock_logger),
        )

        entries = bus.handlers_for("Identity", "child_data_anonymized").value
        assert [e.handler_id for e in entries] == [
            "integration.promote",
            "logging.log_event",
        ]

    def test_strict_mode_missing_handler_raises(self, mock_logger):
        """Test strict mode fails startup on a missing handler method."""
        declarations = [
            ContextDeclaration(
                context=BoundedContext.IDENTITY,
                subscriptions=(
                    EventSubscription(
                        event_type="child_updated",
                        handler_group="logging",
                        method_name="does_not_exist",
                    ),
                ),
            )
        ]

        with pytest.raises(RuntimeError, match="EVENTS_STRICT_MODE"):
            build_domain_event_bus(
                declarations,
                logger=mock_logger,
                settings=Settings(events_strict_mode=True),
                handler_groups_factory=handler_groups_factory(mock_logger),
            )

    def test_graceful_mode_skips_missing_handler(self, mock_logger):
        """Test graceful mode logs a warning and skips the subscription."""
        declarations = [
            ContextDeclaration(
                context=BoundedContext.IDENTITY,
                subscriptions=(
                    EventSubscription(
                        event_type="child_updated",
                        handler_group="unknown_group",
                        method_name="handle",
                    ),
                ),
            )
        ]

        bus = build_domain_event_bus(
            declarations,
            logger=mock_logger,
            settings=Settings(events_strict_mode=False),
            handler_groups_factory=handler_groups_factory(mock_logger),
        )

        assert bus.handlers_for("Identity", "child_updated").value == ()
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "domain_event_handler_missing"

    def test_async_executor_created_when_enabled(self, mock_logger):
        """Test async dispatch creates an executor that shutdown releases."""
        bus = build_domain_event_bus(
            [ContextDeclaration(context=BoundedContext.MESSAGING)],
            logger=mock_logger,
            settings=Settings(
                events_async_dispatch_enabled=True, events_async_max_workers=2
            ),
            handler_groups_factory=handler_groups_factory(mock_logger),
        )

        assert bus._async_executor is not None
        bus.shutdown()

    def test_default_priority_from_settings(self, mock_logger):
        """Test runtime subscriptions use the configured default priority."""
        bus = build_domain_event_bus(
            [ContextDeclaration(context=BoundedContext.FAMILY)],
            logger=mock_logger,
            settings=Settings(events_default_priority=7),
            handler_groups_factory=handler_groups_factory(mock_logger),
        )

        bus.subscribe("Family", "family_created", lambda e: None)

        assert bus.handlers_for("Family", "family_created").value[0].priority == 7


@pytest.mark.unit
class TestGetDomainEventBus:
    """Test the application-scoped singleton."""

    def test_singleton(self, monkeypatch):
        """Test get_domain_event_bus returns one fully wired instance."""
        monkeypatch.setenv("ENVIRONMENT", "testing")

        first = get_domain_event_bus()
        second = get_domain_event_bus()

        assert isinstance(first, DomainEventBus)
        assert first is second
        assert first.contexts == get_declared_contexts()
