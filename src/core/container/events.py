# mypy: disable-error-code="arg-type"
"""Domain event bus dependency factory.

Application-scoped singleton for per-context domain event dispatch.
Builds one context bus per declared bounded context and subscribes all
declared handlers at startup using registry-driven auto-wiring
(CONTEXT_REGISTRY in src/domain/events/registry.py).
"""

from collections.abc import Callable, Iterable, Mapping
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from src.core.config import Settings
from src.domain.events.registry import ContextDeclaration
from src.domain.protocols.logger_protocol import LoggerProtocol

if TYPE_CHECKING:
    from src.infrastructure.events.domain_event_bus import DomainEventBus


HandlerGroupsFactory = Callable[[str], Mapping[str, Any]]


def default_handler_groups(*, logger: LoggerProtocol) -> HandlerGroupsFactory:
    """Return a factory creating the handler groups for one context.

    Groups:
        - "integration": IntegrationPromotionHandler bound to the context
        - "notifications": NotificationFanoutHandler (shared across contexts)
        - "logging": LoggingEventHandler bound to the context
    """
    from src.application.event_handlers import (
        IntegrationPromotionHandler,
        NotificationFanoutHandler,
    )
    from src.core.container.infrastructure import (
        get_integration_event_publisher,
        get_notification_channel,
    )
    from src.infrastructure.events.handlers import LoggingEventHandler

    notifications = NotificationFanoutHandler(
        channel=get_notification_channel(), logger=logger
    )

    def handler_groups(context: str) -> Mapping[str, Any]:
        return {
            "integration": IntegrationPromotionHandler(
                publisher=get_integration_event_publisher(),
                source_context=context,
                logger=logger,
            ),
            "notifications": notifications,
            "logging": LoggingEventHandler(logger=logger, context=context),
        }

    return handler_groups


def build_domain_event_bus(
    declarations: Iterable[ContextDeclaration],
    *,
    logger: LoggerProtocol,
    settings: Settings,
    handler_groups_factory: HandlerGroupsFactory,
) -> "DomainEventBus":
    """Create the bus and wire every declared subscription.

    For each declared context:
        1. Initialize an (empty) context bus
        2. Create the context's handler groups
        3. Resolve each subscription to ``getattr(group, method_name)``
        4. Subscribe it with the declared priority and mode

    Mode-dependent behavior for unresolvable subscriptions:
        - STRICT: raise RuntimeError (startup fails)
        - GRACEFUL: log a warning and skip the subscription

    Args:
        declarations: Declared contexts and their subscriptions.
        logger: Logger shared by the bus and handlers.
        settings: Event bus configuration.
        handler_groups_factory: context id -> {group name: handler object}.

    Returns:
        DomainEventBus: Fully wired bus.

    Raises:
        RuntimeError: In strict mode, when a declared handler is missing.
    """
    from src.infrastructure.events.async_executor import AsyncHandlerExecutor
    from src.infrastructure.events.domain_event_bus import DomainEventBus

    declarations = list(declarations)

    async_executor = None
    if settings.events_async_dispatch_enabled:
        async_executor = AsyncHandlerExecutor(
            max_workers=settings.events_async_max_workers, logger=logger
        )

    bus = DomainEventBus.from_contexts(
        [declaration.context for declaration in declarations],
        logger=logger,
        default_priority=settings.events_default_priority,
        async_executor=async_executor,
    )

    for declaration in declarations:
        context = declaration.context.value
        if not declaration.subscriptions:
            continue

        groups = handler_groups_factory(context)

        for subscription in declaration.subscriptions:
            group = groups.get(subscription.handler_group)
            handler_method = (
                getattr(group, subscription.method_name, None)
                if group is not None
                else None
            )

            if handler_method is None:
                if settings.events_strict_mode:
                    raise RuntimeError(
                        f"EVENTS_STRICT_MODE: Missing declared event handler\n"
                        f"Context: {context}\n"
                        f"Event: {subscription.event_type}\n"
                        f"Expected method: {subscription.handler_group}."
                        f"{subscription.method_name}\n\n"
                        f"Fix: Implement the handler method or remove the "
                        f"subscription from src/domain/events/registry.py\n"
                        f"Or disable strict mode: Set EVENTS_STRICT_MODE=false"
                    )
                logger.warning(
                    "domain_event_handler_missing",
                    context=context,
                    event_type=subscription.event_type,
                    handler_group=subscription.handler_group,
                    handler_method=subscription.method_name,
                )
                continue

            bus.subscribe(
                context,
                subscription.event_type,
                handler_method,
                priority=subscription.priority,
                mode=subscription.mode,
                name=f"{subscription.handler_group}.{subscription.method_name}",
            )

    return bus


@lru_cache()
def get_domain_event_bus() -> "DomainEventBus":
    """Get domain event bus singleton (app-scoped).

    Every context declared in CONTEXT_REGISTRY is initialized (even when it
    has no subscriptions) and all declared handlers are subscribed before
    the bus is returned, so producers never observe a partially wired bus.

    Returns:
        DomainEventBus implementing DomainEventBusProtocol.

    Usage:
        bus = get_domain_event_bus()
        result = bus.dispatch("Identity", identity_events.child_updated(...))
    """
    from src.core.config import get_settings
    from src.core.container.infrastructure import get_logger
    from src.domain.events.registry import CONTEXT_REGISTRY

    logger = get_logger()
    return build_domain_event_bus(
        CONTEXT_REGISTRY,
        logger=logger,
        settings=get_settings(),
        handler_groups_factory=default_handler_groups(logger=logger),
    )
