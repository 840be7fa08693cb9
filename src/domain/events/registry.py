"""Domain Event Subscriptions Registry - Single Source of Truth.

This registry declares every bounded context that owns a domain event bus,
together with the handler subscriptions wired into it at startup. It is the
PRIMARY registration path: the container builds one context bus per entry
and subscribes each declared handler before any producer can dispatch.
Runtime ``subscribe`` calls are reserved for tests and dynamic scenarios.

Architecture:
- Domain layer (no dependencies on infrastructure)
- Handlers are referenced by (handler group, method name); the container
  resolves them to bound methods of handler instances it creates per context
- A context with no subscriptions is still declared (empty but valid bus)

Adding a subscription:
1. Add an EventSubscription to the owning context below
2. Implement the method on the handler group it names
3. Run tests - the registry compliance test fails if the method is missing

Handler groups:
    - "integration": IntegrationPromotionHandler (propagates failures)
    - "notifications": NotificationFanoutHandler (swallows failures)
    - "logging": LoggingEventHandler (swallows failures)
"""

from dataclasses import dataclass, field

from src.domain.enums import BoundedContext, HandlerMode
from src.domain.events import (
    community_events,
    identity_events,
    messaging_events,
    support_events,
)
from src.domain.events.handler_entry import DEFAULT_PRIORITY


@dataclass(frozen=True, slots=True, kw_only=True)
class EventSubscription:
    """One declared handler subscription.

    Attributes:
        event_type: Event type to subscribe to.
        handler_group: Name of the handler object the container creates
            ("integration", "notifications", "logging").
        method_name: Method on that handler object.
        priority: Lower runs earlier (default 100).
        mode: Execution mode (default SYNC).
    """

    event_type: str
    handler_group: str
    method_name: str
    priority: int = DEFAULT_PRIORITY
    mode: HandlerMode = HandlerMode.SYNC


@dataclass(frozen=True, slots=True, kw_only=True)
class ContextDeclaration:
    """A bounded context and its startup subscriptions.

    Attributes:
        context: Context id.
        subscriptions: Declared subscriptions (may be empty).
    """

    context: BoundedContext
    subscriptions: tuple[EventSubscription, ...] = field(default_factory=tuple)


# Priority bands
PROMOTION_PRIORITY = 10
NOTIFICATION_PRIORITY = 50
LOGGING_PRIORITY = 200


def _promote(event_type: str) -> EventSubscription:
    return EventSubscription(
        event_type=event_type,
        handler_group="integration",
        method_name="promote",
        priority=PROMOTION_PRIORITY,
    )


def _log(event_type: str) -> EventSubscription:
    return EventSubscription(
        event_type=event_type,
        handler_group="logging",
        method_name="log_event",
        priority=LOGGING_PRIORITY,
    )


CONTEXT_REGISTRY: list[ContextDeclaration] = [
    ContextDeclaration(
        context=BoundedContext.IDENTITY,
        subscriptions=(
            _promote(identity_events.CHILD_DATA_ANONYMIZED),
            _log(identity_events.CHILD_DATA_ANONYMIZED),
            _promote(identity_events.USER_ANONYMIZED),
            _log(identity_events.USER_ANONYMIZED),
            _log(identity_events.CHILD_UPDATED),
        ),
    ),
    ContextDeclaration(context=BoundedContext.FAMILY),
    ContextDeclaration(
        context=BoundedContext.MESSAGING,
        subscriptions=(
            EventSubscription(
                event_type=messaging_events.MESSAGE_SENT,
                handler_group="notifications",
                method_name="notify_recipients",
                priority=NOTIFICATION_PRIORITY,
                mode=HandlerMode.ASYNC,
            ),
            _log(messaging_events.MESSAGE_SENT),
            _log(messaging_events.CONVERSATION_CREATED),
            _promote(messaging_events.USER_DATA_ANONYMIZED),
        ),
    ),
    ContextDeclaration(
        context=BoundedContext.COMMUNITY,
        subscriptions=(
            EventSubscription(
                event_type=community_events.COMMENT_ADDED,
                handler_group="notifications",
                method_name="notify_aggregate",
                priority=NOTIFICATION_PRIORITY,
            ),
        ),
    ),
    ContextDeclaration(
        context=BoundedContext.SUPPORT,
        subscriptions=(
            _promote(support_events.CONTACT_REQUEST_SUBMITTED),
            _log(support_events.CONTACT_REQUEST_SUBMITTED),
        ),
    ),
    ContextDeclaration(context=BoundedContext.PARTICIPATION),
]


def get_declared_contexts() -> list[str]:
    """Return the ids of all declared contexts, in declaration order."""
    return [declaration.context.value for declaration in CONTEXT_REGISTRY]


def get_subscriptions(context: str) -> tuple[EventSubscription, ...]:
    """Return the declared subscriptions for a context (empty if undeclared)."""
    for declaration in CONTEXT_REGISTRY:
        if declaration.context.value == context:
            return declaration.subscriptions
    return ()
