"""Application event handlers.

Handlers subscribed to the per-context domain event buses. Each one states
its own failure policy:

- IntegrationPromotionHandler: propagates publish failures
- NotificationFanoutHandler: swallows delivery failures (best-effort)

Wiring is registry-driven (see src/domain/events/registry.py and
src/core/container/events.py).
"""

from src.application.event_handlers.integration_promotion_handler import (
    IntegrationPromotionHandler,
)
from src.application.event_handlers.notification_fanout_handler import (
    NotificationFanoutHandler,
)

__all__ = ["IntegrationPromotionHandler", "NotificationFanoutHandler"]
