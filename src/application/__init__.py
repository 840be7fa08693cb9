"""Application layer - Use case support and event handlers.

Structure:
- event_handlers/: Handlers subscribed to domain event buses
- events/: Helpers for use cases consuming dispatch outcomes

The application layer orchestrates domain logic but contains no business rules.
"""
