"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- events/: Per-context domain event bus (registry, dispatcher, facade)
- integration/: Integration event publishers (in-memory, Redis pub/sub)
- notifications/: UI notification channels (in-memory, Redis pub/sub)
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
