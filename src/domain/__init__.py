"""Domain layer - Pure business logic.

This layer contains the domain event value types, the per-context event
factories, the startup subscription registry, error types and protocols
(ports). The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- enums/: Bounded contexts, handler modes, criticality
- errors/: Event bus and collaborator errors (returned in Result types)
- events/: Domain and integration events, handler entries, registry
- protocols/: Event bus, logger, integration publisher, notification ports
"""
