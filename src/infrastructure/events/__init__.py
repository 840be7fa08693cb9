"""Domain event bus infrastructure.

Exports:
    DomainEventBus: Facade over per-context buses (DomainEventBusProtocol)
    ContextEventBus: Bus bound to one bounded context
    HandlerRegistry / ContextRegistry: Copy-on-write handler registries
    HandlerDispatcher: Caller-thread handler execution and aggregation
    AsyncHandlerExecutor: Optional background pool for async-mode handlers
"""

from src.infrastructure.events.async_executor import AsyncHandlerExecutor
from src.infrastructure.events.context_registry import (
    ContextRegistry,
    HandlerRegistry,
    context_key,
)
from src.infrastructure.events.dispatcher import HandlerDispatcher
from src.infrastructure.events.domain_event_bus import ContextEventBus, DomainEventBus

__all__ = [
    "AsyncHandlerExecutor",
    "ContextEventBus",
    "ContextRegistry",
    "DomainEventBus",
    "HandlerDispatcher",
    "HandlerRegistry",
    "context_key",
]
