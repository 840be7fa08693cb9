"""Result types for railway-oriented programming.

Every operation that can fail in a way the caller must decide about returns
a Result instead of raising. The event bus relies on this twice: handlers
report their outcome as a Result, and dispatch aggregates those outcomes
into a single Result for the producing use case.

Usage:
    def promote(event: DomainEvent) -> Result[None, str]:
        if broker_down:
            return Failure(error="broker_unavailable")
        return Success(value=None)

    match bus.dispatch(BoundedContext.IDENTITY, event):
        case Success():
            ...
        case Failure(error=error):
            logger.warning("dispatch failed", error=str(error))
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value (None for side-effect operations).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error (or handler-specific reason) that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]

OK: Success[None] = Success(value=None)
"""Shared success value for operations that return nothing."""
