"""Domain event bus error types.

Errors produced by the domain event bus. All of them flow as data inside
Result types: the bus never raises to a producer because a handler failed.

Error Types:
- UnknownContextError: dispatch/subscribe for a context never initialized
- HandlerCrashed: reason recorded when a handler raised an exception
- UnexpectedHandlerReturn: reason recorded when a handler returned
  something other than None, Success or Failure
- HandlerFailure: one failed handler (id + reason) in a dispatch outcome
- DispatchFailed: aggregated failures of one dispatch call

Usage:
    from src.core.result import Failure
    from src.domain.errors import DispatchFailed, UnknownContextError

    match bus.dispatch("Identity", event):
        case Failure(error=UnknownContextError(context=context)):
            ...
        case Failure(error=DispatchFailed(failures=failures)):
            for failure in failures:
                logger.warning("handler failed", handler=failure.handler_id)
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class UnknownContextError(DomainError):
    """Bounded context has no registry.

    Fatal to the call and never retried by the bus.

    Attributes:
        code: ErrorCode.UNKNOWN_CONTEXT.
        message: Human-readable message.
        context: The context id that was requested.
    """

    code: ErrorCode = ErrorCode.UNKNOWN_CONTEXT
    message: str = "Bounded context was never initialized"
    context: str


@dataclass(frozen=True, slots=True, kw_only=True)
class HandlerCrashed(DomainError):
    """Reason recorded for a handler that raised instead of returning.

    Attributes:
        code: ErrorCode.HANDLER_CRASHED.
        message: Generic reason text.
        error_type: Exception class name.
        error_message: str() of the exception.
    """

    code: ErrorCode = ErrorCode.HANDLER_CRASHED
    message: str = "Handler raised an exception"
    error_type: str
    error_message: str


@dataclass(frozen=True, slots=True, kw_only=True)
class UnexpectedHandlerReturn(DomainError):
    """Reason recorded for a handler whose return value is not a Result.

    Attributes:
        code: ErrorCode.HANDLER_UNEXPECTED_RETURN.
        message: Generic reason text.
        returned: repr() of the value the handler returned.
    """

    code: ErrorCode = ErrorCode.HANDLER_UNEXPECTED_RETURN
    message: str = "Handler returned an unexpected value"
    returned: str


@dataclass(frozen=True, slots=True, kw_only=True)
class HandlerFailure:
    """One handler's reported failure within a dispatch.

    Attributes:
        handler_id: Display name of the handler (registration name or
            the callable's qualified name).
        reason: Whatever the handler put in its Failure, or a
            HandlerCrashed / UnexpectedHandlerReturn produced by the bus.
        handler: The registered callable.
    """

    handler_id: str
    reason: Any
    handler: Callable[..., Any] | None = field(default=None, compare=False, repr=False)

    def as_pair(self) -> tuple[str, Any]:
        """Return (handler_id, reason)."""
        return (self.handler_id, self.reason)


@dataclass(frozen=True, slots=True, kw_only=True)
class DispatchFailed(DomainError):
    """At least one handler failed during a dispatch.

    The bus does not decide what this means for the calling use case; it
    only reports every failure in the order the handlers ran.

    Attributes:
        code: ErrorCode.EVENT_DISPATCH_FAILED.
        message: Human-readable summary.
        event_type: Type of the dispatched event.
        failures: Failed handlers in execution order.
    """

    code: ErrorCode = ErrorCode.EVENT_DISPATCH_FAILED
    message: str = "One or more domain event handlers failed"
    event_type: str
    failures: tuple[HandlerFailure, ...]

    @property
    def pairs(self) -> list[tuple[str, Any]]:
        """Failures as (handler_id, reason) pairs, in execution order."""
        return [failure.as_pair() for failure in self.failures]

    @property
    def reasons(self) -> list[Any]:
        """Failure reasons in execution order."""
        return [failure.reason for failure in self.failures]
