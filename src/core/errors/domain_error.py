"""Base error value for Result-returning operations.

Bus errors (unknown context, failed dispatch) and collaborator errors
(integration publish, notification delivery) are values placed in
``Failure(error=...)``; none of them is ever raised.

Subclasses pin a default ``code`` and add the fields callers match on:

    @dataclass(frozen=True, slots=True, kw_only=True)
    class UnknownContextError(DomainError):
        code: ErrorCode = ErrorCode.UNKNOWN_CONTEXT
        message: str = "Bounded context was never initialized"
        context: str
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error value carried in a Failure (NOT an Exception).

    Attributes:
        code: Machine-readable error code.
        message: Human-readable description.
        details: Extra string context for logs.
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
