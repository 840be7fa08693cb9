"""Helpers for use cases consuming dispatch outcomes.

The bus never decides whether a use case succeeded. Use cases that chain
steps with a flat ``Result[..., reason]`` shape can collapse a dispatch
outcome to the first handler failure reason with ``first_failure_reason``.
"""

from typing import Any

from src.core.result import OK, Failure, Result, Success
from src.domain.errors import DispatchFailed, UnknownContextError


def first_failure_reason(
    result: Result[None, DispatchFailed | UnknownContextError],
) -> Result[None, Any]:
    """Collapse a dispatch outcome to ``Failure(reason)`` of its first failure.

    Args:
        result: Outcome returned by ``dispatch``.

    Returns:
        Success(None) unchanged; Failure(reason) of the first failed handler
        for DispatchFailed; the UnknownContextError failure unchanged.

    Example:
        >>> match first_failure_reason(bus.dispatch("Identity", event)):
        ...     case Failure(error="db_down"):
        ...         ...
    """
    match result:
        case Success():
            return OK
        case Failure(error=DispatchFailed(failures=failures)) if failures:
            return Failure(error=failures[0].reason)
        case _:
            return result
