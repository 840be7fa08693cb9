"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the codebase while
remaining backend-agnostic. Every log call is a short event name plus
key-value context.

Log Levels:
    - DEBUG: Dispatch tracing (event dispatching, registration changes)
    - INFO: Lifecycle (context bus started/stopped)
    - WARNING: A handler failed, or a best-effort side effect was swallowed
    - ERROR: A handler raised an exception
    - CRITICAL: Startup wiring cannot proceed

Context Binding:
    Use bind() to create scoped loggers with permanent context
    (context, correlation_id) automatically included in all logs.

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    bus_logger = logger.bind(context="Identity")
    bus_logger.debug("domain_event_dispatching", event_type="child_updated")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger port.

    Every call takes a snake_case event name (``domain_event_handler_failed``)
    plus key-value context; adapters add timestamp and level.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Dispatch tracing."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Lifecycle and observed events."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Failed handlers and swallowed side effects."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a raised exception.

        Args:
            message: Event name.
            error: Exception whose type and message are added as
                ``error_type`` / ``error_message``.
            **context: Structured context. ``exc_info`` is passed through
                to render the traceback.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Startup cannot proceed."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a logger with ``context`` added to every call.

        The receiver is left unchanged.
        """
        ...
