"""Handler execution modes.

Usage:
    from src.domain.enums import HandlerMode

    bus.subscribe(context, "message_sent", handler, mode=HandlerMode.ASYNC)
"""

from enum import Enum


class HandlerMode(str, Enum):
    """How a registered handler is executed.

    SYNC handlers always run inline in the dispatching caller's thread and
    their results are part of the dispatch outcome.

    ASYNC handlers are accepted and stored. Unless async dispatch is enabled
    in settings they run exactly like SYNC handlers. When enabled they are
    submitted to a background worker pool after the SYNC handlers finish and
    their results are NOT part of the dispatch outcome.
    """

    SYNC = "sync"
    ASYNC = "async"
