"""Dispatch outcome helpers for use cases.

The bus returns aggregated outcomes; what an outcome means for a use case is
decided here, by the caller.
"""

from src.application.events.dispatch_helpers import first_failure_reason

__all__ = ["first_failure_reason"]
