"""Shared-kernel enums.

- Environment: deployment environment read by Settings
- ErrorCode: machine-readable codes carried by DomainError subclasses
"""

from src.core.enums.environment import Environment
from src.core.enums.error_code import ErrorCode

__all__ = ["Environment", "ErrorCode"]
