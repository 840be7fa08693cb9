"""Base error value shared by every layer."""

from src.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
