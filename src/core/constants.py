"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Categories:
- Channel prefixes: Redis pub/sub naming
- Limits: Truncation and safety limits

Example:
    >>> from src.core.constants import NOTIFICATION_CHANNEL_PREFIX
    >>> channel = f"{NOTIFICATION_CHANNEL_PREFIX}:user:{user_id}"
"""

# =============================================================================
# Channel Prefixes
# =============================================================================

NOTIFICATION_CHANNEL_PREFIX: str = "notifications"
"""Redis pub/sub prefix for UI notification channels."""


# =============================================================================
# Limits
# =============================================================================

NOTIFICATION_PREVIEW_LENGTH: int = 120
"""Maximum characters of message content included in a notification."""
