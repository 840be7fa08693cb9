"""Domain event criticality levels.

Carried in event metadata. The bus does not change behavior based on
criticality; it is recorded for handlers and for future guaranteed
delivery support.
"""

from enum import Enum


class EventCriticality(str, Enum):
    """Event criticality level."""

    CRITICAL = "critical"
    """Must not be lost."""

    NORMAL = "normal"
    """Standard fire-and-forget (default)."""
