"""Deployment environments.

Read from ENVIRONMENT by Settings. The container renders logs for humans in
development and as JSON everywhere else.
"""

from enum import Enum


class Environment(str, Enum):
    """Deployment environment."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
