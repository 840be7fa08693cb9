"""
Event bus configuration (pydantic-settings).

One flat Settings model read from environment variables (case-insensitive).
Every field has a default, so the bus starts without any .env file.

Groups:
- Environment and logging (ENVIRONMENT, LOG_LEVEL)
- Event bus wiring (EVENTS_*)
- Integration transport (INTEGRATION_EVENTS_BACKEND, REDIS_URL)

Usage:
    from src.core.config import get_settings

    if get_settings().events_strict_mode:
        ...  # missing declared handlers fail startup
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Context Event Bus",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Domain event bus
    events_strict_mode: bool = Field(
        default=False,
        description="Fail at startup when a declared handler method is missing "
        "(graceful mode logs a warning and skips the subscription)",
    )
    events_default_priority: int = Field(
        default=100,
        description="Priority assigned to handlers registered without one (lower runs earlier)",
    )
    events_async_dispatch_enabled: bool = Field(
        default=False,
        description="Submit handlers registered with mode=async to a background "
        "worker pool instead of running them inline. Disabled: async handlers "
        "run exactly like sync handlers.",
    )
    events_async_max_workers: int = Field(
        default=4,
        description="Worker threads for async handler execution (only used when "
        "events_async_dispatch_enabled is true)",
    )

    # Integration events (cross-context transport used by handlers)
    integration_events_backend: str = Field(
        default="in-memory",
        description="Integration event transport: 'in-memory' or 'redis'",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL (only used by the redis integration backend)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log_level: {v}")
        return level

    @field_validator("events_async_max_workers")
    @classmethod
    def validate_async_max_workers(cls, v: int) -> int:
        """
        Validate worker pool size.

        Args:
            v: Number of worker threads.

        Returns:
            int: Validated worker count.

        Raises:
            ValueError: If count is not between 1 and 64.
        """
        if not 1 <= v <= 64:
            raise ValueError("events_async_max_workers must be between 1 and 64")
        return v

    @field_validator("integration_events_backend")
    @classmethod
    def validate_integration_backend(cls, v: str) -> str:
        """
        Validate integration event backend name.

        Args:
            v: Backend name.

        Returns:
            str: Lower-cased backend name.

        Raises:
            ValueError: If backend is not supported.
        """
        backend = v.lower()
        if backend not in {"in-memory", "redis"}:
            raise ValueError(
                f"Unsupported integration_events_backend: {v}. "
                "Supported: 'in-memory', 'redis'"
            )
        return backend

    @property
    def is_development(self) -> bool:
        """True when running on a developer machine."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True under the test suite."""
        return self.environment == Environment.TESTING

    @property
    def use_json_logs(self) -> bool:
        """JSON log rendering everywhere except development."""
        return not self.is_development


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Container factories read settings through this accessor so tests can
    reset it with ``get_settings.cache_clear()``.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
