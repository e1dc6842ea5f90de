"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a default, so an empty environment yields a working
registry with the reference policies (reject duplicates, no-op on missing
handlers, no locking).

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from courier.core.config import settings

    if settings.dispatch_strict_mode:
        # Missing handlers raise NoHandlerRegisteredError
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from courier.core.enums import DuplicatePolicy, Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


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
        default="Courier",
        description="Application name (bound to every log line)",
    )

    # Registry policies
    registry_duplicate_policy: DuplicatePolicy = Field(
        default=DuplicatePolicy.REJECT,
        description="Second registration for a command type: 'reject' raises, "
        "'replace' overwrites",
    )
    dispatch_strict_mode: bool = Field(
        default=False,
        description="Raise NoHandlerRegisteredError when dispatching a command "
        "with no handler (default: silent no-op)",
    )
    registry_thread_safe: bool = Field(
        default=False,
        description="Guard registry stores with locks so registration may "
        "interleave with dispatch across threads",
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
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
        return level

    @field_validator("registry_duplicate_policy", mode="before")
    @classmethod
    def normalize_duplicate_policy(cls, v: object) -> object:
        """Accept policy names in any case (REPLACE, Replace, replace)."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """
        Check if running in CI environment.

        Returns:
            bool: True if environment is CI, False otherwise.
        """
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
