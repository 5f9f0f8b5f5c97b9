"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from `PACKPIN_*` environment
variables (or a local `.env` file).

Usage:
    from packpin.core.config import get_settings

    settings = get_settings()
    print(settings.base_url)  # https://api.packpin.com:443/v2

Environment variables:
    PACKPIN_API_KEY: Account API key
    PACKPIN_HOST: API hostname (default api.packpin.com)
    PACKPIN_PORT: API port (default 443; any other port uses http)
    PACKPIN_TIMEOUT: Request timeout in seconds
    PACKPIN_ENVIRONMENT: development, testing, ci or production
    PACKPIN_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from packpin.core.constants import (
    API_PATH,
    DEFAULT_HOST,
    DEFAULT_PORT,
    HTTPS_PORT,
    REQUEST_TIMEOUT_DEFAULT,
)
from packpin.core.enums import Environment

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Client settings (flat structure).

    Configuration precedence:
        1. Explicit constructor arguments
        2. Environment variables (PACKPIN_ prefix)
        3. `.env` file in the working directory
        4. Default values
    """

    api_key: str | None = Field(
        default=None,
        description="Packpin account API key (sent as Packpin-Api-Key header)",
    )
    host: str = Field(
        default=DEFAULT_HOST,
        min_length=1,
        description="Packpin API hostname",
    )
    port: int = Field(
        default=DEFAULT_PORT,
        ge=1,
        le=65535,
        description="Packpin API port (443 selects https, anything else http)",
    )
    timeout: float = Field(
        default=REQUEST_TIMEOUT_DEFAULT,
        gt=0,
        description="Timeout per request in seconds",
    )
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = SettingsConfigDict(
        env_prefix="PACKPIN_",
        env_file=".env",
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
            v: Log level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def protocol(self) -> str:
        """URL scheme derived from the port."""
        return "https" if self.port == HTTPS_PORT else "http"

    @property
    def base_url(self) -> str:
        """Full API base URL including the version prefix."""
        return f"{self.protocol}://{self.host}:{self.port}{API_PATH}"

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def use_json_logs(self) -> bool:
        """Render logs as JSON everywhere except development."""
        return not self.is_development


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
