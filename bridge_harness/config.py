"""
Configuration management for the bridge test harness.

Uses pydantic-settings for type-safe environment variable handling.
Secrets are loaded from environment variables only - never from files in repo.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Harness settings loaded from environment variables.

    All sensitive values use SecretStr to prevent accidental logging.
    """

    model_config = SettingsConfigDict(
        env_prefix="BRIDGE_HARNESS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    # Deposit API
    api_base_url: str = Field(
        default="http://localhost:3031",
        description="Base URL of the deposit API under test",
    )
    api_key: SecretStr | None = Field(
        default=None,
        description="API key sent as the x-api-key header",
    )
    request_timeout: int = Field(
        default=20,
        description="HTTP request timeout in seconds",
        ge=1,
        le=120,
    )

    # Pagination
    page_token_key: str = Field(
        default="nextToken",
        description="Query parameter carrying the continuation token",
    )
    max_pages: int | None = Field(
        default=None,
        description="Upper bound on pages per collection (None = unbounded)",
        ge=1,
    )

    # Canned node payloads
    node_info_path: Path | None = Field(
        default=None,
        description="Alternate node info baseline (JSON)",
    )
    protocol_info_path: Path | None = Field(
        default=None,
        description="Alternate protocol info baseline (JSON)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_v = v.upper()
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @property
    def has_api_key(self) -> bool:
        """Check if an API key is configured."""
        return self.api_key is not None

    def get_redacted_config(self) -> dict[str, str | int | bool | None]:
        """
        Get configuration dict with sensitive values redacted.
        Safe for logging.
        """
        return {
            "log_level": self.log_level,
            "api_base_url": self.api_base_url,
            "api_key_configured": self.has_api_key,
            "request_timeout": self.request_timeout,
            "page_token_key": self.page_token_key,
            "max_pages": self.max_pages,
        }


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Call get_settings.cache_clear() after changing the environment.
    """
    return Settings()
