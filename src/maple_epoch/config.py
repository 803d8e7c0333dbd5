"""Configuration management using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_WORDPRESS_API_URL = "https://mapleepoch.com/wp-json/wp/v2"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # WordPress settings. A missing URL falls back to the production origin.
    wordpress_api_url: str = Field(
        default=DEFAULT_WORDPRESS_API_URL, description="WordPress REST API base URL"
    )
    wordpress_api_token: str = Field(
        default="", description="Bearer token for authenticated dashboard calls"
    )

    # Fetch behaviour
    cache_duration_seconds: float = Field(
        default=300.0, description="Freshness window for cached CMS responses"
    )
    request_timeout_seconds: float = Field(
        default=10.0, description="Deadline for a single CMS request"
    )
    section_fetch_size: int = Field(
        default=20, description="Minimum page size requested for section listings"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Console log level")
    log_file: Path | None = Field(default=None, description="Optional log file path")

    @property
    def api_base_url(self) -> str:
        """WordPress API URL without a trailing slash."""
        return (self.wordpress_api_url or DEFAULT_WORDPRESS_API_URL).rstrip("/")

    @property
    def has_api_token(self) -> bool:
        """Check if a dashboard API token is configured."""
        return bool(self.wordpress_api_token)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
