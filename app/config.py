"""Configuration management for the Podcast Feed API."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="PODCAST_", extra="ignore"
    )

    # Upstream feed
    feed_url: str = "https://anchor.fm/s/49f0c604/podcast/rss"
    fetch_timeout_seconds: float = Field(default=15.0, gt=0)

    # Items without an enclosure are either skipped or fail the whole request
    malformed_item_policy: str = Field(default="skip", pattern="^(skip|fail)$")

    # Response encoding
    gzip_mode: str = Field(
        default="negotiate", pattern="^(negotiate|always|never)$"
    )
    gzip_compresslevel: int = Field(default=6, ge=0, le=9)

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
