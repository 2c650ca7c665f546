# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration loaded from environment variables.

Usage:
    from linkhub.config import get_settings

    settings = get_settings()

get_settings() creates the settings object on first call. Tests can reset
it via get_settings.cache_clear().
"""

from functools import lru_cache

from pydantic import BaseModel, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProfileLink(BaseModel):
    """A single link shown on the public profile page."""

    title: str
    url: str
    icon: str | None = None


class Settings(BaseSettings):
    """Runtime settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    database_url: str = "sqlite:///./linkhub.db"
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Shared secret for the collector trigger endpoint; unset disables it
    cron_secret: SecretStr | None = None

    # Sessions
    session_duration_hours: int = 24
    session_sweep_minutes: int = 15

    # 0 means the collector only runs when triggered over HTTP
    collector_interval_minutes: int = 0

    # Public profile
    profile_name: str = "Linkhub"
    profile_subtitle: str | None = None
    profile_bio: str = ""
    profile_avatar_url: str | None = None
    profile_links: list[ProfileLink] = []

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def session_duration_seconds(self) -> int:
        return self.session_duration_hours * 3600


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
