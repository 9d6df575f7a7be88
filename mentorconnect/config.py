"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        default="sqlite:///./mentorconnect.db",
        description="SQLAlchemy URL of the database backing the local token storage",
        min_length=1,
    )
    auth_api_url: str = Field(
        default="http://localhost:5000",
        description="Base URL of the auth and profile backend",
        min_length=1,
    )
    request_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout applied to every outbound HTTP request",
        gt=0,
    )
    llm_base_url: str = Field(
        default="http://localhost:11434",
        description="Base URL of the local LLM server",
        min_length=1,
    )
    llm_model: str = Field(default="llama3.2", min_length=1)
    llm_temperature: float = Field(default=0.7, ge=0, le=2)
    ai_replies_enabled: bool = Field(
        default=False,
        description="Generate a reply from the other participant after sending a message",
    )
    notification_fetch_delay_seconds: float = Field(
        default=0.8,
        description="Simulated latency of the notification fetch",
        ge=0,
    )
    page_fetch_delay_seconds: float = Field(
        default=1.0,
        description="Simulated latency of the page data fetches",
        ge=0,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to decide which calendar day a timestamp belongs to",
    )
    log_level: str = Field(default="INFO")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"],
    )

    @field_validator("auth_api_url", "llm_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
