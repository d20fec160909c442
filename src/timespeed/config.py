"""Application settings for the time-flow host."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TIMESPEED_", env_file=".env", env_file_encoding="utf-8"
    )

    config_path: Path = Field(
        default=Path("config/timespeed.json"),
        description="Where the time configuration is read from and written to",
    )
    log_level: str = Field(default="INFO", description="Root log level for the host")
    max_sessions: int = Field(
        default=32,
        description="Upper bound on concurrently registered sessions",
        gt=0,
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
