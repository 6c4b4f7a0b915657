"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)
    BOOK_CONCIERGE_LOG_LEVEL: str = Field(default="info")
    BOOK_CONCIERGE_LOG_DIR: Path | None = Field(default=None)
    CATALOG_PATH: Path | None = Field(default=None)
    HEALTH_MESSAGE: str = Field(default="Book Recommendation Chatbot Fulfillment is running!")

    # Context lifespans, counted in conversation turns by Dialogflow
    GENRE_CONTEXT_LIFESPAN: int = Field(default=5, ge=1)
    LENGTH_CONTEXT_LIFESPAN: int = Field(default=5, ge=1)
    PREFERENCES_CONTEXT_LIFESPAN: int = Field(default=50, ge=1)


settings = Settings()
config = settings  # Alias used by route and service modules


__all__ = ["Settings", "settings", "config"]
