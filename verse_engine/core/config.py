"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    VERSE_ENGINE_LOG_LEVEL: str = Field(default="info")
    VERSE_ENGINE_LOG_DIR: Path | None = Field(default=None)
    DATA_DIR: Path = Field(default=Path("./data"))

    # Canonical book dataset; the bundled JSON is used when unset
    BOOK_DATASET_PATH: Path | None = Field(default=None)

    # Detection and capture tuning
    CONFIDENCE_THRESHOLD: float = Field(default=0.7, ge=0.0, le=1.0)
    CROSS_SEGMENT_WINDOW: int = Field(default=2, ge=0)
    BIBLE_LIBRARY_NAME: str = Field(default="Default")


settings = Settings()
config = settings  # Alias for backward compatibility


__all__ = ["Settings", "settings", "config"]
