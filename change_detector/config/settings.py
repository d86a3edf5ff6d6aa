"""Configuration settings using Pydantic."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CHANGE_DETECTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Hashing
    hash_algorithm: Literal["xxh64", "sha256"] = Field(
        default="xxh64",
        description="64-bit hash function used by new detectors",
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")
    log_file: Path | None = Field(default=None, description="Optional JSONL log file")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
