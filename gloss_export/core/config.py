"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = Field(...)
    GITHUB_TOKEN: str = Field(...)
    GITHUB_EXPORT_QUEUE_URL: str = Field(...)

    # Target repository for exported documents
    GITHUB_OWNER: str = Field(default="globalbibletools")
    GITHUB_REPO: str = Field(default="data")
    GITHUB_BRANCH: str = Field(default="main")
    GITHUB_API_URL: str = Field(default="https://api.github.com")

    EXPORT_SYSTEM_NAME: str = Field(default="Global Bible Tools")
    EXPORT_MESSAGE_GROUP_ID: str = Field(default="github-export")
    # Rows fetched per cursor read; each row is a whole book
    EXPORT_BATCH_SIZE: int = Field(default=1, ge=1)

    AWS_REGION: str | None = Field(default=None)

    GLOSS_EXPORT_LOG_LEVEL: str = Field(default="info")
    GLOSS_EXPORT_LOG_DIR: Path | None = Field(default=None)
    DATA_DIR: Path = Field(default=Path("/tmp"))


settings = Settings()  # type: ignore[call-arg]


__all__ = ["Settings", "settings"]
