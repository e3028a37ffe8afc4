"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    upload_dir: Path = Path("uploads")
    max_upload_bytes: int = 12 * 1024 * 1024
    default_timezone: str = "UTC"
    cors_origins: list[str] = ["*"]
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 4000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
