"""
Configuration module for the ECA Media Service.

This module defines the settings for the Media Service, including the blob
storage root, upload limits, logging level and service ports.
"""

from __future__ import annotations

from pathlib import Path

from eca_service_libs.config import ServiceSettings
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import SettingsConfigDict


class Settings(ServiceSettings):
    """
    Configuration settings for the Media Service.

    Settings are loaded from .env files and environment variables prefixed
    with MEDIA_SERVICE_ (e.g. MEDIA_SERVICE_LOG_LEVEL).
    """

    SERVICE_NAME: str = "media-service"

    STORAGE_DIR: Path = Field(
        default=Path("./data/media"),
        # MEDIA_STORAGE_DIR is the variable existing deployments already set
        validation_alias=AliasChoices("MEDIA_SERVICE_STORAGE_DIR", "MEDIA_STORAGE_DIR"),
        description="Flat directory holding every stored blob",
    )
    MAX_UPLOAD_SIZE_BYTES: int = 16 * 1024 * 1024
    PUBLIC_BASE_URL: str | None = Field(
        default=None,
        description="Base for blob URLs in responses; the request host URL when unset",
    )

    HTTP_PORT: int = 8083

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        env_prefix="MEDIA_SERVICE_",
    )

    @field_validator("STORAGE_DIR")
    @classmethod
    def _absolute_storage_dir(cls, value: Path) -> Path:
        # Path.resolve() normalizes ".." without requiring the directory to exist
        return value.expanduser().resolve()


# Create a single instance for the application to use
settings = Settings()
