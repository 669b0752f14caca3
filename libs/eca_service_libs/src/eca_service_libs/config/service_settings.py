"""
Base settings shared by every ECA service.

Services subclass ServiceSettings, set their own env prefix through
``model_config`` and expose a module-level ``settings`` instance.
"""

from __future__ import annotations

from eca_core.config_enums import Environment
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """Settings every ECA service carries."""

    SERVICE_NAME: str = "eca-service"
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",  # Read from global ENVIRONMENT var
        description="Runtime environment for the service",
    )

    # Quart app.run() parameters
    DEBUG: bool = False
    HTTP_HOST: str = "0.0.0.0"
    HTTP_PORT: int = 8000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION
