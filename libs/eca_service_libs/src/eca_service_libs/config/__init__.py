"""Configuration utilities for ECA services."""

from .service_settings import ServiceSettings

__all__ = ["ServiceSettings"]
