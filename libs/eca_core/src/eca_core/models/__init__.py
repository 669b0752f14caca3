"""Pure data models shared across ECA services."""

from eca_core.models.error_models import ErrorDetail

__all__ = ["ErrorDetail"]
