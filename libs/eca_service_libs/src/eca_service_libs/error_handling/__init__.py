"""Error handling utilities for ECA services."""

from eca_service_libs.error_handling.eca_error import EcaError
from eca_service_libs.error_handling.error_detail_factory import (
    create_error_detail_with_context,
)
from eca_service_libs.error_handling.factories import (
    raise_initialization_failed,
    raise_resource_conflict,
    raise_resource_not_found,
    raise_storage_error,
    raise_unknown_error,
    raise_validation_error,
)
from eca_service_libs.error_handling.http_status import error_response_body, status_code_for
from eca_service_libs.error_handling.request_validation import (
    field_errors,
    raise_request_validation_error,
)

__all__ = [
    "EcaError",
    "create_error_detail_with_context",
    "error_response_body",
    "field_errors",
    "raise_initialization_failed",
    "raise_request_validation_error",
    "raise_resource_conflict",
    "raise_resource_not_found",
    "raise_storage_error",
    "raise_unknown_error",
    "raise_validation_error",
    "status_code_for",
]
