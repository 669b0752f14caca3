"""Mapping from EcaError codes to HTTP responses."""

from __future__ import annotations

from typing import Any

from eca_core.error_enums import ErrorCode

from eca_service_libs.error_handling.eca_error import EcaError

_STATUS_BY_CODE: dict[str, int] = {
    ErrorCode.VALIDATION_ERROR.value: 400,
    ErrorCode.RESOURCE_NOT_FOUND.value: 404,
    ErrorCode.RESOURCE_CONFLICT.value: 409,
}


def status_code_for(error: EcaError) -> int:
    """Return the HTTP status for an EcaError; unmapped codes are server errors."""
    return _STATUS_BY_CODE.get(error.error_code, 500)


def error_response_body(error: EcaError) -> dict[str, Any]:
    """Wire body for an error response, without the server-side stack trace."""
    detail = error.to_dict()
    detail.pop("stack_trace", None)
    return {"error": detail}
