"""
Factory functions that build an ErrorDetail and raise EcaError.

Each factory maps one failure kind onto one ErrorCode so call sites never
construct ErrorDetail by hand. All factories are NoReturn.
"""

from __future__ import annotations

from typing import Any, NoReturn, Optional
from uuid import UUID

from eca_core.error_enums import ErrorCode

from eca_service_libs.error_handling.eca_error import EcaError
from eca_service_libs.error_handling.error_detail_factory import (
    create_error_detail_with_context,
)


def _raise(
    error_code: ErrorCode,
    service: str,
    operation: str,
    message: str,
    correlation_id: Optional[UUID],
    details: dict[str, Any],
) -> NoReturn:
    error_detail = create_error_detail_with_context(
        error_code=error_code,
        message=message,
        service=service,
        operation=operation,
        correlation_id=correlation_id,
        details=details,
    )
    raise EcaError(error_detail)


def raise_unknown_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise an UNKNOWN_ERROR for failures that fit no other category."""
    _raise(
        ErrorCode.UNKNOWN_ERROR, service, operation, message, correlation_id, additional_context
    )


def raise_validation_error(
    service: str,
    operation: str,
    field: str,
    message: str,
    correlation_id: Optional[UUID] = None,
    value: Any = None,
    **additional_context: Any,
) -> NoReturn:
    """
    Raise a VALIDATION_ERROR for malformed client input.

    Args:
        field: Name of the offending field
        value: Offending value, included in details when given
    """
    details: dict[str, Any] = {"field": field}
    if value is not None:
        details["value"] = value
    details.update(additional_context)
    _raise(ErrorCode.VALIDATION_ERROR, service, operation, message, correlation_id, details)


def raise_resource_not_found(
    service: str,
    operation: str,
    resource_type: str,
    resource_id: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise RESOURCE_NOT_FOUND with a generated message."""
    details: dict[str, Any] = {
        "resource_type": resource_type,
        "resource_id": resource_id,
        **additional_context,
    }
    _raise(
        ErrorCode.RESOURCE_NOT_FOUND,
        service,
        operation,
        f"{resource_type} with ID '{resource_id}' not found",
        correlation_id,
        details,
    )


def raise_resource_conflict(
    service: str,
    operation: str,
    resource_type: str,
    resource_id: str,
    message: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise RESOURCE_CONFLICT when a create-if-absent finds an existing record."""
    details: dict[str, Any] = {
        "resource_type": resource_type,
        "resource_id": resource_id,
        **additional_context,
    }
    _raise(ErrorCode.RESOURCE_CONFLICT, service, operation, message, correlation_id, details)


def raise_storage_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise STORAGE_ERROR for disk or database I/O failures."""
    _raise(
        ErrorCode.STORAGE_ERROR, service, operation, message, correlation_id, additional_context
    )


def raise_initialization_failed(
    service: str,
    operation: str,
    component: str,
    message: str,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise INITIALIZATION_FAILED when a component cannot start safely."""
    details: dict[str, Any] = {"component": component, **additional_context}
    _raise(
        ErrorCode.INITIALIZATION_FAILED, service, operation, message, correlation_id, details
    )
