"""Translation of pydantic request-model failures into VALIDATION_ERROR."""

from __future__ import annotations

from typing import Any, NoReturn, Optional
from uuid import UUID

from pydantic import ValidationError

from eca_service_libs.error_handling.factories import raise_validation_error


def field_errors(error: ValidationError) -> list[dict[str, str]]:
    """
    Flatten a pydantic ValidationError into ``[{"field", "message"}]``.

    Messages raised by our own validators are reported verbatim, without
    pydantic's "Value error, " prefix.
    """
    errors: list[dict[str, str]] = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "body"
        ctx_error = item.get("ctx", {}).get("error")
        if item["type"] == "value_error" and ctx_error is not None:
            message = str(ctx_error)
        else:
            message = item["msg"]
        errors.append({"field": field, "message": message})
    return errors


def raise_request_validation_error(
    service: str,
    operation: str,
    error: ValidationError,
    correlation_id: Optional[UUID] = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise VALIDATION_ERROR for a rejected request body; every field error goes in details."""
    errors = field_errors(error)
    first = errors[0] if errors else {"field": "body", "message": "Invalid request body"}
    raise_validation_error(
        service=service,
        operation=operation,
        field=first["field"],
        message=first["message"],
        correlation_id=correlation_id,
        errors=errors,
        **additional_context,
    )
