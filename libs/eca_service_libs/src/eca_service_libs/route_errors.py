"""
Error responses for ECA Quart routes.

Every route catches EcaError for expected failures and Exception for
everything else. ``RouteErrorResponder`` turns either into a logged,
counted JSON error response so the three services answer failures the
same way.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from eca_core.observability_enums import OperationType
from eca_core.status_enums import OperationStatus
from quart import Response, jsonify

from eca_service_libs.error_handling import (
    EcaError,
    error_response_body,
    raise_unknown_error,
    status_code_for,
)
from eca_service_libs.operation_metrics import OperationMetricsProtocol

_STATUS_BY_HTTP_CODE: dict[int, OperationStatus] = {
    400: OperationStatus.FAILED,
    404: OperationStatus.NOT_FOUND,
    409: OperationStatus.CONFLICT,
}


def operation_status_for(status_code: int) -> OperationStatus:
    """Metric label for an error response status; unmapped codes count as ERROR."""
    return _STATUS_BY_HTTP_CODE.get(status_code, OperationStatus.ERROR)


class RouteErrorResponder:
    """Builds error responses for one blueprint's routes."""

    def __init__(self, service: str, resource_label: str, logger: Any) -> None:
        """
        Args:
            service: Service name reported in UNKNOWN_ERROR bodies
            resource_label: Noun used in log lines, e.g. "Blob" or "Course"
            logger: The route module's structlog logger
        """
        self.service = service
        self.resource_label = resource_label
        self.logger = logger

    def error_response(
        self,
        error: EcaError,
        operation: OperationType,
        metrics: OperationMetricsProtocol,
    ) -> tuple[Response, int]:
        """Response for an expected failure; the status follows the error code."""
        status_code = status_code_for(error)
        self.logger.warning(
            f"{self.resource_label} {operation.value} failed: {error.error_detail.message}",
            extra={"correlation_id": error.correlation_id, "error_code": error.error_code},
        )
        metrics.record_operation(operation, operation_status_for(status_code))
        return jsonify(error_response_body(error)), status_code

    def unexpected_error_response(
        self,
        error: Exception,
        correlation_id: UUID,
        operation: OperationType,
        metrics: OperationMetricsProtocol,
    ) -> tuple[Response, int]:
        """500 UNKNOWN_ERROR for anything that is not an EcaError."""
        self.logger.error(
            f"Unexpected error during {self.resource_label.lower()} {operation.value}: {error}",
            extra={"correlation_id": str(correlation_id)},
            exc_info=True,
        )
        metrics.record_operation(operation, OperationStatus.ERROR)
        try:
            raise_unknown_error(
                service=self.service,
                operation=operation.value,
                message=f"An unexpected error occurred during {operation.value}",
                correlation_id=correlation_id,
            )
        except EcaError as unknown_error:
            return jsonify(error_response_body(unknown_error)), 500
