"""Tests for the shared route error responses."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from unittest.mock import MagicMock

import pytest
from eca_core.observability_enums import OperationType
from eca_core.status_enums import OperationStatus
from eca_service_libs.error_handling import (
    EcaError,
    raise_resource_conflict,
    raise_resource_not_found,
    raise_storage_error,
    raise_validation_error,
)
from eca_service_libs.route_errors import RouteErrorResponder, operation_status_for
from quart import Quart


class RecordingMetrics:
    def __init__(self) -> None:
        self.operations: list[tuple[OperationType, OperationStatus]] = []

    def record_operation(self, operation: OperationType, status: OperationStatus) -> None:
        self.operations.append((operation, status))


def _caught(raise_error: Callable[[], object]) -> EcaError:
    with pytest.raises(EcaError) as exc_info:
        raise_error()
    return exc_info.value


@pytest.fixture
def app() -> Quart:
    return Quart(__name__)


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def responder(logger: MagicMock) -> RouteErrorResponder:
    return RouteErrorResponder("course_service", "Course", logger)


@pytest.mark.parametrize(
    "status_code, expected",
    [
        (400, OperationStatus.FAILED),
        (404, OperationStatus.NOT_FOUND),
        (409, OperationStatus.CONFLICT),
        (500, OperationStatus.ERROR),
    ],
)
def test_operation_status_for(status_code: int, expected: OperationStatus) -> None:
    assert operation_status_for(status_code) == expected


class TestErrorResponse:
    @pytest.mark.parametrize(
        "raise_error, status_code, metric_status",
        [
            (
                lambda: raise_validation_error(
                    service="course_service", operation="create", field="name", message="bad"
                ),
                400,
                OperationStatus.FAILED,
            ),
            (
                lambda: raise_resource_not_found(
                    service="course_service",
                    operation="get",
                    resource_type="Course",
                    resource_id="HDSE",
                ),
                404,
                OperationStatus.NOT_FOUND,
            ),
            (
                lambda: raise_resource_conflict(
                    service="course_service",
                    operation="create",
                    resource_type="Course",
                    resource_id="HDSE",
                    message="Course with ID: HDSE already exists",
                ),
                409,
                OperationStatus.CONFLICT,
            ),
            (
                lambda: raise_storage_error(
                    service="course_service", operation="list", message="db down"
                ),
                500,
                OperationStatus.ERROR,
            ),
        ],
    )
    async def test_status_and_metric_follow_error_code(
        self,
        app: Quart,
        responder: RouteErrorResponder,
        logger: MagicMock,
        raise_error: Callable[[], object],
        status_code: int,
        metric_status: OperationStatus,
    ) -> None:
        error = _caught(raise_error)
        metrics = RecordingMetrics()

        async with app.app_context():
            response, status = responder.error_response(error, OperationType.CREATE, metrics)
            body = await response.get_json()

        assert status == status_code
        assert body["error"]["error_code"] == error.error_code
        assert body["error"]["correlation_id"] == error.correlation_id
        assert "stack_trace" not in body["error"]
        assert metrics.operations == [(OperationType.CREATE, metric_status)]
        logger.warning.assert_called_once()


class TestUnexpectedErrorResponse:
    async def test_returns_unknown_error_without_internal_message(
        self, app: Quart, responder: RouteErrorResponder, logger: MagicMock
    ) -> None:
        correlation_id = uuid.uuid4()
        metrics = RecordingMetrics()

        async with app.app_context():
            response, status = responder.unexpected_error_response(
                RuntimeError("connection reset"), correlation_id, OperationType.GET, metrics
            )
            body = await response.get_json()

        assert status == 500
        error = body["error"]
        assert error["error_code"] == "UNKNOWN_ERROR"
        assert error["message"] == "An unexpected error occurred during get"
        assert error["correlation_id"] == str(correlation_id)
        assert error["service"] == "course_service"
        assert error["operation"] == "get"
        assert "stack_trace" not in error
        assert metrics.operations == [(OperationType.GET, OperationStatus.ERROR)]

        logger.error.assert_called_once()
        assert "connection reset" in logger.error.call_args.args[0]
        assert logger.error.call_args.kwargs["exc_info"] is True
