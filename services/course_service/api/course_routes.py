"""CRUD routes for course records."""

from __future__ import annotations

from dishka import FromDishka
from eca_core.observability_enums import OperationType
from eca_core.status_enums import OperationStatus
from eca_service_libs.error_handling import (
    EcaError,
    raise_request_validation_error,
    raise_resource_not_found,
    raise_validation_error,
)
from eca_service_libs.logging_utils import create_service_logger
from eca_service_libs.operation_metrics import OperationMetricsProtocol
from eca_service_libs.request_context import correlation_id_from_request
from eca_service_libs.route_errors import RouteErrorResponder
from pydantic import ValidationError
from quart import Blueprint, Response, jsonify, request
from quart_dishka import inject

from services.course_service.api_models import CourseResponse, CreateCourseRequest
from services.course_service.models_db import Course
from services.course_service.protocols import CourseRepositoryProtocol

logger = create_service_logger("course_service.api.courses")
course_bp = Blueprint("course_routes", __name__, url_prefix="/courses")

SERVICE_NAME = "course_service"
errors = RouteErrorResponder(SERVICE_NAME, "Course", logger)


@course_bp.route("", methods=["GET"])
@inject
async def list_courses(
    repository: FromDishka[CourseRepositoryProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
) -> Response | tuple[Response, int]:
    correlation_id = correlation_id_from_request()

    try:
        courses = await repository.list_all()
        metrics.record_operation(OperationType.LIST, OperationStatus.SUCCESS)
        return jsonify({"_embedded": {"courses": [_course_payload(c) for c in courses]}}), 200
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.LIST, metrics)


@course_bp.route("", methods=["POST"])
@inject
async def create_course(
    repository: FromDishka[CourseRepositoryProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
) -> Response | tuple[Response, int]:
    """Create a course; 409 when the ID is already taken."""
    correlation_id = correlation_id_from_request()

    try:
        data = await request.get_json(silent=True)
        if not isinstance(data, dict):
            raise_validation_error(
                service=SERVICE_NAME,
                operation="create_course",
                field="body",
                message="Request body must be a JSON object",
                correlation_id=correlation_id,
            )
        try:
            create_request = CreateCourseRequest.model_validate(data)
        except ValidationError as ve:
            raise_request_validation_error(
                service=SERVICE_NAME,
                operation="create_course",
                error=ve,
                correlation_id=correlation_id,
            )

        course = await repository.create_if_absent(create_request, correlation_id)
        metrics.record_operation(OperationType.CREATE, OperationStatus.SUCCESS)
        return jsonify(_course_payload(course)), 201
    except EcaError as e:
        return errors.error_response(e, OperationType.CREATE, metrics)
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.CREATE, metrics)


@course_bp.route("/<string:course_id>", methods=["GET"])
@inject
async def get_course(
    course_id: str,
    repository: FromDishka[CourseRepositoryProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
) -> Response | tuple[Response, int]:
    correlation_id = correlation_id_from_request(course_id=course_id)

    try:
        course = await repository.get_by_id(course_id)
        if course is None:
            raise_resource_not_found(
                service=SERVICE_NAME,
                operation="get_course",
                resource_type="course",
                resource_id=course_id,
                correlation_id=correlation_id,
            )
        metrics.record_operation(OperationType.GET, OperationStatus.SUCCESS)
        return jsonify(_course_payload(course)), 200
    except EcaError as e:
        return errors.error_response(e, OperationType.GET, metrics)
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.GET, metrics)


@course_bp.route("/<string:course_id>", methods=["DELETE"])
@inject
async def delete_course(
    course_id: str,
    repository: FromDishka[CourseRepositoryProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
) -> Response | tuple[Response, int]:
    correlation_id = correlation_id_from_request(course_id=course_id)

    try:
        if not await repository.delete(course_id, correlation_id):
            raise_resource_not_found(
                service=SERVICE_NAME,
                operation="delete_course",
                resource_type="course",
                resource_id=course_id,
                correlation_id=correlation_id,
            )
        metrics.record_operation(OperationType.DELETE, OperationStatus.SUCCESS)
        return Response(status=204)
    except EcaError as e:
        return errors.error_response(e, OperationType.DELETE, metrics)
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.DELETE, metrics)


def _course_payload(course: Course) -> dict[str, str]:
    return CourseResponse.model_validate(course).model_dump()
