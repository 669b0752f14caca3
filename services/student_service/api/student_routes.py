"""CRUD routes for student records."""

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

from services.student_service.api_models import CreateStudentRequest, StudentResponse
from services.student_service.models_db import Student
from services.student_service.protocols import StudentRepositoryProtocol

logger = create_service_logger("student_service.api.students")
student_bp = Blueprint("student_routes", __name__, url_prefix="/students")

SERVICE_NAME = "student_service"
errors = RouteErrorResponder(SERVICE_NAME, "Student", logger)


@student_bp.route("", methods=["GET"])
@inject
async def list_students(
    repository: FromDishka[StudentRepositoryProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
) -> Response | tuple[Response, int]:
    correlation_id = correlation_id_from_request()

    try:
        students = await repository.list_all()
        metrics.record_operation(OperationType.LIST, OperationStatus.SUCCESS)
        return jsonify({"_embedded": {"students": [_student_payload(s) for s in students]}}), 200
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.LIST, metrics)


@student_bp.route("", methods=["POST"])
@inject
async def create_student(
    repository: FromDishka[StudentRepositoryProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
) -> Response | tuple[Response, int]:
    """Create a student; 409 when the registration number, contact or email is taken."""
    correlation_id = correlation_id_from_request()

    try:
        data = await request.get_json(silent=True)
        if not isinstance(data, dict):
            raise_validation_error(
                service=SERVICE_NAME,
                operation="create_student",
                field="body",
                message="Request body must be a JSON object",
                correlation_id=correlation_id,
            )
        try:
            create_request = CreateStudentRequest.model_validate(data)
        except ValidationError as ve:
            raise_request_validation_error(
                service=SERVICE_NAME,
                operation="create_student",
                error=ve,
                correlation_id=correlation_id,
            )

        student = await repository.create_if_absent(create_request, correlation_id)
        metrics.record_operation(OperationType.CREATE, OperationStatus.SUCCESS)
        return jsonify(_student_payload(student)), 201
    except EcaError as e:
        return errors.error_response(e, OperationType.CREATE, metrics)
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.CREATE, metrics)


@student_bp.route("/<string:registration_number>", methods=["GET"])
@inject
async def get_student(
    registration_number: str,
    repository: FromDishka[StudentRepositoryProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
) -> Response | tuple[Response, int]:
    correlation_id = correlation_id_from_request(registration_number=registration_number)

    try:
        student = await repository.get_by_id(registration_number)
        if student is None:
            raise_resource_not_found(
                service=SERVICE_NAME,
                operation="get_student",
                resource_type="student",
                resource_id=registration_number,
                correlation_id=correlation_id,
            )
        metrics.record_operation(OperationType.GET, OperationStatus.SUCCESS)
        return jsonify(_student_payload(student)), 200
    except EcaError as e:
        return errors.error_response(e, OperationType.GET, metrics)
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.GET, metrics)


@student_bp.route("/<string:registration_number>", methods=["DELETE"])
@inject
async def delete_student(
    registration_number: str,
    repository: FromDishka[StudentRepositoryProtocol],
    metrics: FromDishka[OperationMetricsProtocol],
) -> Response | tuple[Response, int]:
    correlation_id = correlation_id_from_request(registration_number=registration_number)

    try:
        if not await repository.delete(registration_number, correlation_id):
            raise_resource_not_found(
                service=SERVICE_NAME,
                operation="delete_student",
                resource_type="student",
                resource_id=registration_number,
                correlation_id=correlation_id,
            )
        metrics.record_operation(OperationType.DELETE, OperationStatus.SUCCESS)
        return Response(status=204)
    except EcaError as e:
        return errors.error_response(e, OperationType.DELETE, metrics)
    except Exception as e:
        return errors.unexpected_error_response(e, correlation_id, OperationType.DELETE, metrics)


def _student_payload(student: Student) -> dict[str, str]:
    return StudentResponse.model_validate(student).model_dump(by_alias=True)
