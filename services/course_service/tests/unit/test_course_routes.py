"""Route tests for Course Service backed by the in-memory repository."""

from __future__ import annotations

import pytest
from dishka import Provider, Scope, make_async_container
from eca_core.observability_enums import OperationType
from eca_core.status_enums import OperationStatus
from eca_service_libs.operation_metrics import OperationMetricsProtocol
from quart import Quart
from quart_dishka import QuartDishka

from services.course_service.api.course_routes import course_bp
from services.course_service.implementations.course_repository_mock_impl import (
    MockCourseRepositoryImpl,
)
from services.course_service.protocols import CourseRepositoryProtocol

HDSE = {"id": "HDSE", "name": "Higher Diploma in Software Engineering", "duration": "2 Years"}


class RecordingMetrics:
    def __init__(self) -> None:
        self.operations: list[tuple[OperationType, OperationStatus]] = []

    def record_operation(self, operation: OperationType, status: OperationStatus) -> None:
        self.operations.append((operation, status))


@pytest.fixture
def metrics() -> RecordingMetrics:
    return RecordingMetrics()


@pytest.fixture
def repository() -> MockCourseRepositoryImpl:
    return MockCourseRepositoryImpl()


@pytest.fixture
def test_app(repository: MockCourseRepositoryImpl, metrics: RecordingMetrics) -> Quart:
    app = Quart(__name__)
    app.register_blueprint(course_bp)

    provider = Provider()
    provider.provide(lambda: repository, scope=Scope.APP, provides=CourseRepositoryProtocol)
    provider.provide(lambda: metrics, scope=Scope.APP, provides=OperationMetricsProtocol)

    container = make_async_container(provider)
    QuartDishka(app=app, container=container)
    return app


class TestCourseRoutes:
    async def test_create_get_list_delete(self, test_app: Quart) -> None:
        async with test_app.test_client() as client:
            created = await client.post("/courses", json=HDSE)
            assert created.status_code == 201
            assert await created.get_json() == HDSE

            fetched = await client.get("/courses/HDSE")
            assert fetched.status_code == 200
            assert await fetched.get_json() == HDSE

            listing = await client.get("/courses")
            assert await listing.get_json() == {"_embedded": {"courses": [HDSE]}}

            deleted = await client.delete("/courses/HDSE")
            assert deleted.status_code == 204

            missing = await client.get("/courses/HDSE")
            assert missing.status_code == 404

    async def test_duplicate_id_is_conflict(
        self, test_app: Quart, metrics: RecordingMetrics
    ) -> None:
        async with test_app.test_client() as client:
            await client.post("/courses", json=HDSE)
            response = await client.post("/courses", json=HDSE)

            assert response.status_code == 409
            error = (await response.get_json())["error"]
            assert error["error_code"] == "RESOURCE_CONFLICT"
            assert error["message"] == "Course with ID: HDSE already exists"

        assert metrics.operations[-1] == (OperationType.CREATE, OperationStatus.CONFLICT)

    async def test_invalid_course_is_bad_request_with_field_messages(
        self, test_app: Quart, repository: MockCourseRepositoryImpl
    ) -> None:
        async with test_app.test_client() as client:
            response = await client.post(
                "/courses", json={"id": "HD5E", "name": "Math", "duration": ""}
            )

            assert response.status_code == 400
            error = (await response.get_json())["error"]
            assert error["error_code"] == "VALIDATION_ERROR"
            assert error["details"]["errors"] == [
                {"field": "id", "message": "Course ID must contain only letters"},
                {"field": "duration", "message": "Course duration cannot be empty"},
            ]

        assert repository.courses == {}

    async def test_non_object_body_is_bad_request(self, test_app: Quart) -> None:
        async with test_app.test_client() as client:
            response = await client.post("/courses", json=["HDSE"])

            assert response.status_code == 400
            assert (await response.get_json())["error"]["details"]["field"] == "body"

    async def test_delete_unknown_course_is_not_found(self, test_app: Quart) -> None:
        async with test_app.test_client() as client:
            response = await client.delete("/courses/NOPE")

            assert response.status_code == 404
            error = (await response.get_json())["error"]
            assert error["message"] == "course with ID 'NOPE' not found"

    async def test_empty_list_uses_embedded_envelope(self, test_app: Quart) -> None:
        async with test_app.test_client() as client:
            response = await client.get("/courses")

            assert await response.get_json() == {"_embedded": {"courses": []}}

    async def test_repository_failure_is_unknown_error(
        self,
        test_app: Quart,
        repository: MockCourseRepositoryImpl,
        metrics: RecordingMetrics,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        async def broken_get(course_id: str) -> None:
            raise RuntimeError("connection reset by peer")

        monkeypatch.setattr(repository, "get_by_id", broken_get)

        async with test_app.test_client() as client:
            response = await client.get("/courses/HDSE")

            assert response.status_code == 500
            error = (await response.get_json())["error"]
            assert error["error_code"] == "UNKNOWN_ERROR"
            assert error["message"] == "An unexpected error occurred during get"
            assert error["service"] == "course_service"
            assert "stack_trace" not in error

        assert metrics.operations == [(OperationType.GET, OperationStatus.ERROR)]
