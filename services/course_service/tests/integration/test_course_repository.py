"""Repository tests for the SQLAlchemy course store on a file-backed SQLite database."""

from __future__ import annotations

import uuid

import pytest
from eca_core.error_enums import ErrorCode
from eca_service_libs.error_handling import EcaError
from sqlalchemy.ext.asyncio import AsyncEngine

from services.course_service.api_models import CreateCourseRequest
from services.course_service.implementations.course_repository_postgres_impl import (
    PostgreSQLCourseRepositoryImpl,
)


@pytest.fixture
def repository(sqlite_engine: AsyncEngine) -> PostgreSQLCourseRepositoryImpl:
    return PostgreSQLCourseRepositoryImpl(sqlite_engine)


def _course(course_id: str = "HDSE", name: str = "Software Engineering") -> CreateCourseRequest:
    return CreateCourseRequest(id=course_id, name=name, duration="2 Years")


class TestCourseRepository:
    async def test_create_then_get(self, repository: PostgreSQLCourseRepositoryImpl) -> None:
        await repository.create_if_absent(_course(), uuid.uuid4())

        course = await repository.get_by_id("HDSE")

        assert course is not None
        assert (course.id, course.name, course.duration) == (
            "HDSE",
            "Software Engineering",
            "2 Years",
        )

    async def test_get_unknown_returns_none(
        self, repository: PostgreSQLCourseRepositoryImpl
    ) -> None:
        assert await repository.get_by_id("NOPE") is None

    async def test_duplicate_id_raises_conflict_and_keeps_original(
        self, repository: PostgreSQLCourseRepositoryImpl
    ) -> None:
        await repository.create_if_absent(_course(), uuid.uuid4())

        with pytest.raises(EcaError) as exc_info:
            await repository.create_if_absent(_course(name="Other Name"), uuid.uuid4())

        assert exc_info.value.error_code == ErrorCode.RESOURCE_CONFLICT.value
        assert exc_info.value.error_detail.message == "Course with ID: HDSE already exists"
        stored = await repository.get_by_id("HDSE")
        assert stored is not None
        assert stored.name == "Software Engineering"

    async def test_list_all_is_ordered_by_id(
        self, repository: PostgreSQLCourseRepositoryImpl
    ) -> None:
        await repository.create_if_absent(_course("ZOO"), uuid.uuid4())
        await repository.create_if_absent(_course("ART"), uuid.uuid4())

        assert [c.id for c in await repository.list_all()] == ["ART", "ZOO"]

    async def test_delete_reports_whether_a_row_was_removed(
        self, repository: PostgreSQLCourseRepositoryImpl
    ) -> None:
        await repository.create_if_absent(_course(), uuid.uuid4())

        assert await repository.delete("HDSE", uuid.uuid4()) is True
        assert await repository.delete("HDSE", uuid.uuid4()) is False
        assert await repository.get_by_id("HDSE") is None
