from __future__ import annotations

from uuid import UUID

from eca_service_libs.error_handling import raise_resource_conflict

from services.course_service.api_models import CreateCourseRequest
from services.course_service.models_db import Course
from services.course_service.protocols import CourseRepositoryProtocol


class MockCourseRepositoryImpl(CourseRepositoryProtocol):
    """In-memory implementation of CourseRepositoryProtocol for testing."""

    def __init__(self) -> None:
        self.courses: dict[str, Course] = {}

    async def create_if_absent(
        self, course_data: CreateCourseRequest, correlation_id: UUID
    ) -> Course:
        if course_data.id in self.courses:
            raise_resource_conflict(
                service="course_service",
                operation="create_course",
                resource_type="course",
                resource_id=str(course_data.id),
                message=f"Course with ID: {course_data.id} already exists",
                correlation_id=correlation_id,
            )

        course = Course(id=course_data.id, name=course_data.name, duration=course_data.duration)
        self.courses[course.id] = course
        return course

    async def get_by_id(self, course_id: str) -> Course | None:
        return self.courses.get(course_id)

    async def list_all(self) -> list[Course]:
        return [self.courses[key] for key in sorted(self.courses)]

    async def delete(self, course_id: str, correlation_id: UUID) -> bool:
        return self.courses.pop(course_id, None) is not None
