"""
Course Service behavioral contracts and protocols.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from services.course_service.api_models import CreateCourseRequest
from services.course_service.models_db import Course


class CourseRepositoryProtocol(Protocol):
    """Protocol for course persistence."""

    async def create_if_absent(
        self, course_data: CreateCourseRequest, correlation_id: UUID
    ) -> Course:
        """
        Insert a new course.

        Raises:
            EcaError: RESOURCE_CONFLICT if a course with the same ID exists
        """
        ...

    async def get_by_id(self, course_id: str) -> Course | None: ...

    async def list_all(self) -> list[Course]: ...

    async def delete(self, course_id: str, correlation_id: UUID) -> bool:
        """Delete a course; False if no such course existed."""
        ...
