"""
Student Service behavioral contracts and protocols.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from services.student_service.api_models import CreateStudentRequest
from services.student_service.models_db import Student


class StudentRepositoryProtocol(Protocol):
    """Protocol for student persistence."""

    async def create_if_absent(
        self, student_data: CreateStudentRequest, correlation_id: UUID
    ) -> Student:
        """
        Insert a new student.

        Raises:
            EcaError: RESOURCE_CONFLICT if the registration number, contact or
                email is already taken
        """
        ...

    async def get_by_id(self, registration_number: str) -> Student | None: ...

    async def list_all(self) -> list[Student]: ...

    async def delete(self, registration_number: str, correlation_id: UUID) -> bool:
        """Delete a student; False if no such student existed."""
        ...
