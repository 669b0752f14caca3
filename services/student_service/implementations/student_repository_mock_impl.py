from __future__ import annotations

from uuid import UUID

from services.student_service.api_models import CreateStudentRequest
from services.student_service.implementations.student_repository_postgres_impl import (
    raise_student_conflict,
)
from services.student_service.models_db import Student
from services.student_service.protocols import StudentRepositoryProtocol


class MockStudentRepositoryImpl(StudentRepositoryProtocol):
    """In-memory implementation of StudentRepositoryProtocol with the same uniqueness rules."""

    def __init__(self) -> None:
        self.students: dict[str, Student] = {}

    async def create_if_absent(
        self, student_data: CreateStudentRequest, correlation_id: UUID
    ) -> Student:
        if student_data.registration_number in self.students:
            raise_student_conflict(student_data, None, correlation_id)
        for field in ("contact", "email"):
            value = getattr(student_data, field)
            if any(getattr(s, field) == value for s in self.students.values()):
                raise_student_conflict(student_data, field, correlation_id)

        student = Student(
            registration_number=student_data.registration_number,
            full_name=student_data.full_name,
            address=student_data.address,
            contact=student_data.contact,
            email=student_data.email,
        )
        self.students[student.registration_number] = student
        return student

    async def get_by_id(self, registration_number: str) -> Student | None:
        return self.students.get(registration_number)

    async def list_all(self) -> list[Student]:
        return [self.students[key] for key in sorted(self.students)]

    async def delete(self, registration_number: str, correlation_id: UUID) -> bool:
        return self.students.pop(registration_number, None) is not None
