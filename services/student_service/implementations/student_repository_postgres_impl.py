from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator, NoReturn
from uuid import UUID

from eca_service_libs.error_handling import raise_resource_conflict
from eca_service_libs.logging_utils import create_service_logger
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from services.student_service.api_models import CreateStudentRequest
from services.student_service.models_db import Student
from services.student_service.protocols import StudentRepositoryProtocol

logger = create_service_logger("student_service.repository")

# Unique columns other than the primary key, in the order they are reported
_UNIQUE_FIELDS = ("contact", "email")


def raise_student_conflict(
    student_data: CreateStudentRequest, field: str | None, correlation_id: UUID
) -> NoReturn:
    """Raise RESOURCE_CONFLICT naming the taken field; None means the registration number."""
    if field is None:
        message = (
            f"Student with registration number: {student_data.registration_number} "
            "already exists"
        )
    else:
        message = f"Student with {field}: {getattr(student_data, field)} already exists"

    raise_resource_conflict(
        service="student_service",
        operation="create_student",
        resource_type="student",
        resource_id=str(student_data.registration_number),
        message=message,
        correlation_id=correlation_id,
        field=field or "registrationNumber",
    )


def conflicting_field(error: IntegrityError) -> str | None:
    """
    Which unique column an IntegrityError is about.

    PostgreSQL reports the constraint name (``uq_student_email``), SQLite the
    qualified column (``student.email``). Offending values are never matched.
    """
    text = str(error.orig)
    for field in _UNIQUE_FIELDS:
        if f"uq_student_{field}" in text or f"student.{field}" in text:
            return field
    return None


class PostgreSQLStudentRepositoryImpl(StudentRepositoryProtocol):
    """SQLAlchemy implementation of StudentRepositoryProtocol."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.async_session_maker = async_sessionmaker(engine, expire_on_commit=False)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a transactional session context."""
        session = self.async_session_maker()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_if_absent(
        self, student_data: CreateStudentRequest, correlation_id: UUID
    ) -> Student:
        student = Student(
            registration_number=student_data.registration_number,
            full_name=student_data.full_name,
            address=student_data.address,
            contact=student_data.contact,
            email=student_data.email,
        )
        try:
            async with self.session() as session:
                session.add(student)
                await session.flush()
        except IntegrityError as e:
            logger.warning(
                f"Student {student_data.registration_number} violates a unique constraint: "
                f"{e.orig}",
                extra={"correlation_id": str(correlation_id)},
            )
            raise_student_conflict(student_data, conflicting_field(e), correlation_id)

        logger.info(
            f"Created student {student.registration_number}",
            extra={"correlation_id": str(correlation_id)},
        )
        return student

    async def get_by_id(self, registration_number: str) -> Student | None:
        async with self.session() as session:
            return await session.get(Student, registration_number)

    async def list_all(self) -> list[Student]:
        async with self.session() as session:
            result = await session.execute(
                select(Student).order_by(Student.registration_number)
            )
            return list(result.scalars().all())

    async def delete(self, registration_number: str, correlation_id: UUID) -> bool:
        async with self.session() as session:
            result = await session.execute(
                delete(Student).where(Student.registration_number == registration_number)
            )
            deleted = result.rowcount > 0

        if deleted:
            logger.info(
                f"Deleted student {registration_number}",
                extra={"correlation_id": str(correlation_id)},
            )
        return deleted
