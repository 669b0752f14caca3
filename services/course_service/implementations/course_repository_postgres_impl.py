from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator
from uuid import UUID

from eca_service_libs.error_handling import raise_resource_conflict
from eca_service_libs.logging_utils import create_service_logger
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from services.course_service.api_models import CreateCourseRequest
from services.course_service.models_db import Course
from services.course_service.protocols import CourseRepositoryProtocol

logger = create_service_logger("course_service.repository")


class PostgreSQLCourseRepositoryImpl(CourseRepositoryProtocol):
    """SQLAlchemy implementation of CourseRepositoryProtocol."""

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
        self, course_data: CreateCourseRequest, correlation_id: UUID
    ) -> Course:
        course = Course(id=course_data.id, name=course_data.name, duration=course_data.duration)
        try:
            async with self.session() as session:
                session.add(course)
                await session.flush()
        except IntegrityError as e:
            # Primary key is the only unique constraint on course
            logger.warning(
                f"Course {course_data.id} already exists: {e.orig}",
                extra={"correlation_id": str(correlation_id)},
            )
            raise_resource_conflict(
                service="course_service",
                operation="create_course",
                resource_type="course",
                resource_id=str(course_data.id),
                message=f"Course with ID: {course_data.id} already exists",
                correlation_id=correlation_id,
            )

        logger.info(
            f"Created course {course.id}",
            extra={"correlation_id": str(correlation_id)},
        )
        return course

    async def get_by_id(self, course_id: str) -> Course | None:
        async with self.session() as session:
            return await session.get(Course, course_id)

    async def list_all(self) -> list[Course]:
        async with self.session() as session:
            result = await session.execute(select(Course).order_by(Course.id))
            return list(result.scalars().all())

    async def delete(self, course_id: str, correlation_id: UUID) -> bool:
        async with self.session() as session:
            result = await session.execute(delete(Course).where(Course.id == course_id))
            deleted = result.rowcount > 0

        if deleted:
            logger.info(
                f"Deleted course {course_id}",
                extra={"correlation_id": str(correlation_id)},
            )
        return deleted
