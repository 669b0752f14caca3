"""
Course Service dependency injection configuration.
"""

from __future__ import annotations

from dishka import Provider, Scope, provide
from eca_service_libs.operation_metrics import (
    OperationMetricsProtocol,
    PrometheusOperationMetrics,
    create_operations_counter,
)
from prometheus_client import CollectorRegistry
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from services.course_service.config import Settings, settings
from services.course_service.implementations.course_repository_mock_impl import (
    MockCourseRepositoryImpl,
)
from services.course_service.implementations.course_repository_postgres_impl import (
    PostgreSQLCourseRepositoryImpl,
)
from services.course_service.protocols import CourseRepositoryProtocol


class DatabaseProvider(Provider):
    @provide(scope=Scope.APP)
    def provide_engine(self, settings: Settings) -> AsyncEngine:
        if settings.DATABASE_URL.startswith("sqlite"):
            return create_async_engine(settings.DATABASE_URL)
        return create_async_engine(
            settings.DATABASE_URL,
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
            pool_pre_ping=settings.DATABASE_POOL_PRE_PING,
            pool_recycle=settings.DATABASE_POOL_RECYCLE,
        )


class RepositoryProvider(Provider):
    @provide(scope=Scope.APP)
    def provide_course_repository(
        self, settings: Settings, engine: AsyncEngine
    ) -> CourseRepositoryProtocol:
        if settings.USE_MOCK_REPOSITORY:
            return MockCourseRepositoryImpl()
        return PostgreSQLCourseRepositoryImpl(engine)


class ServiceProvider(Provider):
    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return settings

    @provide(scope=Scope.APP)
    def provide_collector_registry(self) -> CollectorRegistry:
        """Provide Prometheus collector registry."""
        return CollectorRegistry()

    @provide(scope=Scope.APP)
    def provide_course_metrics(self, registry: CollectorRegistry) -> OperationMetricsProtocol:
        return PrometheusOperationMetrics(create_operations_counter("course", registry))
