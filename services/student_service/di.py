"""
Student Service dependency injection configuration.
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

from services.student_service.config import Settings, settings
from services.student_service.implementations.student_repository_mock_impl import (
    MockStudentRepositoryImpl,
)
from services.student_service.implementations.student_repository_postgres_impl import (
    PostgreSQLStudentRepositoryImpl,
)
from services.student_service.protocols import StudentRepositoryProtocol


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
    def provide_student_repository(
        self, settings: Settings, engine: AsyncEngine
    ) -> StudentRepositoryProtocol:
        if settings.USE_MOCK_REPOSITORY:
            return MockStudentRepositoryImpl()
        return PostgreSQLStudentRepositoryImpl(engine)


class ServiceProvider(Provider):
    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return settings

    @provide(scope=Scope.APP)
    def provide_collector_registry(self) -> CollectorRegistry:
        """Provide Prometheus collector registry."""
        return CollectorRegistry()

    @provide(scope=Scope.APP)
    def provide_student_metrics(self, registry: CollectorRegistry) -> OperationMetricsProtocol:
        return PrometheusOperationMetrics(create_operations_counter("student", registry))
