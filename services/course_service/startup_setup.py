"""Startup and shutdown logic for Course Service."""

from __future__ import annotations

from dishka import AsyncContainer, make_async_container
from eca_service_libs.logging_utils import create_service_logger
from eca_service_libs.metrics_middleware import create_http_metrics
from prometheus_client import CollectorRegistry
from quart import Quart
from sqlalchemy.ext.asyncio import AsyncEngine

from services.course_service.config import Settings
from services.course_service.di import DatabaseProvider, RepositoryProvider, ServiceProvider
from services.course_service.models_db import Base

logger = create_service_logger("course_service.startup")

_app_container_ref: AsyncContainer | None = None


def create_di_container() -> AsyncContainer:
    """Creates and returns the DI AsyncContainer."""
    global _app_container_ref
    container = make_async_container(DatabaseProvider(), RepositoryProvider(), ServiceProvider())
    _app_container_ref = container
    logger.info("DI AsyncContainer created.")
    return container


async def initialize_database_schema(engine: AsyncEngine) -> None:
    """Create the course table if it does not exist yet."""
    try:
        logger.info("Initializing database schema...")
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema initialized successfully")
    except Exception as e:
        logger.critical(f"Failed to initialize database schema: {e}", exc_info=True)
        raise


async def initialize_services(app: Quart, settings: Settings, container: AsyncContainer) -> None:
    """Prepare the schema and HTTP metrics; any failure aborts startup."""
    if settings.USE_MOCK_REPOSITORY:
        logger.warning("USE_MOCK_REPOSITORY is set; courses are kept in memory only")
    else:
        engine = await container.get(AsyncEngine)
        await initialize_database_schema(engine)

    registry = await container.get(CollectorRegistry)
    app.extensions["metrics"] = create_http_metrics(registry)


async def shutdown_services() -> None:
    """Dispose the engine and close the DI container."""
    try:
        if _app_container_ref:
            engine = await _app_container_ref.get(AsyncEngine)
            await engine.dispose()
            await _app_container_ref.close()
            logger.info("Course Service DI container closed")
    except Exception as e:
        logger.error(f"Error during Course Service shutdown: {e}", exc_info=True)
