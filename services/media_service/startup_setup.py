"""Startup and shutdown logic for Media Service."""

from __future__ import annotations

import uuid

from dishka import AsyncContainer, make_async_container
from eca_service_libs.logging_utils import create_service_logger
from eca_service_libs.metrics_middleware import create_http_metrics
from prometheus_client import CollectorRegistry
from quart import Quart

from services.media_service.config import Settings
from services.media_service.di import MediaServiceProvider
from services.media_service.protocols import BlobStoreProtocol

# Global reference for DI container, managed by app.py
_app_container_ref: AsyncContainer | None = None


def create_di_container() -> AsyncContainer:
    """Creates and returns the DI AsyncContainer."""
    global _app_container_ref
    logger = create_service_logger("media.startup")
    container = make_async_container(MediaServiceProvider())
    _app_container_ref = container  # Keep a reference for shutdown
    logger.info("DI AsyncContainer created.")
    return container


async def initialize_services(app: Quart, settings: Settings, container: AsyncContainer) -> None:
    """Prepare the storage root and HTTP metrics; any failure aborts startup."""
    logger = create_service_logger("media.startup")
    correlation_id = uuid.uuid4()

    try:
        blob_store = await container.get(BlobStoreProtocol)
        await blob_store.initialize(correlation_id)

        registry = await container.get(CollectorRegistry)
        app.extensions["metrics"] = create_http_metrics(registry)
        app.config["MAX_CONTENT_LENGTH"] = settings.MAX_UPLOAD_SIZE_BYTES

        logger.info(
            f"Media Service initialized with storage root {settings.STORAGE_DIR}",
            extra={"correlation_id": str(correlation_id)},
        )
    except Exception as e:
        logger.critical(f"Failed to initialize Media Service: {e}", exc_info=True)
        raise


async def shutdown_services() -> None:
    """Gracefully shutdown the Media Service's DI container."""
    logger = create_service_logger("media.startup")

    try:
        if _app_container_ref:
            await _app_container_ref.close()
            logger.info("Media Service DI container closed")
    except Exception as e:
        logger.error(f"Error during Media Service shutdown: {e}", exc_info=True)
