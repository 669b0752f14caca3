"""Health and metrics routes for Media Service."""

from __future__ import annotations

import uuid

from dishka import FromDishka
from eca_service_libs.logging_utils import create_service_logger
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from quart import Blueprint, Response, jsonify
from quart_dishka import inject

from services.media_service.config import Settings

logger = create_service_logger("media.api.health")
health_bp = Blueprint("health_routes", __name__)


@health_bp.route("/healthz")
@inject
async def health_check(settings: FromDishka[Settings]) -> Response | tuple[Response, int]:
    """Standardized health check endpoint; unhealthy when the storage root is unusable."""
    correlation_id = uuid.uuid4()
    storage_root = settings.STORAGE_DIR
    checks = {"service_responsive": True, "dependencies_available": True}

    try:
        if storage_root.exists() and storage_root.is_dir():
            storage = {"status": "healthy", "path": str(storage_root)}
        else:
            storage = {
                "status": "unhealthy",
                "path": str(storage_root),
                "error": "Storage root is not accessible",
            }
    except Exception as e:
        logger.error(
            f"Storage health check failed: {e}",
            extra={"correlation_id": str(correlation_id)},
            exc_info=True,
        )
        storage = {"status": "unhealthy", "path": str(storage_root), "error": str(e)}

    healthy = storage["status"] == "healthy"
    checks["dependencies_available"] = healthy
    overall_status = "healthy" if healthy else "unhealthy"

    return jsonify(
        {
            "service": "media_service",
            "status": overall_status,
            "message": f"Media Service is {overall_status}",
            "version": "1.0.0",
            "checks": checks,
            "dependencies": {"storage": storage},
            "environment": settings.ENVIRONMENT.value,
            "correlation_id": str(correlation_id),
        }
    ), (200 if healthy else 503)


@health_bp.route("/metrics")
@inject
async def metrics(registry: FromDishka[CollectorRegistry]) -> Response:
    """Prometheus metrics endpoint."""
    try:
        metrics_data = generate_latest(registry)
        return Response(metrics_data, content_type=CONTENT_TYPE_LATEST)
    except Exception as e:
        logger.error(f"Error generating metrics: {e}", exc_info=True)
        return Response("Error generating metrics", status=500)
