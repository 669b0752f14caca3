"""Health and metrics routes for Course Service."""

from __future__ import annotations

from dishka import FromDishka
from eca_service_libs.logging_utils import create_service_logger
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from quart import Blueprint, Response, jsonify
from quart_dishka import inject
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from services.course_service.config import Settings

logger = create_service_logger("course_service.api.health")
health_bp = Blueprint("health_routes", __name__)


@health_bp.route("/healthz")
@inject
async def health_check(
    settings: FromDishka[Settings], engine: FromDishka[AsyncEngine]
) -> Response | tuple[Response, int]:
    """Standardized health check endpoint."""
    checks = {"service_responsive": True, "dependencies_available": True}
    dependencies: dict[str, dict[str, str]] = {}

    if settings.USE_MOCK_REPOSITORY:
        dependencies["database"] = {"status": "healthy", "mode": "mock"}
    else:
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            dependencies["database"] = {"status": "healthy"}
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            dependencies["database"] = {"status": "unhealthy", "error": str(e)}
            checks["dependencies_available"] = False

    overall_status = "healthy" if checks["dependencies_available"] else "unhealthy"

    return jsonify(
        {
            "service": "course_service",
            "status": overall_status,
            "message": f"Course Service is {overall_status}",
            "version": "1.0.0",
            "checks": checks,
            "dependencies": dependencies,
            "environment": settings.ENVIRONMENT.value,
        }
    ), (200 if overall_status == "healthy" else 503)


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
