"""Shared Prometheus HTTP metrics for ECA Quart services.

Metric instances live in ``app.extensions["metrics"]``; they are created in
each service's startup_setup with ``create_http_metrics``.
"""

from __future__ import annotations

import time
from typing import Any

from prometheus_client import CollectorRegistry, Counter, Histogram
from quart import Quart, Response, current_app, g, request

from eca_service_libs.logging_utils import create_service_logger

logger = create_service_logger("eca.metrics_middleware")


def create_http_metrics(registry: CollectorRegistry) -> dict[str, Any]:
    """Create Prometheus metrics instances for HTTP middleware."""
    return {
        "http_requests_total": Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status_code"],
            registry=registry,
        ),
        "http_request_duration_seconds": Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=registry,
        ),
    }


def setup_metrics_middleware(app: Quart, logger_name: str | None = None) -> None:
    """Record request count and duration for every request served by ``app``.

    Args:
        app: The Quart application to configure
        logger_name: Optional custom logger name for this service
    """
    service_logger = create_service_logger(logger_name) if logger_name else logger

    @app.before_request
    async def before_request() -> None:
        g.start_time = time.time()

    @app.after_request
    async def after_request(response: Response) -> Response:
        try:
            start_time = getattr(g, "start_time", None)
            metrics = current_app.extensions.get("metrics", {})

            if start_time is not None and metrics:
                duration = time.time() - start_time
                # Label by route rule so /files/<id> does not explode cardinality
                endpoint = request.url_rule.rule if request.url_rule else request.path

                request_count = metrics.get("http_requests_total")
                request_duration = metrics.get("http_request_duration_seconds")

                if request_count:
                    request_count.labels(
                        method=request.method,
                        endpoint=endpoint,
                        status_code=str(response.status_code),
                    ).inc()
                if request_duration:
                    request_duration.labels(method=request.method, endpoint=endpoint).observe(
                        duration
                    )

        except Exception as e:
            service_logger.error(f"Error recording request metrics: {e}")

        return response
