"""Tests for the Quart HTTP metrics middleware."""

from __future__ import annotations

from eca_service_libs.metrics_middleware import create_http_metrics, setup_metrics_middleware
from prometheus_client import CollectorRegistry
from quart import Quart


async def test_requests_are_counted_by_route_rule() -> None:
    registry = CollectorRegistry()
    app = Quart(__name__)
    app.extensions["metrics"] = create_http_metrics(registry)
    setup_metrics_middleware(app)

    @app.route("/files/<file_id>")
    async def get_file(file_id: str) -> str:
        return file_id

    async with app.test_client() as client:
        await client.get("/files/a")
        await client.get("/files/b")

    count = registry.get_sample_value(
        "http_requests_total",
        {"method": "GET", "endpoint": "/files/<file_id>", "status_code": "200"},
    )
    assert count == 2.0
    duration_count = registry.get_sample_value(
        "http_request_duration_seconds_count",
        {"method": "GET", "endpoint": "/files/<file_id>"},
    )
    assert duration_count == 2.0
