"""Tests for Prometheus operation metrics."""

from __future__ import annotations

from unittest.mock import MagicMock

from eca_core.observability_enums import OperationType
from eca_core.status_enums import OperationStatus
from eca_service_libs.operation_metrics import (
    OperationMetricsProtocol,
    PrometheusOperationMetrics,
    create_operations_counter,
)
from prometheus_client import CollectorRegistry


def test_record_operation_increments_labelled_counter() -> None:
    registry = CollectorRegistry()
    metrics = PrometheusOperationMetrics(create_operations_counter("media", registry))

    metrics.record_operation(OperationType.UPLOAD, OperationStatus.SUCCESS)
    metrics.record_operation(OperationType.UPLOAD, OperationStatus.SUCCESS)
    metrics.record_operation(OperationType.DOWNLOAD, OperationStatus.NOT_FOUND)

    labels_ok = {"operation": "upload", "status": "success"}
    labels_missing = {"operation": "download", "status": "not_found"}
    assert registry.get_sample_value("media_operations_total", labels_ok) == 2.0
    assert registry.get_sample_value("media_operations_total", labels_missing) == 1.0


def test_counter_failures_are_swallowed() -> None:
    counter = MagicMock()
    counter.labels.side_effect = RuntimeError("registry broken")
    metrics = PrometheusOperationMetrics(counter)

    metrics.record_operation(OperationType.LIST, OperationStatus.ERROR)

    counter.labels.assert_called_once_with(operation="list", status="error")


def test_implementation_satisfies_protocol() -> None:
    metrics = PrometheusOperationMetrics(create_operations_counter("x", CollectorRegistry()))

    assert isinstance(metrics, OperationMetricsProtocol)
