"""Prometheus-backed operation metrics shared by ECA services."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from eca_core.observability_enums import OperationType
from eca_core.status_enums import OperationStatus
from prometheus_client import CollectorRegistry, Counter

from eca_service_libs.logging_utils import create_service_logger

logger = create_service_logger("eca.metrics.operations")


@runtime_checkable
class OperationMetricsProtocol(Protocol):
    """Protocol for per-operation outcome metrics."""

    def record_operation(self, operation: OperationType, status: OperationStatus) -> None:
        """
        Record an operation outcome.

        Args:
            operation: Operation type (OperationType enum)
            status: Operation status (OperationStatus enum)
        """
        ...


class PrometheusOperationMetrics(OperationMetricsProtocol):
    """Prometheus-based implementation of operation metrics collection."""

    def __init__(self, operations_counter: Counter) -> None:
        """
        Initialize Prometheus operation metrics.

        Args:
            operations_counter: Counter labelled by ``operation`` and ``status``
        """
        self.operations = operations_counter

    def record_operation(self, operation: OperationType, status: OperationStatus) -> None:
        # Metrics must never break a request
        try:
            self.operations.labels(operation=operation.value, status=status.value).inc()
        except Exception as e:
            logger.error(f"Error recording operation metric: {e}")


def create_operations_counter(metric_prefix: str, registry: CollectorRegistry) -> Counter:
    """Create the ``<prefix>_operations_total`` counter on the given registry."""
    return Counter(
        f"{metric_prefix}_operations_total",
        "Total service operations by outcome",
        ["operation", "status"],
        registry=registry,
    )
