"""
Media Service dependency injection configuration.
"""

from __future__ import annotations

from dishka import Provider, Scope, provide
from eca_service_libs.operation_metrics import (
    OperationMetricsProtocol,
    PrometheusOperationMetrics,
    create_operations_counter,
)
from prometheus_client import CollectorRegistry

from services.media_service.config import Settings, settings
from services.media_service.implementations.filesystem_blob_store import FileSystemBlobStore
from services.media_service.protocols import BlobStoreProtocol


class MediaServiceProvider(Provider):
    """DI provider for Media Service dependencies."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide service settings."""
        return settings

    @provide(scope=Scope.APP)
    def provide_collector_registry(self) -> CollectorRegistry:
        """Provide Prometheus collector registry."""
        return CollectorRegistry()

    @provide(scope=Scope.APP)
    def provide_media_metrics(self, registry: CollectorRegistry) -> OperationMetricsProtocol:
        """Provide blob operation metrics."""
        return PrometheusOperationMetrics(create_operations_counter("media", registry))

    @provide(scope=Scope.APP)
    def provide_blob_store(self, settings: Settings) -> BlobStoreProtocol:
        """Provide the filesystem blob store rooted at the configured directory."""
        return FileSystemBlobStore(settings.STORAGE_DIR)
