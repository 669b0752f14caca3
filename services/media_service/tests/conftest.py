"""Shared test fixtures and configuration for Media Service tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from prometheus_client import REGISTRY

from services.media_service.implementations.filesystem_blob_store import FileSystemBlobStore


@pytest.fixture(autouse=True)
def _clear_prometheus_registry() -> Any:
    """Clear the default Prometheus registry so metric names never collide between tests."""
    collectors = list(REGISTRY._collector_to_names.keys())
    for collector in collectors:
        REGISTRY.unregister(collector)
    yield


@pytest.fixture
def store_root(tmp_path: Path) -> Path:
    return tmp_path / "media"


@pytest.fixture
def blob_store(store_root: Path) -> FileSystemBlobStore:
    return FileSystemBlobStore(store_root)
