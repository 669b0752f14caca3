"""Shared test fixtures and configuration for Course Service tests."""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

import pytest
from prometheus_client import REGISTRY
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from services.course_service.models_db import Base


@pytest.fixture(autouse=True)
def _clear_prometheus_registry() -> Any:
    """Clear the default Prometheus registry so metric names never collide between tests."""
    collectors = list(REGISTRY._collector_to_names.keys())
    for collector in collectors:
        REGISTRY.unregister(collector)
    yield


@pytest.fixture
async def sqlite_engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    """File-backed SQLite engine with the course schema created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'courses.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()
