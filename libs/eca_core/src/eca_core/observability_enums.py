"""
eca_core.observability_enums - Labels used for operation metrics.
"""

from __future__ import annotations

from enum import Enum


class OperationType(str, Enum):
    """Types of operations for metrics collection."""

    UPLOAD = "upload"
    DOWNLOAD = "download"
    LIST = "list"
    GET = "get"
    CREATE = "create"
    DELETE = "delete"
