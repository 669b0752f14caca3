"""
eca_core.status_enums - Outcome enums shared by services.
"""

from __future__ import annotations

from enum import Enum


class OperationStatus(str, Enum):
    """Outcome of a single service operation, used as a metrics label."""

    SUCCESS = "success"
    FAILED = "failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    ERROR = "error"
