"""
eca_core.error_enums - Centralized error code definitions.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    RESOURCE_CONFLICT = "RESOURCE_CONFLICT"  # Create-if-absent hit an existing record
    STORAGE_ERROR = "STORAGE_ERROR"  # Disk or database I/O failure
    INITIALIZATION_FAILED = "INITIALIZATION_FAILED"  # Service cannot start safely
