"""Factory for ErrorDetail instances with automatic context capture."""

from __future__ import annotations

import traceback
import uuid
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import UUID

from eca_core.error_enums import ErrorCode
from eca_core.models.error_models import ErrorDetail
from opentelemetry import trace


def create_error_detail_with_context(
    error_code: ErrorCode,
    message: str,
    service: str,
    operation: str,
    correlation_id: Optional[UUID] = None,
    details: Optional[dict[str, Any]] = None,
    capture_stack: bool = True,
) -> ErrorDetail:
    """
    Create an ErrorDetail, filling in timestamp, stack and trace context.

    Args:
        error_code: Error code from the ErrorCode enum
        message: Human-readable error message
        service: Name of the service raising the error
        operation: Operation that failed
        correlation_id: Request correlation ID (generated when omitted)
        details: Additional structured context
        capture_stack: Whether to capture the current stack trace

    Returns:
        Fully populated, frozen ErrorDetail
    """
    stack_trace = None
    if capture_stack:
        # Drop this factory frame from the captured stack
        stack_trace = "".join(traceback.format_stack()[:-1])

    trace_id = None
    span_id = None
    span = trace.get_current_span()
    if span is not None:
        span_context = span.get_span_context()
        if span_context.is_valid:
            trace_id = format(span_context.trace_id, "032x")
            span_id = format(span_context.span_id, "016x")

    return ErrorDetail(
        error_code=error_code,
        message=message,
        correlation_id=correlation_id or uuid.uuid4(),
        timestamp=datetime.now(timezone.utc),
        service=service,
        operation=operation,
        details=details or {},
        stack_trace=stack_trace,
        trace_id=trace_id,
        span_id=span_id,
    )
