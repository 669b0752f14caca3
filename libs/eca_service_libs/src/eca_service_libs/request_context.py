"""Per-request helpers for ECA Quart routes."""

from __future__ import annotations

import uuid
from typing import Any

from quart import request

from eca_service_libs.logging_utils import bind_request_context, create_service_logger

logger = create_service_logger("eca.request_context")

CORRELATION_ID_HEADER = "X-Correlation-ID"


def correlation_id_from_request(**context: Any) -> uuid.UUID:
    """
    Return the request's correlation id and bind it to the log context.

    A valid X-Correlation-ID header is reused so a caller can follow one
    request across services; anything else gets a fresh uuid4.
    """
    header_value = request.headers.get(CORRELATION_ID_HEADER)
    correlation_id = uuid.uuid4()
    if header_value:
        try:
            correlation_id = uuid.UUID(header_value)
        except ValueError:
            logger.warning(f"Invalid correlation ID format in header: {header_value}")
    bind_request_context(correlation_id, **context)
    return correlation_id
