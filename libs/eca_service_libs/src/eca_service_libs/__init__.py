"""
ECA Service Libraries Package.

Shared service infrastructure for the ECA microservices: structured logging,
structured errors, settings, and Prometheus metrics helpers.
"""

from .logging_utils import configure_service_logging, create_service_logger

__all__ = [
    "configure_service_logging",
    "create_service_logger",
]

# Framework-specific helpers should be imported directly from:
# - eca_service_libs.metrics_middleware
# - eca_service_libs.operation_metrics
# - eca_service_libs.route_errors
