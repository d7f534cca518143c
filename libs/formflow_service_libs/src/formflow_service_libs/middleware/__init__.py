"""Quart middleware shared by FormFlow services."""

from .correlation_middleware import setup_correlation_middleware
from .metrics_middleware import setup_metrics_middleware

__all__ = ["setup_correlation_middleware", "setup_metrics_middleware"]
