"""
FormFlow Service Libraries.

Shared infrastructure for FormFlow services: structured logging, error
handling, configuration, middleware and the typed Quart application class.
"""

from .logging_utils import configure_service_logging, create_service_logger
from .quart_app import FormFlowApp

__all__ = ["FormFlowApp", "configure_service_logging", "create_service_logger"]
