"""Error handling utilities for FormFlow services."""

from .error_detail_factory import create_error_detail_with_context
from .factories import (
    raise_configuration_error,
    raise_processing_error,
    raise_resource_not_found,
    raise_validation_error,
)
from .formflow_error import FormFlowError

__all__ = [
    "FormFlowError",
    "create_error_detail_with_context",
    "raise_configuration_error",
    "raise_processing_error",
    "raise_resource_not_found",
    "raise_validation_error",
]
