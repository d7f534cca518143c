"""Pydantic contracts shared across FormFlow services."""

from .error_models import ErrorDetail, ErrorResponse

__all__ = ["ErrorDetail", "ErrorResponse"]
