"""
Raise helpers for the common error categories.

Each helper builds an ErrorDetail through create_error_detail_with_context and
raises FormFlowError; none of them return.
"""

from __future__ import annotations

from typing import Any, NoReturn
from uuid import UUID

from formflow_core.error_enums import ErrorCode

from .error_detail_factory import create_error_detail_with_context
from .formflow_error import FormFlowError


def raise_validation_error(
    service: str,
    operation: str,
    field: str,
    message: str,
    correlation_id: UUID | None = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise a VALIDATION_ERROR for a single offending field."""
    error_detail = create_error_detail_with_context(
        error_code=ErrorCode.VALIDATION_ERROR,
        message=message,
        service=service,
        operation=operation,
        correlation_id=correlation_id,
        details={"field": field, **additional_context},
        capture_stack=False,
    )
    raise FormFlowError(error_detail)


def raise_resource_not_found(
    service: str,
    operation: str,
    resource_type: str,
    resource_id: str,
    correlation_id: UUID | None = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise a RESOURCE_NOT_FOUND error."""
    error_detail = create_error_detail_with_context(
        error_code=ErrorCode.RESOURCE_NOT_FOUND,
        message=f"{resource_type} with ID '{resource_id}' not found",
        service=service,
        operation=operation,
        correlation_id=correlation_id,
        details={
            "resource_type": resource_type,
            "resource_id": resource_id,
            **additional_context,
        },
        capture_stack=False,
    )
    raise FormFlowError(error_detail)


def raise_processing_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID | None = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise a PROCESSING_ERROR for internal failures."""
    error_detail = create_error_detail_with_context(
        error_code=ErrorCode.PROCESSING_ERROR,
        message=message,
        service=service,
        operation=operation,
        correlation_id=correlation_id,
        details=additional_context,
    )
    raise FormFlowError(error_detail)


def raise_configuration_error(
    service: str,
    operation: str,
    config_key: str,
    message: str,
    correlation_id: UUID | None = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise a CONFIGURATION_ERROR naming the offending setting."""
    error_detail = create_error_detail_with_context(
        error_code=ErrorCode.CONFIGURATION_ERROR,
        message=message,
        service=service,
        operation=operation,
        correlation_id=correlation_id,
        details={"config_key": config_key, **additional_context},
        capture_stack=False,
    )
    raise FormFlowError(error_detail)
