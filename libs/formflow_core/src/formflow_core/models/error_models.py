"""Structured error contracts.

ErrorDetail is the single error payload carried by FormFlowError, logged by
services and serialised into JSON error responses.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from ..error_enums import ErrorCode


class ErrorDetail(BaseModel):
    """Canonical error information shared by all services."""

    model_config = ConfigDict(frozen=True)

    error_code: ErrorCode
    message: str
    correlation_id: UUID
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    service: str
    operation: str
    details: dict[str, Any] = Field(default_factory=dict)
    stack_trace: str | None = None
    trace_id: str | None = None
    span_id: str | None = None


class ErrorResponse(BaseModel):
    """API error response wrapper.

    Wraps ErrorDetail with the HTTP status code so JSON error bodies look the
    same for every endpoint.
    """

    error: ErrorDetail
    status_code: int
