"""Tests for the shared ErrorDetail and ErrorResponse contracts."""

from __future__ import annotations

import uuid
from datetime import UTC, datetime

import pytest
from formflow_core.error_enums import ErrorCode
from formflow_core.models.error_models import ErrorDetail, ErrorResponse
from pydantic import ValidationError


class TestErrorDetail:
    def test_defaults_are_filled_in(self) -> None:
        detail = ErrorDetail(
            error_code=ErrorCode.VALIDATION_ERROR,
            message="Bad input",
            correlation_id=uuid.uuid4(),
            service="greeting_service",
            operation="submit_form",
        )

        assert detail.details == {}
        assert detail.stack_trace is None
        assert detail.trace_id is None
        assert detail.timestamp.tzinfo is not None
        assert detail.timestamp <= datetime.now(UTC)

    def test_is_immutable(self) -> None:
        detail = ErrorDetail(
            error_code=ErrorCode.UNKNOWN_ERROR,
            message="boom",
            correlation_id=uuid.uuid4(),
            service="svc",
            operation="op",
        )

        with pytest.raises(ValidationError):
            detail.message = "changed"  # type: ignore[misc]

    def test_json_dump_uses_enum_values(self) -> None:
        correlation_id = uuid.uuid4()
        response = ErrorResponse(
            error=ErrorDetail(
                error_code=ErrorCode.RESOURCE_NOT_FOUND,
                message="missing",
                correlation_id=correlation_id,
                service="svc",
                operation="op",
                details={"resource_id": "abc"},
            ),
            status_code=404,
        )

        dumped = response.model_dump(mode="json")

        assert dumped["status_code"] == 404
        assert dumped["error"]["error_code"] == "RESOURCE_NOT_FOUND"
        assert dumped["error"]["correlation_id"] == str(correlation_id)
        assert dumped["error"]["details"] == {"resource_id": "abc"}
