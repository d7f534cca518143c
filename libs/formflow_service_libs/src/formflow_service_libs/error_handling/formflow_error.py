"""
Core exception class for FormFlow services.

FormFlowError wraps an ErrorDetail so every failure carries the same
structured context (code, correlation id, service, operation, details) from
the point it is raised to the HTTP error handler that renders it.
"""

from __future__ import annotations

from typing import Any

from formflow_core.models.error_models import ErrorDetail
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode


class FormFlowError(Exception):
    """Structured exception carrying an ErrorDetail.

    The error is recorded on the current OpenTelemetry span at construction
    time when a recording span is active.
    """

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(f"[{error_detail.error_code.value}] {error_detail.message}")
        self.error_detail = error_detail
        self._record_to_span()

    def _record_to_span(self) -> None:
        span = trace.get_current_span()
        if span is None or not span.is_recording():
            return

        span.record_exception(self)
        span.set_status(Status(StatusCode.ERROR, self.error_detail.message))
        span.set_attribute("error", True)
        span.set_attribute("error.code", self.error_detail.error_code.value)
        span.set_attribute("error.message", self.error_detail.message)
        span.set_attribute("error.service", self.error_detail.service)
        span.set_attribute("error.operation", self.error_detail.operation)
        span.set_attribute("correlation_id", str(self.error_detail.correlation_id))
        for key, value in self.error_detail.details.items():
            if isinstance(value, (str, bool, int, float)):
                span.set_attribute(f"error.details.{key}", value)

    @property
    def correlation_id(self) -> str:
        return str(self.error_detail.correlation_id)

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def service(self) -> str:
        return self.error_detail.service

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging or JSON responses."""
        return {
            "error": str(self),
            "error_detail": self.error_detail.model_dump(mode="json"),
        }

    def add_detail(self, key: str, value: Any) -> FormFlowError:
        """Return a new error with one more entry in details.

        ErrorDetail is immutable, so the original error is left untouched.
        """
        new_details = {**self.error_detail.details, key: value}
        return FormFlowError(self.error_detail.model_copy(update={"details": new_details}))
