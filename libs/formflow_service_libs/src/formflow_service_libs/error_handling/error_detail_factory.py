"""
Factory for ErrorDetail instances with automatic context capture.

Captures the stack trace and the active OpenTelemetry trace/span ids so call
sites only supply what they know: code, message, service and operation.
"""

from __future__ import annotations

import traceback
import uuid
from typing import Any
from uuid import UUID

from formflow_core.error_enums import ErrorCode
from formflow_core.models.error_models import ErrorDetail
from opentelemetry import trace


def create_error_detail_with_context(
    error_code: ErrorCode,
    message: str,
    service: str,
    operation: str,
    correlation_id: UUID | None = None,
    details: dict[str, Any] | None = None,
    capture_stack: bool = True,
) -> ErrorDetail:
    """
    Build an ErrorDetail enriched with stack and trace context.

    Args:
        error_code: Error classification
        message: Human-readable description
        service: Service raising the error
        operation: Operation that failed
        correlation_id: Request correlation ID (generated when omitted)
        details: Additional structured context
        capture_stack: Capture the current exception or call stack

    Returns:
        Populated ErrorDetail
    """
    stack_trace: str | None = None
    if capture_stack:
        formatted = traceback.format_exc()
        if formatted and formatted != "NoneType: None\n":
            stack_trace = formatted
        else:
            # No exception being handled; drop this frame from the call stack
            stack_trace = "".join(traceback.format_stack()[:-1])

    trace_id: str | None = None
    span_id: str | None = None
    span = trace.get_current_span()
    if span is not None and span.is_recording():
        span_context = span.get_span_context()
        if span_context.is_valid:
            trace_id = format(span_context.trace_id, "032x")
            span_id = format(span_context.span_id, "016x")

    return ErrorDetail(
        error_code=error_code,
        message=message,
        correlation_id=correlation_id or uuid.uuid4(),
        service=service,
        operation=operation,
        details=details or {},
        stack_trace=stack_trace,
        trace_id=trace_id,
        span_id=span_id,
    )
