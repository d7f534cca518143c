"""
Quart integration for structured error handling.

register_error_handlers() turns FormFlowError, framework HTTP errors and
unexpected exceptions into one response shape. Clients that ask for JSON get
an ErrorResponse body; everyone else gets the service's HTML error page when
one is configured.
"""

from __future__ import annotations

import uuid
from typing import Any

from formflow_core.error_enums import ErrorCode
from formflow_core.models.error_models import ErrorDetail, ErrorResponse
from quart import Quart, Response, g, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from ..logging_utils import create_service_logger
from .correlation import CorrelationContext
from .error_detail_factory import create_error_detail_with_context
from .formflow_error import FormFlowError

logger = create_service_logger("formflow.error_handling.quart")

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.MISSING_REQUIRED_FIELD: 400,
    ErrorCode.INVALID_REQUEST: 400,
    ErrorCode.RESOURCE_NOT_FOUND: 404,
    ErrorCode.METHOD_NOT_ALLOWED: 405,
}

HTTP_STATUS_TO_ERROR_CODE: dict[int, ErrorCode] = {
    400: ErrorCode.INVALID_REQUEST,
    404: ErrorCode.RESOURCE_NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
}


def status_for_error_code(error_code: ErrorCode) -> int:
    """Map an ErrorCode to its HTTP status (500 for anything unmapped)."""
    return ERROR_CODE_TO_STATUS.get(error_code, 500)


def _request_correlation_id() -> uuid.UUID:
    ctx = getattr(g, "correlation_context", None)
    if isinstance(ctx, CorrelationContext):
        return ctx.uuid
    return uuid.uuid4()


def _client_wants_json() -> bool:
    best = request.accept_mimetypes.best_match(
        ["text/html", "application/json"], default="text/html"
    )
    return best == "application/json" or request.is_json


async def create_error_response(
    error_detail: ErrorDetail,
    status_code: int,
    html_template: str | None = None,
) -> tuple[Response | str, int]:
    """Render an ErrorDetail as JSON or HTML depending on the Accept header."""
    if html_template is None or _client_wants_json():
        body = ErrorResponse(error=error_detail, status_code=status_code)
        return jsonify(body.model_dump(mode="json", exclude={"error": {"stack_trace"}})), status_code

    html = await render_template(html_template, error=error_detail, status_code=status_code)
    return html, status_code


def register_error_handlers(app: Quart, html_template: str | None = None) -> None:
    """Register structured error handlers on a Quart application.

    Args:
        app: Application to configure
        html_template: Template rendered for non-JSON clients; JSON is
            always used when omitted
    """
    service_name = app.config.get("SERVICE_NAME", app.name)

    @app.errorhandler(FormFlowError)
    async def handle_formflow_error(error: FormFlowError) -> Any:
        status_code = status_for_error_code(error.error_detail.error_code)
        log = logger.warning if status_code < 500 else logger.error
        log(
            "Request failed",
            error_code=error.error_code,
            error_message=error.error_detail.message,
            service=error.service,
            operation=error.operation,
            correlation_id=error.correlation_id,
            status_code=status_code,
        )
        return await create_error_response(error.error_detail, status_code, html_template)

    @app.errorhandler(HTTPException)
    async def handle_http_exception(error: HTTPException) -> Any:
        status_code = error.code or 500
        error_detail = create_error_detail_with_context(
            error_code=HTTP_STATUS_TO_ERROR_CODE.get(status_code, ErrorCode.UNKNOWN_ERROR),
            message=error.description or error.name,
            service=service_name,
            operation=f"{request.method} {request.path}",
            correlation_id=_request_correlation_id(),
            capture_stack=False,
        )
        logger.info(
            "HTTP error",
            status_code=status_code,
            path=request.path,
            method=request.method,
            correlation_id=str(error_detail.correlation_id),
        )
        response = await create_error_response(error_detail, status_code, html_template)
        if status_code == 405 and error.get_headers():
            body, code = response
            headers = {k: v for k, v in error.get_headers() if k.lower() == "allow"}
            return body, code, headers
        return response

    @app.errorhandler(Exception)
    async def handle_unexpected_error(error: Exception) -> Any:
        error_detail = create_error_detail_with_context(
            error_code=ErrorCode.UNKNOWN_ERROR,
            message="An unexpected error occurred",
            service=service_name,
            operation=f"{request.method} {request.path}",
            correlation_id=_request_correlation_id(),
            details={"exception_type": type(error).__name__},
        )
        logger.error(
            f"Unexpected error: {error}",
            correlation_id=str(error_detail.correlation_id),
            exc_info=True,
        )
        return await create_error_response(error_detail, 500, html_template)
