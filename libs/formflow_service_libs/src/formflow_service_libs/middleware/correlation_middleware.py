"""Correlation id middleware for Quart applications."""

from __future__ import annotations

from quart import Quart, Response, g, request

from ..error_handling.correlation import (
    CORRELATION_HEADER,
    CorrelationContext,
    extract_correlation_context_from_request,
)
from ..logging_utils import bind_request_context, clear_request_context


def setup_correlation_middleware(app: Quart) -> None:
    """Attach a CorrelationContext to every request and echo it on the response.

    The context is stored on ``g.correlation_context`` and bound into the
    structlog context for the lifetime of the request.
    """

    @app.before_request
    async def _bind_correlation_context() -> None:
        ctx = extract_correlation_context_from_request(request)
        g.correlation_context = ctx
        bind_request_context(ctx.original, request.method, request.path)

    @app.after_request
    async def _echo_correlation_header(response: Response) -> Response:
        ctx = getattr(g, "correlation_context", None)
        if isinstance(ctx, CorrelationContext):
            response.headers[CORRELATION_HEADER] = ctx.original
        return response

    @app.teardown_request
    async def _clear_correlation_context(exc: BaseException | None) -> None:
        clear_request_context()
