"""Shared Prometheus metrics middleware for FormFlow HTTP services.

The metric instances must be stored in ``app.extensions["metrics"]`` as a
dict keyed by metric name, typically by the service's startup_setup module.
"""

from __future__ import annotations

import time

from quart import Quart, Response, current_app, g, request

from ..logging_utils import create_service_logger

logger = create_service_logger("formflow.metrics_middleware")


def setup_metrics_middleware(
    app: Quart,
    request_count_metric_name: str = "http_requests_total",
    request_duration_metric_name: str = "http_request_duration_seconds",
    status_label_name: str = "status_code",
    logger_name: str | None = None,
) -> None:
    """Record request count and duration for every request.

    Args:
        app: The Quart application to configure
        request_count_metric_name: Key of the request counter in app.extensions["metrics"]
        request_duration_metric_name: Key of the duration histogram
        status_label_name: Name of the status code label
        logger_name: Optional custom logger name for this service
    """
    service_logger = create_service_logger(logger_name) if logger_name else logger

    @app.before_request
    async def before_request() -> None:
        g.start_time = time.time()

    @app.after_request
    async def after_request(response: Response) -> Response:
        try:
            start_time = getattr(g, "start_time", None)
            metrics = current_app.extensions.get("metrics", {})

            if start_time is not None and metrics:
                duration = time.time() - start_time
                # Use the matched rule so ids in URLs don't explode label cardinality
                endpoint = request.url_rule.rule if request.url_rule else "unmatched"
                method = request.method

                request_count = metrics.get(request_count_metric_name)
                request_duration = metrics.get(request_duration_metric_name)

                if request_count:
                    request_count.labels(
                        method=method,
                        endpoint=endpoint,
                        **{status_label_name: str(response.status_code)},
                    ).inc()
                if request_duration:
                    request_duration.labels(method=method, endpoint=endpoint).observe(duration)

        except Exception as e:
            service_logger.error(f"Error recording request metrics: {e}")

        return response
