"""Health and metrics routes for Greeting Service."""

from __future__ import annotations

from dishka import FromDishka
from formflow_core.status_enums import HealthStatus
from formflow_service_libs.error_handling.correlation import CorrelationContext
from formflow_service_libs.logging_utils import create_service_logger
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from quart import Blueprint, Response, jsonify
from quart_dishka import inject

from services.greeting_service.config import Settings
from services.greeting_service.protocols import SubmissionRepositoryProtocol

logger = create_service_logger("greeting.api.health")
health_bp = Blueprint("health_routes", __name__)


@health_bp.route("/healthz")
@inject
async def health_check(
    corr: FromDishka[CorrelationContext],
    settings: FromDishka[Settings],
    repository: FromDishka[SubmissionRepositoryProtocol],
) -> tuple[Response, int]:
    """Standardized health check endpoint."""
    checks = {"service_responsive": True, "submission_store": True}
    dependencies: dict[str, dict] = {}

    try:
        stored = await repository.count()
        dependencies["submission_store"] = {
            "status": HealthStatus.HEALTHY.value,
            "stored_submissions": stored,
        }
    except Exception as e:
        logger.error(
            f"Submission store health check failed: {e}",
            correlation_id=corr.original,
            exc_info=True,
        )
        checks["submission_store"] = False
        dependencies["submission_store"] = {
            "status": HealthStatus.UNHEALTHY.value,
            "error": str(e),
        }

    healthy = all(checks.values())
    status = HealthStatus.HEALTHY if healthy else HealthStatus.UNHEALTHY
    health_response = {
        "service": "greeting_service",
        "status": status.value,
        "message": f"Greeting Service is {status.value}",
        "version": settings.SERVICE_VERSION,
        "environment": settings.ENVIRONMENT.value,
        "checks": checks,
        "dependencies": dependencies,
        "correlation_id": corr.original,
    }
    return jsonify(health_response), 200 if healthy else 503


@health_bp.route("/metrics")
@inject
async def metrics(registry: FromDishka[CollectorRegistry]) -> Response:
    """Prometheus metrics endpoint."""
    try:
        metrics_data = generate_latest(registry)
        return Response(metrics_data, content_type=CONTENT_TYPE_LATEST)
    except Exception as e:
        logger.error(f"Error generating metrics: {e}", exc_info=True)
        return Response("Error generating metrics", status=500)
