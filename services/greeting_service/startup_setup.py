"""Startup and shutdown logic for Greeting Service."""

from __future__ import annotations

from dishka import AsyncContainer, make_async_container
from formflow_service_libs.logging_utils import create_service_logger
from formflow_service_libs.quart_app import FormFlowApp
from prometheus_client import CollectorRegistry, Counter, Histogram

from services.greeting_service.config import Settings, settings
from services.greeting_service.di import CoreInfrastructureProvider, ServiceImplementationsProvider
from services.greeting_service.protocols import FormMetricsProtocol

logger = create_service_logger("greeting.startup")


def create_di_container(app_settings: Settings = settings) -> AsyncContainer:
    """Creates and returns the DI AsyncContainer."""
    container = make_async_container(
        CoreInfrastructureProvider(app_settings),
        ServiceImplementationsProvider(),
    )
    logger.info("DI AsyncContainer created.")
    return container


async def initialize_services(app: FormFlowApp) -> None:
    """Create HTTP metrics on the container's registry and store them on the app.

    Form metrics are resolved here too so their series are exported before
    the first submission arrives.
    """
    try:
        async with app.container() as request_container:
            registry = await request_container.get(CollectorRegistry)
            app.extensions["metrics"] = _create_metrics(registry)
            await request_container.get(FormMetricsProtocol)

        logger.info("Greeting Service metrics initialized successfully.")
    except Exception as e:
        logger.critical(f"Failed to initialize Greeting Service: {e}", exc_info=True)
        raise


async def shutdown_services(app: FormFlowApp) -> None:
    """Gracefully shutdown the Greeting Service's DI container."""
    try:
        await app.container.close()
        logger.info("Greeting Service DI container closed")
    except Exception as e:
        logger.error(f"Error during Greeting Service shutdown: {e}", exc_info=True)


def _create_metrics(registry: CollectorRegistry) -> dict:
    """Create Prometheus metrics instances for HTTP middleware."""
    return {
        "http_requests_total": Counter(
            "greeting_service_http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status_code"],
            registry=registry,
        ),
        "http_request_duration_seconds": Histogram(
            "greeting_service_http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=registry,
        ),
    }
