"""
FormFlow Greeting Service Application.

A Quart service that serves the name form: GET renders it, POST validates
it, and a successful POST redirects to the greeting page.
"""

from __future__ import annotations

from dishka import AsyncContainer
from formflow_service_libs.error_handling.quart import register_error_handlers
from formflow_service_libs.logging_utils import configure_service_logging, create_service_logger
from formflow_service_libs.middleware import (
    setup_correlation_middleware,
    setup_metrics_middleware,
)
from formflow_service_libs.quart_app import FormFlowApp
from quart_dishka import QuartDishka

from services.greeting_service import startup_setup
from services.greeting_service.api.form_routes import form_bp
from services.greeting_service.api.health_routes import health_bp
from services.greeting_service.config import Settings, settings

# Configure structured logging
configure_service_logging("greeting-service", log_level=settings.LOG_LEVEL)
logger = create_service_logger("greeting.app")


def create_app(
    container: AsyncContainer | None = None,
    app_settings: Settings = settings,
) -> FormFlowApp:
    """Create and configure the Greeting Service application.

    Args:
        container: DI container to use; a production container is built when omitted
        app_settings: Settings the app and the default container are built from
    """
    app = FormFlowApp(__name__)
    app.config["SERVICE_NAME"] = app_settings.SERVICE_NAME
    app.secret_key = app_settings.SECRET_KEY.get_secret_value()

    # DI must be in place before blueprints are registered
    app.container = container or startup_setup.create_di_container(app_settings)
    QuartDishka(app=app, container=app.container)

    setup_correlation_middleware(app)
    register_error_handlers(app, html_template="error.html")
    setup_metrics_middleware(
        app=app,
        request_count_metric_name="http_requests_total",
        request_duration_metric_name="http_request_duration_seconds",
        status_label_name="status_code",
        logger_name="greeting.metrics",
    )

    @app.before_serving
    async def startup() -> None:
        """Initialize services and metrics."""
        await startup_setup.initialize_services(app)
        logger.info("Greeting Service startup completed successfully")

    @app.after_serving
    async def shutdown() -> None:
        """Gracefully shutdown all services."""
        await startup_setup.shutdown_services(app)
        logger.info("Greeting Service shutdown completed")

    app.register_blueprint(form_bp)
    app.register_blueprint(health_bp)

    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=settings.DEBUG, host=settings.HTTP_HOST, port=settings.HTTP_PORT)
