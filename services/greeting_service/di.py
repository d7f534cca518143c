"""Dependency injection configuration for Greeting Service using Dishka."""

from __future__ import annotations

from dishka import Provider, Scope, provide
from formflow_service_libs.error_handling.correlation import (
    CorrelationContext,
    extract_correlation_context_from_request,
)
from prometheus_client import CollectorRegistry, Counter
from quart import g, request

from services.greeting_service.config import Settings, settings
from services.greeting_service.implementations.in_memory_submission_repository import (
    InMemorySubmissionRepository,
)
from services.greeting_service.implementations.name_form_validator import (
    PydanticNameFormValidator,
)
from services.greeting_service.implementations.prometheus_form_metrics import (
    PrometheusFormMetrics,
)
from services.greeting_service.protocols import (
    FormMetricsProtocol,
    NameFormValidatorProtocol,
    SubmissionRepositoryProtocol,
)


class CoreInfrastructureProvider(Provider):
    """Provider for settings, the metrics registry and request correlation context."""

    def __init__(self, app_settings: Settings = settings) -> None:
        super().__init__()
        self._settings = app_settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide service settings."""
        return self._settings

    @provide(scope=Scope.APP)
    def provide_collector_registry(self) -> CollectorRegistry:
        """Provide a service-private Prometheus registry."""
        return CollectorRegistry()

    @provide(scope=Scope.REQUEST)
    def provide_correlation_context(self) -> CorrelationContext:
        """Provide correlation context set by the middleware, or read it from the request."""
        ctx = getattr(g, "correlation_context", None)
        if isinstance(ctx, CorrelationContext):
            return ctx

        return extract_correlation_context_from_request(request)


class ServiceImplementationsProvider(Provider):
    """Provider for form validation, storage and metrics implementations."""

    @provide(scope=Scope.APP)
    def provide_form_metrics(self, registry: CollectorRegistry) -> FormMetricsProtocol:
        """Provide form submission metrics."""
        form_submissions = Counter(
            "greeting_service_form_submissions_total",
            "Name form submissions by outcome",
            ["outcome"],
            registry=registry,
        )
        return PrometheusFormMetrics(form_submissions)

    @provide(scope=Scope.APP)
    def provide_submission_repository(self, settings: Settings) -> SubmissionRepositoryProtocol:
        """Provide the in-memory submission store."""
        return InMemorySubmissionRepository(max_size=settings.MAX_STORED_SUBMISSIONS)

    @provide(scope=Scope.APP)
    def provide_name_form_validator(self, settings: Settings) -> NameFormValidatorProtocol:
        """Provide the name form validator."""
        return PydanticNameFormValidator(max_length=settings.NAME_MAX_LENGTH)
