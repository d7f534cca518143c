"""Prometheus-based form metrics implementation."""

from __future__ import annotations

from formflow_core.status_enums import SubmissionOutcome
from formflow_service_libs.logging_utils import create_service_logger
from prometheus_client import Counter

from services.greeting_service.protocols import FormMetricsProtocol

logger = create_service_logger("greeting.metrics.prometheus")


class PrometheusFormMetrics(FormMetricsProtocol):
    """Prometheus-based implementation of form submission metrics."""

    def __init__(self, form_submissions_counter: Counter) -> None:
        """
        Initialize Prometheus form metrics.

        Args:
            form_submissions_counter: Counter labelled by submission outcome
        """
        self.form_submissions = form_submissions_counter
        # Every outcome series is exported from zero
        for outcome in SubmissionOutcome:
            self.form_submissions.labels(outcome=outcome.value)

    def record_submission(self, outcome: SubmissionOutcome) -> None:
        try:
            self.form_submissions.labels(outcome=outcome.value).inc()
        except Exception as e:
            logger.error(f"Error recording form submission metric: {e}")
