"""Unit tests for PrometheusFormMetrics."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from formflow_core.status_enums import SubmissionOutcome
from prometheus_client import CollectorRegistry, Counter

from services.greeting_service.implementations.prometheus_form_metrics import (
    PrometheusFormMetrics,
)


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def counter(registry: CollectorRegistry) -> Counter:
    return Counter("form_submissions_total", "test", ["outcome"], registry=registry)


def test_every_outcome_starts_at_zero(registry: CollectorRegistry, counter: Counter) -> None:
    PrometheusFormMetrics(counter)

    for outcome in SubmissionOutcome:
        assert (
            registry.get_sample_value("form_submissions_total", {"outcome": outcome.value}) == 0.0
        )


def test_records_outcome_label(registry: CollectorRegistry, counter: Counter) -> None:
    metrics = PrometheusFormMetrics(counter)

    metrics.record_submission(SubmissionOutcome.ACCEPTED)
    metrics.record_submission(SubmissionOutcome.ACCEPTED)
    metrics.record_submission(SubmissionOutcome.INVALID)

    assert registry.get_sample_value("form_submissions_total", {"outcome": "accepted"}) == 2.0
    assert registry.get_sample_value("form_submissions_total", {"outcome": "invalid"}) == 1.0
    assert registry.get_sample_value("form_submissions_total", {"outcome": "error"}) == 0.0


def test_metric_failures_do_not_propagate() -> None:
    mock_counter = MagicMock()
    metrics = PrometheusFormMetrics(mock_counter)
    mock_counter.reset_mock()
    mock_counter.labels.side_effect = ValueError("bad label")

    metrics.record_submission(SubmissionOutcome.ERROR)

    mock_counter.labels.assert_called_once_with(outcome="error")
