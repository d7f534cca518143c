"""
Greeting Service behavioral contracts and protocols.

This module defines the protocols that Greeting Service components must
implement, enabling dependency injection and testability.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable
from uuid import UUID

from formflow_core.status_enums import SubmissionOutcome

from services.greeting_service.api_models import FormValidationResult, Submission


class NameFormValidatorProtocol(Protocol):
    """Protocol for validating raw name form data."""

    def validate(self, data: Mapping[str, str]) -> FormValidationResult:
        """
        Validate submitted form fields.

        Args:
            data: Raw form fields as received (missing fields count as empty)

        Returns:
            FormValidationResult with stripped values and per-field errors
        """
        ...


class SubmissionRepositoryProtocol(Protocol):
    """Protocol for storing accepted submissions."""

    async def save(self, submission: Submission) -> None:
        """Persist an accepted submission."""
        ...

    async def get(self, submission_id: str, correlation_id: UUID | None = None) -> Submission:
        """
        Retrieve a submission by id.

        Raises:
            FormFlowError: RESOURCE_NOT_FOUND if the id is unknown
        """
        ...

    async def search(
        self,
        first_name: str = "",
        last_name: str = "",
        limit: int = 20,
    ) -> list[Submission]:
        """Return submissions whose names start with the given prefixes, newest first."""
        ...

    async def count(self) -> int:
        """Return the number of stored submissions."""
        ...


@runtime_checkable
class FormMetricsProtocol(Protocol):
    """Protocol for form submission metrics collection."""

    def record_submission(self, outcome: SubmissionOutcome) -> None:
        """Record the outcome of one form POST."""
        ...
