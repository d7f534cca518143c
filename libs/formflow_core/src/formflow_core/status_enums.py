"""Status enums for form submission outcomes and health reporting."""

from __future__ import annotations

from enum import Enum


class SubmissionOutcome(str, Enum):
    """Outcome of a single form POST, used as a metrics label."""

    ACCEPTED = "accepted"
    INVALID = "invalid"
    ERROR = "error"


class HealthStatus(str, Enum):
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
