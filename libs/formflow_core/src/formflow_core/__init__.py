"""
FormFlow Common Core Package.
"""

from .config_enums import Environment
from .error_enums import ErrorCode, FormErrorCode
from .models.error_models import ErrorDetail, ErrorResponse
from .status_enums import HealthStatus, SubmissionOutcome

__all__ = [
    "Environment",
    "ErrorCode",
    "ErrorDetail",
    "ErrorResponse",
    "FormErrorCode",
    "HealthStatus",
    "SubmissionOutcome",
]
