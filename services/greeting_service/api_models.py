"""Form and submission models for the Greeting Service.

NameForm is the validated shape of the name form. Submission is what gets
stored once a POST has been accepted.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from formflow_core.error_enums import FormErrorCode
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

DEFAULT_NAME_MAX_LENGTH = 64

FIELD_LABELS: dict[str, str] = {
    "first_name": "first name",
    "last_name": "last name",
}

# Letters, optionally joined by single spaces, hyphens or apostrophes
NAME_PATTERN = re.compile(r"^[^\W\d_]+(?:[ '\-][^\W\d_]+)*$")


class NameForm(BaseModel):
    """Validated content of the name form.

    The maximum length is read from the validation context
    (``{"max_length": n}``) so it can follow service configuration.
    """

    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    first_name: str
    last_name: str

    @field_validator("first_name", "last_name")
    @classmethod
    def _check_name(cls, value: str, info: ValidationInfo) -> str:
        label = FIELD_LABELS[info.field_name]
        max_length = (info.context or {}).get("max_length", DEFAULT_NAME_MAX_LENGTH)

        if not value:
            raise PydanticCustomError(FormErrorCode.REQUIRED.value, f"Please enter your {label}.")
        if len(value) > max_length:
            raise PydanticCustomError(
                FormErrorCode.TOO_LONG.value,
                f"{label.capitalize()} must be at most {max_length} characters.",
            )
        if not NAME_PATTERN.match(value):
            raise PydanticCustomError(
                FormErrorCode.INVALID_CHARACTERS.value,
                f"{label.capitalize()} may only contain letters, spaces, hyphens and apostrophes.",
            )
        return value


@dataclass(frozen=True)
class FormValidationResult:
    """Outcome of validating one form submission.

    ``errors`` maps field names to messages; an empty mapping means the
    submission is valid and ``form`` is set.
    """

    values: dict[str, str]
    errors: dict[str, str] = field(default_factory=dict)
    form: NameForm | None = None

    @property
    def is_valid(self) -> bool:
        return not self.errors


class Submission(BaseModel):
    """An accepted name form submission."""

    model_config = ConfigDict(frozen=True)

    submission_id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    first_name: str
    last_name: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    correlation_id: UUID

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_form(cls, form: NameForm, correlation_id: UUID) -> Submission:
        return cls(
            first_name=form.first_name,
            last_name=form.last_name,
            correlation_id=correlation_id,
        )
