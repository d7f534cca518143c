"""Pydantic-backed validation of the name form."""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping

from formflow_core.error_enums import FormErrorCode
from formflow_service_libs.logging_utils import create_service_logger
from pydantic import ValidationError
from pydantic_core import ErrorDetails

from services.greeting_service.api_models import FIELD_LABELS, FormValidationResult, NameForm
from services.greeting_service.protocols import NameFormValidatorProtocol

logger = create_service_logger("greeting.validation")

FORM_ERROR_TYPES = frozenset(code.value for code in FormErrorCode)


class PydanticNameFormValidator(NameFormValidatorProtocol):
    """Validate raw form fields into a NameForm, collecting one message per field."""

    def __init__(self, max_length: int) -> None:
        self.max_length = max_length

    def validate(self, data: Mapping[str, str]) -> FormValidationResult:
        # NFC so combining marks typed separately count as part of their letter
        values = {
            name: unicodedata.normalize("NFC", str(data.get(name) or "")).strip()
            for name in FIELD_LABELS
        }

        try:
            form = NameForm.model_validate(values, context={"max_length": self.max_length})
        except ValidationError as e:
            errors: dict[str, str] = {}
            for error in e.errors():
                field_name = str(error["loc"][0]) if error["loc"] else "form"
                # First failure per field is the one shown
                errors.setdefault(field_name, self._message_for(field_name, error))
            logger.debug("Name form failed validation", invalid_fields=sorted(errors))
            return FormValidationResult(values=values, errors=errors)

        return FormValidationResult(values=values, form=form)

    @staticmethod
    def _message_for(field_name: str, error: ErrorDetails) -> str:
        if error["type"] in FORM_ERROR_TYPES:
            return error["msg"]
        label = FIELD_LABELS.get(field_name, field_name)
        return f"Please check your {label}."
