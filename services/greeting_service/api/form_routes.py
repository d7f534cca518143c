"""Name form routes for Greeting Service.

GET / renders the form, POST / validates it. A rejected POST re-renders the
form with the submitted values and per-field messages; an accepted POST is
stored and answered with a redirect to the greeting page, so reloading the
result never re-submits the form.
"""

from __future__ import annotations

import re

from dishka import FromDishka
from formflow_core.status_enums import SubmissionOutcome
from formflow_service_libs.error_handling import raise_validation_error
from formflow_service_libs.error_handling.correlation import CorrelationContext
from formflow_service_libs.logging_utils import create_service_logger
from quart import Blueprint, Response, flash, redirect, render_template, request, url_for
from quart_dishka import inject

from services.greeting_service.api_models import Submission
from services.greeting_service.config import Settings
from services.greeting_service.protocols import (
    FormMetricsProtocol,
    NameFormValidatorProtocol,
    SubmissionRepositoryProtocol,
)

logger = create_service_logger("greeting.api.form")
form_bp = Blueprint("form_routes", __name__)

SUBMISSION_ID_PATTERN = re.compile(r"^[0-9a-f]{32}$")


@form_bp.route("/", methods=["GET"])
async def show_form() -> str:
    """Render an empty name form."""
    return await render_template("name_form.html", values={}, errors={})


@form_bp.route("/", methods=["POST"])
@inject
async def submit_form(
    corr: FromDishka[CorrelationContext],
    settings: FromDishka[Settings],
    validator: FromDishka[NameFormValidatorProtocol],
    repository: FromDishka[SubmissionRepositoryProtocol],
    metrics: FromDishka[FormMetricsProtocol],
) -> Response | tuple[str, int]:
    """Validate the submitted name form and redirect on success."""
    form_data = await request.form
    result = validator.validate(form_data)

    if result.errors:
        metrics.record_submission(SubmissionOutcome.INVALID)
        logger.info(
            "Name form rejected",
            invalid_fields=sorted(result.errors),
            correlation_id=corr.original,
        )
        html = await render_template("name_form.html", values=result.values, errors=result.errors)
        return html, 422

    assert result.form is not None
    submission = Submission.from_form(result.form, corr.uuid)
    try:
        await repository.save(submission)
    except Exception:
        metrics.record_submission(SubmissionOutcome.ERROR)
        raise

    metrics.record_submission(SubmissionOutcome.ACCEPTED)
    logger.info(
        "Name form accepted",
        submission_id=submission.submission_id,
        correlation_id=corr.original,
    )

    await flash(f"Thanks, {submission.first_name}! Your name has been saved.", "success")
    return redirect(
        url_for("form_routes.show_greeting", submission_id=submission.submission_id),
        code=settings.REDIRECT_STATUS_CODE,
    )


@form_bp.route("/greeting/<string:submission_id>", methods=["GET"])
@inject
async def show_greeting(
    submission_id: str,
    corr: FromDishka[CorrelationContext],
    repository: FromDishka[SubmissionRepositoryProtocol],
) -> str:
    """Render the greeting for an accepted submission."""
    if not SUBMISSION_ID_PATTERN.match(submission_id):
        raise_validation_error(
            service="greeting_service",
            operation="show_greeting",
            field="submission_id",
            message="Invalid submission ID format - must be 32 character lowercase hex string",
            correlation_id=corr.uuid,
            value=submission_id,
        )

    submission = await repository.get(submission_id, corr.uuid)
    return await render_template("greeting.html", submission=submission)


@form_bp.route("/lookup", methods=["GET"])
@inject
async def lookup(
    settings: FromDishka[Settings],
    repository: FromDishka[SubmissionRepositoryProtocol],
) -> str:
    """Search stored names. Query-string driven, so it never changes state."""
    first_name = request.args.get("first_name", "").strip()
    last_name = request.args.get("last_name", "").strip()

    results: list[Submission] | None = None
    if first_name or last_name:
        results = await repository.search(
            first_name=first_name,
            last_name=last_name,
            limit=settings.LOOKUP_RESULT_LIMIT,
        )

    return await render_template(
        "lookup.html",
        values={"first_name": first_name, "last_name": last_name},
        errors={},
        results=results,
    )
