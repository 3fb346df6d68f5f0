"""Measurements API: form description, validation preview, and submission."""

import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

import structlog

from app.models.requests import MeasurementRequest
from app.models.responses import (
    FieldDescriptor,
    FieldLimits,
    FormDescriptionResponse,
    MeasurementAcceptedResponse,
)
from app.services.measurement_form import (
    SubmitOutcome,
    evaluate_submission,
    get_measurement_validators,
    parse_measurement,
    validate_measurement,
)
from app.validators import MeasurementRecord, MeasurementValidators, ValidationReport
from app.validators.reference_data import (
    ABSOLUTE_ZERO_CELSIUS,
    FIELD_METADATA,
    HUMIDITY_MAX_PERCENT,
    HUMIDITY_MIN_PERCENT,
    PRESSURE_MIN_HPA,
)

logger = structlog.get_logger()

router = APIRouter()


def _generate_measurement_id() -> str:
    """Generate a short, readable measurement ID."""
    return f"meas_{uuid.uuid4().hex[:8]}"


def _record_from_request(body: MeasurementRequest) -> MeasurementRecord:
    return parse_measurement(
        temperature=body.temperature,
        humidity=body.humidity,
        pressure=body.pressure,
        comment=body.comment,
    )


# ─── Endpoints ───


@router.get("/measurements/form", response_model=FormDescriptionResponse)
async def describe_form(
    validators: MeasurementValidators = Depends(get_measurement_validators),
):
    """Field layout and thresholds, so clients can render and pre-check the form."""
    limits = validators.limits
    numeric_limits = {
        "temperature": (
            FieldLimits(min=ABSOLUTE_ZERO_CELSIUS),
            FieldLimits(min=limits.temperature_warn_min, max=limits.temperature_warn_max),
        ),
        "humidity": (
            FieldLimits(min=HUMIDITY_MIN_PERCENT, max=HUMIDITY_MAX_PERCENT),
            None,
        ),
        "pressure": (
            FieldLimits(min=PRESSURE_MIN_HPA),
            FieldLimits(min=limits.pressure_warn_min, max=limits.pressure_warn_max),
        ),
    }

    fields = []
    for name, meta in FIELD_METADATA.items():
        if name in numeric_limits:
            hard, advisory = numeric_limits[name]
            fields.append(FieldDescriptor(name=name, limits=hard, warning_range=advisory, **meta))
        else:
            fields.append(FieldDescriptor(
                name=name,
                kind="text",
                max_length=limits.comment_max_length,
                **meta,
            ))

    return FormDescriptionResponse(fields=fields)


@router.post("/measurements/validate", response_model=ValidationReport)
async def validate(
    body: MeasurementRequest,
    validators: MeasurementValidators = Depends(get_measurement_validators),
):
    """Validate a measurement without submitting it.

    Always answers 200; the report tells whether the form would be accepted.
    """
    return validate_measurement(_record_from_request(body), validators)


@router.post("/measurements", status_code=201, response_model=MeasurementAcceptedResponse)
async def submit_measurement(
    body: MeasurementRequest,
    validators: MeasurementValidators = Depends(get_measurement_validators),
):
    """Submit a measurement.

    Errors reject the submission with 422. Warnings reject it with 409
    unless ignore_warnings is set. Accepted measurements are acknowledged,
    not stored.
    """
    decision = evaluate_submission(
        _record_from_request(body),
        ignore_warnings=body.ignore_warnings,
        validators=validators,
    )

    if decision.outcome is SubmitOutcome.BLOCKED_BY_ERRORS:
        logger.info("measurement_rejected", reason=decision.outcome.value, errors=len(decision.errors))
        raise HTTPException(
            status_code=422,
            detail={
                "error": "validation_failed",
                "message": decision.report.verdict,
                "errors": [e.model_dump() for e in decision.errors],
                "warnings": [w.model_dump() for w in decision.warnings],
            },
        )

    if decision.outcome is SubmitOutcome.WARNINGS_NOT_ACKNOWLEDGED:
        logger.info("measurement_rejected", reason=decision.outcome.value, warnings=len(decision.warnings))
        raise HTTPException(
            status_code=409,
            detail={
                "error": "warnings_not_acknowledged",
                "message": "Set ignore_warnings to submit despite the warnings.",
                "warnings": [w.model_dump() for w in decision.warnings],
            },
        )

    record = decision.record
    measurement_id = _generate_measurement_id()
    logger.info(
        "measurement_accepted",
        measurement_id=measurement_id,
        warnings_acknowledged=len(decision.warnings),
    )

    return MeasurementAcceptedResponse(
        measurement_id=measurement_id,
        temperature=record.temperature,
        humidity=record.humidity,
        pressure=record.pressure,
        comment=record.comment,
        warnings_acknowledged=decision.warnings,
        recorded_at=datetime.now(timezone.utc),
    )
