"""Measurement form: parsing raw input, validating it, and the submit policy.

The validators only see parsed values. This module owns everything around
them: turning user text into numbers, deciding whether a submission goes
through, and the per-user "recent attempt" highlighting state.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Optional, Union

import structlog

from app.config import get_settings
from app.validators import (
    MeasurementLimits,
    MeasurementRecord,
    MeasurementValidators,
    Severity,
    ValidationIssue,
    ValidationReport,
    build_measurement_validators,
    run,
)
from app.validators.messages import to_issue
from app.validators.models import MeasurementField

logger = structlog.get_logger()

RawValue = Union[str, float, int, None]

_UNICODE_MINUS = "−"


@lru_cache
def get_measurement_validators() -> MeasurementValidators:
    """Form validators built once from settings and shared by every request."""
    settings = get_settings()
    validators = build_measurement_validators(MeasurementLimits.from_settings(settings))
    logger.info("measurement_validators_built", limits=vars(validators.limits))
    return validators


def parse_decimal(raw: RawValue) -> Optional[float]:
    """Parse user input into a float, or None if it is not a usable number.

    Accepts "," as decimal separator and the Unicode minus sign, so
    "−12,5" parses to -12.5. Blank, NaN and infinite input give None.
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            return None
    else:
        text = raw.strip().replace(_UNICODE_MINUS, "-").replace(",", ".")
        # float() also takes digit-group underscores, which a form user never means
        if not text or "_" in text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None

    if math.isnan(value) or math.isinf(value):
        return None
    return value


def parse_measurement(
    temperature: RawValue = None,
    humidity: RawValue = None,
    pressure: RawValue = None,
    comment: RawValue = None,
) -> MeasurementRecord:
    """Build a record from raw form values."""
    comment_text = "" if comment is None else str(comment)
    return MeasurementRecord(
        temperature=parse_decimal(temperature),
        humidity=parse_decimal(humidity),
        pressure=parse_decimal(pressure),
        comment=comment_text.strip(),
    )


# ── Submit policy ──


class SubmitOutcome(str, Enum):
    """What happens when the user presses submit."""

    ACCEPTED = "accepted"
    BLOCKED_BY_ERRORS = "blocked_by_errors"
    WARNINGS_NOT_ACKNOWLEDGED = "warnings_not_acknowledged"


@dataclass(frozen=True)
class SubmitDecision:
    """Outcome of one submit attempt plus the violations behind it."""

    outcome: SubmitOutcome
    record: MeasurementRecord
    errors: list[ValidationIssue]
    warnings: list[ValidationIssue]

    @property
    def accepted(self) -> bool:
        return self.outcome is SubmitOutcome.ACCEPTED

    @property
    def report(self) -> ValidationReport:
        return ValidationReport.build(self.errors, self.warnings)


def describe_violations(
    record: MeasurementRecord,
    validators: Optional[MeasurementValidators] = None,
) -> tuple[list[ValidationIssue], list[ValidationIssue]]:
    """Run both form validators and turn their violations into issues."""
    validators = validators or get_measurement_validators()
    limits = validators.limits

    errors = [to_issue(v, Severity.ERROR, limits) for v in run(validators.errors, record)]
    warnings = [to_issue(v, Severity.WARNING, limits) for v in run(validators.warnings, record)]
    return errors, warnings


def validate_measurement(
    record: MeasurementRecord,
    validators: Optional[MeasurementValidators] = None,
) -> ValidationReport:
    """Full report for a record, without any submit decision."""
    errors, warnings = describe_violations(record, validators)
    report = ValidationReport.build(errors, warnings)

    logger.info(
        "measurement_validated",
        valid=report.valid,
        summary=report.summary,
    )
    return report


def evaluate_submission(
    record: MeasurementRecord,
    ignore_warnings: bool = False,
    validators: Optional[MeasurementValidators] = None,
) -> SubmitDecision:
    """Decide whether a submission goes through.

    Errors always block. Warnings block unless the user explicitly
    acknowledged them with ignore_warnings.
    """
    errors, warnings = describe_violations(record, validators)

    if errors:
        outcome = SubmitOutcome.BLOCKED_BY_ERRORS
    elif warnings and not ignore_warnings:
        outcome = SubmitOutcome.WARNINGS_NOT_ACKNOWLEDGED
    else:
        outcome = SubmitOutcome.ACCEPTED

    logger.info(
        "measurement_submission_evaluated",
        outcome=outcome.value,
        errors=len(errors),
        warnings=len(warnings),
        ignore_warnings=ignore_warnings,
    )
    return SubmitDecision(outcome=outcome, record=record, errors=errors, warnings=warnings)


# ── Per-user form state ──


@dataclass
class MeasurementForm:
    """State of one user's form between edits and submit attempts.

    Issues are only highlighted after a submit attempt; any edit clears the
    highlighting until the next attempt.
    """

    raw: dict[str, RawValue] = field(default_factory=dict)
    ignore_warnings: bool = False
    recent_attempt: bool = False
    validators: Optional[MeasurementValidators] = None

    def edit(self, name: Union[MeasurementField, str], value: RawValue) -> None:
        key = MeasurementField(name).value
        self.raw[key] = value
        self.recent_attempt = False

    def acknowledge_warnings(self, ignore: bool = True) -> None:
        self.ignore_warnings = ignore

    @property
    def record(self) -> MeasurementRecord:
        return parse_measurement(
            temperature=self.raw.get(MeasurementField.TEMPERATURE.value),
            humidity=self.raw.get(MeasurementField.HUMIDITY.value),
            pressure=self.raw.get(MeasurementField.PRESSURE.value),
            comment=self.raw.get(MeasurementField.COMMENT.value),
        )

    def submit(self) -> SubmitDecision:
        self.recent_attempt = True
        return evaluate_submission(self.record, self.ignore_warnings, self.validators)

    def highlighted(self) -> list[ValidationIssue]:
        """Issues to show next to the fields right now."""
        if not self.recent_attempt:
            return []
        errors, warnings = describe_violations(self.record, self.validators)
        if errors:
            return errors
        return [] if self.ignore_warnings else warnings
