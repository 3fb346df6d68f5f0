"""Validation models: violation codes, form-level variants, and report structure.

Violations are plain values. Each field has its own code enum; the form
wraps them in one variant per field so a form-level list still knows which
field every violation came from. Severity is decided by the caller: codes
produced by the error validators are errors, the rest are warnings.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Violation severity levels."""

    ERROR = "error"      # Blocks submission
    WARNING = "warning"  # Advisory, can be acknowledged


class MeasurementField(str, Enum):
    """Fields of the measurement form, in display order."""

    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    PRESSURE = "pressure"
    COMMENT = "comment"


# ── Field-level codes ──


class TemperatureError(str, Enum):
    NOT_NUMBER = "not_number"
    BELOW_ABSOLUTE_ZERO = "below_absolute_zero"


class TemperatureWarning(str, Enum):
    UNUSUALLY_LOW = "unusually_low"
    UNUSUALLY_HIGH = "unusually_high"


class HumidityError(str, Enum):
    NOT_NUMBER = "not_number"
    OUT_OF_BOUND = "out_of_bound"


class PressureError(str, Enum):
    NOT_NUMBER = "not_number"
    NEGATIVE = "negative"


class PressureWarning(str, Enum):
    UNUSUALLY_LOW = "unusually_low"
    UNUSUALLY_HIGH = "unusually_high"


class CommentError(str, Enum):
    TOO_LONG = "too_long"


# ── Form-level variants ──
#
# The class itself is the injection function handed to lift_map:
# TemperatureIssue(TemperatureError.NOT_NUMBER) tags the code with its field.


@dataclass(frozen=True)
class TemperatureIssue:
    code: Union[TemperatureError, TemperatureWarning]
    field: ClassVar[MeasurementField] = MeasurementField.TEMPERATURE


@dataclass(frozen=True)
class HumidityIssue:
    code: HumidityError
    field: ClassVar[MeasurementField] = MeasurementField.HUMIDITY


@dataclass(frozen=True)
class PressureIssue:
    code: Union[PressureError, PressureWarning]
    field: ClassVar[MeasurementField] = MeasurementField.PRESSURE


@dataclass(frozen=True)
class CommentIssue:
    code: CommentError
    field: ClassVar[MeasurementField] = MeasurementField.COMMENT


FormError = Union[TemperatureIssue, HumidityIssue, PressureIssue, CommentIssue]
FormWarning = Union[TemperatureIssue, PressureIssue]


# ── Serialisable report ──


class ValidationIssue(BaseModel):
    """A single violation, ready for API responses."""

    field: MeasurementField
    code: str
    severity: Severity
    message: str

    class Config:
        use_enum_values = True


class ValidationReport(BaseModel):
    """Complete validation report for one measurement."""

    valid: bool = Field(description="True if no errors (warnings may still be present)")
    has_warnings: bool = False
    summary: dict = Field(
        description="Count of violations by severity",
        default_factory=lambda: {"errors": 0, "warnings": 0},
    )
    errors: list[ValidationIssue] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    verdict: str = Field(default="", description="Human-readable verdict")

    @classmethod
    def build(
        cls,
        errors: list[ValidationIssue],
        warnings: list[ValidationIssue],
    ) -> "ValidationReport":
        """Build a report from already-described errors and warnings."""
        summary = {"errors": len(errors), "warnings": len(warnings)}

        if errors:
            verdict = f"INVALID: {len(errors)} error(s) must be fixed before submitting."
        elif warnings:
            verdict = (
                f"VALID WITH WARNINGS: {len(warnings)} unusual value(s); "
                "acknowledge the warnings to submit."
            )
        else:
            verdict = "VALID: ready to submit."

        return cls(
            valid=not errors,
            has_warnings=bool(warnings),
            summary=summary,
            errors=errors,
            warnings=warnings,
            verdict=verdict,
        )
