"""User-facing messages for every violation code."""

from typing import Union

from app.validators.measurement import MeasurementLimits
from app.validators.models import (
    CommentError,
    CommentIssue,
    HumidityError,
    HumidityIssue,
    PressureError,
    PressureIssue,
    PressureWarning,
    Severity,
    TemperatureError,
    TemperatureIssue,
    TemperatureWarning,
    ValidationIssue,
)
from app.validators.reference_data import (
    ABSOLUTE_ZERO_CELSIUS,
    HUMIDITY_MAX_PERCENT,
    HUMIDITY_MIN_PERCENT,
)

Issue = Union[TemperatureIssue, HumidityIssue, PressureIssue, CommentIssue]

# Keyed by code class: codes of different fields share string values.
# Templates are formatted with the fields of MeasurementLimits.
MESSAGES: dict[type, dict] = {
    TemperatureError: {
        TemperatureError.NOT_NUMBER: "Temperature must be a number",
        TemperatureError.BELOW_ABSOLUTE_ZERO: (
            f"Temperature cannot be below absolute zero ({ABSOLUTE_ZERO_CELSIUS} °C)"
        ),
    },
    TemperatureWarning: {
        TemperatureWarning.UNUSUALLY_LOW: (
            "Temperature is unusually low (below {temperature_warn_min:g} °C), please double-check"
        ),
        TemperatureWarning.UNUSUALLY_HIGH: (
            "Temperature is unusually high (above {temperature_warn_max:g} °C), please double-check"
        ),
    },
    HumidityError: {
        HumidityError.NOT_NUMBER: "Humidity must be a number",
        HumidityError.OUT_OF_BOUND: (
            f"Humidity must be between {HUMIDITY_MIN_PERCENT:g} and {HUMIDITY_MAX_PERCENT:g} %"
        ),
    },
    PressureError: {
        PressureError.NOT_NUMBER: "Pressure must be a number",
        PressureError.NEGATIVE: "Pressure cannot be negative",
    },
    PressureWarning: {
        PressureWarning.UNUSUALLY_LOW: (
            "Pressure is unusually low (below {pressure_warn_min:g} hPa), please double-check"
        ),
        PressureWarning.UNUSUALLY_HIGH: (
            "Pressure is unusually high (above {pressure_warn_max:g} hPa), please double-check"
        ),
    },
    CommentError: {
        CommentError.TOO_LONG: "Comment must be at most {comment_max_length} characters",
    },
}


def describe(issue: Issue, limits: MeasurementLimits) -> str:
    """Render the message for a form-level violation."""
    template = MESSAGES[type(issue.code)][issue.code]
    return template.format(**vars(limits))


def to_issue(issue: Issue, severity: Severity, limits: MeasurementLimits) -> ValidationIssue:
    """Convert a form-level violation into its serialisable form."""
    return ValidationIssue(
        field=issue.field,
        code=issue.code.value,
        severity=severity,
        message=describe(issue, limits),
    )
