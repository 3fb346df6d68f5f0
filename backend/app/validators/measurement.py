"""Measurement validators: the concrete field rules of the measurement form.

Field validators are built from engine primitives, lifted onto the parsed
record and concatenated into two form validators: one for errors (built
with required(), block submission) and one for warnings (built with
optional(), advisory only).
"""

from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Optional

from app.validators.engine import (
    Validator,
    concat,
    lift_map,
    max_bound,
    min_bound,
    optional,
    required,
    succeed,
)
from app.validators.models import (
    CommentError,
    CommentIssue,
    FormError,
    FormWarning,
    HumidityError,
    HumidityIssue,
    PressureError,
    PressureIssue,
    PressureWarning,
    TemperatureError,
    TemperatureIssue,
    TemperatureWarning,
)
from app.validators.reference_data import (
    ABSOLUTE_ZERO_CELSIUS,
    DEFAULT_COMMENT_MAX_LENGTH,
    DEFAULT_PRESSURE_WARN_MAX,
    DEFAULT_PRESSURE_WARN_MIN,
    DEFAULT_TEMPERATURE_WARN_MAX,
    DEFAULT_TEMPERATURE_WARN_MIN,
    HUMIDITY_MAX_PERCENT,
    HUMIDITY_MIN_PERCENT,
    PRESSURE_MIN_HPA,
)


@dataclass(frozen=True)
class MeasurementRecord:
    """A measurement after parsing. None means absent or unparseable."""

    temperature: Optional[float] = None
    humidity: Optional[float] = None
    pressure: Optional[float] = None
    comment: str = ""


@dataclass(frozen=True)
class MeasurementLimits:
    """Thresholds that are configurable per deployment."""

    temperature_warn_min: float = DEFAULT_TEMPERATURE_WARN_MIN
    temperature_warn_max: float = DEFAULT_TEMPERATURE_WARN_MAX
    pressure_warn_min: float = DEFAULT_PRESSURE_WARN_MIN
    pressure_warn_max: float = DEFAULT_PRESSURE_WARN_MAX
    comment_max_length: int = DEFAULT_COMMENT_MAX_LENGTH

    @classmethod
    def from_settings(cls, settings: Any) -> "MeasurementLimits":
        return cls(
            temperature_warn_min=settings.TEMPERATURE_WARN_MIN,
            temperature_warn_max=settings.TEMPERATURE_WARN_MAX,
            pressure_warn_min=settings.PRESSURE_WARN_MIN,
            pressure_warn_max=settings.PRESSURE_WARN_MAX,
            comment_max_length=settings.COMMENT_MAX_LENGTH,
        )


@dataclass(frozen=True)
class MeasurementValidators:
    """The two form validators plus the limits they were built from."""

    limits: MeasurementLimits
    errors: Validator[MeasurementRecord, FormError]
    warnings: Validator[MeasurementRecord, FormWarning]


# ── Field validators ──


def temperature_errors() -> Validator[Optional[float], TemperatureError]:
    return required(
        TemperatureError.NOT_NUMBER,
        min_bound(TemperatureError.BELOW_ABSOLUTE_ZERO, ABSOLUTE_ZERO_CELSIUS),
    )


def temperature_warnings(limits: MeasurementLimits) -> Validator[Optional[float], TemperatureWarning]:
    return optional(concat([
        min_bound(TemperatureWarning.UNUSUALLY_LOW, limits.temperature_warn_min),
        max_bound(TemperatureWarning.UNUSUALLY_HIGH, limits.temperature_warn_max),
    ]))


def humidity_errors() -> Validator[Optional[float], HumidityError]:
    return required(
        HumidityError.NOT_NUMBER,
        concat([
            min_bound(HumidityError.OUT_OF_BOUND, HUMIDITY_MIN_PERCENT),
            max_bound(HumidityError.OUT_OF_BOUND, HUMIDITY_MAX_PERCENT),
        ]),
    )


def pressure_errors() -> Validator[Optional[float], PressureError]:
    return required(
        PressureError.NOT_NUMBER,
        min_bound(PressureError.NEGATIVE, PRESSURE_MIN_HPA),
    )


def pressure_warnings(limits: MeasurementLimits) -> Validator[Optional[float], PressureWarning]:
    return optional(concat([
        min_bound(PressureWarning.UNUSUALLY_LOW, limits.pressure_warn_min),
        max_bound(PressureWarning.UNUSUALLY_HIGH, limits.pressure_warn_max),
    ]))


def comment_errors(limits: MeasurementLimits) -> Validator[str, CommentError]:
    # Length is a number like any other; reuse the bound primitive on it
    too_long = max_bound(CommentError.TOO_LONG, limits.comment_max_length)
    return lift_map(lambda code: code, len, too_long)


# ── Form validators ──


def build_measurement_validators(limits: Optional[MeasurementLimits] = None) -> MeasurementValidators:
    """Assemble the form-level error and warning validators.

    Field order is temperature, humidity, pressure, comment; violations come
    out in that order.
    """
    limits = limits or MeasurementLimits()

    errors = concat([
        lift_map(TemperatureIssue, attrgetter("temperature"), temperature_errors()),
        lift_map(HumidityIssue, attrgetter("humidity"), humidity_errors()),
        lift_map(PressureIssue, attrgetter("pressure"), pressure_errors()),
        lift_map(CommentIssue, attrgetter("comment"), comment_errors(limits)),
    ])

    warnings = concat([
        lift_map(TemperatureIssue, attrgetter("temperature"), temperature_warnings(limits)),
        lift_map(HumidityIssue, attrgetter("humidity"), succeed),
        lift_map(PressureIssue, attrgetter("pressure"), pressure_warnings(limits)),
    ])

    return MeasurementValidators(limits=limits, errors=errors, warnings=warnings)
