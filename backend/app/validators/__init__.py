"""Measurement validation: composable validators and the measurement form rules.

Usage:
    from app.validators import build_measurement_validators, run

    validators = build_measurement_validators()
    errors = run(validators.errors, record)
    warnings = run(validators.warnings, record)
"""

from app.validators.engine import (
    Bound,
    BoundKind,
    Validator,
    concat,
    is_valid,
    lift_map,
    max_bound,
    min_bound,
    optional,
    required,
    run,
    succeed,
)
from app.validators.measurement import (
    MeasurementLimits,
    MeasurementRecord,
    MeasurementValidators,
    build_measurement_validators,
)
from app.validators.models import Severity, ValidationIssue, ValidationReport

__all__ = [
    "Bound",
    "BoundKind",
    "Validator",
    "concat",
    "is_valid",
    "lift_map",
    "max_bound",
    "min_bound",
    "optional",
    "required",
    "run",
    "succeed",
    "MeasurementLimits",
    "MeasurementRecord",
    "MeasurementValidators",
    "build_measurement_validators",
    "Severity",
    "ValidationIssue",
    "ValidationReport",
]
