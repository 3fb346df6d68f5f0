"""API response models."""

from pydantic import BaseModel
from typing import Optional, Literal
from datetime import datetime

from app.validators.models import ValidationIssue


class FieldLimits(BaseModel):
    """Numeric limits of a single field."""

    min: Optional[float] = None
    max: Optional[float] = None


class FieldDescriptor(BaseModel):
    """Everything a client needs to render one form field."""

    name: str
    label: str
    unit: Optional[str] = None
    required: bool
    kind: Literal["number", "text"] = "number"
    limits: FieldLimits = FieldLimits()
    warning_range: Optional[FieldLimits] = None
    max_length: Optional[int] = None


class FormDescriptionResponse(BaseModel):
    """The measurement form layout and thresholds."""

    fields: list[FieldDescriptor]


class MeasurementAcceptedResponse(BaseModel):
    """Response after a measurement passed validation."""

    measurement_id: str
    temperature: float
    humidity: float
    pressure: float
    comment: str = ""
    warnings_acknowledged: list[ValidationIssue] = []
    recorded_at: datetime


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
