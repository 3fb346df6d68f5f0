"""API request models."""

from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr
from typing import Optional, Union

# Raw form values: text as typed by the user, or a number from API clients.
# Strict so JSON booleans are rejected instead of read as 1 or 0.
RawNumber = Optional[Union[StrictStr, StrictInt, StrictFloat]]


class MeasurementRequest(BaseModel):
    """A measurement as entered in the form, before parsing."""

    temperature: RawNumber = Field(
        default=None,
        description="Temperature in °C; ',' is accepted as decimal separator",
        examples=["21,5"],
    )
    humidity: RawNumber = Field(
        default=None,
        description="Relative humidity in %",
        examples=["45"],
    )
    pressure: RawNumber = Field(
        default=None,
        description="Air pressure in hPa",
        examples=["1013.25"],
    )
    comment: Optional[str] = Field(default=None, max_length=10000)
    ignore_warnings: bool = Field(
        default=False,
        description="Explicit acknowledgement that warnings may be ignored",
    )
