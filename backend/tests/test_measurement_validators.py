"""Tests for the measurement form rules."""

from operator import attrgetter

import pytest

from app.services.measurement_form import parse_decimal
from app.validators import (
    MeasurementLimits,
    MeasurementRecord,
    build_measurement_validators,
    concat,
    lift_map,
    run,
)
from app.validators.measurement import (
    comment_errors,
    humidity_errors,
    pressure_errors,
    pressure_warnings,
    temperature_errors,
    temperature_warnings,
)
from app.validators.models import (
    CommentError,
    CommentIssue,
    HumidityError,
    HumidityIssue,
    PressureError,
    PressureIssue,
    PressureWarning,
    TemperatureError,
    TemperatureIssue,
    TemperatureWarning,
)


@pytest.fixture()
def validators():
    return build_measurement_validators()


def record(**overrides) -> MeasurementRecord:
    values = {"temperature": 20.0, "humidity": 50.0, "pressure": 1013.0, "comment": ""}
    values.update(overrides)
    return MeasurementRecord(**values)


class TestTemperature:
    """Temperature: required, not below absolute zero; unusual values warn."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("−300", [TemperatureError.BELOW_ABSOLUTE_ZERO]),
            ("-300", [TemperatureError.BELOW_ABSOLUTE_ZERO]),
            ("abc", [TemperatureError.NOT_NUMBER]),
            ("", [TemperatureError.NOT_NUMBER]),
            ("20", []),
            ("-273,15", []),
        ],
    )
    def test_errors(self, text, expected):
        assert run(temperature_errors(), parse_decimal(text)) == expected

    def test_warnings(self):
        validator = temperature_warnings(MeasurementLimits())

        assert run(validator, -61.0) == [TemperatureWarning.UNUSUALLY_LOW]
        assert run(validator, 60.5) == [TemperatureWarning.UNUSUALLY_HIGH]
        assert run(validator, -60.0) == []
        assert run(validator, None) == []

    def test_warning_range_follows_limits(self):
        validator = temperature_warnings(MeasurementLimits(temperature_warn_max=30.0))

        assert run(validator, 35.0) == [TemperatureWarning.UNUSUALLY_HIGH]


class TestHumidity:
    """Humidity: required, 0-100 %, never warns."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("150", [HumidityError.OUT_OF_BOUND]),
            ("-5", [HumidityError.OUT_OF_BOUND]),
            ("50", []),
            ("0", []),
            ("100", []),
            ("n/a", [HumidityError.NOT_NUMBER]),
        ],
    )
    def test_errors(self, text, expected):
        assert run(humidity_errors(), parse_decimal(text)) == expected

    def test_humidity_never_warns(self, validators):
        assert run(validators.warnings, record(humidity=99.9)) == []


class TestPressure:
    """Pressure: required, not negative; outside sea-level records warns."""

    def test_errors(self):
        validator = pressure_errors()

        assert run(validator, None) == [PressureError.NOT_NUMBER]
        assert run(validator, -1.0) == [PressureError.NEGATIVE]
        assert run(validator, 0.0) == []

    def test_warnings(self):
        validator = pressure_warnings(MeasurementLimits())

        assert run(validator, 500.0) == [PressureWarning.UNUSUALLY_LOW]
        assert run(validator, 1100.0) == [PressureWarning.UNUSUALLY_HIGH]
        assert run(validator, 1013.25) == []
        assert run(validator, None) == []


class TestComment:
    """Comment: optional free text with a length limit."""

    def test_comment_length(self):
        validator = comment_errors(MeasurementLimits(comment_max_length=5))

        assert run(validator, "") == []
        assert run(validator, "12345") == []
        assert run(validator, "123456") == [CommentError.TOO_LONG]


class TestFormValidators:
    """Whole-form aggregation."""

    def test_form_aggregation_order(self):
        form = concat([
            lift_map(TemperatureIssue, attrgetter("temperature"), temperature_errors()),
            lift_map(HumidityIssue, attrgetter("humidity"), humidity_errors()),
        ])
        measured = MeasurementRecord(
            temperature=parse_decimal("-300"),
            humidity=parse_decimal("150"),
        )

        assert run(form, measured) == [
            TemperatureIssue(TemperatureError.BELOW_ABSOLUTE_ZERO),
            HumidityIssue(HumidityError.OUT_OF_BOUND),
        ]

    def test_valid_record(self, validators):
        assert run(validators.errors, record()) == []
        assert run(validators.warnings, record()) == []

    def test_empty_record_reports_every_required_field(self, validators):
        assert run(validators.errors, MeasurementRecord()) == [
            TemperatureIssue(TemperatureError.NOT_NUMBER),
            HumidityIssue(HumidityError.NOT_NUMBER),
            PressureIssue(PressureError.NOT_NUMBER),
        ]

    def test_absent_field_gives_no_warnings(self, validators):
        assert run(validators.warnings, MeasurementRecord()) == []

    def test_errors_in_field_order(self, validators):
        measured = record(temperature=-300.0, humidity=-1.0, pressure=-5.0, comment="x" * 501)

        assert run(validators.errors, measured) == [
            TemperatureIssue(TemperatureError.BELOW_ABSOLUTE_ZERO),
            HumidityIssue(HumidityError.OUT_OF_BOUND),
            PressureIssue(PressureError.NEGATIVE),
            CommentIssue(CommentError.TOO_LONG),
        ]

    def test_warnings_in_field_order(self, validators):
        measured = record(temperature=75.0, pressure=800.0)

        assert run(validators.warnings, measured) == [
            TemperatureIssue(TemperatureWarning.UNUSUALLY_HIGH),
            PressureIssue(PressureWarning.UNUSUALLY_LOW),
        ]

    def test_issues_remember_their_field(self):
        assert TemperatureIssue(TemperatureError.NOT_NUMBER).field == "temperature"
        assert HumidityIssue(HumidityError.NOT_NUMBER).field == "humidity"
        assert TemperatureIssue(TemperatureError.NOT_NUMBER) != HumidityIssue(HumidityError.NOT_NUMBER)

    def test_same_validators_reused(self, validators):
        measured = record(temperature=-300.0)

        assert run(validators.errors, measured) == run(validators.errors, measured)
