"""Reference data: physical limits and default advisory ranges for measurements.

Hard limits are physics and never change. Advisory ranges are defaults only;
the active values come from settings.
"""

# ──────────────────────────────────────────────────────────────────────
# HARD LIMITS (a value outside these is an error)
# ──────────────────────────────────────────────────────────────────────

ABSOLUTE_ZERO_CELSIUS = -273.15

HUMIDITY_MIN_PERCENT = 0.0
HUMIDITY_MAX_PERCENT = 100.0

PRESSURE_MIN_HPA = 0.0

# ──────────────────────────────────────────────────────────────────────
# ADVISORY RANGES (a value outside these is only a warning)
# ──────────────────────────────────────────────────────────────────────

# Roughly the recorded surface extremes, rounded outwards
DEFAULT_TEMPERATURE_WARN_MIN = -60.0
DEFAULT_TEMPERATURE_WARN_MAX = 60.0

# Sea-level pressure records: 870 hPa (typhoon Tip), 1084.8 hPa (Tosontsengel)
DEFAULT_PRESSURE_WARN_MIN = 870.0
DEFAULT_PRESSURE_WARN_MAX = 1085.0

DEFAULT_COMMENT_MAX_LENGTH = 500

# ──────────────────────────────────────────────────────────────────────
# FIELD METADATA (labels and units shown by form clients)
# ──────────────────────────────────────────────────────────────────────

FIELD_METADATA: dict[str, dict] = {
    "temperature": {"label": "Temperature", "unit": "°C", "required": True},
    "humidity": {"label": "Relative humidity", "unit": "%", "required": True},
    "pressure": {"label": "Air pressure", "unit": "hPa", "required": True},
    "comment": {"label": "Comment", "unit": None, "required": False},
}
