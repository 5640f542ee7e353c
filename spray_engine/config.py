"""Configuration constants for the spray window engine."""

# Unit conversion
MS_TO_MPH = 2.237

# Forecast resolution (hours per interval)
INTERVAL_HOURS = 3

# Spraying hours in local time: [start, end)
SPRAY_HOUR_START = 6
SPRAY_HOUR_END = 20

# Ideal conditions
PERFECT_WIND_MIN_MPH = 2.0
PERFECT_RAIN_MAX_PCT = 5  # exclusive
PERFECT_TEMP_MIN_C = 5.0
PERFECT_TEMP_MAX_C = 25.0

# Marginal conditions
RISKY_RAIN_MIN_PCT = 5
RISKY_RAIN_MAX_PCT = 20
RISKY_TEMP_LOW_MIN_C = 3.0   # [3, 5)
RISKY_TEMP_HIGH_MAX_C = 28.0  # (25, 28]

# Wind limits per chemical class: name -> (perfect_max_mph, risky_max_mph)
SPRAY_TYPE_WIND_LIMITS = {
    "herbicide": (10.0, 15.0),
    "fungicide": (12.0, 15.0),
    "insecticide": (15.0, 18.0),
}
DEFAULT_SPRAY_TYPE = "herbicide"

# Largest real-world offset from UTC (seconds)
MAX_UTC_OFFSET_SECONDS = 14 * 3600
