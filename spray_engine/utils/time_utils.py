"""Time and rounding helpers for forecast intervals."""
from datetime import datetime, timedelta, timezone
import math

from spray_engine.config import INTERVAL_HOURS


def to_local_datetime(timestamp: int, utc_offset_seconds: int = 0) -> datetime:
    """Convert a UTC epoch timestamp to a naive local datetime."""
    utc_dt = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return (utc_dt + timedelta(seconds=utc_offset_seconds)).replace(tzinfo=None)


def format_time_range(local_time: datetime, hours: int = INTERVAL_HOURS) -> str:
    """Format an interval as "HH:MM-HH:MM" (end wraps past midnight)."""
    end = local_time + timedelta(hours=hours)
    return f"{local_time:%H:%M}-{end:%H:%M}"


def round_half_up(value: float):
    """
    Round to the nearest integer with .5 going up (12.5 -> 13).

    Non-finite values (NaN, inf) are returned unchanged so that they fall
    through the classification thresholds instead of raising.
    """
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))
