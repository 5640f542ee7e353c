"""Convert provider 5-day/3-hour forecast payloads into forecast intervals."""
from typing import Any, Dict, List, Optional

from spray_engine.config import MAX_UTC_OFFSET_SECONDS
from spray_engine.models.forecast import ForecastInterval
from spray_engine.utils.time_utils import to_local_datetime


class ForecastFormatError(ValueError):
    """Raised when a forecast payload is missing required fields."""


def _parse_item(item: Dict[str, Any], index: int) -> ForecastInterval:
    try:
        timestamp = int(item["dt"])
        temperature = float(item["main"]["temp"])
        wind = item["wind"]
        wind_speed = float(wind["speed"])
    except (KeyError, TypeError, ValueError) as e:
        raise ForecastFormatError(f"Forecast entry {index} is malformed: {e!r}") from e

    # Must stay representable as a local datetime under any offset
    try:
        to_local_datetime(timestamp, -MAX_UTC_OFFSET_SECONDS)
        to_local_datetime(timestamp, MAX_UTC_OFFSET_SECONDS)
    except (OverflowError, OSError, ValueError) as e:
        raise ForecastFormatError(
            f"Forecast entry {index} has an out-of-range timestamp {timestamp}"
        ) from e

    return ForecastInterval(
        timestamp=timestamp,
        wind_speed_ms=wind_speed,
        wind_direction_deg=float(wind.get("deg") or 0.0),
        precipitation_probability=float(item.get("pop") or 0.0),
        temperature_c=temperature,
    )


def parse_forecast_payload(payload: Dict[str, Any]) -> List[ForecastInterval]:
    """
    Parse a provider forecast payload.

    Expected shape:
        {"list": [{"dt", "main": {"temp"}, "wind": {"speed", "deg"}, "pop"}, ...]}

    Missing "pop" and "deg" default to 0.

    Raises:
        ForecastFormatError: If "list" or a required entry field is missing,
            or a timestamp cannot be converted to a date
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("list"), list):
        raise ForecastFormatError("Forecast payload has no 'list' of intervals")
    return [_parse_item(item, i) for i, item in enumerate(payload["list"])]


def payload_utc_offset(payload: Dict[str, Any]) -> Optional[int]:
    """
    Return the city UTC offset in seconds, or None when absent.

    Raises:
        ForecastFormatError: If the offset is not an integer within ±14 hours
    """
    city = payload.get("city") if isinstance(payload, dict) else None
    if not isinstance(city, dict) or city.get("timezone") is None:
        return None
    try:
        offset = int(city["timezone"])
    except (TypeError, ValueError) as e:
        raise ForecastFormatError(f"City timezone is malformed: {e!r}") from e
    if abs(offset) > MAX_UTC_OFFSET_SECONDS:
        raise ForecastFormatError(f"City timezone offset {offset}s is out of range")
    return offset
