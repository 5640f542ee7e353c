"""Forecast intervals, their spray classification and per-day timelines."""
from datetime import datetime
from enum import Enum
from typing import List

from attrs import define, field, frozen


@frozen
class ForecastInterval:
    """A single 3-hour forecast data point as supplied by the provider."""

    timestamp: int  # epoch seconds, UTC
    wind_speed_ms: float
    wind_direction_deg: float
    precipitation_probability: float  # fraction 0..1
    temperature_c: float


class SprayStatus(str, Enum):
    """Spray-safety status of one interval."""

    PERFECT = "PERFECT"
    RISKY = "RISKY"
    DONT_SPRAY = "DONT_SPRAY"
    NIGHT = "NIGHT"

    @property
    def is_sprayable(self) -> bool:
        return self in (SprayStatus.PERFECT, SprayStatus.RISKY)


@frozen
class ClassifiedInterval:
    """A forecast interval with its status and display-ready units."""

    source: ForecastInterval
    status: SprayStatus
    reason: str
    wind_mph: float
    rain_pct: int  # rounded percentage 0..100
    temp_c: float
    local_time: datetime  # naive, local to the forecast location
    time_range: str  # "HH:MM-HH:MM"

    @property
    def timestamp(self) -> int:
        return self.source.timestamp

    @property
    def wind_direction_deg(self) -> float:
        return self.source.wind_direction_deg

    @property
    def start_time(self) -> str:
        return self.time_range.split("-")[0]

    @property
    def end_time(self) -> str:
        return self.time_range.split("-")[1]

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "time": self.time_range,
            "status": self.status.value,
            "wind": self.wind_mph,
            "windDir": self.wind_direction_deg,
            "rain": self.rain_pct,
            "temp": self.temp_c,
            "reason": self.reason,
            "dt": self.timestamp,
        }


@define
class DayTimeline:
    """Classified intervals of one local calendar day, in time order."""

    day: str  # long weekday name, e.g. "Monday"
    date: str  # ISO date "YYYY-MM-DD"
    blocks: List[ClassifiedInterval] = field(factory=list)

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "day": self.day,
            "date": self.date,
            "blocks": [block.to_dict() for block in self.blocks],
        }
