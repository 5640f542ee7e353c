"""Spray windows and the analysis result."""
from datetime import datetime, timezone
from typing import List

from attrs import define, field, frozen

from spray_engine.models.forecast import DayTimeline, SprayStatus


@frozen
class SprayWindow:
    """A merged run of equal-quality sprayable intervals within one day."""

    day: str
    date: str
    start_time: str  # "HH:MM"
    end_time: str  # "HH:MM", end of the last member interval
    duration_hours: int
    quality: SprayStatus  # PERFECT or RISKY
    avg_wind: float  # mph
    avg_temp: float  # °C
    rain_chance: int  # peak rain % over members

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "day": self.day,
            "date": self.date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "durationHours": self.duration_hours,
            "quality": self.quality.value,
            "avgWind": self.avg_wind,
            "avgTemp": self.avg_temp,
            "rainChance": self.rain_chance,
        }


@define
class SprayAnalysis:
    """Result of one analysis run: ranked windows plus the full timeline."""

    recommended_windows: List[SprayWindow] = field(factory=list)
    timeline: List[DayTimeline] = field(factory=list)
    last_updated: datetime = field(factory=lambda: datetime.now(timezone.utc))

    def top_windows(self, count: int = 3) -> List[SprayWindow]:
        """Return the best ``count`` windows (rank 0 is best)."""
        return self.recommended_windows[:count]

    def to_dict(self) -> dict:
        """Convert to serializable dictionary."""
        return {
            "recommendedWindows": [w.to_dict() for w in self.recommended_windows],
            "timeline": [day.to_dict() for day in self.timeline],
            "lastUpdated": self.last_updated.isoformat(),
        }
