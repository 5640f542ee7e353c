"""Pydantic schemas for spray analysis requests and responses."""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class ForecastMain(BaseModel):
    """Main readings of a forecast entry."""

    model_config = ConfigDict(extra="allow")

    temp: float  # °C


class ForecastWind(BaseModel):
    """Wind readings of a forecast entry."""

    model_config = ConfigDict(extra="allow")

    speed: float  # m/s
    deg: Optional[float] = None


class ForecastItem(BaseModel):
    """A single 3-hour forecast entry."""

    model_config = ConfigDict(extra="allow")

    dt: int  # epoch seconds, UTC
    main: ForecastMain
    wind: ForecastWind
    pop: Optional[float] = Field(None, ge=0, le=1)


class ForecastCity(BaseModel):
    """Forecast location metadata."""

    model_config = ConfigDict(extra="allow")

    timezone: Optional[int] = Field(None, ge=-14 * 3600, le=14 * 3600)  # seconds from UTC


class ForecastPayload(BaseModel):
    """5-day/3-hour forecast payload as returned by the weather provider."""

    model_config = ConfigDict(extra="allow")

    list: List[ForecastItem]
    city: Optional[ForecastCity] = None


class SprayTypeSchema(BaseModel):
    """Wind limits of one spray type."""

    name: str
    perfect_max: float = Field(alias="perfectMax")
    risky_max: float = Field(alias="riskyMax")


class TimeBlockSchema(BaseModel):
    """One classified interval in the timeline."""

    time: str
    status: str
    wind: float
    wind_dir: float = Field(alias="windDir")
    rain: int
    temp: float
    reason: str
    dt: int


class DayTimelineSchema(BaseModel):
    """A day of classified intervals."""

    day: str
    date: str
    blocks: List[TimeBlockSchema]


class SprayWindowSchema(BaseModel):
    """A ranked spray window."""

    day: str
    date: str
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    duration_hours: int = Field(alias="durationHours")
    quality: str
    avg_wind: float = Field(alias="avgWind")
    avg_temp: float = Field(alias="avgTemp")
    rain_chance: int = Field(alias="rainChance")


class SprayAnalysisResponse(BaseModel):
    """Response schema for a spray analysis."""

    recommended_windows: List[SprayWindowSchema] = Field(alias="recommendedWindows")
    timeline: List[DayTimelineSchema]
    last_updated: str = Field(alias="lastUpdated")
