"""Classify forecast intervals for agrochemical spraying."""
import logging
from typing import Dict, Iterable, List, Tuple

from spray_engine.config import (
    MS_TO_MPH,
    SPRAY_HOUR_START,
    SPRAY_HOUR_END,
    PERFECT_WIND_MIN_MPH,
    PERFECT_RAIN_MAX_PCT,
    PERFECT_TEMP_MIN_C,
    PERFECT_TEMP_MAX_C,
    RISKY_RAIN_MIN_PCT,
    RISKY_RAIN_MAX_PCT,
    RISKY_TEMP_LOW_MIN_C,
    RISKY_TEMP_HIGH_MAX_C,
)
from spray_engine.models.forecast import (
    ClassifiedInterval,
    DayTimeline,
    ForecastInterval,
    SprayStatus,
)
from spray_engine.models.profile import SprayTypeProfile
from spray_engine.utils.time_utils import (
    format_time_range,
    round_half_up,
    to_local_datetime,
)

logger = logging.getLogger(__name__)


class IntervalClassifier:
    """Assigns a spray status to each forecast interval for one spray profile."""

    def __init__(self, profile: SprayTypeProfile, utc_offset_seconds: int = 0):
        """
        Initialize classifier.

        Args:
            profile: Wind thresholds of the chemical being sprayed
            utc_offset_seconds: Offset of the forecast location from UTC,
                used to derive local hour and calendar date
        """
        self.profile = profile
        self.utc_offset_seconds = utc_offset_seconds

    def classify_conditions(
        self, hour: int, wind_mph: float, rain_pct: float, temp_c: float
    ) -> Tuple[SprayStatus, str]:
        """
        Classify one set of conditions. First matching rule wins.

        Args:
            hour: Local hour of day (0-23)
            wind_mph: Wind speed in mph
            rain_pct: Probability of precipitation in percent
            temp_c: Air temperature in °C

        Returns:
            Tuple of (status, human-readable reason)
        """
        perfect_max = self.profile.perfect_max_mph
        risky_max = self.profile.risky_max_mph

        if hour < SPRAY_HOUR_START or hour >= SPRAY_HOUR_END:
            return SprayStatus.NIGHT, "Outside spraying hours (6am-8pm)"

        if (
            PERFECT_WIND_MIN_MPH <= wind_mph <= perfect_max
            and rain_pct < PERFECT_RAIN_MAX_PCT
            and PERFECT_TEMP_MIN_C <= temp_c <= PERFECT_TEMP_MAX_C
        ):
            return SprayStatus.PERFECT, "Ideal spraying conditions"

        wind_marginal = perfect_max < wind_mph <= risky_max
        rain_marginal = RISKY_RAIN_MIN_PCT <= rain_pct <= RISKY_RAIN_MAX_PCT
        temp_marginal = (
            RISKY_TEMP_LOW_MIN_C <= temp_c < PERFECT_TEMP_MIN_C
            or PERFECT_TEMP_MAX_C < temp_c <= RISKY_TEMP_HIGH_MAX_C
        )
        if wind_marginal or rain_marginal or temp_marginal:
            if wind_marginal:
                return SprayStatus.RISKY, "Wind approaching limit"
            if rain_marginal:
                return SprayStatus.RISKY, "Light rain possible"
            return SprayStatus.RISKY, "Temperature not ideal"

        if wind_mph > risky_max:
            reason = f"High wind ({round_half_up(wind_mph)}mph)"
        elif rain_pct > RISKY_RAIN_MAX_PCT:
            reason = f"Rain forecast ({round_half_up(rain_pct)}%)"
        elif temp_c < RISKY_TEMP_LOW_MIN_C:
            reason = "Too cold"
        elif temp_c > RISKY_TEMP_HIGH_MAX_C:
            reason = "Too hot"
        else:
            reason = "Unsuitable conditions"
        return SprayStatus.DONT_SPRAY, reason

    def classify(self, interval: ForecastInterval) -> ClassifiedInterval:
        """Convert units and classify a single forecast interval."""
        local_time = to_local_datetime(interval.timestamp, self.utc_offset_seconds)
        wind_mph = interval.wind_speed_ms * MS_TO_MPH
        rain_pct = round_half_up(interval.precipitation_probability * 100)
        temp_c = interval.temperature_c

        status, reason = self.classify_conditions(
            local_time.hour, wind_mph, rain_pct, temp_c
        )
        return ClassifiedInterval(
            source=interval,
            status=status,
            reason=reason,
            wind_mph=wind_mph,
            rain_pct=rain_pct,
            temp_c=temp_c,
            local_time=local_time,
            time_range=format_time_range(local_time),
        )

    def build_timeline(self, forecast: Iterable[ForecastInterval]) -> List[DayTimeline]:
        """
        Classify every interval and group them by local calendar date.

        Intervals are sorted by timestamp first (stable), so days come out in
        chronological order regardless of input order.

        Returns:
            List of DayTimeline, one per local date present in the forecast
        """
        ordered = sorted(forecast, key=lambda interval: interval.timestamp)

        days: Dict[str, DayTimeline] = {}
        for interval in ordered:
            block = self.classify(interval)
            date_key = block.local_time.date().isoformat()
            if date_key not in days:
                days[date_key] = DayTimeline(
                    day=block.local_time.strftime("%A"),
                    date=date_key,
                )
            days[date_key].blocks.append(block)

        timeline = [days[key] for key in sorted(days)]
        logger.debug(
            "Classified %d intervals into %d days (%s)",
            len(ordered), len(timeline), self.profile.name,
        )
        return timeline
