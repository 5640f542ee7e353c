"""Tests for the interval classifier."""
import math
import pytest

from spray_engine.config import MS_TO_MPH
from spray_engine.models.forecast import ForecastInterval, SprayStatus
from spray_engine.models.profile import resolve_spray_profile
from spray_engine.services.interval_classifier import IntervalClassifier

# Monday 2024-06-03 00:00 UTC
MONDAY = 1717372800
HOUR = 3600


def make_interval(hour, wind_mph=5.0, rain_pct=0, temp_c=18.0, day=0):
    """Build a forecast interval from display units."""
    return ForecastInterval(
        timestamp=MONDAY + day * 86400 + hour * HOUR,
        wind_speed_ms=wind_mph / MS_TO_MPH,
        wind_direction_deg=180.0,
        precipitation_probability=rain_pct / 100,
        temperature_c=temp_c,
    )


@pytest.fixture
def herbicide():
    return IntervalClassifier(resolve_spray_profile("herbicide"))


@pytest.fixture
def insecticide():
    return IntervalClassifier(resolve_spray_profile("insecticide"))


class TestClassifyConditions:
    """Tests for the first-match-wins status rules."""

    def test_ideal_conditions(self, herbicide):
        """Test mid-morning calm, dry, mild conditions are PERFECT."""
        assert herbicide.classify_conditions(10, 5, 0, 18) == (
            SprayStatus.PERFECT, "Ideal spraying conditions"
        )

    @pytest.mark.parametrize("hour", [0, 3, 5, 20, 21, 23])
    def test_night_hours(self, herbicide, hour):
        """Test hours outside 6am-8pm are NIGHT regardless of weather."""
        status, reason = herbicide.classify_conditions(hour, 5, 0, 18)
        assert status == SprayStatus.NIGHT
        assert reason == "Outside spraying hours (6am-8pm)"

    def test_night_wins_over_bad_weather(self, herbicide):
        """Test NIGHT takes priority over DONT_SPRAY conditions."""
        status, _ = herbicide.classify_conditions(22, 40, 90, 35)
        assert status == SprayStatus.NIGHT

    @pytest.mark.parametrize("hour", [6, 19])
    def test_spraying_hour_bounds(self, herbicide, hour):
        """Test 6:00 is inside and 19:00 is the last daytime hour."""
        status, _ = herbicide.classify_conditions(hour, 5, 0, 18)
        assert status == SprayStatus.PERFECT

    def test_perfect_boundaries_inclusive(self, herbicide):
        """Test PERFECT wind and temperature ranges include their bounds."""
        assert herbicide.classify_conditions(10, 2, 4, 5)[0] == SprayStatus.PERFECT
        assert herbicide.classify_conditions(10, 10, 4, 25)[0] == SprayStatus.PERFECT

    def test_calm_wind_is_not_perfect(self, herbicide):
        """Test wind below 2 mph falls through to DONT_SPRAY."""
        assert herbicide.classify_conditions(10, 1, 0, 18) == (
            SprayStatus.DONT_SPRAY, "Unsuitable conditions"
        )

    def test_wind_approaching_limit(self, herbicide):
        """Test wind between perfect and risky limits is RISKY."""
        assert herbicide.classify_conditions(10, 12, 0, 18) == (
            SprayStatus.RISKY, "Wind approaching limit"
        )

    def test_light_rain(self, herbicide):
        """Test 5-20% rain is RISKY."""
        assert herbicide.classify_conditions(10, 5, 5, 18) == (
            SprayStatus.RISKY, "Light rain possible"
        )
        assert herbicide.classify_conditions(10, 5, 20, 18)[0] == SprayStatus.RISKY

    @pytest.mark.parametrize("temp", [3, 4.9, 25.1, 28])
    def test_marginal_temperature(self, herbicide, temp):
        """Test temperatures in [3, 5) and (25, 28] are RISKY."""
        assert herbicide.classify_conditions(10, 5, 0, temp) == (
            SprayStatus.RISKY, "Temperature not ideal"
        )

    def test_risky_reason_priority(self, herbicide):
        """Test wind reason wins over rain and rain over temperature."""
        assert herbicide.classify_conditions(10, 12, 10, 27)[1] == "Wind approaching limit"
        assert herbicide.classify_conditions(10, 5, 10, 27)[1] == "Light rain possible"

    def test_risky_wind_with_heavy_rain(self, herbicide):
        """Test any marginal sub-condition makes the interval RISKY."""
        assert herbicide.classify_conditions(10, 12, 50, 18)[0] == SprayStatus.RISKY

    def test_high_wind_herbicide(self, herbicide):
        """Test 16 mph is too windy for herbicide."""
        assert herbicide.classify_conditions(10, 16, 0, 18) == (
            SprayStatus.DONT_SPRAY, "High wind (16mph)"
        )

    def test_high_wind_risky_for_insecticide(self, insecticide):
        """Test 16 mph is only marginal for insecticide."""
        assert insecticide.classify_conditions(10, 16, 0, 18) == (
            SprayStatus.RISKY, "Wind approaching limit"
        )

    def test_insecticide_perfect_limit_inclusive(self, insecticide, herbicide):
        """Test 15 mph is PERFECT for insecticide but RISKY for herbicide."""
        assert insecticide.classify_conditions(10, 15, 0, 18)[0] == SprayStatus.PERFECT
        assert herbicide.classify_conditions(10, 15, 0, 18) == (
            SprayStatus.RISKY, "Wind approaching limit"
        )

    def test_risky_wind_limit_inclusive(self, herbicide):
        """Test herbicide wind is RISKY up to 15 mph and DONT_SPRAY just above."""
        assert herbicide.classify_conditions(10, 15, 0, 18)[0] == SprayStatus.RISKY
        assert herbicide.classify_conditions(10, 15.01, 0, 18) == (
            SprayStatus.DONT_SPRAY, "High wind (15mph)"
        )

    def test_rain_forecast(self, herbicide):
        """Test rain above 20% is DONT_SPRAY."""
        assert herbicide.classify_conditions(10, 5, 21, 18) == (
            SprayStatus.DONT_SPRAY, "Rain forecast (21%)"
        )

    def test_too_cold_and_too_hot(self, herbicide):
        """Test temperature extremes."""
        assert herbicide.classify_conditions(10, 5, 0, 2.9) == (SprayStatus.DONT_SPRAY, "Too cold")
        assert herbicide.classify_conditions(10, 5, 0, 28.1) == (SprayStatus.DONT_SPRAY, "Too hot")

    def test_high_wind_reason_first(self, herbicide):
        """Test DONT_SPRAY reason checks wind before rain and temperature."""
        _, reason = herbicide.classify_conditions(10, 20, 80, 35)
        assert reason == "High wind (20mph)"

    def test_nan_falls_through(self, herbicide):
        """Test NaN readings end up DONT_SPRAY."""
        status, reason = herbicide.classify_conditions(10, math.nan, 0, 18)
        assert status == SprayStatus.DONT_SPRAY
        assert reason == "Unsuitable conditions"

    def test_deterministic(self, herbicide):
        """Test identical input yields identical status and reason."""
        args = (14, 11.3, 7, 26.2)
        assert herbicide.classify_conditions(*args) == herbicide.classify_conditions(*args)


class TestClassify:
    """Tests for single-interval classification and unit conversion."""

    def test_unit_conversion(self, herbicide):
        """Test m/s to mph and fraction to rounded percentage."""
        interval = ForecastInterval(
            timestamp=MONDAY + 9 * HOUR,
            wind_speed_ms=3.0,
            wind_direction_deg=270.0,
            precipitation_probability=0.125,
            temperature_c=15.5,
        )
        block = herbicide.classify(interval)

        assert block.wind_mph == pytest.approx(3.0 * 2.237)
        assert block.rain_pct == 13
        assert block.temp_c == 15.5
        assert block.wind_direction_deg == 270.0
        assert block.time_range == "09:00-12:00"

    def test_rain_threshold_uses_rounded_percentage(self, herbicide):
        """Test 4.6% rounds to 5% and is therefore RISKY."""
        interval = make_interval(10, rain_pct=4.6)
        block = herbicide.classify(interval)
        assert block.rain_pct == 5
        assert block.status == SprayStatus.RISKY

    def test_local_hour_uses_offset(self):
        """Test the UTC offset shifts the local hour."""
        classifier = IntervalClassifier(resolve_spray_profile("herbicide"), 2 * HOUR)
        block = classifier.classify(make_interval(3))  # 05:00 local
        assert block.status == SprayStatus.NIGHT

        block = classifier.classify(make_interval(6))  # 08:00 local
        assert block.status == SprayStatus.PERFECT
        assert block.time_range == "08:00-11:00"

    def test_half_hour_offset_keeps_minutes(self):
        """Test a +5:30 offset shows local minutes in the time range."""
        classifier = IntervalClassifier(resolve_spray_profile("herbicide"), 5 * HOUR + 30 * 60)
        block = classifier.classify(make_interval(3))
        assert block.time_range == "08:30-11:30"
        assert block.status == SprayStatus.PERFECT

    def test_time_range_wraps_midnight(self, herbicide):
        """Test the last interval of the day ends at 00:00."""
        assert herbicide.classify(make_interval(21)).time_range == "21:00-00:00"

    def test_to_dict(self, herbicide):
        """Test block serialization keys."""
        data = herbicide.classify(make_interval(12)).to_dict()
        assert set(data) == {"time", "status", "wind", "windDir", "rain", "temp", "reason", "dt"}
        assert data["status"] == "PERFECT"
        assert data["dt"] == MONDAY + 12 * HOUR


class TestBuildTimeline:
    """Tests for grouping classified intervals into days."""

    def test_empty_forecast(self, herbicide):
        """Test empty forecast yields empty timeline."""
        assert herbicide.build_timeline([]) == []

    def test_groups_by_local_date(self, herbicide):
        """Test intervals are bucketed per day with weekday names."""
        forecast = [make_interval(h, day=d) for d in range(3) for h in range(0, 24, 3)]
        timeline = herbicide.build_timeline(forecast)

        assert [day.date for day in timeline] == ["2024-06-03", "2024-06-04", "2024-06-05"]
        assert [day.day for day in timeline] == ["Monday", "Tuesday", "Wednesday"]
        assert all(len(day.blocks) == 8 for day in timeline)

    def test_completeness_and_order(self, herbicide):
        """Test no interval is dropped, duplicated or reordered."""
        forecast = [make_interval(h, day=d) for d in range(5) for h in range(0, 24, 3)]
        timeline = herbicide.build_timeline(forecast)

        flattened = [block.source for day in timeline for block in day.blocks]
        assert flattened == forecast

    def test_unsorted_input_is_sorted(self, herbicide):
        """Test days and blocks come out chronologically for unsorted input."""
        forecast = [make_interval(9, day=1), make_interval(15), make_interval(9)]
        timeline = herbicide.build_timeline(forecast)

        assert [day.date for day in timeline] == ["2024-06-03", "2024-06-04"]
        assert [b.time_range for b in timeline[0].blocks] == ["09:00-12:00", "15:00-18:00"]

    def test_offset_moves_interval_to_previous_day(self):
        """Test a negative offset assigns early UTC intervals to the previous date."""
        classifier = IntervalClassifier(resolve_spray_profile("herbicide"), -5 * HOUR)
        timeline = classifier.build_timeline([make_interval(3)])
        assert timeline[0].date == "2024-06-02"
        assert timeline[0].day == "Sunday"
