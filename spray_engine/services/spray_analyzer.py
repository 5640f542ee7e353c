"""Spray window analysis entry point."""
from datetime import datetime, timezone
import logging
from typing import Iterable, Optional

from spray_engine.models.forecast import ForecastInterval
from spray_engine.models.profile import resolve_spray_profile
from spray_engine.models.window import SprayAnalysis
from spray_engine.services.interval_classifier import IntervalClassifier
from spray_engine.services.window_merger import WindowMerger

logger = logging.getLogger(__name__)


class SprayAnalyzer:
    """Runs the classifier and window merger over a forecast."""

    def __init__(self, utc_offset_seconds: int = 0, merger: Optional[WindowMerger] = None):
        self.utc_offset_seconds = utc_offset_seconds
        self.merger = merger or WindowMerger()

    def analyze(
        self, forecast: Iterable[ForecastInterval], spray_type: Optional[str] = None
    ) -> SprayAnalysis:
        """
        Analyze a forecast for one spray type.

        Unknown spray types fall back to the herbicide profile. An empty
        forecast gives an empty timeline and no windows.
        """
        profile = resolve_spray_profile(spray_type)
        classifier = IntervalClassifier(profile, self.utc_offset_seconds)

        timeline = classifier.build_timeline(forecast)
        windows = self.merger.merge(timeline)

        logger.debug(
            "Spray analysis for %s: %d days, %d windows",
            profile.name, len(timeline), len(windows),
        )
        return SprayAnalysis(
            recommended_windows=windows,
            timeline=timeline,
            last_updated=datetime.now(timezone.utc),
        )


def analyze_spray_conditions(
    forecast: Iterable[ForecastInterval],
    spray_type: Optional[str] = None,
    utc_offset_seconds: int = 0,
) -> SprayAnalysis:
    """Analyze a forecast with a one-off SprayAnalyzer."""
    return SprayAnalyzer(utc_offset_seconds=utc_offset_seconds).analyze(
        forecast, spray_type
    )
