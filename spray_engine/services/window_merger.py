"""Merge classified intervals into ranked spray windows."""
import logging
from typing import Iterable, List, Optional

import numpy as np

from spray_engine.config import INTERVAL_HOURS
from spray_engine.models.forecast import ClassifiedInterval, DayTimeline, SprayStatus
from spray_engine.models.window import SprayWindow

logger = logging.getLogger(__name__)


class WindowMerger:
    """Collapses runs of equal-quality sprayable intervals into windows."""

    def __init__(self, interval_hours: int = INTERVAL_HOURS):
        self.interval_hours = interval_hours

    def _close_window(
        self, day: DayTimeline, members: List[ClassifiedInterval]
    ) -> SprayWindow:
        """Aggregate the member intervals of an open window."""
        winds = np.array([block.wind_mph for block in members], dtype=np.float64)
        temps = np.array([block.temp_c for block in members], dtype=np.float64)
        rains = [block.rain_pct for block in members]

        return SprayWindow(
            day=day.day,
            date=day.date,
            start_time=members[0].start_time,
            end_time=members[-1].end_time,
            duration_hours=len(members) * self.interval_hours,
            quality=members[0].status,
            avg_wind=float(winds.mean()),
            avg_temp=float(temps.mean()),
            rain_chance=max(rains),
        )

    def merge_day(self, day: DayTimeline) -> List[SprayWindow]:
        """
        Merge one day's intervals into windows in a single left-to-right pass.

        A quality change closes the open window and starts a new one with the
        triggering interval. DONT_SPRAY and NIGHT intervals close the open
        window without starting another.
        """
        windows: List[SprayWindow] = []
        current: Optional[List[ClassifiedInterval]] = None

        for block in day.blocks:
            if block.status.is_sprayable:
                if current is None:
                    current = [block]
                elif current[0].status == block.status:
                    current.append(block)
                else:
                    windows.append(self._close_window(day, current))
                    current = [block]
            elif current is not None:
                windows.append(self._close_window(day, current))
                current = None

        if current is not None:
            windows.append(self._close_window(day, current))

        return windows

    def find_windows(self, timeline: Iterable[DayTimeline]) -> List[SprayWindow]:
        """Merge every day, keeping day-then-chronological order."""
        windows: List[SprayWindow] = []
        for day in timeline:
            windows.extend(self.merge_day(day))
        return windows

    @staticmethod
    def rank_windows(windows: Iterable[SprayWindow]) -> List[SprayWindow]:
        """
        Rank windows: PERFECT before RISKY, then longest first.

        The sort is stable, so ties keep their day-then-chronological order.
        """
        return sorted(
            windows,
            key=lambda w: (w.quality != SprayStatus.PERFECT, -w.duration_hours),
        )

    def merge(self, timeline: Iterable[DayTimeline]) -> List[SprayWindow]:
        """Find all windows across the timeline and rank them."""
        ranked = self.rank_windows(self.find_windows(timeline))
        logger.debug("Merged %d spray windows", len(ranked))
        return ranked
