"""Service wrapping the spray window engine for the API."""
import logging
from typing import Any, Dict, List, Optional

from spray_engine.models.profile import list_spray_profiles, resolve_spray_profile
from spray_engine.services.forecast_parser import (
    parse_forecast_payload,
    payload_utc_offset,
)
from spray_engine.services.spray_analyzer import SprayAnalyzer

logger = logging.getLogger(__name__)


class SprayAnalysisService:
    """Service for spray analysis operations."""

    def __init__(
        self,
        default_spray_type: str = "herbicide",
        default_utc_offset_seconds: int = 0,
    ):
        self.default_spray_type = default_spray_type
        self.default_utc_offset_seconds = default_utc_offset_seconds

    def get_spray_types(self) -> List[dict]:
        """Get the built-in spray type profiles."""
        return [profile.to_dict() for profile in list_spray_profiles()]

    def analyze_payload(
        self,
        payload: Dict[str, Any],
        spray_type: Optional[str] = None,
        utc_offset_seconds: Optional[int] = None,
    ) -> dict:
        """
        Analyze a provider forecast payload.

        Args:
            payload: Forecast payload with a "list" of 3-hour entries
            spray_type: Spray type label (unknown labels mean herbicide)
            utc_offset_seconds: Local offset; defaults to the payload's city
                offset, then to the configured default

        Returns:
            Serialized SprayAnalysis

        Raises:
            ForecastFormatError: If the payload is malformed
        """
        forecast = parse_forecast_payload(payload)

        if utc_offset_seconds is None:
            utc_offset_seconds = payload_utc_offset(payload)
        if utc_offset_seconds is None:
            utc_offset_seconds = self.default_utc_offset_seconds

        profile = resolve_spray_profile(spray_type or self.default_spray_type)
        analysis = SprayAnalyzer(utc_offset_seconds=utc_offset_seconds).analyze(
            forecast, profile.name
        )
        logger.info(
            "Analyzed %d intervals (type=%s, offset=%ds): %d windows",
            len(forecast), profile.name, utc_offset_seconds,
            len(analysis.recommended_windows),
        )
        return analysis.to_dict()
