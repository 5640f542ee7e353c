"""FastAPI dependencies for dependency injection."""
from functools import lru_cache

from backend.config import settings
from backend.services.spray_analysis_service import SprayAnalysisService


@lru_cache()
def get_spray_analysis_service() -> SprayAnalysisService:
    """Get cached spray analysis service instance."""
    return SprayAnalysisService(
        default_spray_type=settings.default_spray_type,
        default_utc_offset_seconds=settings.default_utc_offset_seconds,
    )
