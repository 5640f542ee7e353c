"""API routes for spray window analysis."""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, HTTPException

from backend.schemas.spray_analysis import (
    ForecastPayload,
    SprayAnalysisResponse,
    SprayTypeSchema,
)
from backend.services.spray_analysis_service import SprayAnalysisService
from backend.api.dependencies import get_spray_analysis_service
from spray_engine.services.forecast_parser import ForecastFormatError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["spray-analysis"])


@router.get("/spray-types", response_model=List[SprayTypeSchema], response_model_by_alias=True)
async def get_spray_types(
    service: SprayAnalysisService = Depends(get_spray_analysis_service),
) -> List[dict]:
    """Get the spray types and their wind limits (mph)."""
    return service.get_spray_types()


@router.post(
    "/spray-analysis",
    response_model=SprayAnalysisResponse,
    response_model_by_alias=True,
)
async def analyze_spray_windows(
    payload: ForecastPayload,
    type: Optional[str] = Query(None, description="herbicide, fungicide or insecticide"),
    utc_offset: Optional[int] = Query(
        None, ge=-14 * 3600, le=14 * 3600, description="Local offset from UTC in seconds"
    ),
    service: SprayAnalysisService = Depends(get_spray_analysis_service),
) -> dict:
    """
    Analyze a 5-day/3-hour forecast for spraying.

    Returns every interval classified per day, plus spray windows ranked
    PERFECT first and longest first.
    """
    try:
        return service.analyze_payload(
            payload.model_dump(), spray_type=type, utc_offset_seconds=utc_offset
        )
    except ForecastFormatError as e:
        logger.warning("Rejected forecast payload: %s", e)
        raise HTTPException(status_code=422, detail=str(e))
