"""
API for event statistics.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ....application.services import EventStatisticsService
from ....domain.statistics import AccidentStats, EventStatistics, TrendPoint
from ..dependencies import get_service
from ..schemas import ObjectDetectionReport

router = APIRouter(prefix="/statistics")

@router.get("", response_model=EventStatistics)
async def get_statistics(
    time_range: Optional[str] = Query(None, alias="range"),
    service: EventStatisticsService = Depends(get_service),
):
    """Severity and time-of-day overview, object types and daily trend."""
    return service.get_event_statistics(time_range)

@router.get("/objects", response_model=ObjectDetectionReport)
async def get_object_statistics(
    time_range: Optional[str] = Query(None, alias="range"),
    service: EventStatisticsService = Depends(get_service),
):
    return ObjectDetectionReport.from_stats(service.get_object_detection_stats(time_range))

@router.get("/accidents", response_model=AccidentStats)
async def get_accident_statistics(
    time_range: Optional[str] = Query(None, alias="range"),
    service: EventStatisticsService = Depends(get_service),
):
    return service.get_accident_stats(time_range)

@router.get("/trend", response_model=List[TrendPoint])
async def get_trend(
    days: Optional[int] = Query(None, ge=1, le=366),
    service: EventStatisticsService = Depends(get_service),
):
    return service.get_trend(days)
