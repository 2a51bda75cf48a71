"""
API for reading and adding collision events.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ....application.services import EventStatisticsService
from ....domain.entities import CollisionEvent
from ..dependencies import get_service

router = APIRouter()

@router.get(
    "/events",
    response_model=List[CollisionEvent],
    response_model_exclude_none=True,
)
async def list_events(
    time_range: Optional[str] = Query(None, alias="range"),
    service: EventStatisticsService = Depends(get_service),
):
    """Events of the range (day, week, month, year), newest first."""
    return service.get_latest_events(time_range)

@router.get(
    "/events/{event_id}",
    response_model=CollisionEvent,
    response_model_exclude_none=True,
)
async def get_event(event_id: str, service: EventStatisticsService = Depends(get_service)):
    return service.get_event_by_id(event_id)

@router.post(
    "/events",
    response_model=CollisionEvent,
    response_model_exclude_none=True,
    status_code=201,
)
async def add_event(event: CollisionEvent, service: EventStatisticsService = Depends(get_service)):
    """
    Stores a new event. id and timestamp are assigned when omitted.

    Body example:
    {
        "severity": "high",
        "location": {"address": "Jinja Road", "roadType": "highway"},
        "objects": [{"id": "o1", "type": "vehicle", "confidence": 0.91}]
    }
    """
    return service.add_event(event)
