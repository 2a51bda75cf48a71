from typing import Optional

from fastapi import HTTPException

from ...application.services import EventStatisticsService

# Singleton
_service: Optional[EventStatisticsService] = None

def init_service(service: EventStatisticsService):
    global _service
    _service = service

def get_service() -> EventStatisticsService:
    if _service is None:
        raise HTTPException(500, "Statistics service not initialized")
    return _service
