"""
API package.
"""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .dependencies import init_service, get_service
from .routes import events, statistics
from ...application.services import EventStatisticsService
from ....common.exceptions import EventNotFoundError, StoreError
from ....common.logging import setup_logger

logger = setup_logger(__name__)

def create_app(service: Optional[EventStatisticsService] = None) -> FastAPI:
    app = FastAPI(title="Collision Insights API")

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allow all origins for development
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(events.router, tags=["events"])
    app.include_router(statistics.router, tags=["statistics"])

    @app.exception_handler(EventNotFoundError)
    async def event_not_found_handler(request: Request, exc: EventNotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error(f"Store failure on {request.url.path}: {exc}")
        return JSONResponse(status_code=503, content={"detail": str(exc)})

    if service is not None:
        init_service(service)
    return app
