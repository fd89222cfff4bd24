"""
Health check endpoint.

This is the first thing you hit to verify the service is running.
The lab has no external backends, so it reports the limits it runs with.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_settings
from config.settings import Settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(settings: Settings = Depends(get_settings)) -> dict:
    return {
        "status": "healthy",
        "max_printers": settings.MAX_PRINTERS,
        "max_jobs_per_request": settings.MAX_JOBS_PER_REQUEST,
    }
