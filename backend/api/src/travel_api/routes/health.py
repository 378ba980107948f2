"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter, Depends

from travel_api import __version__
from travel_api.dependencies import get_app_settings
from travel_api.settings import ApiSettings
from travel_shared.models import iso_timestamp

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health(settings: ApiSettings = Depends(get_app_settings)) -> dict[str, Any]:
    """Report liveness, version and environment."""
    return {
        "status": "ok",
        "timestamp": iso_timestamp(),
        "service": "travel-api",
        "version": __version__,
        "environment": settings.environment,
    }
