"""Health check endpoint."""

from typing import Any

from fastapi import APIRouter, Depends

from app.api.dependencies import get_flight_resolver
from app.config import settings
from app.services.flight_resolver import FlightResolver

router = APIRouter()


@router.get("/healthz", summary="Health check")
def health_check(resolver: FlightResolver = Depends(get_flight_resolver)) -> dict[str, Any]:
    """Simple health check endpoint."""
    return {
        "status": "ok",
        "env": settings.aerodex_env,
        "providers": resolver.provider_tags,
        "textGeneration": resolver.generator is not None,
    }
