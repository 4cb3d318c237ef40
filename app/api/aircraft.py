"""Static aircraft encyclopedia endpoints."""

from __future__ import annotations

from functools import lru_cache
import json
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from app.models.aircraft import Aircraft
from app.models.responses import ErrorResponse

router = APIRouter(prefix="/api", tags=["aircraft"])

logger = logging.getLogger("aerodex.aircraft")

CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "aircraft_catalog.json"


@lru_cache(maxsize=1)
def load_catalog() -> tuple[Aircraft, ...]:
    with CATALOG_PATH.open(encoding="utf-8") as handle:
        raw = json.load(handle)
    catalog = tuple(Aircraft.model_validate(entry) for entry in raw)
    logger.info("Loaded %s aircraft from catalog", len(catalog))
    return catalog


@router.get("/aircraft", response_model=list[Aircraft], summary="List catalog aircraft")
def list_aircraft(
    manufacturer: Optional[str] = Query(
        default=None, description="Filter by manufacturer, e.g. Boeing or Airbus"
    ),
) -> list[Aircraft]:
    catalog = load_catalog()
    if manufacturer:
        wanted = manufacturer.strip().lower()
        return [aircraft for aircraft in catalog if aircraft.manufacturer.lower() == wanted]
    return list(catalog)


@router.get(
    "/aircraft/{aircraft_id}",
    response_model=Aircraft,
    responses={404: {"model": ErrorResponse}},
    summary="Get one catalog aircraft",
)
def get_aircraft(aircraft_id: str):
    for aircraft in load_catalog():
        if aircraft.id == aircraft_id:
            return aircraft
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=ErrorResponse(error=f"Unknown aircraft: {aircraft_id}").to_json_dict(),
    )
