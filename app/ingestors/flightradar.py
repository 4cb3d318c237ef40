"""Detail-feed adapter for the Flightradar24 live flight-positions API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from app.config import settings
from app.domain.sources import SourceTag
from app.ingestors.base import fetch_json, first_data_entry
from app.models.flight import DetailBlock, NormalizedFlightRecord, RealtimeBlock

logger = logging.getLogger("aerodex.ingestors.flightradar")

FEET_TO_M = 0.3048
KNOTS_TO_MS = 0.514444
FPM_TO_MS = 0.00508


class FlightRadarIngestor:
    """Look up a live flight on Flightradar24 by flight code."""

    source = SourceTag.FLIGHTRADAR24

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url or settings.fr24_base_url
        self.timeout = timeout or settings.provider_timeout
        self.transport = transport

    async def fetch(self, identifier: str) -> Optional[NormalizedFlightRecord]:
        if not self.api_key:
            return None

        payload = await fetch_json(
            self.base_url,
            params={"flights": identifier.replace(" ", "").upper()},
            headers={
                "Authorization": f"Bearer {self.api_key}",
                "Accept": "application/json",
                "Accept-Version": "v1",
            },
            timeout=self.timeout,
            transport=self.transport,
            provider="Flightradar24",
        )
        entry = first_data_entry(payload)
        if entry is None:
            logger.info("Flightradar24 had no live flight for %s", identifier)
            return None

        # FR24 reports feet, knots and feet per minute
        alt_ft = entry.get("alt")
        speed_kt = entry.get("gspeed")
        vspeed_fpm = entry.get("vspeed")
        origin = entry.get("orig_iata") or entry.get("orig_icao")
        destination = entry.get("dest_iata") or entry.get("dest_icao")

        return NormalizedFlightRecord(
            source=self.source,
            callsign=entry.get("callsign"),
            airline=entry.get("operating_as") or entry.get("painted_as"),
            realtime=RealtimeBlock(
                latitude=entry.get("lat"),
                longitude=entry.get("lon"),
                altitude_m=float(alt_ft) * FEET_TO_M if alt_ft is not None else None,
                velocity_ms=float(speed_kt) * KNOTS_TO_MS if speed_kt is not None else None,
                heading=entry.get("track"),
                vertical_rate_ms=float(vspeed_fpm) * FPM_TO_MS if vspeed_fpm is not None else None,
                on_ground=(alt_ft == 0) if alt_ft is not None else None,
                icao24=(entry.get("hex") or "").upper() or None,
                squawk=entry.get("squawk"),
            ),
            detail=DetailBlock(
                aircraft_model=entry.get("type"),
                registration=entry.get("reg"),
                origin=origin,
                destination=destination,
                route=f"{origin} - {destination}" if origin and destination else None,
                eta=entry.get("eta"),
            ),
        )


__all__ = ["FlightRadarIngestor"]
