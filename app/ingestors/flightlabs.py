"""Detail-feed adapter for the FlightLabs real-time flights API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from app.config import settings
from app.domain.sources import SourceTag
from app.ingestors.base import fetch_json, first_data_entry
from app.models.flight import DetailBlock, NormalizedFlightRecord, RealtimeBlock

logger = logging.getLogger("aerodex.ingestors.flightlabs")


class FlightLabsIngestor:
    """Look up aircraft type, route and live status by flight code."""

    source = SourceTag.FLIGHTLABS

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url or settings.flightlabs_base_url
        self.timeout = timeout or settings.provider_timeout
        self.transport = transport

    async def fetch(self, identifier: str) -> Optional[NormalizedFlightRecord]:
        if not self.api_key:
            return None

        payload = await fetch_json(
            self.base_url,
            params={
                "access_key": self.api_key,
                "flightIata": identifier.replace(" ", "").upper(),
            },
            timeout=self.timeout,
            transport=self.transport,
            provider="FlightLabs",
        )
        if isinstance(payload, dict) and payload.get("success") is False:
            logger.warning("FlightLabs rejected lookup for %s: %s", identifier, payload.get("error"))
            return None
        entry = first_data_entry(payload)
        if entry is None:
            logger.info("FlightLabs had no data for %s", identifier)
            return None

        origin = entry.get("dep_iata") or entry.get("dep_icao")
        destination = entry.get("arr_iata") or entry.get("arr_icao")
        route = f"{origin} - {destination}" if origin and destination else None

        realtime = None
        if entry.get("lat") is not None and entry.get("lng") is not None:
            speed_kmh = entry.get("speed")
            v_speed_kmh = entry.get("v_speed")
            realtime = RealtimeBlock(
                latitude=entry.get("lat"),
                longitude=entry.get("lng"),
                altitude_m=entry.get("alt"),
                velocity_ms=float(speed_kmh) / 3.6 if speed_kmh is not None else None,
                heading=entry.get("dir"),
                vertical_rate_ms=float(v_speed_kmh) / 3.6 if v_speed_kmh is not None else None,
                icao24=(entry.get("hex") or "").upper() or None,
                squawk=entry.get("squawk"),
            )

        return NormalizedFlightRecord(
            source=self.source,
            callsign=entry.get("flight_icao"),
            realtime=realtime,
            detail=DetailBlock(
                aircraft_model=entry.get("aircraft_icao"),
                registration=entry.get("reg_number"),
                origin=origin,
                destination=destination,
                route=route,
                status=entry.get("status"),
            ),
        )


__all__ = ["FlightLabsIngestor"]
