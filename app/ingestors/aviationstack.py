"""Schedule-feed adapter for the AviationStack flights API."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from app.config import settings
from app.domain.sources import SourceTag
from app.ingestors.base import fetch_json, first_data_entry
from app.models.flight import AirportTimes, NormalizedFlightRecord, RealtimeBlock, ScheduleBlock

logger = logging.getLogger("aerodex.ingestors.aviationstack")


def _airport_times(raw: Any) -> AirportTimes | None:
    if not isinstance(raw, dict):
        return None
    return AirportTimes(
        airport=raw.get("airport"),
        iata=raw.get("iata"),
        icao=raw.get("icao"),
        scheduled=raw.get("scheduled"),
        estimated=raw.get("estimated"),
        actual=raw.get("actual"),
        terminal=raw.get("terminal"),
        gate=raw.get("gate"),
    )


def _live_block(raw: Any) -> RealtimeBlock | None:
    if not isinstance(raw, dict) or raw.get("latitude") is None:
        return None
    speed_kmh = raw.get("speed_horizontal")
    return RealtimeBlock(
        latitude=raw.get("latitude"),
        longitude=raw.get("longitude"),
        altitude_m=raw.get("altitude"),
        velocity_ms=float(speed_kmh) / 3.6 if speed_kmh is not None else None,
        heading=raw.get("direction"),
        on_ground=raw.get("is_ground"),
    )


class AviationStackIngestor:
    """Look up a flight's timetable by IATA flight code."""

    source = SourceTag.AVIATIONSTACK

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url or settings.aviationstack_base_url
        self.timeout = timeout or settings.provider_timeout
        self.transport = transport

    async def fetch(self, identifier: str) -> Optional[NormalizedFlightRecord]:
        if not self.api_key:
            return None

        payload = await fetch_json(
            self.base_url,
            params={
                "access_key": self.api_key,
                "flight_iata": identifier.replace(" ", "").upper(),
                "limit": 1,
            },
            timeout=self.timeout,
            transport=self.transport,
            provider="AviationStack",
        )
        entry = first_data_entry(payload)
        if entry is None:
            logger.info("AviationStack had no schedule for %s", identifier)
            return None

        airline = (entry.get("airline") or {}).get("name")
        flight = entry.get("flight") or {}
        aircraft = entry.get("aircraft") or {}

        return NormalizedFlightRecord(
            source=self.source,
            callsign=flight.get("icao"),
            airline=airline,
            realtime=_live_block(entry.get("live")),
            schedule=ScheduleBlock(
                airline=airline,
                flight_iata=flight.get("iata"),
                registration=aircraft.get("registration"),
                flight_status=entry.get("flight_status"),
                departure=_airport_times(entry.get("departure")),
                arrival=_airport_times(entry.get("arrival")),
            ),
        )


__all__ = ["AviationStackIngestor"]
