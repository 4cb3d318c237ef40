"""Position-feed adapter for the OpenSky Network bulk state-vector API."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
import logging
import time
from typing import Any, Optional, Sequence

import httpx

from app.config import settings
from app.domain.callsigns import build_patterns, match
from app.domain.sources import SourceTag
from app.ingestors.base import BROWSER_USER_AGENT, fetch_json
from app.models.flight import NormalizedFlightRecord, RawPositionRecord, RealtimeBlock

logger = logging.getLogger("aerodex.ingestors.opensky")


@dataclass(frozen=True)
class BoundingBox:
    """Geographic box in OpenSky query-parameter form."""

    lamin: float
    lomin: float
    lamax: float
    lomax: float

    def contains(self, lat: float | None, lon: float | None) -> bool:
        if lat is None or lon is None:
            return False
        return self.lamin <= lat <= self.lamax and self.lomin <= lon <= self.lomax

    def as_params(self) -> dict[str, float]:
        return {
            "lamin": self.lamin,
            "lomin": self.lomin,
            "lamax": self.lamax,
            "lomax": self.lomax,
        }


JAPAN_BBOX = BoundingBox(lamin=24.0, lomin=123.0, lamax=46.0, lomax=146.0)


def _parse_timestamp(raw_ts: Any) -> datetime | None:
    if raw_ts is None:
        return None
    try:
        # OpenSky returns seconds since epoch
        return datetime.fromtimestamp(float(raw_ts), tz=timezone.utc)
    except (TypeError, ValueError, OverflowError, OSError):
        logger.debug("Failed to parse OpenSky timestamp: %s", raw_ts)
        return None


class OpenSkyIngestor:
    """Locate a flight in the OpenSky live state feed by callsign."""

    source = SourceTag.OPENSKY

    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        fallback_bbox: BoundingBox = JAPAN_BBOX,
    ) -> None:
        self.base_url = base_url or settings.opensky_base_url
        self.timeout = timeout or settings.provider_timeout
        self.transport = transport
        self.fallback_bbox = fallback_bbox

    async def get_states(self, bbox: BoundingBox | None = None) -> list[RawPositionRecord] | None:
        """Fetch state vectors; ``None`` means the request itself failed."""

        payload = await fetch_json(
            self.base_url,
            params=bbox.as_params() if bbox else None,
            headers={"User-Agent": BROWSER_USER_AGENT},
            timeout=self.timeout,
            transport=self.transport,
            provider="OpenSky",
        )
        if payload is None:
            return None

        raw_states = []
        if isinstance(payload, dict):
            raw_states = payload.get("states") or []

        records: list[RawPositionRecord] = []
        for entry in raw_states:
            record = RawPositionRecord.from_state(entry)
            if record:
                records.append(record)

        logger.debug("Fetched %s OpenSky state vectors (bbox=%s)", len(records), bbox)
        return records

    async def fetch(self, identifier: str) -> Optional[NormalizedFlightRecord]:
        return await self.find(build_patterns(identifier))

    async def find(self, patterns: Sequence[str]) -> Optional[NormalizedFlightRecord]:
        """Match patterns against the global feed, retrying once on the regional box."""

        states = await self.get_states()
        if states:
            hit = match(patterns, states)
            if hit is None:
                logger.info("No OpenSky callsign matched %s", list(patterns))
                return None
            return self._to_record(hit, SourceTag.OPENSKY)

        logger.info("Global OpenSky feed unavailable; retrying with regional bounding box")
        regional = await self.get_states(self.fallback_bbox)
        if not regional:
            return None
        hit = match(patterns, regional)
        if hit is None:
            return None
        return self._to_record(hit, SourceTag.OPENSKY_REGIONAL)

    def _to_record(self, state: RawPositionRecord, source: SourceTag) -> NormalizedFlightRecord:
        last_contact = _parse_timestamp(state.last_contact)
        age = None
        if state.last_contact is not None:
            age = max(time.time() - state.last_contact, 0.0)

        return NormalizedFlightRecord(
            source=source,
            callsign=state.clean_callsign or None,
            realtime=RealtimeBlock(
                latitude=state.latitude,
                longitude=state.longitude,
                altitude_m=state.baro_altitude,
                geo_altitude_m=state.geo_altitude,
                velocity_ms=state.velocity,
                heading=state.true_track,
                vertical_rate_ms=state.vertical_rate,
                on_ground=state.on_ground,
                origin_country=state.origin_country,
                icao24=state.icao24.upper() if state.icao24 else None,
                squawk=state.squawk,
                last_contact=last_contact,
                last_contact_age_seconds=age,
            ),
        )


__all__ = ["BoundingBox", "JAPAN_BBOX", "OpenSkyIngestor"]
