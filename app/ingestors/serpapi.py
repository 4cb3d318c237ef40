"""Search-engine adapter backed by SerpAPI's Google engine."""

from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from app.config import settings
from app.domain.sources import SourceTag
from app.ingestors.base import BROWSER_USER_AGENT, fetch_json
from app.models.flight import (
    AirportTimes,
    DetailBlock,
    NormalizedFlightRecord,
    ScheduleBlock,
    SearchSnippet,
)

logger = logging.getLogger("aerodex.ingestors.serpapi")

MAX_ORGANIC_RESULTS = 5


def _flight_block(payload: dict[str, Any]) -> dict[str, Any] | None:
    """Return the structured flight-status block of a search result, if any."""

    answer_box = payload.get("answer_box")
    if isinstance(answer_box, dict):
        block_type = str(answer_box.get("type") or "")
        if "flight" in block_type or "departure" in answer_box or "arrival" in answer_box:
            return answer_box
    flights = payload.get("flights_results") or payload.get("flight_status")
    if isinstance(flights, list) and flights and isinstance(flights[0], dict):
        return flights[0]
    if isinstance(flights, dict):
        return flights
    return None


def _airport_times(raw: Any) -> AirportTimes | None:
    if not isinstance(raw, dict):
        return None
    return AirportTimes(
        airport=raw.get("airport") or raw.get("name"),
        iata=raw.get("iata") or raw.get("id"),
        scheduled=raw.get("scheduled") or raw.get("time"),
        estimated=raw.get("estimated"),
        actual=raw.get("actual"),
        terminal=raw.get("terminal"),
        gate=raw.get("gate"),
    )


class SerpApiIngestor:
    """Search the web for a flight and normalize whatever comes back."""

    source = SourceTag.SERPAPI

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str | None = None,
        fallback_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url or settings.serpapi_base_url
        self.fallback_url = fallback_url or settings.search_fallback_url
        self.timeout = timeout or settings.provider_timeout
        self.transport = transport

    async def fetch(self, identifier: str) -> Optional[NormalizedFlightRecord]:
        if not self.api_key:
            return None

        query = f"{identifier.strip().upper()} flight status"
        payload = await fetch_json(
            self.base_url,
            params={"engine": "google", "q": query, "api_key": self.api_key, "hl": "en"},
            timeout=self.timeout,
            transport=self.transport,
            provider="SerpAPI",
        )

        if isinstance(payload, dict) and not payload.get("error"):
            block = _flight_block(payload)
            if block is not None:
                return self._structured_record(identifier, block)

            organic = [
                SearchSnippet(
                    title=result.get("title"),
                    link=result.get("link"),
                    snippet=result.get("snippet"),
                )
                for result in (payload.get("organic_results") or [])[:MAX_ORGANIC_RESULTS]
                if isinstance(result, dict)
            ]
            if organic:
                return NormalizedFlightRecord(source=self.source, evidence=organic)

        logger.info("SerpAPI returned nothing usable for %s; checking search page", identifier)
        return await self._search_page_placeholder(query)

    def _structured_record(self, identifier: str, block: dict[str, Any]) -> NormalizedFlightRecord:
        departure = _airport_times(block.get("departure"))
        arrival = _airport_times(block.get("arrival"))
        airline = block.get("airline")
        if isinstance(airline, dict):
            airline = airline.get("name")
        status = block.get("status") or block.get("flight_status")

        return NormalizedFlightRecord(
            source=self.source,
            airline=airline,
            schedule=ScheduleBlock(
                airline=airline,
                flight_iata=block.get("flight") or identifier.strip().upper(),
                flight_status=status,
                departure=departure,
                arrival=arrival,
            ),
            detail=DetailBlock(
                aircraft_model=block.get("aircraft"),
                origin=departure.airport if departure else None,
                destination=arrival.airport if arrival else None,
                status=status,
            ),
            evidence=[
                SearchSnippet(
                    title=block.get("title"),
                    link=block.get("link"),
                    snippet=block.get("snippet"),
                )
            ]
            if block.get("title")
            else [],
        )

    async def _search_page_placeholder(self, query: str) -> Optional[NormalizedFlightRecord]:
        """Confirm the public search page is reachable and point the user at it."""

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self.transport, follow_redirects=True
            ) as client:
                response = await client.get(
                    self.fallback_url,
                    params={"q": query},
                    headers={"User-Agent": BROWSER_USER_AGENT},
                )
        except httpx.RequestError as exc:
            logger.warning("Search page request failed: %s", exc)
            return None

        if response.status_code != 200:
            logger.warning("Search page returned HTTP %s", response.status_code)
            return None

        return NormalizedFlightRecord(
            source=SourceTag.SEARCH_PAGE,
            evidence=[
                SearchSnippet(
                    title=f"Search results for {query}",
                    link=str(response.request.url),
                    snippet="Live search results are available for this flight.",
                )
            ],
        )


__all__ = ["SerpApiIngestor"]
