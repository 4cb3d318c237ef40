"""Shared adapter contract and transport handling for upstream providers."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol

import httpx

from app.domain.sources import SourceTag
from app.models.flight import NormalizedFlightRecord

logger = logging.getLogger("aerodex.ingestors")

BROWSER_USER_AGENT = "Mozilla/5.0 (compatible; AerodexFlightTracker/1.0)"


class FlightSourceIngestor(Protocol):
    """Identifier-mode source adapter."""

    source: SourceTag

    async def fetch(self, identifier: str) -> Optional[NormalizedFlightRecord]:
        """Return a normalized partial record, or ``None`` when the provider has nothing."""


async def fetch_json(
    url: str,
    *,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    timeout: float,
    transport: httpx.AsyncBaseTransport | None = None,
    provider: str,
) -> Any | None:
    """GET ``url`` and decode JSON, returning ``None`` on any transport failure."""

    try:
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(url, params=params, headers=headers)
    except httpx.TimeoutException as exc:
        logger.warning("%s request timed out: %s", provider, exc)
        return None
    except httpx.RequestError as exc:
        logger.warning("%s request failed: %s", provider, exc)
        return None

    if response.status_code == 429:
        logger.warning("%s rate limit encountered: %s", provider, response.text[:200])
        return None
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.warning("%s returned HTTP %s: %s", provider, exc.response.status_code, exc)
        return None

    try:
        return response.json()
    except ValueError as exc:
        logger.warning("Failed to parse %s JSON response: %s", provider, exc)
        return None


def first_data_entry(payload: Any) -> dict[str, Any] | None:
    """Return the first object of a ``{"data": [...]}`` payload."""

    if not isinstance(payload, dict):
        return None
    data = payload.get("data")
    if not isinstance(data, list) or not data:
        return None
    entry = data[0]
    return entry if isinstance(entry, dict) else None


__all__ = [
    "BROWSER_USER_AGENT",
    "FlightSourceIngestor",
    "fetch_json",
    "first_data_entry",
]
