"""Provider tags identifying which upstream source produced a record."""

from __future__ import annotations

from enum import Enum


class SourceTag(str, Enum):
    """Upstream flight-data providers."""

    OPENSKY = "opensky"
    OPENSKY_REGIONAL = "opensky_regional"
    FLIGHTRADAR24 = "flightradar24"
    FLIGHTLABS = "flightlabs"
    AVIATIONSTACK = "aviationstack"
    SERPAPI = "serpapi"
    SEARCH_PAGE = "search_page"


# Merge order for composing a response; earlier sources win per field.
MERGE_PRIORITY: tuple[SourceTag, ...] = (
    SourceTag.OPENSKY,
    SourceTag.OPENSKY_REGIONAL,
    SourceTag.FLIGHTRADAR24,
    SourceTag.FLIGHTLABS,
    SourceTag.AVIATIONSTACK,
    SourceTag.SERPAPI,
    SourceTag.SEARCH_PAGE,
)

SOURCE_LABELS: dict[SourceTag, str] = {
    SourceTag.OPENSKY: "OpenSky Network",
    SourceTag.OPENSKY_REGIONAL: "OpenSky Network (regional)",
    SourceTag.FLIGHTRADAR24: "Flightradar24",
    SourceTag.FLIGHTLABS: "FlightLabs",
    SourceTag.AVIATIONSTACK: "AviationStack",
    SourceTag.SERPAPI: "Google Search (SerpAPI)",
    SourceTag.SEARCH_PAGE: "Google Search",
}


def merge_rank(tag: SourceTag) -> int:
    return MERGE_PRIORITY.index(tag)


__all__ = ["MERGE_PRIORITY", "SOURCE_LABELS", "SourceTag", "merge_rank"]
