"""Curated list of airborne flights offered when a lookup misses."""

from __future__ import annotations

from typing import Iterable

from app.domain.carriers import DOMESTIC_GROUP, INTERNATIONAL_GROUP, OTHER_GROUP, carrier_group
from app.models.flight import RawPositionRecord
from app.models.responses import UNKNOWN, CandidateFlight
from app.services.composer import format_altitude, format_speed

GROUP_LIMITS: dict[int, int] = {
    DOMESTIC_GROUP: 10,
    INTERNATIONAL_GROUP: 5,
    OTHER_GROUP: 5,
}

SEARCH_TIPS: list[str] = [
    "Use the airline code plus flight number, e.g. JL123, NH456 or UA789.",
    "ICAO callsigns such as JAL123 or ANA456 match the live position feed directly.",
    "Only flights that are currently airborne appear in the live feed.",
    "Try again in a few minutes; live data refreshes continuously.",
]


def candidate_from_state(state: RawPositionRecord) -> CandidateFlight:
    return CandidateFlight(
        callsign=state.clean_callsign or UNKNOWN,
        country=state.origin_country or UNKNOWN,
        latitude=state.latitude,
        longitude=state.longitude,
        altitude=format_altitude(state.baro_altitude),
        speed=format_speed(state.velocity),
    )


def build_available_flights(states: Iterable[RawPositionRecord]) -> list[CandidateFlight]:
    """Airborne flights, domestic carriers first, then international, then the rest."""

    groups: dict[int, list[RawPositionRecord]] = {group: [] for group in GROUP_LIMITS}
    for state in states:
        if state.on_ground or not state.clean_callsign:
            continue
        groups[carrier_group(state.clean_callsign)].append(state)

    selected: list[CandidateFlight] = []
    for group in (DOMESTIC_GROUP, INTERNATIONAL_GROUP, OTHER_GROUP):
        selected.extend(
            candidate_from_state(state) for state in groups[group][: GROUP_LIMITS[group]]
        )
    return selected


__all__ = ["GROUP_LIMITS", "SEARCH_TIPS", "build_available_flights", "candidate_from_state"]
