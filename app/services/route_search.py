"""Route-mode search: airborne flights in the Japan region right now.

No route-graph matching happens here. The endpoints are resolved for display
and the candidates are simply whatever is currently flying inside the
regional bounding box.
"""

from __future__ import annotations

import logging

from app.domain.airports import lookup_airport
from app.ingestors.opensky import JAPAN_BBOX, BoundingBox, OpenSkyIngestor
from app.models.responses import RouteEndpoint, RouteSearchResponse
from app.services.suggestions import candidate_from_state

logger = logging.getLogger("aerodex.route_search")

ROUTE_RESULT_LIMIT = 20

ROUTE_SEARCH_NOTE = (
    "Candidates are airborne flights currently inside the Japan region; "
    "they are not filtered by origin or destination."
)

ROUTE_SEARCH_TIPS: list[str] = [
    "Pick a callsign from the list and track it by flight number for full details.",
    "Domestic callsigns start with JAL, ANA, SKY, APJ or JJP.",
    "Airport names (Haneda, Narita, Kansai) and IATA/ICAO codes are all accepted.",
]


def resolve_endpoint(text: str) -> RouteEndpoint:
    airport = lookup_airport(text)
    if airport is None:
        code = text.strip().upper()
        return RouteEndpoint(query=text, icao=code, iata=code, name=code)
    return RouteEndpoint(query=text, icao=airport.icao, iata=airport.iata, name=airport.name)


class RouteSearcher:
    """Approximate an origin/destination query with a regional airborne snapshot."""

    def __init__(self, opensky: OpenSkyIngestor, *, bbox: BoundingBox = JAPAN_BBOX) -> None:
        self.opensky = opensky
        self.bbox = bbox

    async def search(self, origin: str, destination: str) -> RouteSearchResponse:
        departure = resolve_endpoint(origin)
        arrival = resolve_endpoint(destination)

        states = await self.opensky.get_states() or []
        airborne = [
            state
            for state in states
            if not state.on_ground and self.bbox.contains(state.latitude, state.longitude)
        ]
        flights = [candidate_from_state(state) for state in airborne[:ROUTE_RESULT_LIMIT]]

        logger.info(
            "Route search %s -> %s: %s airborne candidates (%s returned)",
            departure.iata,
            arrival.iata,
            len(airborne),
            len(flights),
        )
        return RouteSearchResponse(
            departure=departure,
            arrival=arrival,
            flights=flights,
            total_found=len(flights),
            message=(
                f"{len(flights)} flights currently airborne near the {departure.name} - "
                f"{arrival.name} route."
            ),
            note=ROUTE_SEARCH_NOTE,
            search_tips=list(ROUTE_SEARCH_TIPS),
        )


__all__ = ["ROUTE_RESULT_LIMIT", "RouteSearcher", "resolve_endpoint"]
