import pytest

from app.models.flight import RawPositionRecord
from app.services.route_search import ROUTE_RESULT_LIMIT, RouteSearcher, resolve_endpoint


class FakePositionFeed:
    def __init__(self, states):
        self.states = states
        self.calls = []

    async def get_states(self, bbox=None):
        self.calls.append(bbox)
        return self.states


def _state(callsign, lat, lon, on_ground=False):
    return RawPositionRecord(
        callsign=callsign,
        origin_country="Japan",
        latitude=lat,
        longitude=lon,
        baro_altitude=9000.0,
        velocity=200.0,
        on_ground=on_ground,
    )


def test_resolve_endpoint_accepts_names_and_codes():
    haneda = resolve_endpoint("羽田")
    itami = resolve_endpoint("ITM")
    osaka = resolve_endpoint(" Osaka ")

    assert (haneda.icao, haneda.iata) == ("RJTT", "HND")
    assert itami.icao == "RJOO"
    assert osaka.iata == "KIX"


def test_resolve_endpoint_passes_unknown_names_through():
    endpoint = resolve_endpoint("springfield")

    assert endpoint.query == "springfield"
    assert endpoint.icao == "SPRINGFIELD"
    assert endpoint.name == "SPRINGFIELD"


@pytest.mark.anyio
async def test_route_search_keeps_airborne_flights_inside_region():
    feed = FakePositionFeed(
        [
            _state("JAL1", 35.0, 135.0),
            _state("SIA2", 10.0, 135.0),
            _state("ANA3", 35.0, 135.0, on_ground=True),
            _state("SKY4", None, None),
        ]
    )

    response = await RouteSearcher(feed).search("Tokyo", "Osaka")

    assert [flight.callsign for flight in response.flights] == ["JAL1"]
    assert response.total_found == 1
    assert response.departure.iata == "HND"
    assert response.arrival.iata == "KIX"
    assert response.note
    assert response.search_tips


@pytest.mark.anyio
async def test_route_search_caps_results():
    feed = FakePositionFeed([_state(f"JAL{index}", 35.0, 135.0) for index in range(30)])

    response = await RouteSearcher(feed).search("HND", "ITM")

    assert len(response.flights) == ROUTE_RESULT_LIMIT
    assert response.total_found == ROUTE_RESULT_LIMIT


@pytest.mark.anyio
async def test_route_search_with_unavailable_feed_returns_empty_list():
    feed = FakePositionFeed(None)

    response = await RouteSearcher(feed).search("HND", "ITM")

    assert response.flights == []
    assert response.total_found == 0
