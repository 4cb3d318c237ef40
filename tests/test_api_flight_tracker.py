import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_flight_resolver
from app.api.flight_tracker import GENERIC_FAILURE
from app.main import app
from app.models.responses import (
    CandidateFlight,
    ComposedFlightResponse,
    FlightNotFoundResponse,
    RouteEndpoint,
    RouteSearchResponse,
)


class StubResolver:
    provider_tags = ["opensky"]
    generator = None

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.queries = []

    async def resolve(self, query):
        self.queries.append(query)
        if self.error:
            raise self.error
        return self.result


@pytest.fixture
def use_resolver():
    def install(resolver):
        app.dependency_overrides[get_flight_resolver] = lambda: resolver
        return TestClient(app)

    yield install
    app.dependency_overrides.clear()


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"flightNumber": "   "},
        {"departure": "Tokyo"},
        {"flightNumber": "JL123", "departure": "Tokyo", "arrival": "Osaka"},
    ],
)
def test_flight_tracker_rejects_incomplete_queries(use_resolver, body):
    resolver = StubResolver()
    client = use_resolver(resolver)

    response = client.post("/api/flight-tracker", json=body)

    assert response.status_code == 400
    assert response.json()["error"]
    assert resolver.queries == []


def test_flight_tracker_rejects_malformed_body(use_resolver):
    client = use_resolver(StubResolver())

    response = client.post("/api/flight-tracker", json=[1, 2, 3])

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body."}


def test_flight_tracker_returns_composed_flight(use_resolver):
    resolver = StubResolver(
        ComposedFlightResponse(status="In flight", flight_number="JL123", data_sources=["opensky"])
    )
    client = use_resolver(resolver)

    response = client.post("/api/flight-tracker", json={"flightNumber": "jl123", "aircraftModel": "B767"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "In flight"
    assert payload["currentLocation"]["city"] == "Unknown"
    assert payload["estimatedArrival"] == "Unknown"
    assert payload["dataSources"] == ["opensky"]
    assert resolver.queries[0].flight_number == "jl123"
    assert resolver.queries[0].aircraft_model == "B767"


def test_flight_tracker_returns_not_found_with_suggestions(use_resolver):
    resolver = StubResolver(
        FlightNotFoundResponse(
            error="No flight information found for XX999.",
            suggestion="Try another flight.",
            available_flights=[CandidateFlight(callsign="ANA1", country="Japan")],
            search_tips=["Use JL123 style numbers."],
        )
    )
    client = use_resolver(resolver)

    response = client.post("/api/flight-tracker", json={"flightNumber": "XX999"})

    assert response.status_code == 404
    payload = response.json()
    assert payload["availableFlights"][0]["callsign"] == "ANA1"
    assert payload["searchTips"] == ["Use JL123 style numbers."]


def test_flight_tracker_route_search(use_resolver):
    endpoint = RouteEndpoint(query="Tokyo", icao="RJTT", iata="HND", name="Tokyo Haneda Airport")
    resolver = StubResolver(
        RouteSearchResponse(
            departure=endpoint,
            arrival=RouteEndpoint(query="Osaka", icao="RJBB", iata="KIX", name="Kansai International Airport"),
            flights=[CandidateFlight(callsign="JAL1")],
            total_found=1,
        )
    )
    client = use_resolver(resolver)

    response = client.post("/api/flight-tracker", json={"departure": "Tokyo", "arrival": "Osaka"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["totalFound"] == 1
    assert payload["departure"]["iata"] == "HND"
    assert resolver.queries[0].mode == "route"


def test_flight_tracker_hides_internal_errors(use_resolver):
    client = use_resolver(StubResolver(error=RuntimeError("database of secrets exploded")))

    response = client.post("/api/flight-tracker", json={"flightNumber": "JL123"})

    assert response.status_code == 500
    assert response.json() == {"error": GENERIC_FAILURE}


def test_healthz_reports_providers(use_resolver):
    client = use_resolver(StubResolver())

    response = client.get("/healthz")

    assert response.status_code == 200
    assert response.json()["providers"] == ["opensky"]
    assert response.json()["textGeneration"] is False
