"""Response contracts returned by the flight-tracker endpoint."""

from __future__ import annotations

from pydantic import Field

from app.models.base import CamelModel

UNKNOWN = "Unknown"

# Default map centre (Tokyo) used when no provider reported coordinates.
DEFAULT_LATITUDE = 35.6762
DEFAULT_LONGITUDE = 139.6503


class CurrentLocation(CamelModel):
    latitude: float = Field(default=DEFAULT_LATITUDE, description="Latitude in decimal degrees")
    longitude: float = Field(default=DEFAULT_LONGITUDE, description="Longitude in decimal degrees")
    city: str = Field(default=UNKNOWN, description="Inferred nearest city")
    region: str = Field(default=UNKNOWN, description="Inferred region or country")


class AirportSummary(CamelModel):
    """Itemized departure or arrival block, every field a display string."""

    airport: str = UNKNOWN
    iata: str = UNKNOWN
    scheduled: str = UNKNOWN
    estimated: str = UNKNOWN
    actual: str = UNKNOWN
    terminal: str = UNKNOWN
    gate: str = UNKNOWN


class ComposedFlightResponse(CamelModel):
    """Fixed response schema for a resolved flight."""

    status: str = Field(default=UNKNOWN, description="Human-readable flight status")
    current_location: CurrentLocation = Field(default_factory=CurrentLocation)
    origin: str = UNKNOWN
    destination: str = UNKNOWN
    altitude: str = UNKNOWN
    speed: str = UNKNOWN
    estimated_arrival: str = UNKNOWN
    weather: str = UNKNOWN
    message: str = UNKNOWN
    flight_number: str = UNKNOWN
    callsign: str = UNKNOWN
    airline: str = UNKNOWN
    aircraft_model: str = UNKNOWN
    departure: AirportSummary = Field(default_factory=AirportSummary)
    arrival: AirportSummary = Field(default_factory=AirportSummary)
    data_sources: list[str] = Field(
        default_factory=list, description="Providers that contributed data"
    )


class RouteEndpoint(CamelModel):
    query: str
    icao: str
    iata: str
    name: str


class CandidateFlight(CamelModel):
    """Currently airborne flight offered as a route candidate or suggestion."""

    callsign: str = UNKNOWN
    country: str = UNKNOWN
    latitude: float | None = None
    longitude: float | None = None
    altitude: str = UNKNOWN
    speed: str = UNKNOWN


class RouteSearchResponse(CamelModel):
    departure: RouteEndpoint
    arrival: RouteEndpoint
    flights: list[CandidateFlight] = Field(default_factory=list)
    total_found: int = 0
    message: str = ""
    note: str = ""
    search_tips: list[str] = Field(default_factory=list)


class FlightNotFoundResponse(CamelModel):
    error: str
    suggestion: str
    available_flights: list[CandidateFlight] = Field(default_factory=list)
    search_tips: list[str] = Field(default_factory=list)


class ErrorResponse(CamelModel):
    error: str


__all__ = [
    "AirportSummary",
    "CandidateFlight",
    "ComposedFlightResponse",
    "CurrentLocation",
    "DEFAULT_LATITUDE",
    "DEFAULT_LONGITUDE",
    "ErrorResponse",
    "FlightNotFoundResponse",
    "RouteEndpoint",
    "RouteSearchResponse",
    "UNKNOWN",
]
