"""Pydantic models for the aerodex backend."""

from .aircraft import Aircraft, AircraftSpecifications
from .flight import (
    AirportTimes,
    DetailBlock,
    FlightQuery,
    NormalizedFlightRecord,
    RawPositionRecord,
    RealtimeBlock,
    ScheduleBlock,
    SearchSnippet,
)
from .responses import (
    UNKNOWN,
    AirportSummary,
    CandidateFlight,
    ComposedFlightResponse,
    CurrentLocation,
    ErrorResponse,
    FlightNotFoundResponse,
    RouteEndpoint,
    RouteSearchResponse,
)

__all__ = [
    "Aircraft",
    "AircraftSpecifications",
    "AirportSummary",
    "AirportTimes",
    "CandidateFlight",
    "ComposedFlightResponse",
    "CurrentLocation",
    "DetailBlock",
    "ErrorResponse",
    "FlightNotFoundResponse",
    "FlightQuery",
    "NormalizedFlightRecord",
    "RawPositionRecord",
    "RealtimeBlock",
    "RouteEndpoint",
    "RouteSearchResponse",
    "ScheduleBlock",
    "SearchSnippet",
    "UNKNOWN",
]
