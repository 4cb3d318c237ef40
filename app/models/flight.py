"""Flight query and normalized upstream record models."""

from __future__ import annotations

from datetime import datetime
import logging
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.domain.sources import SourceTag
from app.models.base import CamelModel

logger = logging.getLogger("aerodex.models.flight")

QueryMode = Literal["flight", "route"]


class FlightQuery(CamelModel):
    """Inbound flight-tracker request: a flight identifier or a route pair."""

    flight_number: Optional[str] = Field(
        default=None, description="Free-text flight number or callsign"
    )
    aircraft_model: Optional[str] = Field(
        default=None, description="Aircraft type label, passed through for display"
    )
    departure: Optional[str] = Field(default=None, description="Route origin place name")
    arrival: Optional[str] = Field(default=None, description="Route destination place name")

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @property
    def mode(self) -> QueryMode | None:
        has_route = self.departure is not None or self.arrival is not None
        if self.flight_number and not has_route:
            return "flight"
        if self.departure and self.arrival and not self.flight_number:
            return "route"
        return None

    def input_error(self) -> str | None:
        """Describe why the request is unusable, or ``None`` if it is valid."""

        if self.mode is not None:
            return None
        if self.flight_number:
            return "Provide either a flight number or a departure/arrival pair, not both."
        if self.departure or self.arrival:
            return "Both departure and arrival are required for a route search."
        return "A flight number is required."


class RawPositionRecord(BaseModel):
    """One state vector from the OpenSky bulk live-position feed."""

    icao24: Optional[str] = None
    callsign: Optional[str] = None
    origin_country: Optional[str] = None
    time_position: Optional[int] = None
    last_contact: Optional[int] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    baro_altitude: Optional[float] = None
    on_ground: bool = False
    velocity: Optional[float] = None
    true_track: Optional[float] = None
    vertical_rate: Optional[float] = None
    geo_altitude: Optional[float] = None
    squawk: Optional[str] = None
    spi: Optional[bool] = None
    position_source: Optional[int] = None

    model_config = ConfigDict(extra="ignore")

    @property
    def clean_callsign(self) -> str:
        return (self.callsign or "").strip()

    @property
    def is_airborne(self) -> bool:
        return not self.on_ground

    @classmethod
    def from_state(cls, entry: Any) -> Optional["RawPositionRecord"]:
        if not isinstance(entry, (list, tuple)) or len(entry) < 9:
            return None

        def at(index: int) -> Any:
            return entry[index] if len(entry) > index else None

        try:
            return cls(
                icao24=at(0),
                callsign=at(1),
                origin_country=at(2),
                time_position=at(3),
                last_contact=at(4),
                longitude=at(5),
                latitude=at(6),
                baro_altitude=at(7),
                on_ground=bool(at(8)),
                velocity=at(9),
                true_track=at(10),
                vertical_rate=at(11),
                geo_altitude=at(13),
                squawk=at(14),
                spi=at(15),
                position_source=at(16),
            )
        except ValidationError:
            logger.debug("Skipping malformed state vector: %s", entry)
            return None


class RealtimeBlock(BaseModel):
    """Live position and motion reported by a provider."""

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    altitude_m: Optional[float] = Field(default=None, description="Barometric altitude in metres")
    geo_altitude_m: Optional[float] = Field(default=None, description="Geometric altitude in metres")
    velocity_ms: Optional[float] = Field(default=None, description="Ground speed in m/s")
    heading: Optional[float] = Field(default=None, description="Track angle in degrees")
    vertical_rate_ms: Optional[float] = None
    on_ground: Optional[bool] = None
    origin_country: Optional[str] = None
    icao24: Optional[str] = None
    squawk: Optional[str] = None
    last_contact: Optional[datetime] = None
    last_contact_age_seconds: Optional[float] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class AirportTimes(BaseModel):
    """Departure or arrival airport with its timetable."""

    airport: Optional[str] = None
    iata: Optional[str] = None
    icao: Optional[str] = None
    scheduled: Optional[str] = None
    estimated: Optional[str] = None
    actual: Optional[str] = None
    terminal: Optional[str] = None
    gate: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class ScheduleBlock(BaseModel):
    """Timetable information from a schedule provider."""

    airline: Optional[str] = None
    flight_iata: Optional[str] = None
    registration: Optional[str] = None
    flight_status: Optional[str] = None
    departure: Optional[AirportTimes] = None
    arrival: Optional[AirportTimes] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class DetailBlock(BaseModel):
    """Aircraft and routing detail from a detail provider."""

    aircraft_model: Optional[str] = None
    registration: Optional[str] = None
    origin: Optional[str] = None
    destination: Optional[str] = None
    route: Optional[str] = None
    status: Optional[str] = None
    eta: Optional[str] = None

    model_config = ConfigDict(coerce_numbers_to_str=True)


class SearchSnippet(BaseModel):
    """Unstructured search-engine evidence."""

    title: Optional[str] = None
    link: Optional[str] = None
    snippet: Optional[str] = None


class NormalizedFlightRecord(BaseModel):
    """Partial flight record produced by a single source adapter."""

    source: SourceTag
    callsign: Optional[str] = None
    airline: Optional[str] = None
    realtime: Optional[RealtimeBlock] = None
    schedule: Optional[ScheduleBlock] = None
    detail: Optional[DetailBlock] = None
    evidence: list[SearchSnippet] = Field(default_factory=list)


__all__ = [
    "AirportTimes",
    "DetailBlock",
    "FlightQuery",
    "NormalizedFlightRecord",
    "QueryMode",
    "RawPositionRecord",
    "RealtimeBlock",
    "ScheduleBlock",
    "SearchSnippet",
]
