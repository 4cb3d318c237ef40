"""Deterministic composition of a flight response from adapter records."""

from __future__ import annotations

import json
import logging
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from app.domain.airports import nearest_airport
from app.domain.sources import SOURCE_LABELS, merge_rank
from app.models.flight import AirportTimes, FlightQuery, NormalizedFlightRecord
from app.models.responses import (
    UNKNOWN,
    AirportSummary,
    ComposedFlightResponse,
    CurrentLocation,
)

logger = logging.getLogger("aerodex.composer")

T = TypeVar("T")

M_TO_FEET = 3.28084
MS_TO_KMH = 3.6
MS_TO_KNOTS = 1.94384


def format_altitude(altitude_m: float | None) -> str:
    if altitude_m is None:
        return UNKNOWN
    return f"{round(altitude_m)}m"


def format_speed(velocity_ms: float | None) -> str:
    if velocity_ms is None:
        return UNKNOWN
    return f"{round(velocity_ms * MS_TO_KMH)}km/h"


def _humanize_status(value: str) -> str:
    return value.replace("_", " ").strip().capitalize()


def order_records(records: Iterable[NormalizedFlightRecord]) -> list[NormalizedFlightRecord]:
    """Sort records by merge priority so completion order never matters."""

    return sorted(records, key=lambda record: merge_rank(record.source))


def _first(records: Sequence[NormalizedFlightRecord], getter: Callable[[NormalizedFlightRecord], Optional[T]]) -> Optional[T]:
    for record in records:
        value = getter(record)
        if value is not None and value != "":
            return value
    return None


def _airport_summary(times: AirportTimes | None) -> AirportSummary:
    if times is None:
        return AirportSummary()
    return AirportSummary(
        airport=times.airport or UNKNOWN,
        iata=times.iata or UNKNOWN,
        scheduled=times.scheduled or UNKNOWN,
        estimated=times.estimated or UNKNOWN,
        actual=times.actual or UNKNOWN,
        terminal=times.terminal or UNKNOWN,
        gate=times.gate or UNKNOWN,
    )


def compose_response(
    query: FlightQuery, records: Sequence[NormalizedFlightRecord]
) -> ComposedFlightResponse:
    """Build a fully populated response from whatever fields the adapters supplied."""

    ordered = order_records(records)

    located = _first(
        ordered,
        lambda r: r.realtime
        if r.realtime and r.realtime.latitude is not None and r.realtime.longitude is not None
        else None,
    )
    altitude_m = _first(
        ordered,
        lambda r: (r.realtime.altitude_m if r.realtime.altitude_m is not None else r.realtime.geo_altitude_m)
        if r.realtime
        else None,
    )
    velocity_ms = _first(ordered, lambda r: r.realtime.velocity_ms if r.realtime else None)
    on_ground = _first(ordered, lambda r: r.realtime.on_ground if r.realtime else None)
    origin_country = _first(ordered, lambda r: r.realtime.origin_country if r.realtime else None)

    departure = _first(ordered, lambda r: r.schedule.departure if r.schedule else None)
    arrival = _first(ordered, lambda r: r.schedule.arrival if r.schedule else None)
    schedule_status = _first(ordered, lambda r: r.schedule.flight_status if r.schedule else None)
    detail_status = _first(ordered, lambda r: r.detail.status if r.detail else None)

    if on_ground is True:
        status = "On the ground"
    elif on_ground is False:
        status = "In flight"
    elif schedule_status or detail_status:
        status = _humanize_status(schedule_status or detail_status)
    else:
        status = UNKNOWN

    location = CurrentLocation(region=origin_country or UNKNOWN)
    if located is not None:
        location.latitude = located.latitude
        location.longitude = located.longitude
        airport = nearest_airport(located.latitude, located.longitude)
        if airport is not None:
            location.city = airport.city
            location.region = airport.region

    origin = (
        (departure.airport if departure else None)
        or _first(ordered, lambda r: r.detail.origin if r.detail else None)
        or origin_country
        or UNKNOWN
    )
    destination = (
        (arrival.airport if arrival else None)
        or _first(ordered, lambda r: r.detail.destination if r.detail else None)
        or UNKNOWN
    )
    estimated_arrival = (
        ((arrival.estimated or arrival.scheduled) if arrival else None)
        or _first(ordered, lambda r: r.detail.eta if r.detail else None)
        or UNKNOWN
    )

    flight_number = (query.flight_number or "").upper() or UNKNOWN
    callsign = _first(ordered, lambda r: r.callsign) or UNKNOWN
    airline = (
        _first(ordered, lambda r: r.airline)
        or _first(ordered, lambda r: r.schedule.airline if r.schedule else None)
        or UNKNOWN
    )
    aircraft_model = (
        _first(ordered, lambda r: r.detail.aircraft_model if r.detail else None)
        or query.aircraft_model
        or UNKNOWN
    )

    data_sources: list[str] = []
    for record in ordered:
        if record.source.value not in data_sources:
            data_sources.append(record.source.value)

    labels = ", ".join(SOURCE_LABELS[record.source] for record in ordered)
    message = f"Flight {callsign if callsign != UNKNOWN else flight_number}: data compiled from {labels}."
    if located is None:
        message = f"{message} Live position is not available."

    response = ComposedFlightResponse(
        status=status,
        current_location=location,
        origin=origin,
        destination=destination,
        altitude=format_altitude(altitude_m),
        speed=format_speed(velocity_ms),
        estimated_arrival=estimated_arrival,
        weather=UNKNOWN,
        message=message,
        flight_number=flight_number,
        callsign=callsign,
        airline=airline,
        aircraft_model=aircraft_model,
        departure=_airport_summary(departure),
        arrival=_airport_summary(arrival),
        data_sources=data_sources,
    )
    logger.debug("Composed flight response: %s", response)
    return response


def _describe_record(record: NormalizedFlightRecord) -> list[str]:
    lines = [f"Source: {SOURCE_LABELS[record.source]}"]
    if record.callsign:
        lines.append(f"- Callsign: {record.callsign}")
    if record.airline:
        lines.append(f"- Airline: {record.airline}")

    realtime = record.realtime
    if realtime:
        if realtime.latitude is not None and realtime.longitude is not None:
            lines.append(f"- Position: {realtime.latitude:.4f}, {realtime.longitude:.4f}")
        if realtime.altitude_m is not None:
            lines.append(
                f"- Barometric altitude: {realtime.altitude_m:.0f} m ({realtime.altitude_m * M_TO_FEET:.0f} ft)"
            )
        if realtime.geo_altitude_m is not None:
            lines.append(f"- Geometric altitude: {realtime.geo_altitude_m:.0f} m")
        if realtime.velocity_ms is not None:
            lines.append(
                f"- Ground speed: {realtime.velocity_ms * MS_TO_KMH:.0f} km/h ({realtime.velocity_ms * MS_TO_KNOTS:.0f} kt)"
            )
        if realtime.heading is not None:
            lines.append(f"- Heading: {realtime.heading:.0f} deg")
        if realtime.vertical_rate_ms is not None:
            lines.append(f"- Vertical rate: {realtime.vertical_rate_ms:.1f} m/s")
        if realtime.on_ground is not None:
            lines.append(f"- On ground: {'yes' if realtime.on_ground else 'no'}")
        if realtime.origin_country:
            lines.append(f"- Origin country: {realtime.origin_country}")
        if realtime.icao24:
            lines.append(f"- ICAO24: {realtime.icao24}")
        if realtime.last_contact:
            lines.append(f"- Last contact: {realtime.last_contact.isoformat()}")

    schedule = record.schedule
    if schedule:
        if schedule.flight_status:
            lines.append(f"- Flight status: {schedule.flight_status}")
        if schedule.registration:
            lines.append(f"- Registration: {schedule.registration}")
        for label, times in (("Departure", schedule.departure), ("Arrival", schedule.arrival)):
            if times is None:
                continue
            described = ", ".join(
                f"{key}={value}"
                for key, value in times.model_dump(exclude_none=True).items()
            )
            lines.append(f"- {label}: {described or 'no details'}")

    detail = record.detail
    if detail:
        for key, value in detail.model_dump(exclude_none=True).items():
            lines.append(f"- {key.replace('_', ' ').capitalize()}: {value}")

    for snippet in record.evidence:
        lines.append(f"- Search result: {snippet.title or ''} {snippet.snippet or ''}".rstrip())
    return lines


def build_generation_prompt(
    query: FlightQuery,
    records: Sequence[NormalizedFlightRecord],
    baseline: ComposedFlightResponse,
) -> str:
    """Construct the one-shot prompt embedding every collected field."""

    lines: list[str] = [
        "Summarize the following real flight-tracking data for a traveller.",
        f"Requested flight: {query.flight_number}",
    ]
    if query.aircraft_model:
        lines.append(f"Aircraft model selected by the user: {query.aircraft_model}")

    for record in order_records(records):
        lines.append("")
        lines.extend(_describe_record(record))

    template = baseline.to_json_dict()
    template.pop("dataSources", None)
    lines.extend(
        [
            "",
            "Return a JSON object with exactly these keys. The values below were computed "
            "directly from the data; keep them unless the data supports a better value. "
            "Infer city, region, origin, destination, estimatedArrival and weather where "
            "reasonable and write a one or two sentence human-readable message.",
            json.dumps(template, ensure_ascii=False, indent=2),
        ]
    )
    return "\n".join(lines)


__all__ = [
    "build_generation_prompt",
    "compose_response",
    "format_altitude",
    "format_speed",
    "order_records",
]
