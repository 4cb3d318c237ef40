"""Aircraft catalog models."""

from __future__ import annotations

from app.models.base import CamelModel


class AircraftSpecifications(CamelModel):
    length: str
    wingspan: str
    height: str
    engines: str


class Aircraft(CamelModel):
    """One entry of the static aircraft encyclopedia."""

    id: str
    name: str
    manufacturer: str
    max_speed: str
    capacity: str
    range: str
    first_flight: str
    description: str
    specifications: AircraftSpecifications
    image: str


__all__ = ["Aircraft", "AircraftSpecifications"]
