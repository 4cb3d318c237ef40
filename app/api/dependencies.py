"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Request

from app.config import settings
from app.services.flight_resolver import FlightResolver


def get_flight_resolver(request: Request) -> FlightResolver:
    """Return the resolver built at startup, creating it if the lifespan did not run."""

    resolver = getattr(request.app.state, "flight_resolver", None)
    if resolver is None:
        resolver = FlightResolver.from_settings(settings)
        request.app.state.flight_resolver = resolver
    return resolver


__all__ = ["get_flight_resolver"]
