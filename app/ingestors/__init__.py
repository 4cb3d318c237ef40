"""Upstream flight-data source adapters."""

from .aviationstack import AviationStackIngestor
from .base import FlightSourceIngestor, fetch_json
from .flightlabs import FlightLabsIngestor
from .flightradar import FlightRadarIngestor
from .opensky import JAPAN_BBOX, BoundingBox, OpenSkyIngestor
from .serpapi import SerpApiIngestor

__all__ = [
    "AviationStackIngestor",
    "BoundingBox",
    "FlightLabsIngestor",
    "FlightRadarIngestor",
    "FlightSourceIngestor",
    "JAPAN_BBOX",
    "OpenSkyIngestor",
    "SerpApiIngestor",
    "fetch_json",
]
