"""Domain enums and static reference tables."""

from .airports import Airport, haversine_km, lookup_airport, nearest_airport
from .carriers import IATA_TO_ICAO, carrier_group
from .sources import MERGE_PRIORITY, SOURCE_LABELS, SourceTag, merge_rank

__all__ = [
    "Airport",
    "IATA_TO_ICAO",
    "MERGE_PRIORITY",
    "SOURCE_LABELS",
    "SourceTag",
    "carrier_group",
    "haversine_km",
    "lookup_airport",
    "merge_rank",
    "nearest_airport",
]
