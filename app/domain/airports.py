"""Reference airports used for route lookups and location inference."""

from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class Airport:
    """Static airport reference entry."""

    icao: str
    iata: str
    name: str
    city: str
    region: str
    latitude: float
    longitude: float


AIRPORTS: tuple[Airport, ...] = (
    Airport("RJTT", "HND", "Tokyo Haneda Airport", "Tokyo", "Kanto, Japan", 35.5494, 139.7798),
    Airport("RJAA", "NRT", "Narita International Airport", "Narita", "Kanto, Japan", 35.7720, 140.3929),
    Airport("RJBB", "KIX", "Kansai International Airport", "Osaka", "Kansai, Japan", 34.4347, 135.2440),
    Airport("RJOO", "ITM", "Osaka Itami Airport", "Osaka", "Kansai, Japan", 34.7855, 135.4382),
    Airport("RJGG", "NGO", "Chubu Centrair International Airport", "Nagoya", "Chubu, Japan", 34.8584, 136.8054),
    Airport("RJCC", "CTS", "New Chitose Airport", "Sapporo", "Hokkaido, Japan", 42.7752, 141.6923),
    Airport("RJFF", "FUK", "Fukuoka Airport", "Fukuoka", "Kyushu, Japan", 33.5859, 130.4507),
    Airport("ROAH", "OKA", "Naha Airport", "Naha", "Okinawa, Japan", 26.1958, 127.6459),
    Airport("RJSS", "SDJ", "Sendai Airport", "Sendai", "Tohoku, Japan", 38.1397, 140.9170),
    Airport("RJOA", "HIJ", "Hiroshima Airport", "Hiroshima", "Chugoku, Japan", 34.4361, 132.9194),
    Airport("RJFK", "KOJ", "Kagoshima Airport", "Kagoshima", "Kyushu, Japan", 31.8034, 130.7194),
    Airport("RKSI", "ICN", "Incheon International Airport", "Seoul", "South Korea", 37.4602, 126.4407),
    Airport("RCTP", "TPE", "Taiwan Taoyuan International Airport", "Taipei", "Taiwan", 25.0777, 121.2330),
    Airport("VHHH", "HKG", "Hong Kong International Airport", "Hong Kong", "Hong Kong", 22.3080, 113.9185),
    Airport("ZSPD", "PVG", "Shanghai Pudong International Airport", "Shanghai", "China", 31.1443, 121.8083),
    Airport("ZBAA", "PEK", "Beijing Capital International Airport", "Beijing", "China", 40.0799, 116.6031),
    Airport("WSSS", "SIN", "Singapore Changi Airport", "Singapore", "Singapore", 1.3644, 103.9915),
    Airport("VTBS", "BKK", "Suvarnabhumi Airport", "Bangkok", "Thailand", 13.6900, 100.7501),
    Airport("PHNL", "HNL", "Daniel K. Inouye International Airport", "Honolulu", "Hawaii, USA", 21.3187, -157.9225),
    Airport("KLAX", "LAX", "Los Angeles International Airport", "Los Angeles", "California, USA", 33.9416, -118.4085),
    Airport("KSFO", "SFO", "San Francisco International Airport", "San Francisco", "California, USA", 37.6213, -122.3790),
    Airport("KJFK", "JFK", "John F. Kennedy International Airport", "New York", "New York, USA", 40.6413, -73.7781),
    Airport("EGLL", "LHR", "London Heathrow Airport", "London", "United Kingdom", 51.4700, -0.4543),
    Airport("LFPG", "CDG", "Paris Charles de Gaulle Airport", "Paris", "France", 49.0097, 2.5479),
    Airport("EDDF", "FRA", "Frankfurt Airport", "Frankfurt", "Germany", 50.0379, 8.5622),
    Airport("OMDB", "DXB", "Dubai International Airport", "Dubai", "United Arab Emirates", 25.2532, 55.3657),
    Airport("YSSY", "SYD", "Sydney Kingsford Smith Airport", "Sydney", "Australia", -33.9399, 151.1753),
)

_BY_CODE: dict[str, Airport] = {}
for _airport in AIRPORTS:
    _BY_CODE[_airport.icao] = _airport
    _BY_CODE[_airport.iata] = _airport

# Common free-text place names, English and Japanese.
PLACE_NAMES: dict[str, str] = {
    "tokyo": "RJTT",
    "haneda": "RJTT",
    "東京": "RJTT",
    "羽田": "RJTT",
    "narita": "RJAA",
    "成田": "RJAA",
    "osaka": "RJBB",
    "kansai": "RJBB",
    "大阪": "RJBB",
    "関西": "RJBB",
    "itami": "RJOO",
    "伊丹": "RJOO",
    "nagoya": "RJGG",
    "chubu": "RJGG",
    "centrair": "RJGG",
    "名古屋": "RJGG",
    "中部": "RJGG",
    "sapporo": "RJCC",
    "chitose": "RJCC",
    "new chitose": "RJCC",
    "札幌": "RJCC",
    "新千歳": "RJCC",
    "fukuoka": "RJFF",
    "福岡": "RJFF",
    "okinawa": "ROAH",
    "naha": "ROAH",
    "沖縄": "ROAH",
    "那覇": "ROAH",
    "sendai": "RJSS",
    "仙台": "RJSS",
    "hiroshima": "RJOA",
    "広島": "RJOA",
    "kagoshima": "RJFK",
    "鹿児島": "RJFK",
    "seoul": "RKSI",
    "incheon": "RKSI",
    "ソウル": "RKSI",
    "taipei": "RCTP",
    "台北": "RCTP",
    "hong kong": "VHHH",
    "香港": "VHHH",
    "shanghai": "ZSPD",
    "上海": "ZSPD",
    "beijing": "ZBAA",
    "北京": "ZBAA",
    "singapore": "WSSS",
    "シンガポール": "WSSS",
    "bangkok": "VTBS",
    "バンコク": "VTBS",
    "honolulu": "PHNL",
    "hawaii": "PHNL",
    "ホノルル": "PHNL",
    "ハワイ": "PHNL",
    "los angeles": "KLAX",
    "ロサンゼルス": "KLAX",
    "san francisco": "KSFO",
    "サンフランシスコ": "KSFO",
    "new york": "KJFK",
    "ニューヨーク": "KJFK",
    "london": "EGLL",
    "ロンドン": "EGLL",
    "paris": "LFPG",
    "パリ": "LFPG",
    "frankfurt": "EDDF",
    "フランクフルト": "EDDF",
    "dubai": "OMDB",
    "ドバイ": "OMDB",
    "sydney": "YSSY",
    "シドニー": "YSSY",
}


def lookup_airport(text: str | None) -> Airport | None:
    """Resolve a place name or ICAO/IATA code to a reference airport."""

    if not text:
        return None
    key = text.strip()
    if not key:
        return None
    code = PLACE_NAMES.get(key.lower()) or PLACE_NAMES.get(key)
    if code:
        return _BY_CODE[code]
    return _BY_CODE.get(key.upper())


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates in kilometres."""

    r_km = 6371.0
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(
        d_lambda / 2
    ) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return r_km * c


def nearest_airport(lat: float, lon: float, max_km: float = 150.0) -> Airport | None:
    """Return the closest reference airport within ``max_km``, if any."""

    best: tuple[float, Airport] | None = None
    for airport in AIRPORTS:
        distance = haversine_km(lat, lon, airport.latitude, airport.longitude)
        if distance <= max_km and (best is None or distance < best[0]):
            best = (distance, airport)
    return best[1] if best else None


__all__ = [
    "AIRPORTS",
    "Airport",
    "PLACE_NAMES",
    "haversine_km",
    "lookup_airport",
    "nearest_airport",
]
