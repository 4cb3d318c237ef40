"""Airline operator codes used for callsign translation and suggestion ordering."""

from __future__ import annotations

# ICAO operator prefixes of Japanese carriers.
DOMESTIC_CARRIER_PREFIXES: tuple[str, ...] = (
    "JAL",  # Japan Airlines
    "ANA",  # All Nippon Airways
    "JJP",  # Jetstar Japan
    "APJ",  # Peach Aviation
    "SKY",  # Skymark Airlines
    "ADO",  # Air Do
    "SFJ",  # StarFlyer
    "SNJ",  # Solaseed Air
    "JTA",  # Japan Transocean Air
    "TZP",  # ZIPAIR
    "IBX",  # IBEX Airlines
    "FDA",  # Fuji Dream Airlines
    "JAC",  # Japan Air Commuter
    "AKX",  # ANA Wings
    "JEX",  # J-Air
)

# Frequent international operators in the Japan region.
INTERNATIONAL_CARRIER_PREFIXES: tuple[str, ...] = (
    "UAL",
    "AAL",
    "DAL",
    "KAL",
    "AAR",
    "CPA",
    "SIA",
    "THA",
    "CAL",
    "EVA",
    "CES",
    "CCA",
    "CSN",
    "QFA",
    "BAW",
    "AFR",
    "DLH",
    "KLM",
    "UAE",
    "QTR",
    "FDX",
    "UPS",
)

# IATA airline designator -> ICAO operator code, for user input such as "JL123".
IATA_TO_ICAO: dict[str, str] = {
    "JL": "JAL",
    "NH": "ANA",
    "GK": "JJP",
    "MM": "APJ",
    "BC": "SKY",
    "HD": "ADO",
    "7G": "SFJ",
    "6J": "SNJ",
    "NU": "JTA",
    "ZG": "TZP",
    "FW": "IBX",
    "JH": "FDA",
    "UA": "UAL",
    "AA": "AAL",
    "DL": "DAL",
    "KE": "KAL",
    "OZ": "AAR",
    "CX": "CPA",
    "SQ": "SIA",
    "TG": "THA",
    "CI": "CAL",
    "BR": "EVA",
    "MU": "CES",
    "CA": "CCA",
    "CZ": "CSN",
    "QF": "QFA",
    "BA": "BAW",
    "AF": "AFR",
    "LH": "DLH",
    "KL": "KLM",
    "EK": "UAE",
    "QR": "QTR",
    "FX": "FDX",
    "5X": "UPS",
}

DOMESTIC_GROUP = 0
INTERNATIONAL_GROUP = 1
OTHER_GROUP = 2


def carrier_group(callsign: str | None) -> int:
    """Classify a callsign as domestic, international allow-listed, or other."""

    code = (callsign or "").strip().upper()
    if code.startswith(DOMESTIC_CARRIER_PREFIXES):
        return DOMESTIC_GROUP
    if code.startswith(INTERNATIONAL_CARRIER_PREFIXES):
        return INTERNATIONAL_GROUP
    return OTHER_GROUP


__all__ = [
    "DOMESTIC_CARRIER_PREFIXES",
    "DOMESTIC_GROUP",
    "IATA_TO_ICAO",
    "INTERNATIONAL_CARRIER_PREFIXES",
    "INTERNATIONAL_GROUP",
    "OTHER_GROUP",
    "carrier_group",
]
