#!/usr/bin/env python
"""
Run this to exercise the live providers and the full resolver for one flight.

Providers without an API key in the environment are skipped, exactly as in the
running service.

Usage (from repo root):
    python scripts/tests/run_flight_lookup_live.py JL123
    python scripts/tests/run_flight_lookup_live.py --route Haneda Fukuoka
"""

import argparse
import asyncio
import json

from app.config import load_settings
from app.ingestors import JAPAN_BBOX, OpenSkyIngestor
from app.models.flight import FlightQuery
from app.services import FlightResolver


async def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("flight_number", nargs="?", default="JAL123")
    parser.add_argument("--route", nargs=2, metavar=("DEPARTURE", "ARRIVAL"))
    args = parser.parse_args()

    settings = load_settings()
    resolver = FlightResolver.from_settings(settings)
    print(f"=== Enabled providers: {', '.join(resolver.provider_tags)} ===\n")

    # --- Position feed sanity check ---
    print("Requesting regional state vectors from OpenSky...")
    states = await OpenSkyIngestor().get_states(JAPAN_BBOX)
    if states is None:
        print("OpenSky request failed.\n")
    else:
        airborne = [state for state in states if not state.on_ground]
        print(f"Received {len(states)} states ({len(airborne)} airborne). Showing a few:")
        for idx, state in enumerate(airborne[:5], start=1):
            print(
                f"{idx}. callsign={state.clean_callsign!r}, country={state.origin_country!r}, "
                f"lat={state.latitude}, lon={state.longitude}, alt_m={state.baro_altitude}"
            )
        print()

    # --- Full resolution ---
    if args.route:
        query = FlightQuery(departure=args.route[0], arrival=args.route[1])
    else:
        query = FlightQuery(flight_number=args.flight_number)
    print(f"Resolving {query.model_dump(exclude_none=True)} ...")
    result = await resolver.resolve(query)
    print(f"\n{type(result).__name__}:")
    print(json.dumps(result.to_json_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    asyncio.run(main())
