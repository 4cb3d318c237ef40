from app.domain.carriers import carrier_group
from app.models.flight import RawPositionRecord
from app.services.suggestions import GROUP_LIMITS, build_available_flights


def _state(callsign, on_ground=False):
    return RawPositionRecord(
        callsign=callsign,
        origin_country="Japan",
        latitude=35.0,
        longitude=139.0,
        baro_altitude=9000.0,
        velocity=200.0,
        on_ground=on_ground,
    )


def test_carrier_groups():
    assert carrier_group("ANA1") == 0
    assert carrier_group("UAL2") == 1
    assert carrier_group("XYZ3") == 2


def test_available_flights_put_domestic_carriers_first():
    states = [_state("XYZ3"), _state("UAL2"), _state("ANA1")]

    flights = build_available_flights(states)

    assert [flight.callsign for flight in flights] == ["ANA1", "UAL2", "XYZ3"]
    assert flights[0].altitude == "9000m"
    assert flights[0].speed == "720km/h"


def test_available_flights_skip_grounded_and_blank_callsigns():
    states = [_state("JAL5", on_ground=True), _state("   "), _state(None), _state("SKY7")]

    flights = build_available_flights(states)

    assert [flight.callsign for flight in flights] == ["SKY7"]


def test_available_flights_cap_each_group():
    states = [_state(f"JAL{index}") for index in range(15)]
    states += [_state(f"DAL{index}") for index in range(8)]
    states += [_state(f"QQQ{index}") for index in range(8)]

    flights = build_available_flights(states)

    assert len(flights) == sum(GROUP_LIMITS.values())
    assert flights[0].callsign == "JAL0"
    assert flights[9].callsign == "JAL9"
    assert flights[10].callsign == "DAL0"
    assert flights[15].callsign == "QQQ0"
