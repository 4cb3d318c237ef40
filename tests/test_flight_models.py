import pytest

from app.models.flight import FlightQuery, RawPositionRecord


@pytest.mark.parametrize(
    "payload, mode",
    [
        ({"flightNumber": "JL123"}, "flight"),
        ({"flight_number": "JL123", "aircraftModel": "B767"}, "flight"),
        ({"departure": "Tokyo", "arrival": "Osaka"}, "route"),
        ({"departure": "Tokyo"}, None),
        ({"flightNumber": "JL123", "arrival": "Osaka"}, None),
        ({"flightNumber": "  "}, None),
        ({}, None),
    ],
)
def test_flight_query_mode(payload, mode):
    query = FlightQuery.model_validate(payload)

    assert query.mode == mode
    assert (query.input_error() is None) == (mode is not None)


def test_flight_query_input_errors_name_the_problem():
    assert "not both" in FlightQuery(flight_number="JL1", departure="HND").input_error()
    assert "Both departure and arrival" in FlightQuery(arrival="ITM").input_error()
    assert "flight number is required" in FlightQuery().input_error()


def test_raw_position_record_from_short_state_vector():
    record = RawPositionRecord.from_state(["abc123", "JAL1    ", "Japan", 1, 2, 139.0, 35.0, None, True])

    assert record.clean_callsign == "JAL1"
    assert record.on_ground is True
    assert not record.is_airborne
    assert record.velocity is None


@pytest.mark.parametrize("entry", [None, "JAL1", [1, 2, 3], ["abc", "JAL1", "Japan", 1, 2, "west", 35.0, 0, False]])
def test_raw_position_record_rejects_malformed_vectors(entry):
    assert RawPositionRecord.from_state(entry) is None
