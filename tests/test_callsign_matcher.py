from app.domain.callsigns import broadened_patterns, build_patterns, match, operator_code
from app.models.flight import RawPositionRecord


def _records(*callsigns):
    return [RawPositionRecord(callsign=callsign) for callsign in callsigns]


def test_build_patterns_orders_variants():
    patterns = build_patterns(" jal 0123 ")

    assert patterns[0] == "JAL 0123"
    assert patterns[1] == "jal 0123"
    assert "JAL0123" in patterns
    assert patterns.index("JAL0123") < patterns.index("JAL123")


def test_match_is_case_insensitive():
    records = _records("JAL123")

    hit = match(build_patterns("jal123"), records)

    assert hit is records[0]


def test_match_treats_zero_padding_as_equivalent():
    records = _records("JAL123  ")

    hit = match(build_patterns("JAL0123"), records)

    assert hit is records[0]


def test_match_pads_short_numbers():
    records = _records("ANA0045")

    assert match(build_patterns("ANA45"), records) is records[0]


def test_match_is_permissive_on_substrings():
    # Intentionally loose: a short operator code matches any callsign containing it.
    records = _records("AAL456")

    assert match(build_patterns("AA"), records) is records[0]


def test_match_translates_iata_airline_codes():
    records = _records("UAL789", "JAL123 ")

    hit = match(build_patterns("JL123"), records)

    assert hit is records[1]


def test_match_breaks_ties_by_feed_order():
    records = _records("JAL1234", "JAL123")

    hit = match(build_patterns("JAL123"), records)

    assert hit is records[0]


def test_match_ignores_blank_callsigns_and_empty_input():
    records = _records("", "   ", None)

    assert match(build_patterns("JAL123"), records) is None
    assert match(build_patterns(""), _records("JAL123")) is None


def test_match_returns_none_without_hit():
    assert match(build_patterns("SKY999"), _records("JAL123", "ANA456")) is None


def test_operator_code_extraction():
    assert operator_code("JAL123") == "JAL"
    assert operator_code("jl 123") == "JL"
    assert operator_code("7G55") == "7G"
    assert operator_code("12345") is None


def test_broadened_patterns_are_longest_first_and_capped():
    assert broadened_patterns("JL123") == ["JAL", "JL"]
    assert broadened_patterns("JAL123") == ["JAL", "JA"]
    assert len(broadened_patterns("NH1")) <= 3
    assert broadened_patterns("123") == []
