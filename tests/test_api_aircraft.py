from fastapi.testclient import TestClient

from app.api.aircraft import load_catalog
from app.main import app

client = TestClient(app)


def test_catalog_entries_have_unique_ids():
    catalog = load_catalog()

    assert len(catalog) == 34
    assert len({aircraft.id for aircraft in catalog}) == len(catalog)


def test_list_aircraft_uses_camel_case_keys():
    response = client.get("/api/aircraft")

    assert response.status_code == 200
    payload = response.json()
    assert len(payload) == 34
    assert {"maxSpeed", "firstFlight", "specifications"} <= set(payload[0])


def test_list_aircraft_filters_by_manufacturer():
    response = client.get("/api/aircraft", params={"manufacturer": "airbus"})

    assert response.status_code == 200
    assert len(response.json()) == 11
    assert all(item["manufacturer"] == "Airbus" for item in response.json())


def test_get_aircraft_by_id():
    response = client.get("/api/aircraft/boeing-717")

    assert response.status_code == 200
    assert response.json()["name"] == "Boeing 717-200"
    assert response.json()["specifications"]["engines"].startswith("2")


def test_get_unknown_aircraft_returns_404():
    response = client.get("/api/aircraft/concorde")

    assert response.status_code == 404
    assert "concorde" in response.json()["error"]
