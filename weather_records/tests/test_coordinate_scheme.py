import pytest
from fastapi.testclient import TestClient

from weather_records.api.main import create_app
from weather_records.config import AppSettings


@pytest.fixture()
def client(provider):
    settings = AppSettings(log_level="WARNING", identity_scheme="coordinate")
    return TestClient(create_app(settings, provider=provider))


def test_update_by_coordinate(client):
    updated = {"coord": {"lat": 45.133, "lon": 7.367}, "name": "Torino", "main": {"temp": 280.0}}

    resp = client.put("/weather", params={"Latitude": 45.133, "Longitude": 7.367}, json=updated)
    assert resp.status_code == 200
    assert resp.json() == updated
    assert client.get("/weather").json() == [updated]


def test_update_unknown_coordinate_is_404(client):
    resp = client.put("/weather", params={"Latitude": 1, "Longitude": 1}, json={"name": "x"})
    assert resp.status_code == 404
    assert resp.json() == {"error": "Weather record not found"}


def test_update_requires_coordinate(client):
    resp = client.put("/weather", json={"name": "x"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid latitude or longitude"}


def test_delete_by_coordinate(client):
    resp = client.delete("/weather", params={"Latitude": "45.133", "Longitude": "7.367"})
    assert resp.status_code == 200
    assert resp.json() == {"message": "Deleted successfully"}
    assert client.get("/weather").json() == []


def test_delete_accepts_lowercase_params(client):
    resp = client.delete("/weather", params={"lat": "45.133", "lon": "7.367"})
    assert resp.status_code == 200


def test_delete_malformed_coordinate_is_400(client):
    resp = client.delete("/weather", params={"Latitude": "north", "Longitude": "7.367"})
    assert resp.status_code == 400
    assert len(client.get("/weather").json()) == 1


def test_delete_rejects_separated_number(client):
    resp = client.delete("/weather", params={"Latitude": "45.133", "Longitude": "7_367"})
    assert resp.status_code == 400
    assert len(client.get("/weather").json()) == 1


def test_delete_coordinate_matching_is_exact(client):
    resp = client.delete("/weather", params={"Latitude": "45.1330001", "Longitude": "7.367"})
    assert resp.status_code == 404


def test_id_routes_absent_in_coordinate_deployment(client):
    assert client.delete("/weather/3165523").status_code == 404
    assert client.put("/weather/3165523", json={"id": 1}).status_code == 404
    assert len(client.get("/weather").json()) == 1


def test_health_reports_coordinate_scheme(client):
    data = client.get("/health").json()
    assert data["identity_scheme"] == "coordinate"
    assert data["records"] == 1
