from fastapi.testclient import TestClient

from weather_records.api.main import create_app
from weather_records.config import AppSettings


def test_fetch_appends_provider_reading(client, provider, rome):
    resp = client.post("/weather/fetch", params={"Latitude": 41.9028, "Longitude": 12.4964})
    assert resp.status_code == 200
    assert resp.json() == rome
    assert provider.calls == [(41.9028, 12.4964)]

    listed = client.get("/weather").json()
    assert len(listed) == 2
    assert listed[-1] == rome


def test_fetch_is_not_cached(client, provider):
    for _ in range(2):
        assert client.post("/weather/fetch", params={"Latitude": 1, "Longitude": 2}).status_code == 200
    assert len(provider.calls) == 2
    assert len(client.get("/weather").json()) == 3


def test_fetch_requires_coordinates(client, provider):
    resp = client.post("/weather/fetch", params={"Latitude": 41.9})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Invalid latitude or longitude"}

    resp = client.post("/weather/fetch", params={"Latitude": "x", "Longitude": "1"})
    assert resp.status_code == 400
    assert provider.calls == []


def test_fetch_provider_failure_is_500(failing_provider):
    client = TestClient(create_app(AppSettings(log_level="WARNING"), provider=failing_provider))

    resp = client.post("/weather/fetch", params={"Latitude": 1, "Longitude": 2})
    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to fetch weather data"}
    assert len(client.get("/weather").json()) == 1
