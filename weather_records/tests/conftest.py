import copy

import pytest
from fastapi.testclient import TestClient

from weather_records.api.main import create_app
from weather_records.config import AppSettings
from weather_records.schemas.weather import WeatherReading
from weather_records.services.provider import ProviderError

TURIN = {
    "coord": {"lon": 7.367, "lat": 45.133},
    "weather": [{"id": 501, "main": "Rain", "description": "moderate rain", "icon": "10d"}],
    "base": "stations",
    "main": {
        "temp": 284.2,
        "feels_like": 282.93,
        "temp_min": 283.06,
        "temp_max": 286.82,
        "pressure": 1021,
        "humidity": 60,
        "sea_level": 1021,
        "grnd_level": 910,
    },
    "visibility": 10000,
    "wind": {"speed": 4.09, "deg": 121, "gust": 3.47},
    "rain": {"1h": 2.73},
    "clouds": {"all": 83},
    "dt": 1726660758,
    "sys": {"type": 1, "id": 6736, "country": "IT", "sunrise": 1726636384, "sunset": 1726680975},
    "timezone": 7200,
    "id": 3165523,
    "name": "Province of Turin",
    "cod": 200,
}

ROME = {
    "coord": {"lon": 12.4964, "lat": 41.9028},
    "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
    "main": {"temp": 295.4, "pressure": 1015, "humidity": 48},
    "wind": {"speed": 2.1, "deg": 270},
    "dt": 1726661000,
    "id": 42,
    "name": "Rome",
    "cod": 200,
}


class FakeProvider:
    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.calls = []
        self.closed = False

    def fetch(self, lat, lon):
        self.calls.append((lat, lon))
        if self.error is not None:
            raise ProviderError(self.error)
        return WeatherReading.model_validate(self.payload)

    def close(self):
        self.closed = True


@pytest.fixture()
def turin():
    return copy.deepcopy(TURIN)


@pytest.fixture()
def rome():
    return copy.deepcopy(ROME)


@pytest.fixture()
def settings():
    return AppSettings(log_level="WARNING", seed_enabled=True, seed_path=None, identity_scheme="station_id")


@pytest.fixture()
def provider(rome):
    return FakeProvider(payload=rome)


@pytest.fixture()
def app(settings, provider):
    return create_app(settings, provider=provider)


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def failing_provider():
    return FakeProvider(error="connection refused")
