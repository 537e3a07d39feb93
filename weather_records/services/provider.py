from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

import requests
import structlog
from pydantic import ValidationError

from ..config import AppSettings
from ..schemas.weather import WeatherReading

logger = structlog.get_logger()


class ProviderError(RuntimeError):
    """Raised when the upstream provider cannot be reached or decoded."""


class WeatherProvider(Protocol):
    """Source of current weather readings for a coordinate."""

    def fetch(self, lat: float, lon: float) -> WeatherReading:
        """Fetch the current reading at ``lat``/``lon``.

        Raises
        ------
        ProviderError
            On any connection, HTTP status, or decoding failure. Callers do
            not distinguish between causes.
        """
        ...

    def close(self) -> None:
        ...


@dataclass
class OpenWeatherClient:
    """OpenWeather current-weather implementation of `WeatherProvider`.

    Notes:
    - One GET per call; no retries and no caching of repeated coordinates.
    - ``timeout`` of ``None`` leaves the requests default (no timeout).
    - The response body already has the reading shape, so it is validated
      as-is; unknown fields are dropped.
    """

    base_url: str = "https://api.openweathermap.org/data/2.5/weather"
    api_key: Optional[str] = None
    units: Optional[str] = None
    timeout: Optional[float] = None
    session: requests.Session = field(default_factory=requests.Session)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "OpenWeatherClient":
        return cls(
            base_url=settings.provider_url,
            api_key=settings.provider_api_key,
            units=settings.provider_units,
            timeout=settings.provider_timeout_s,
        )

    def fetch(self, lat: float, lon: float) -> WeatherReading:
        params = {"lat": lat, "lon": lon}
        if self.api_key:
            params["appid"] = self.api_key
        if self.units:
            params["units"] = self.units

        try:
            resp = self.session.get(self.base_url, params=params, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
            return WeatherReading.model_validate(data)
        except (requests.RequestException, ValueError, ValidationError) as e:
            logger.warning("provider_fetch_failed", lat=lat, lon=lon, error=str(e))
            raise ProviderError(str(e)) from e

    def close(self) -> None:
        self.session.close()
