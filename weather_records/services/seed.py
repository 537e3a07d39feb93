"""Startup fixture for the weather store."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import structlog
from pydantic import TypeAdapter

from ..schemas.weather import WeatherReading

logger = structlog.get_logger()

DEFAULT_SEED = """
[
  {
    "coord": {"lon": 7.367, "lat": 45.133},
    "weather": [{"id": 501, "main": "Rain", "description": "moderate rain", "icon": "10d"}],
    "base": "stations",
    "main": {"temp": 284.2, "feels_like": 282.93, "temp_min": 283.06, "temp_max": 286.82, "pressure": 1021, "humidity": 60, "sea_level": 1021, "grnd_level": 910},
    "visibility": 10000,
    "wind": {"speed": 4.09, "deg": 121, "gust": 3.47},
    "rain": {"1h": 2.73},
    "clouds": {"all": 83},
    "dt": 1726660758,
    "sys": {"type": 1, "id": 6736, "country": "IT", "sunrise": 1726636384, "sunset": 1726680975},
    "timezone": 7200,
    "id": 3165523,
    "name": "Province of Turin",
    "cod": 200
  }
]
"""

_readings = TypeAdapter(List[WeatherReading])


def load_seed(path: Optional[str] = None) -> List[WeatherReading]:
    """Parse the seed records, from ``path`` when given or the built-in fixture.

    Raises ``pydantic.ValidationError`` if the content is not a JSON array of
    readings, and ``OSError`` if the file cannot be read.
    """
    raw = Path(path).read_text(encoding="utf-8") if path else DEFAULT_SEED
    records = _readings.validate_json(raw)
    logger.info("seed_loaded", source=path or "builtin", records=len(records))
    return records
