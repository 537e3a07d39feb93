from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Coord(BaseModel):
    lon: Optional[float] = None
    lat: Optional[float] = None


class Condition(BaseModel):
    id: Optional[int] = None
    main: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None


class MainMeasurements(BaseModel):
    temp: Optional[float] = None
    feels_like: Optional[float] = None
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    pressure: Optional[int] = None
    humidity: Optional[int] = None
    sea_level: Optional[int] = None
    grnd_level: Optional[int] = None


class Wind(BaseModel):
    speed: Optional[float] = None
    deg: Optional[int] = None
    gust: Optional[float] = None


class Rain(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    one_h: Optional[float] = Field(default=None, alias="1h")


class Clouds(BaseModel):
    all: Optional[int] = None


class Sys(BaseModel):
    type: Optional[int] = None
    id: Optional[int] = None
    country: Optional[str] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


class WeatherReading(BaseModel):
    """One weather observation in the OpenWeather current-weather shape.

    Every field is optional; serialization with ``exclude_unset`` echoes back
    exactly the fields a client supplied. Identity is either ``id`` (station)
    or ``coord.lat``/``coord.lon``, depending on the deployment.
    """

    coord: Optional[Coord] = None
    weather: Optional[List[Condition]] = None
    base: Optional[str] = None
    main: Optional[MainMeasurements] = None
    visibility: Optional[int] = None
    wind: Optional[Wind] = None
    rain: Optional[Rain] = None
    clouds: Optional[Clouds] = None
    dt: Optional[int] = None
    sys: Optional[Sys] = None
    timezone: Optional[int] = None
    id: Optional[int] = None
    name: Optional[str] = None
    cod: Optional[int] = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "coord": {"lon": 7.367, "lat": 45.133},
                    "weather": [{"id": 501, "main": "Rain", "description": "moderate rain", "icon": "10d"}],
                    "main": {"temp": 284.2, "pressure": 1021, "humidity": 60},
                    "wind": {"speed": 4.09, "deg": 121},
                    "rain": {"1h": 2.73},
                    "dt": 1726660758,
                    "id": 3165523,
                    "name": "Province of Turin",
                    "cod": 200,
                }
            ]
        }
    }

    @property
    def lat(self) -> Optional[float]:
        return self.coord.lat if self.coord else None

    @property
    def lon(self) -> Optional[float]:
        return self.coord.lon if self.coord else None

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str
