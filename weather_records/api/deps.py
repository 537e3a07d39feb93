import re
from typing import NamedTuple, Optional

from fastapi import HTTPException, Path, Query, Request

from ..services.provider import WeatherProvider
from ..services.store import WeatherStore

INVALID_COORDINATE = "Invalid latitude or longitude"
INVALID_STATION_ID = "Invalid weather record id"
NOT_FOUND = "Weather record not found"

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Coordinate(NamedTuple):
    lat: float
    lon: float


def get_store(request: Request) -> WeatherStore:
    return request.app.state.store


def get_provider(request: Request) -> WeatherProvider:
    return request.app.state.provider


def _parse_float(raw: str) -> float:
    # Surrounding whitespace and digit separators are malformed, though float() takes them
    if raw != raw.strip() or "_" in raw:
        raise ValueError(raw)
    return float(raw)


def _parse_coordinate(lat_raw: Optional[str], lon_raw: Optional[str]) -> Optional[Coordinate]:
    if not lat_raw or not lon_raw:
        return None
    try:
        return Coordinate(_parse_float(lat_raw), _parse_float(lon_raw))
    except ValueError:
        raise HTTPException(status_code=400, detail=INVALID_COORDINATE)


def optional_coordinate(
    lat: Optional[str] = Query(None, description="Latitude, decimal degrees"),
    lon: Optional[str] = Query(None, description="Longitude, decimal degrees"),
    latitude: Optional[str] = Query(None, alias="Latitude", include_in_schema=False),
    longitude: Optional[str] = Query(None, alias="Longitude", include_in_schema=False),
) -> Optional[Coordinate]:
    """Coordinate filter; ``None`` when either half is missing or empty."""
    return _parse_coordinate(
        lat if lat is not None else latitude,
        lon if lon is not None else longitude,
    )


def required_coordinate(
    latitude: Optional[str] = Query(None, alias="Latitude", description="Latitude, decimal degrees"),
    longitude: Optional[str] = Query(None, alias="Longitude", description="Longitude, decimal degrees"),
    lat: Optional[str] = Query(None, include_in_schema=False),
    lon: Optional[str] = Query(None, include_in_schema=False),
) -> Coordinate:
    coordinate = _parse_coordinate(
        latitude if latitude is not None else lat,
        longitude if longitude is not None else lon,
    )
    if coordinate is None:
        raise HTTPException(status_code=400, detail=INVALID_COORDINATE)
    return coordinate


def station_id_path(station_id: str = Path(..., description="Station id")) -> int:
    """Station id from the path.

    Ids are matched on their canonical decimal text, so ``042`` or ``+42``
    never name station 42 and answer 404.
    """
    if not _INTEGER.fullmatch(station_id):
        raise HTTPException(status_code=400, detail=INVALID_STATION_ID)
    value = int(station_id)
    if str(value) != station_id:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return value
