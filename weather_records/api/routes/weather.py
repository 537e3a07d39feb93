from typing import List, Optional, Union

import structlog
from fastapi import APIRouter, Depends, HTTPException

from ...schemas.weather import ErrorResponse, WeatherReading
from ...services.provider import ProviderError, WeatherProvider
from ...services.store import WeatherStore
from ..deps import NOT_FOUND, Coordinate, get_provider, get_store, optional_coordinate, required_coordinate

router = APIRouter()
logger = structlog.get_logger()


@router.get(
    "",
    response_model=Union[List[WeatherReading], WeatherReading],
    response_model_exclude_unset=True,
    summary="List readings, or look one up by coordinate",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed coordinate"},
        404: {"model": ErrorResponse, "description": "No reading at that coordinate"},
    },
)
def get_weather(
    coordinate: Optional[Coordinate] = Depends(optional_coordinate),
    store: WeatherStore = Depends(get_store),
):
    if coordinate is None:
        return store.all()

    record = store.find_by_coordinate(coordinate.lat, coordinate.lon)
    if record is None:
        logger.info("record_not_found", lat=coordinate.lat, lon=coordinate.lon)
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return record


@router.post(
    "",
    status_code=201,
    response_model=WeatherReading,
    response_model_exclude_unset=True,
    summary="Add a reading",
    responses={400: {"model": ErrorResponse, "description": "Malformed body"}},
)
def create_weather(record: WeatherReading, store: WeatherStore = Depends(get_store)) -> WeatherReading:
    stored = store.append(record)
    logger.info("record_created", station_id=stored.id, records=len(store))
    return stored


@router.post(
    "/fetch",
    response_model=WeatherReading,
    response_model_exclude_unset=True,
    summary="Fetch the current reading from the provider and store it",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed coordinate"},
        500: {"model": ErrorResponse, "description": "Provider unreachable or returned an unusable body"},
    },
)
def fetch_weather(
    coordinate: Coordinate = Depends(required_coordinate),
    store: WeatherStore = Depends(get_store),
    provider: WeatherProvider = Depends(get_provider),
) -> WeatherReading:
    try:
        record = provider.fetch(coordinate.lat, coordinate.lon)
    except ProviderError:
        raise HTTPException(status_code=500, detail="Failed to fetch weather data")

    stored = store.append(record)
    logger.info("record_fetched", station_id=stored.id, lat=coordinate.lat, lon=coordinate.lon)
    return stored
