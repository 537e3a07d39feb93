"""Write routes for deployments keyed by latitude/longitude."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from ...schemas.weather import ErrorResponse, MessageResponse, WeatherReading
from ...services.store import WeatherStore
from ..deps import NOT_FOUND, Coordinate, get_store, required_coordinate

router = APIRouter()
logger = structlog.get_logger()


@router.put(
    "",
    response_model=WeatherReading,
    response_model_exclude_unset=True,
    summary="Replace the reading at a coordinate",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed coordinate or body"},
        404: {"model": ErrorResponse, "description": "No reading at that coordinate"},
    },
)
def update_weather(
    record: WeatherReading,
    coordinate: Coordinate = Depends(required_coordinate),
    store: WeatherStore = Depends(get_store),
) -> WeatherReading:
    if not store.replace_by_coordinate(coordinate.lat, coordinate.lon, record):
        logger.info("record_not_found", lat=coordinate.lat, lon=coordinate.lon)
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    logger.info("record_replaced", lat=coordinate.lat, lon=coordinate.lon)
    return record


@router.delete(
    "",
    response_model=MessageResponse,
    summary="Remove the reading at a coordinate",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed coordinate"},
        404: {"model": ErrorResponse, "description": "No reading at that coordinate"},
    },
)
def delete_weather(
    coordinate: Coordinate = Depends(required_coordinate),
    store: WeatherStore = Depends(get_store),
) -> MessageResponse:
    if not store.remove_by_coordinate(coordinate.lat, coordinate.lon):
        logger.info("record_not_found", lat=coordinate.lat, lon=coordinate.lon)
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    logger.info("record_deleted", lat=coordinate.lat, lon=coordinate.lon, records=len(store))
    return MessageResponse(message="Deleted successfully")
