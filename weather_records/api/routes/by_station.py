"""Write routes for deployments keyed by station id."""

import structlog
from fastapi import APIRouter, Depends, HTTPException

from ...schemas.weather import ErrorResponse, MessageResponse, WeatherReading
from ...services.store import WeatherStore
from ..deps import NOT_FOUND, get_store, station_id_path

router = APIRouter()
logger = structlog.get_logger()


@router.put(
    "/{station_id}",
    response_model=WeatherReading,
    response_model_exclude_unset=True,
    summary="Replace the reading for a station",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed id or body"},
        404: {"model": ErrorResponse, "description": "No reading for that station"},
    },
)
def update_weather(
    record: WeatherReading,
    station_id: int = Depends(station_id_path),
    store: WeatherStore = Depends(get_store),
) -> WeatherReading:
    if not store.replace_by_id(station_id, record):
        logger.info("record_not_found", station_id=station_id)
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    logger.info("record_replaced", station_id=station_id)
    return record


@router.delete(
    "/{station_id}",
    response_model=MessageResponse,
    summary="Remove the reading for a station",
    responses={
        400: {"model": ErrorResponse, "description": "Malformed id"},
        404: {"model": ErrorResponse, "description": "No reading for that station"},
    },
)
def delete_weather(
    station_id: int = Depends(station_id_path),
    store: WeatherStore = Depends(get_store),
) -> MessageResponse:
    if not store.remove_by_id(station_id):
        logger.info("record_not_found", station_id=station_id)
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    logger.info("record_deleted", station_id=station_id, records=len(store))
    return MessageResponse(message="Deleted successfully")
