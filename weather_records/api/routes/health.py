import time

from fastapi import APIRouter, Depends, Request

from ...schemas.health import HealthResponse
from ...services.store import WeatherStore
from ..deps import get_store

router = APIRouter()


@router.get("", response_model=HealthResponse, summary="Liveness and store size")
def health(request: Request, store: WeatherStore = Depends(get_store)) -> HealthResponse:
    state = request.app.state
    return HealthResponse(
        version=state.settings.app_version,
        uptime_s=max(0.0, time.time() - state.start_time),
        identity_scheme=state.settings.identity_scheme,
        records=len(store),
    )
