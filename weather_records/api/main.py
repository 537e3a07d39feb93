from typing import Optional

import time
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import AppSettings
from ..logging import init_logging
from ..services.provider import OpenWeatherClient, WeatherProvider
from ..services.seed import load_seed
from ..services.store import WeatherStore
from .middleware import (
    RequestIDMiddleware,
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from .routes import by_coordinate, by_station, health, weather

logger = structlog.get_logger()


def create_app(
    settings: Optional[AppSettings] = None,
    store: Optional[WeatherStore] = None,
    provider: Optional[WeatherProvider] = None,
) -> FastAPI:
    settings = settings or AppSettings()
    init_logging(settings.log_level, app_name=settings.app_name)
    owns_provider = provider is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if owns_provider:
            app.state.provider = OpenWeatherClient.from_settings(settings)
        logger.info(
            "startup",
            identity_scheme=settings.identity_scheme,
            records=len(app.state.store),
        )
        yield
        # Injected providers belong to the caller; the store is left for reuse
        if owns_provider:
            app.state.provider.close()
        logger.info("shutdown", records=len(app.state.store))

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "health", "description": "Service health and uptime"},
            {"name": "weather", "description": "Stored weather readings"},
        ],
    )

    app.add_middleware(RequestIDMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(weather.router, prefix="/weather", tags=["weather"])
    if settings.identity_scheme == "coordinate":
        app.include_router(by_coordinate.router, prefix="/weather", tags=["weather"])
    else:
        app.include_router(by_station.router, prefix="/weather", tags=["weather"])

    app.state.settings = settings
    app.state.start_time = time.time()
    # State is built here rather than in lifespan so tests without lifespan still work
    if store is None:
        store = WeatherStore(load_seed(settings.seed_path) if settings.seed_enabled else None)
    app.state.store = store
    app.state.provider = OpenWeatherClient.from_settings(settings) if owns_provider else provider

    return app


if __name__ == "__main__":
    import uvicorn

    s = AppSettings()
    uvicorn.run(create_app(s), host=s.host, port=s.port)
