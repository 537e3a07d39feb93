from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    app_name: str = "WeatherRecords"
    app_version: str = "0.1.0"
    app_env: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    # Which identity the PUT/DELETE routes match on; one per deployment
    identity_scheme: Literal["station_id", "coordinate"] = "station_id"

    seed_enabled: bool = True
    seed_path: Optional[str] = None

    provider_url: str = "https://api.openweathermap.org/data/2.5/weather"
    provider_api_key: Optional[str] = None
    provider_units: Optional[str] = None
    provider_timeout_s: Optional[float] = None

    # .env support and prefix for clarity
    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
