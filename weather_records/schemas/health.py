from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness plus a summary of the in-memory store."""

    status: Literal["ok"] = "ok"
    version: str
    uptime_s: float = Field(ge=0, description="Seconds since the app was created")
    identity_scheme: Literal["station_id", "coordinate"]
    records: int = Field(ge=0, description="Readings currently held")
