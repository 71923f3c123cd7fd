"""Health module schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    uptime_secs: int
    version: str
