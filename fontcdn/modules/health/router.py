"""Health module routes."""

from fastapi import APIRouter, Request

from .schemas import HealthResponse
from .service import HealthService

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health(request: Request) -> HealthResponse:
    """Liveness check. Never fails."""
    service = HealthService(request.app.state.started_at)
    return service.status()
