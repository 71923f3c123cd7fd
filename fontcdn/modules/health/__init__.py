"""Health module - liveness and uptime."""

from .router import router
from .service import HealthService

__all__ = ["router", "HealthService"]
