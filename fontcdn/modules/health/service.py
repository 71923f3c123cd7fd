"""Health service - process status and uptime."""

import time

from fontcdn import __version__

from .schemas import HealthResponse


class HealthService:
    """
    Reports uptime relative to a start instant captured once at app build.

    Args:
        started_at: ``time.monotonic()`` value at process start
    """

    def __init__(self, started_at: float) -> None:
        self.started_at = started_at

    def status(self) -> HealthResponse:
        uptime = max(time.monotonic() - self.started_at, 0.0)
        return HealthResponse(status="ok", uptime_secs=int(uptime), version=__version__)
