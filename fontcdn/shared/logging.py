"""
Logging setup and per-request logging context.

Every record carries the current request id (``-`` outside a request) so the
lines of one request can be grepped together.
"""

import logging
import sys
from contextvars import ContextVar

from fontcdn.shared.types import RequestContext

LOG_FORMAT = "%(asctime)s %(levelname)s [%(request_id)s] %(name)s: %(message)s"

_request_context: ContextVar[RequestContext | None] = ContextVar(
    "fontcdn_request_context", default=None
)
_configured = False


class RequestContextFilter(logging.Filter):
    """Inject ``request_id`` from the active request context."""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = _request_context.get()
        record.request_id = ctx.request_id if ctx else "-"
        return True


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once; later calls only adjust the level."""
    global _configured
    root = logging.getLogger()
    root.setLevel(level.upper())
    if _configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(RequestContextFilter())
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def set_request_context(ctx: RequestContext) -> None:
    _request_context.set(ctx)


def clear_request_context() -> None:
    _request_context.set(None)
