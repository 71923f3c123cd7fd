"""
Application factory - builds the FastAPI app with middleware and routes.
"""

import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from fontcdn import __version__
from fontcdn.config import Settings, get_settings
from fontcdn.modules.fonts.router import router as fonts_router
from fontcdn.modules.health.router import router as health_router
from fontcdn.shared.errors import FontCdnError
from fontcdn.shared.ids import generate_request_id
from fontcdn.shared.logging import (
    clear_request_context,
    get_logger,
    set_request_context,
    setup_logging,
)
from fontcdn.shared.types import RequestContext

logger = get_logger(__name__)

SERVICE_NAME = "font-cdn-engine"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan - startup and shutdown."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level)
    logger.info(f"Font engine {__version__} started")

    yield

    logger.info("Font engine stopped")


def build_app(settings: Settings | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Optional settings override (useful for testing)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="Font CDN Engine",
        description="Deterministic font compression, subsetting, catalog and analysis",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    # Read-only after this point; health uptime is measured from here.
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(request: Request, call_next: Any) -> Response:
        """Attach request context for logging and tracing."""
        ctx = RequestContext(
            request_id=request.headers.get("X-Request-ID") or generate_request_id(),
        )
        set_request_context(ctx)

        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = ctx.request_id
            return response
        finally:
            clear_request_context()

    @app.exception_handler(FontCdnError)
    async def font_cdn_error_handler(request: Request, exc: FontCdnError) -> PlainTextResponse:
        """Return the reason string verbatim as the response body."""
        logger.debug(f"{request.method} {request.url.path} -> {exc.http_status}: {exc.to_dict()}")
        return PlainTextResponse(exc.message, status_code=exc.http_status)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """
        Structural body errors (422).

        The offending input is not echoed back: it may hold text that cannot
        be encoded as UTF-8.
        """
        errors = [
            {"type": err["type"], "loc": [str(part) for part in err["loc"]], "msg": err["msg"]}
            for err in exc.errors()
        ]
        logger.warning(f"{request.method} {request.url.path} malformed body: {errors}")
        return JSONResponse(status_code=422, content={"detail": errors})

    app.include_router(health_router)
    app.include_router(fonts_router)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"service": SERVICE_NAME, "version": __version__}

    return app
