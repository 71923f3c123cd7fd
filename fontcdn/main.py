"""
Font engine entrypoint - runs the uvicorn server.
"""

import sys

import uvicorn
from pydantic import ValidationError

from fontcdn.app import build_app
from fontcdn.config import get_settings
from fontcdn.shared.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Run the font engine server."""
    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging()
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(settings.log_level)
    host, port = settings.bind_address

    app = build_app(settings)
    logger.info(f"Font engine listening on {settings.font_addr}")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
