"""Fonts module - compression, subsetting, catalog and analysis estimates."""

from .router import router
from .service import FontService

__all__ = ["router", "FontService"]
