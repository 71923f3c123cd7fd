"""Configuration."""

from .settings import (
    DEFAULT_FONT_ADDR,
    Settings,
    get_settings,
    init_settings,
    parse_bind_address,
    reset_settings,
)

__all__ = [
    "DEFAULT_FONT_ADDR",
    "Settings",
    "get_settings",
    "init_settings",
    "parse_bind_address",
    "reset_settings",
]
