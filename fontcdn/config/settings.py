"""
Service settings, read from the environment (and an optional ``.env``).

Usage:
    from fontcdn.config import get_settings
    settings = get_settings()
    host, port = settings.bind_address
"""

import ipaddress

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fontcdn.shared.errors import ConfigError

DEFAULT_FONT_ADDR = "0.0.0.0:8082"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_bind_address(value: str) -> tuple[str, int]:
    """
    Parse a ``host:port`` socket address.

    The host must be an IP literal; IPv6 hosts are written ``[addr]:port``.

    Raises:
        ConfigError: if the address cannot be parsed
    """
    host, sep, port_text = value.strip().rpartition(":")
    if not sep or not host or not (port_text.isascii() and port_text.isdigit()):
        raise ConfigError(f"invalid FONT_ADDR: {value!r}")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ConfigError(f"invalid FONT_ADDR: {value!r} (IPv6 hosts need brackets)")

    try:
        ipaddress.ip_address(host)
    except ValueError as e:
        raise ConfigError(f"invalid FONT_ADDR: {value!r}") from e

    port = int(port_text)
    if port > 65535:
        raise ConfigError(f"invalid FONT_ADDR: {value!r} (port out of range)")

    return host, port


class Settings(BaseSettings):
    """Font CDN engine settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    font_addr: str = Field(
        default=DEFAULT_FONT_ADDR,
        description="Bind address as host:port (env FONT_ADDR)",
    )
    log_level: str = Field(default="INFO", description="Root log level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API from a browser",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("font_addr")
    @classmethod
    def _check_font_addr(cls, value: str) -> str:
        # ConfigError is a ValueError, so a bad address fails construction.
        parse_bind_address(value)
        return value

    @property
    def bind_address(self) -> tuple[str, int]:
        return parse_bind_address(self.font_addr)

    @property
    def host(self) -> str:
        return self.bind_address[0]

    @property
    def port(self) -> int:
        return self.bind_address[1]


_settings: Settings | None = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def init_settings(settings: Settings) -> None:
    """Install an explicit settings instance (tests, embedding)."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Drop cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
