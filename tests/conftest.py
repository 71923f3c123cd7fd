"""Shared pytest fixtures."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from fontcdn.app import build_app
from fontcdn.config import Settings, init_settings, reset_settings


@pytest.fixture(autouse=True)
def _reset_settings() -> Generator[None, None, None]:
    """Never leak cached settings between tests."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings() -> Settings:
    """Explicit settings; init kwargs win over the environment."""
    settings = Settings(font_addr="127.0.0.1:8082", log_level="DEBUG", cors_origins=["*"])
    init_settings(settings)
    return settings


@pytest.fixture
def client(settings: Settings) -> Generator[TestClient, None, None]:
    """Test client running the full app, lifespan included."""
    with TestClient(build_app(settings)) as c:
        yield c
