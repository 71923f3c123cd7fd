"""
Font engine API client.

Python counterpart of the dashboard client, for integrations (billing, CDN
URL generation) that call the engine over HTTP.

Usage:
    client = FontClient("http://localhost:8082")
    result = client.compress("Inter", "woff2", 80)
    print(result.download_url)
"""

import logging
from typing import Any

import requests

from fontcdn.modules.fonts.schemas import (
    AnalyzeResponse,
    CompressResponse,
    FontCatalogEntry,
    SubsetResponse,
)
from fontcdn.modules.health.schemas import HealthResponse

logger = logging.getLogger(__name__)


class FontClientError(Exception):
    """Error from the font engine API"""
    def __init__(
        self,
        message: str,
        status_code: int | None = None
    ):
        super().__init__(message)
        self.status_code = status_code


class FontClient:
    """REST client for the font engine."""

    def __init__(
        self,
        api_url: str = "http://localhost:8082",
        timeout: float = 10
    ):
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    def _request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None
    ) -> Any:
        """Make a request and return the decoded JSON body."""
        url = f"{self.api_url}{path}"
        headers = {"Accept": "application/json"}
        try:
            response = requests.request(
                method=method,
                url=url,
                headers=headers,
                json=body,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Font engine request failed: {e}")
            raise FontClientError(f"{method} {path} failed: {e}") from e

        if response.status_code != 200:
            raise FontClientError(
                f"{method} {path} failed ({response.status_code}): {response.text}",
                status_code=response.status_code
            )

        return response.json()

    def test_connection(self) -> bool:
        """Test if the engine is reachable."""
        try:
            self.health()
            return True
        except FontClientError:
            return False

    def health(self) -> HealthResponse:
        return HealthResponse(**self._request("GET", "/health"))

    def compress(self, font_name: str, format: str, quality: int) -> CompressResponse:
        """Compress a font to the specified format at the given quality."""
        data = self._request(
            "POST",
            "/api/v1/font/compress",
            {"font_name": font_name, "format": format, "quality": quality},
        )
        return CompressResponse(**data)

    def subset(self, font_name: str, characters: str, format: str) -> SubsetResponse:
        """Generate a Unicode subset of a font."""
        data = self._request(
            "POST",
            "/api/v1/font/subset",
            {"font_name": font_name, "characters": characters, "format": format},
        )
        return SubsetResponse(**data)

    def catalog(self) -> list[FontCatalogEntry]:
        """List all fonts available in the CDN catalog."""
        return [FontCatalogEntry(**entry) for entry in self._request("GET", "/api/v1/font/catalog")]

    def analyze(self, font_name: str) -> AnalyzeResponse:
        """Analyze a font: glyph count, format, size, OpenType features."""
        data = self._request("POST", "/api/v1/font/analyze", {"font_name": font_name})
        return AnalyzeResponse(**data)
