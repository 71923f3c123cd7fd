"""
Fonts module schemas.

Field names are part of the public wire format and must not change.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# REQUESTS
# =============================================================================

class FontRequest(BaseModel):
    """Base for request bodies. Text fields must be encodable as UTF-8."""

    @field_validator("*")
    @classmethod
    def _require_utf8(cls, value: Any) -> Any:
        if isinstance(value, str):
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as e:
                raise ValueError("text must be valid UTF-8 (lone surrogates are not allowed)") from e
        return value


class CompressRequest(FontRequest):
    """Request to estimate a compressed font."""
    font_name: str
    format: str = Field(..., description="Target format: woff2, woff, otf, ttf")
    quality: int = Field(..., ge=0, strict=True, description="Quality 0-100, JSON integer only")


class SubsetRequest(FontRequest):
    """Request to estimate a Unicode subset of a font."""
    font_name: str
    characters: str = Field(..., description="Characters to keep; may be empty")
    format: str = Field(..., description="Target format: woff2, woff, otf, ttf")


class AnalyzeRequest(FontRequest):
    """Request to analyze a font by name."""
    font_name: str


# =============================================================================
# RESPONSES
# =============================================================================

class CompressResponse(BaseModel):
    font_name: str
    format: str
    quality: int
    original_size_kb: float
    compressed_size_kb: float
    ratio: float
    download_url: str


class SubsetResponse(BaseModel):
    font_name: str
    format: str
    character_count: int
    original_glyph_count: int
    subset_glyph_count: int
    original_size_kb: float
    subset_size_kb: float
    download_url: str


class FontCatalogEntry(BaseModel):
    """A catalog record. Catalog entries are constants and never mutated."""

    model_config = ConfigDict(frozen=True)

    id: str
    family: str
    variant: str
    formats: tuple[str, ...]
    size_kb: float
    glyph_count: int
    unicode_ranges: tuple[str, ...]
    license: str


class AnalyzeResponse(BaseModel):
    font_name: str
    glyph_count: int
    format: str
    size_kb: float
    unicode_ranges: list[str]
    has_variable_axes: bool
    color_palettes: int
    opentype_features: list[str]
