"""Fonts module routes."""

from fastapi import APIRouter, Depends

from .schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    CompressRequest,
    CompressResponse,
    FontCatalogEntry,
    SubsetRequest,
    SubsetResponse,
)
from .service import FontService

router = APIRouter(prefix="/api/v1/font", tags=["fonts"])

_service = FontService()


def get_service() -> FontService:
    """Dependency injection for service."""
    return _service


@router.post("/compress", response_model=CompressResponse)
def compress_font(
    req: CompressRequest,
    service: FontService = Depends(get_service),
) -> CompressResponse:
    """
    Estimate the compressed size of a font.

    Rejections come back as 400 with the reason as a plain-text body.
    """
    return service.compress(req)


@router.post("/subset", response_model=SubsetResponse)
def subset_font(
    req: SubsetRequest,
    service: FontService = Depends(get_service),
) -> SubsetResponse:
    """Estimate the size of a font subset to the given characters."""
    return service.subset(req)


@router.get("/catalog", response_model=list[FontCatalogEntry])
def get_catalog(service: FontService = Depends(get_service)) -> list[FontCatalogEntry]:
    """List all fonts available in the CDN catalog."""
    return service.catalog()


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze_font(
    req: AnalyzeRequest,
    service: FontService = Depends(get_service),
) -> AnalyzeResponse:
    """Analyze a font: glyph count, format, size, OpenType features."""
    return service.analyze(req)
