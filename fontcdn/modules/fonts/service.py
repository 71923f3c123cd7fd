"""Font service - validates requests and runs the estimation model."""

from fontcdn.shared.errors import RequestValidationFailed
from fontcdn.shared.logging import get_logger

from .catalog import list_catalog
from .classifier import ANALYSIS_UNICODE_RANGES, classify
from .estimation import estimate_compression, estimate_subset
from .schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    CompressRequest,
    CompressResponse,
    FontCatalogEntry,
    SubsetRequest,
    SubsetResponse,
)
from .validation import validate_analyze, validate_compress, validate_subset

logger = get_logger(__name__)


class FontService:
    """Stateless font operations. Safe to share across concurrent requests."""

    def compress(self, req: CompressRequest) -> CompressResponse:
        """
        Estimate compressed size for a font in the given format and quality.

        Raises:
            RequestValidationFailed: if format, quality or font name is invalid
        """
        self._reject_if(validate_compress(req.font_name, req.format, req.quality), "compress")

        estimate = estimate_compression(req.font_name, req.format, req.quality)
        logger.info(
            f"font compress request: font={req.font_name!r} format={req.format} "
            f"quality={req.quality}"
        )
        return CompressResponse(
            font_name=req.font_name,
            format=req.format,
            quality=req.quality,
            original_size_kb=estimate.original_size_kb,
            compressed_size_kb=estimate.compressed_size_kb,
            ratio=estimate.ratio,
            download_url=estimate.download_url,
        )

    def subset(self, req: SubsetRequest) -> SubsetResponse:
        """
        Estimate the size of a Unicode subset.

        Raises:
            RequestValidationFailed: if format or font name is invalid
        """
        self._reject_if(validate_subset(req.font_name, req.format), "subset")

        estimate = estimate_subset(req.font_name, req.characters, req.format)
        logger.info(
            f"font subset request: font={req.font_name!r} "
            f"characters={estimate.character_count} format={req.format}"
        )
        return SubsetResponse(
            font_name=req.font_name,
            format=req.format,
            character_count=estimate.character_count,
            original_glyph_count=estimate.original_glyph_count,
            subset_glyph_count=estimate.subset_glyph_count,
            original_size_kb=estimate.original_size_kb,
            subset_size_kb=estimate.subset_size_kb,
            download_url=estimate.download_url,
        )

    def catalog(self) -> list[FontCatalogEntry]:
        return list_catalog()

    def analyze(self, req: AnalyzeRequest) -> AnalyzeResponse:
        """
        Describe a font from its name.

        Raises:
            RequestValidationFailed: if the font name is blank
        """
        self._reject_if(validate_analyze(req.font_name), "analyze")

        descriptor = classify(req.font_name)
        logger.info(f"font analyze request: font={req.font_name!r}")
        return AnalyzeResponse(
            font_name=req.font_name,
            glyph_count=descriptor.glyph_count,
            format=descriptor.format,
            size_kb=descriptor.size_kb,
            unicode_ranges=list(ANALYSIS_UNICODE_RANGES),
            has_variable_axes=descriptor.has_variable_axes,
            color_palettes=descriptor.color_palettes,
            opentype_features=list(descriptor.opentype_features),
        )

    @staticmethod
    def _reject_if(reason: str | None, operation: str) -> None:
        if reason is not None:
            logger.warning(f"font {operation} rejected: {reason}")
            raise RequestValidationFailed(reason)
