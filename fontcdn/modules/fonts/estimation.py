"""
Size estimation model.

No font is read or compressed here: sizes come from closed-form formulas over
a fixed baseline so that client integrations get stable, reproducible numbers.
All functions are pure and expect input that already passed validation.
"""

from dataclasses import dataclass

# Every font is modelled with the same baseline size and glyph count.
ORIGINAL_SIZE_KB = 280.0
ORIGINAL_GLYPH_COUNT = 8500

# Compression efficiency per format (fraction of the original size).
COMPRESSION_RATIO_BASE = {
    "woff2": 0.35,
    "woff": 0.55,
    "otf": 0.90,
    "ttf": 0.90,
}
FALLBACK_RATIO_BASE = 0.80

# Subsetting only distinguishes woff2 from everything else.
SUBSET_WOFF2_RATIO = 0.35
SUBSET_OTHER_RATIO = 0.55


@dataclass(frozen=True)
class CompressionEstimate:
    original_size_kb: float
    compressed_size_kb: float
    ratio: float
    download_url: str


@dataclass(frozen=True)
class SubsetEstimate:
    character_count: int
    original_glyph_count: int
    subset_glyph_count: int
    original_size_kb: float
    subset_size_kb: float
    download_url: str


def slugify(font_name: str) -> str:
    """Lowercase and turn spaces into hyphens. Nothing else is escaped."""
    return font_name.lower().replace(" ", "-")


def compress_download_url(font_name: str, format: str) -> str:
    slug = slugify(font_name)
    return f"/cdn/fonts/{slug}/{slug}.{format}"


def subset_download_url(font_name: str, format: str) -> str:
    return f"/cdn/fonts/{slugify(font_name)}/subset.{format}"


def ratio_base(format: str) -> float:
    return COMPRESSION_RATIO_BASE.get(format, FALLBACK_RATIO_BASE)


def quality_factor(quality: int) -> float:
    """Map quality 0-100 linearly onto 0.5-1.0."""
    return 0.5 + (quality / 100.0) * 0.5


def subset_format_ratio(format: str) -> float:
    return SUBSET_WOFF2_RATIO if format == "woff2" else SUBSET_OTHER_RATIO


def count_characters(characters: str) -> int:
    """
    Count code points in the requested character set, with a floor of 1.

    Duplicates are counted, not collapsed: "aaa" counts as 3.
    """
    return max(len(characters), 1)


def estimate_compression(font_name: str, format: str, quality: int) -> CompressionEstimate:
    """
    Estimate the compressed size of a font.

    Args:
        font_name: Font identifier, used only for the download URL
        format: Target format
        quality: Quality 0-100

    Returns:
        CompressionEstimate with sizes in KB and original/compressed ratio
    """
    original_size_kb = ORIGINAL_SIZE_KB
    compressed_size_kb = original_size_kb * ratio_base(format) * quality_factor(quality)
    return CompressionEstimate(
        original_size_kb=original_size_kb,
        compressed_size_kb=compressed_size_kb,
        ratio=original_size_kb / compressed_size_kb,
        download_url=compress_download_url(font_name, format),
    )


def estimate_subset(font_name: str, characters: str, format: str) -> SubsetEstimate:
    """
    Estimate the size of a font cut down to the given characters.

    Args:
        font_name: Font identifier, used only for the download URL
        characters: Characters to keep; empty is treated as one character
        format: Target format

    Returns:
        SubsetEstimate with glyph counts and sizes in KB
    """
    character_count = count_characters(characters)
    subset_glyph_count = min(character_count, ORIGINAL_GLYPH_COUNT)
    subset_ratio = subset_glyph_count / ORIGINAL_GLYPH_COUNT
    return SubsetEstimate(
        character_count=character_count,
        original_glyph_count=ORIGINAL_GLYPH_COUNT,
        subset_glyph_count=subset_glyph_count,
        original_size_kb=ORIGINAL_SIZE_KB,
        subset_size_kb=ORIGINAL_SIZE_KB * subset_ratio * subset_format_ratio(format),
        download_url=subset_download_url(font_name, format),
    )
