"""
Font analysis classifier.

Picks a canned descriptor by case-insensitive substring match on the font
name. Rules are checked in order and the first match wins, so "noto-fira"
resolves to the noto descriptor.
"""

from dataclasses import dataclass

# Not yet differentiated per font.
ANALYSIS_UNICODE_RANGES = ("U+0000-00FF", "U+0100-024F")


@dataclass(frozen=True)
class FontDescriptor:
    glyph_count: int
    format: str
    size_kb: float
    has_variable_axes: bool
    color_palettes: int
    opentype_features: tuple[str, ...]


CLASSIFICATION_RULES: tuple[tuple[str, FontDescriptor], ...] = (
    ("noto", FontDescriptor(22080, "otf", 4200.0, False, 0, ("kern", "liga", "calt"))),
    ("fira", FontDescriptor(1617, "ttf", 132.0, False, 0, ("kern", "liga", "dlig", "calt"))),
    ("inter", FontDescriptor(3990, "otf", 94.0, True, 0, ("kern", "ss01", "cv01"))),
)

DEFAULT_DESCRIPTOR = FontDescriptor(1200, "ttf", 80.0, False, 0, ("kern",))


def classify(font_name: str) -> FontDescriptor:
    name = font_name.lower()
    for needle, descriptor in CLASSIFICATION_RULES:
        if needle in name:
            return descriptor
    return DEFAULT_DESCRIPTOR
