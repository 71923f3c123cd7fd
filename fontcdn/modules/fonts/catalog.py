"""Static font catalog."""

from .schemas import FontCatalogEntry

FONT_CATALOG: tuple[FontCatalogEntry, ...] = (
    FontCatalogEntry(
        id="inter",
        family="Inter",
        variant="Regular",
        formats=("woff2", "woff", "ttf"),
        size_kb=94.0,
        glyph_count=3990,
        unicode_ranges=("U+0000-00FF", "U+0100-024F"),
        license="OFL-1.1",
    ),
    FontCatalogEntry(
        id="noto-sans-jp",
        family="Noto Sans JP",
        variant="Regular",
        formats=("woff2", "otf"),
        size_kb=4200.0,
        glyph_count=22080,
        unicode_ranges=("U+0020-007E", "U+3000-9FFF"),
        license="OFL-1.1",
    ),
    FontCatalogEntry(
        id="roboto",
        family="Roboto",
        variant="Bold",
        formats=("woff2", "woff", "ttf"),
        size_kb=68.0,
        glyph_count=1294,
        unicode_ranges=("U+0000-00FF",),
        license="Apache-2.0",
    ),
    FontCatalogEntry(
        id="fira-code",
        family="Fira Code",
        variant="Regular",
        formats=("woff2", "ttf"),
        size_kb=132.0,
        glyph_count=1617,
        unicode_ranges=("U+0020-007E", "U+FB00-FB06"),
        license="OFL-1.1",
    ),
)


def list_catalog() -> list[FontCatalogEntry]:
    """Return every catalog entry in catalog order."""
    return list(FONT_CATALOG)
