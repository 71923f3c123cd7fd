"""
Request validation for the font operations.

Each check returns the rejection reason, or None when the request is valid.
Rules run in a fixed order and the first failure wins: format, then quality,
then font name.
"""

VALID_FORMATS = ("woff2", "woff", "otf", "ttf")
MAX_QUALITY = 100

FONT_NAME_REQUIRED = "font_name is required"
QUALITY_OUT_OF_RANGE = "quality must be 0-100"

# Unicode White_Space property. Narrower than str.isspace(), which also
# counts the U+001C..U+001F separators.
UNICODE_WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def check_format(format: str) -> str | None:
    """Exact, case-sensitive match against the supported formats."""
    if format not in VALID_FORMATS:
        return f"unsupported format '{format}'; valid: {', '.join(VALID_FORMATS)}"
    return None


def check_quality(quality: int) -> str | None:
    if quality > MAX_QUALITY:
        return QUALITY_OUT_OF_RANGE
    return None


def check_font_name(font_name: str) -> str | None:
    if not font_name.strip(UNICODE_WHITESPACE):
        return FONT_NAME_REQUIRED
    return None


def validate_compress(font_name: str, format: str, quality: int) -> str | None:
    return check_format(format) or check_quality(quality) or check_font_name(font_name)


def validate_subset(font_name: str, format: str) -> str | None:
    return check_format(format) or check_font_name(font_name)


def validate_analyze(font_name: str) -> str | None:
    return check_font_name(font_name)
