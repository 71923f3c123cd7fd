"""Tests for request validation rules."""

import pytest

from fontcdn.modules.fonts.validation import (
    FONT_NAME_REQUIRED,
    QUALITY_OUT_OF_RANGE,
    VALID_FORMATS,
    check_format,
    validate_analyze,
    validate_compress,
    validate_subset,
)


@pytest.mark.parametrize("format", VALID_FORMATS)
def test_supported_formats_pass(format):
    assert check_format(format) is None


@pytest.mark.parametrize("format", ["ttc", "WOFF2", " woff", "", "eot"])
def test_unsupported_format_names_value_and_valid_set(format):
    reason = check_format(format)
    assert reason == f"unsupported format '{format}'; valid: woff2, woff, otf, ttf"


def test_compress_accepts_quality_bounds():
    assert validate_compress("Inter", "woff2", 0) is None
    assert validate_compress("Inter", "woff2", 100) is None


def test_compress_rejects_quality_over_100():
    assert validate_compress("Inter", "woff2", 101) == QUALITY_OUT_OF_RANGE


@pytest.mark.parametrize("font_name", ["", "   ", "\t\n"])
def test_blank_font_name_rejected_everywhere(font_name):
    assert validate_compress(font_name, "woff2", 50) == FONT_NAME_REQUIRED
    assert validate_subset(font_name, "woff2") == FONT_NAME_REQUIRED
    assert validate_analyze(font_name) == FONT_NAME_REQUIRED


def test_first_failure_wins():
    """Format is checked before quality, quality before the name."""
    assert validate_compress("", "ttc", 500).startswith("unsupported format 'ttc'")
    assert validate_compress("", "woff", 500) == QUALITY_OUT_OF_RANGE
    assert validate_subset("", "ttc").startswith("unsupported format 'ttc'")


@pytest.mark.parametrize("font_name", ["\x1c", "\x1d", "\x1e", "\x1f", "\x1fInter"])
def test_information_separators_are_not_blank(font_name):
    """Only Unicode White_Space counts as blank, not the U+001C..U+001F separators."""
    assert validate_analyze(font_name) is None


@pytest.mark.parametrize("font_name", ["\u3000", "\xa0", "\u2028 \x85"])
def test_unicode_whitespace_is_blank(font_name):
    assert validate_analyze(font_name) == FONT_NAME_REQUIRED
