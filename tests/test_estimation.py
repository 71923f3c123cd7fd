"""Tests for the size estimation model."""

import pytest

from fontcdn.modules.fonts.estimation import (
    ORIGINAL_GLYPH_COUNT,
    ORIGINAL_SIZE_KB,
    compress_download_url,
    count_characters,
    estimate_compression,
    estimate_subset,
    quality_factor,
    slugify,
)

RATIO_BASE = {"woff2": 0.35, "woff": 0.55, "otf": 0.90, "ttf": 0.90}


@pytest.mark.parametrize("format", list(RATIO_BASE))
@pytest.mark.parametrize("quality", [0, 1, 37, 50, 99, 100])
def test_compression_formula(format, quality):
    est = estimate_compression("Inter", format, quality)
    expected = 280.0 * RATIO_BASE[format] * (0.5 + quality / 200)

    assert est.original_size_kb == 280.0
    assert est.compressed_size_kb == pytest.approx(expected)
    assert est.ratio == pytest.approx(280.0 / expected)
    assert est.ratio > 1


def test_compression_quality_extremes():
    assert estimate_compression("Inter", "woff2", 0).compressed_size_kb == pytest.approx(280.0 * 0.35 * 0.5)
    assert estimate_compression("Inter", "woff2", 100).compressed_size_kb == pytest.approx(280.0 * 0.35)


def test_quality_factor_range():
    assert quality_factor(0) == 0.5
    assert quality_factor(100) == 1.0


def test_compression_is_repeatable():
    assert estimate_compression("Fira Code", "woff", 73) == estimate_compression("Fira Code", "woff", 73)


def test_slug_and_compress_url():
    assert slugify("Open Sans") == "open-sans"
    assert compress_download_url("Open Sans", "woff2") == "/cdn/fonts/open-sans/open-sans.woff2"


def test_slug_escapes_nothing_else():
    assert slugify("Noto Sans/JP_Bold") == "noto-sans/jp_bold"


def test_subset_empty_characters_floor_to_one():
    est = estimate_subset("Inter", "", "woff2")
    assert est.character_count == 1
    assert est.subset_glyph_count == 1


def test_subset_counts_duplicates():
    assert count_characters("aaa") == 3
    assert estimate_subset("Inter", "aaa", "woff2").character_count == 3


def test_subset_counts_code_points_not_bytes():
    assert count_characters("日本語") == 3
    assert count_characters("😀") == 1


def test_subset_sizes_woff2():
    est = estimate_subset("Open Sans", "Hello", "woff2")
    assert est.original_glyph_count == ORIGINAL_GLYPH_COUNT == 8500
    assert est.original_size_kb == ORIGINAL_SIZE_KB
    assert est.subset_size_kb == pytest.approx(280.0 * (5 / 8500) * 0.35)
    assert est.download_url == "/cdn/fonts/open-sans/subset.woff2"


@pytest.mark.parametrize("format", ["woff", "otf", "ttf"])
def test_subset_non_woff2_share_one_ratio(format):
    est = estimate_subset("Inter", "Hello", format)
    assert est.subset_size_kb == pytest.approx(280.0 * (5 / 8500) * 0.55)


def test_subset_glyph_count_capped_at_original():
    est = estimate_subset("Inter", "x" * 9000, "ttf")
    assert est.character_count == 9000
    assert est.subset_glyph_count == 8500
    assert est.subset_size_kb == pytest.approx(280.0 * 0.55)
