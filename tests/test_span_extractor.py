"""Tests for layout token parsing."""

from gridcore.data_models import ResponsiveSpec
from gridcore.ui_logic.span_extractor import (
    COLUMN_SPAN,
    GRID_COLUMNS,
    extract_column_spec,
    extract_responsive_spec,
    extract_span_spec,
    parse_token,
)


def test_column_tokens_with_breakpoints():
    result = extract_column_spec("flex grid-cols-3 md:grid-cols-6 xl:grid-cols-12")
    assert result.as_dict() == {"default": 3, "md": 6, "xl": 12}


def test_span_tokens_with_breakpoints():
    result = extract_span_spec("lg:col-span-12 col-span-6 p-2")
    assert result.as_dict() == {"lg": 12, "default": 6}


def test_malformed_column_token_falls_back():
    assert extract_column_spec("text-lg grid-cols-").as_dict() == {"default": 12}


def test_missing_tokens_use_family_defaults():
    assert extract_column_spec("").as_dict() == {"default": 12}
    assert extract_column_spec(None).as_dict() == {"default": 12}
    assert extract_span_spec("bg-red-500 p-4").as_dict() == {"default": 1}


def test_unrelated_numeric_suffixes_ignored():
    result = extract_span_spec("md:p-4 text-2xl col-span-3x xcol-span-3 w-1/2 col-span-2")
    assert result.as_dict() == {"default": 2}


def test_tokens_must_match_whole():
    assert parse_token("my-grid-cols-4", GRID_COLUMNS) is None
    assert parse_token("grid-cols-4-extra", GRID_COLUMNS) is None
    assert parse_token("md:hover:col-span-2", COLUMN_SPAN) is None
    assert parse_token("md:col-span-2", COLUMN_SPAN) == ("md", 2)


def test_optional_hyphen_before_number():
    assert extract_column_spec("grid-cols4").as_dict() == {"default": 4}


def test_later_token_overrides_earlier():
    assert extract_span_spec("col-span-2 col-span-5").as_dict() == {"default": 5}


def test_families_do_not_cross():
    class_name = "grid-cols-4 col-span-2"
    assert extract_responsive_spec(class_name, GRID_COLUMNS).as_dict() == {"default": 4}
    assert extract_responsive_spec(class_name, COLUMN_SPAN).as_dict() == {"default": 2}


def test_two_xl_prefix():
    assert extract_span_spec("2xl:col-span-3").as_dict() == {"2xl": 3}


def test_result_is_responsive_spec():
    result = extract_span_spec("sm:col-span-2")
    assert isinstance(result, ResponsiveSpec)
    assert "sm" in result
    assert "default" not in result
    assert result["sm"] == 2
