"""Tests for breakpoint scale and responsive value resolution."""

import pytest

from gridcore.data_models import ResponsiveSpec
from gridcore.ui_logic.breakpoints import DEFAULT_SCALE, BreakpointScale, resolve_breakpoint_value


def spec(**values):
    return ResponsiveSpec.from_mapping(values)


def test_default_scale_is_ordered():
    widths = [bp.min_width for bp in DEFAULT_SCALE]
    assert widths == sorted(widths)
    assert DEFAULT_SCALE.names == ("default", "sm", "md", "lg", "xl", "2xl")


@pytest.mark.parametrize("width,expected", [
    (0, "default"),
    (639, "default"),
    (640, "sm"),
    (767, "sm"),
    (768, "md"),
    (1024, "lg"),
    (1280, "xl"),
    (1536, "2xl"),
    (5000, "2xl"),
])
def test_active_breakpoint_edges(width, expected):
    assert DEFAULT_SCALE.active(width) == expected


def test_largest_satisfied_breakpoint_wins():
    responsive = spec(default=1, sm=2, lg=4)
    assert resolve_breakpoint_value(responsive, 300) == 1
    assert resolve_breakpoint_value(responsive, 700) == 2
    # md is not declared, sm still applies
    assert resolve_breakpoint_value(responsive, 800) == 2
    assert resolve_breakpoint_value(responsive, 1100) == 4
    assert resolve_breakpoint_value(responsive, 3000) == 4


def test_default_only_when_no_sized_breakpoint_matches():
    responsive = spec(default=7, md=3)
    assert resolve_breakpoint_value(responsive, 767) == 7
    assert resolve_breakpoint_value(responsive, 768) == 3


def test_fallback_when_default_missing():
    responsive = spec(lg=4)
    assert resolve_breakpoint_value(responsive, 500, fallback=12) == 12
    assert resolve_breakpoint_value(responsive, 500) is None
    assert resolve_breakpoint_value(responsive, 1024, fallback=12) == 4


def test_unknown_breakpoint_names_ignored():
    responsive = spec(hover=3)
    assert resolve_breakpoint_value(responsive, 2000, fallback=1) == 1


def test_two_xl_breakpoint():
    responsive = ResponsiveSpec.from_mapping({"default": 1, "2xl": 6, "xl": 4})
    assert resolve_breakpoint_value(responsive, 1300) == 4
    assert resolve_breakpoint_value(responsive, 1600) == 6


def test_resolution_is_monotonic_in_width():
    responsive = ResponsiveSpec.from_mapping(
        {"default": 1, "sm": 2, "md": 3, "lg": 4, "xl": 5, "2xl": 6})
    previous = 0
    for width in range(0, 2200, 25):
        value = resolve_breakpoint_value(responsive, width)
        assert value >= previous
        previous = value


def test_resolution_is_idempotent():
    responsive = spec(default=2, md=5)
    results = {resolve_breakpoint_value(responsive, 900, fallback=1) for _ in range(50)}
    assert results == {5}


def test_custom_scale_sorted_by_width():
    scale = BreakpointScale.from_mapping({"wide": 900, "narrow": 300, "default": 50})
    assert scale.names == ("default", "narrow", "wide")
    assert scale.min_width("narrow") == 300
    assert scale.min_width("default") == 0
    assert scale.min_width("missing") is None
    assert "wide" in scale
    assert "md" not in scale

    responsive = ResponsiveSpec.from_mapping({"narrow": 2, "wide": 3, "md": 9})
    assert resolve_breakpoint_value(responsive, 800, scale=scale) == 2
    assert resolve_breakpoint_value(responsive, 950, scale=scale) == 3
