"""Tests for environment-backed configuration."""

import os

import pytest

from config import ConfigurationError, DesktopConfiguration
from gridcore.ui_logic.breakpoints import DEFAULT_SCALE


def test_defaults_without_variables():
    config = DesktopConfiguration(env={})
    config.validate()
    assert config.breakpoints == {}
    assert config.breakpoint_scale is DEFAULT_SCALE
    assert config.default_columns == 12
    assert config.gap == 0
    assert config.flow_direction == "row"
    assert config.log_level == "INFO"
    assert config.demo_item_classes


def test_values_from_environment():
    config = DesktopConfiguration(env={
        "GRID_BREAKPOINTS": "tablet=600, desktop=1200",
        "GRID_DEFAULT_COLUMNS": "6",
        "GRID_GAP": "8",
        "GRID_COLUMN_GAP": "4.5",
        "GRID_FLOW_DIRECTION": "row-reverse",
        "GRID_LOG_LEVEL": "debug",
        "GRID_DEMO_CLASS": "grid-cols-2",
        "GRID_DEMO_ITEMS": "col-span-1; col-span-2",
    })
    config.validate()
    assert config.breakpoints == {"tablet": 600, "desktop": 1200}
    assert config.breakpoint_scale.names == ("default", "tablet", "desktop")
    assert config.gaps.horizontal == 4.5
    assert config.demo_container_class == "grid-cols-2"
    assert config.demo_item_classes == ["col-span-1", "col-span-2"]

    layout = config.create_layout()
    assert layout.default_columns == 6
    assert layout.column_count_for("", 800) == 6
    assert layout.column_count_for("desktop:grid-cols-3", 1300) == 3


def test_blank_values_treated_as_unset():
    config = DesktopConfiguration(env={"GRID_GAP": "  ", "GRID_DEFAULT_COLUMNS": ""})
    assert config.gap == 0
    assert config.default_columns == 12


@pytest.mark.parametrize("env", [
    {"GRID_BREAKPOINTS": "tablet"},
    {"GRID_BREAKPOINTS": "tablet=wide"},
    {"GRID_BREAKPOINTS": "=600"},
    {"GRID_DEFAULT_COLUMNS": "twelve"},
    {"GRID_GAP": "big"},
])
def test_malformed_values_raise(env):
    with pytest.raises(ConfigurationError):
        DesktopConfiguration(env=env).validate()


@pytest.mark.parametrize("env", [
    {"GRID_DEFAULT_COLUMNS": "0"},
    {"GRID_GAP": "-1"},
    {"GRID_BREAKPOINTS": "sm=-5"},
    {"GRID_FLOW_DIRECTION": "diagonal"},
    {"GRID_LOG_LEVEL": "chatty"},
])
def test_out_of_range_values_rejected(env):
    with pytest.raises(ConfigurationError):
        DesktopConfiguration(env=env).validate()


def test_dotenv_file_loaded(tmp_path, monkeypatch):
    monkeypatch.delenv("GRID_DEFAULT_COLUMNS", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("GRID_DEFAULT_COLUMNS=8\n")
    try:
        config = DesktopConfiguration(env_file=env_file)
        assert config.default_columns == 8
    finally:
        os.environ.pop("GRID_DEFAULT_COLUMNS", None)
