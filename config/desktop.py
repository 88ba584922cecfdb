"""
Desktop configuration loaded from environment variables.

Reads an optional ``.env`` file through python-dotenv, then the process
environment. Values are parsed lazily so a malformed variable surfaces as a
ConfigurationError at the point it is used.
"""
import os
import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from dotenv import load_dotenv

from .base import BaseConfiguration, ConfigurationError

logger = logging.getLogger(__name__)


class DesktopConfiguration(BaseConfiguration):
    """
    Configuration backed by ``GRID_*`` environment variables.

    Supported variables:
        GRID_BREAKPOINTS: ``name=min_width`` pairs separated by commas
        GRID_DEFAULT_COLUMNS: Column count when a container declares none
        GRID_GAP / GRID_COLUMN_GAP: Default gutters in pixels
        GRID_FLOW_DIRECTION: row, column, row-reverse or column-reverse
        GRID_LOG_LEVEL: Logging level name
        GRID_DEMO_CLASS: Container class string of the demo window
        GRID_DEMO_ITEMS: Item class strings of the demo window, separated by ``;``
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None, env_file: Optional[Path] = None) -> None:
        """
        Initialize desktop configuration.

        Args:
            env: Explicit variables; the process environment when omitted
            env_file: ``.env`` file to load before reading the process environment
        """
        if env is None:
            loaded = load_dotenv(env_file)
            logger.debug("Environment file %s", "loaded" if loaded else "not found")
            env = os.environ
        self._env = env

    def _get(self, name: str) -> Optional[str]:
        value = self._env.get(name)
        if value is None or not value.strip():
            return None
        return value.strip()

    def _get_number(self, name: str, default: float) -> float:
        raw = self._get(name)
        if raw is None:
            return default
        try:
            return float(raw)
        except ValueError as e:
            raise ConfigurationError(f"{name} must be a number, got '{raw}'") from e

    @property
    def breakpoints(self) -> Dict[str, int]:
        raw = self._get("GRID_BREAKPOINTS")
        if raw is None:
            return {}
        result: Dict[str, int] = {}
        for pair in raw.split(","):
            if not pair.strip():
                continue
            name, sep, width = pair.partition("=")
            if not sep or not name.strip():
                raise ConfigurationError(f"Malformed breakpoint '{pair.strip()}', expected name=width")
            try:
                result[name.strip()] = int(width)
            except ValueError as e:
                raise ConfigurationError(f"Breakpoint '{name.strip()}' width must be an integer") from e
        return result

    @property
    def default_columns(self) -> int:
        raw = self._get("GRID_DEFAULT_COLUMNS")
        if raw is None:
            return 12
        try:
            return int(raw)
        except ValueError as e:
            raise ConfigurationError(f"GRID_DEFAULT_COLUMNS must be an integer, got '{raw}'") from e

    @property
    def gap(self) -> float:
        return self._get_number("GRID_GAP", 0)

    @property
    def column_gap(self) -> float:
        return self._get_number("GRID_COLUMN_GAP", 0)

    @property
    def flow_direction(self) -> str:
        return self._get("GRID_FLOW_DIRECTION") or super().flow_direction

    @property
    def log_level(self) -> str:
        return self._get("GRID_LOG_LEVEL") or super().log_level

    @property
    def demo_container_class(self) -> str:
        return self._get("GRID_DEMO_CLASS") or super().demo_container_class

    @property
    def demo_item_classes(self) -> List[str]:
        raw = self._get("GRID_DEMO_ITEMS")
        if raw is None:
            return super().demo_item_classes
        return [item.strip() for item in raw.split(";")]
