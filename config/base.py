"""
Platform-independent configuration interface.

Defines the settings the layout core and its hosts read, independent of
where they come from. Concrete configurations supply the raw values.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List

from gridcore.data_models import FlowDirection, GapSettings
from gridcore.ui_logic.breakpoints import DEFAULT_SCALE, BreakpointScale
from gridcore.ui_logic.grid_layout import GridLayout

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when a configuration value is missing or malformed."""
    pass


class BaseConfiguration(ABC):
    """
    Abstract configuration for grid hosts.

    Subclasses provide raw values; this class derives the layout objects
    from them and validates the combination.
    """

    @property
    @abstractmethod
    def breakpoints(self) -> Dict[str, int]:
        """Breakpoint name -> minimum width in pixels."""

    @property
    @abstractmethod
    def default_columns(self) -> int:
        """Column count used when a container declares none."""

    @property
    @abstractmethod
    def gap(self) -> float:
        """Default gap between items in pixels."""

    @property
    def column_gap(self) -> float:
        return 0

    @property
    def flow_direction(self) -> str:
        return FlowDirection.ROW.value

    @property
    def log_level(self) -> str:
        return "INFO"

    @property
    def demo_container_class(self) -> str:
        return "grid-cols-4 md:grid-cols-12"

    @property
    def demo_item_classes(self) -> List[str]:
        return ["col-span-4 md:col-span-6"] * 4

    # ------------------------------------------------------------------
    @property
    def breakpoint_scale(self) -> BreakpointScale:
        if not self.breakpoints:
            return DEFAULT_SCALE
        return BreakpointScale.from_mapping(self.breakpoints)

    @property
    def gaps(self) -> GapSettings:
        return GapSettings(gap=self.gap, column_gap=self.column_gap)

    def create_layout(self) -> GridLayout:
        """Layout rules built from this configuration."""
        return GridLayout(scale=self.breakpoint_scale, default_columns=self.default_columns)

    def validate(self) -> None:
        """
        Check the configuration for consistency.

        Raises:
            ConfigurationError: If any value is out of range
        """
        if self.default_columns < 1:
            raise ConfigurationError(f"Default column count must be positive, got {self.default_columns}")
        if self.gap < 0 or self.column_gap < 0:
            raise ConfigurationError("Gaps cannot be negative")
        for name, width in self.breakpoints.items():
            if width < 0:
                raise ConfigurationError(f"Breakpoint '{name}' width cannot be negative")
        try:
            FlowDirection(self.flow_direction)
        except ValueError as e:
            raise ConfigurationError(f"Unknown flow direction '{self.flow_direction}'") from e
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level '{self.log_level}'")
        logger.debug("Configuration valid: %s", self.summary())

    def summary(self) -> Dict[str, object]:
        return {
            'breakpoints': self.breakpoint_scale.as_dict(),
            'default_columns': self.default_columns,
            'gap': self.gap,
            'column_gap': self.column_gap,
            'flow_direction': self.flow_direction,
            'log_level': self.log_level,
        }
