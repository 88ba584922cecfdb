"""
Grid layout settings.

BaseConfiguration turns raw values into layout rules; DesktopConfiguration
reads them from ``GRID_*`` environment variables or a ``.env`` file.
"""
from .base import BaseConfiguration, ConfigurationError
from .desktop import DesktopConfiguration

__all__ = ['BaseConfiguration', 'ConfigurationError', 'DesktopConfiguration']
