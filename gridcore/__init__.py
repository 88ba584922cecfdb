"""
Responsive grid layout core.

Framework-free layout resolution shared by the desktop adapter and any
other host that can report a container width.
"""
from .data_models import (
    AUTO,
    DEFAULT_BREAKPOINT,
    ContainerInsets,
    FlowDirection,
    GapSettings,
    GridContext,
    ResponsiveSpec,
    RowAssignment,
)

__all__ = [
    'AUTO',
    'DEFAULT_BREAKPOINT',
    'ContainerInsets',
    'FlowDirection',
    'GapSettings',
    'GridContext',
    'ResponsiveSpec',
    'RowAssignment',
]
