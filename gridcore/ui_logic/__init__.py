"""
UI logic package - portable across platforms.

Breakpoint resolution, layout token parsing, row packing and sizing,
and container coordination. No UI framework dependencies.
"""
from .breakpoints import Breakpoint, BreakpointScale, DEFAULT_SCALE, resolve_breakpoint_value
from .span_extractor import (
    COLUMN_SPAN,
    GRID_COLUMNS,
    TokenFamily,
    extract_column_spec,
    extract_responsive_spec,
    extract_span_spec,
)
from .grid_layout import (
    GridLayout,
    compute_flex_basis,
    compute_gutter_offset,
    pack_rows,
    resolve_flex_basis,
)
from .grid_item import GridItem
from .grid_coordinator import GridCoordinator, ContextCallback

__all__ = [
    'Breakpoint',
    'BreakpointScale',
    'DEFAULT_SCALE',
    'resolve_breakpoint_value',
    'COLUMN_SPAN',
    'GRID_COLUMNS',
    'TokenFamily',
    'extract_column_spec',
    'extract_responsive_spec',
    'extract_span_spec',
    'GridLayout',
    'compute_flex_basis',
    'compute_gutter_offset',
    'pack_rows',
    'resolve_flex_basis',
    'GridItem',
    'GridCoordinator',
    'ContextCallback',
]
