"""
Grid mathematics for responsive column layouts.

Resolve column counts and spans, pack children into rows with a greedy
wrap, and size each child as a gap-aware percentage of the container.
No UI framework dependencies - the desktop adapter and any other host
feed measured widths in and read flex bases out.
"""
import logging
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from ..data_models import AUTO, GridContext, ResponsiveSpec, RowAssignment
from .breakpoints import DEFAULT_SCALE, BreakpointScale, resolve_breakpoint_value
from .span_extractor import COLUMN_SPAN, GRID_COLUMNS, TokenFamily, extract_responsive_spec

logger = logging.getLogger(__name__)


def pack_rows(spans: Sequence[int], column_count: int) -> RowAssignment:
    """
    Assign children to rows in declaration order.

    A new row starts as soon as the current one holds something and the
    next span would push its total past ``column_count``. Children are
    never reordered to fill gaps.

    Args:
        spans: Span of each child, indexed by declaration order
        column_count: Number of columns in the grid

    Returns:
        RowAssignment with rows numbered from 1
    """
    rows: List[List[int]] = []
    running_total = 0

    for index, raw_span in enumerate(spans):
        span = raw_span if raw_span > 0 else 1
        if not rows or (running_total > 0 and running_total + span > column_count):
            rows.append([])
            running_total = 0
        running_total += span
        rows[-1].append(index)

    return RowAssignment.from_rows(rows)


def compute_gutter_offset(row_size: int, span: int, column_count: int, gutter: float) -> float:
    """
    Total gap width charged to a child's row.

    A lone child narrower than the grid is charged two gutters, a row of
    several children ``row_size - 1``, a lone full-width child none.
    """
    if row_size == 1 and span < column_count:
        return gutter * 2
    return gutter * (row_size - 1)


def compute_flex_basis(
    span: int,
    row_size: int,
    column_count: int,
    width: Optional[float],
    gutter: float = 0,
) -> Optional[float]:
    """
    Percentage of the container width a child should occupy.

    Args:
        span: Child span, already clamped to ``column_count``
        row_size: Number of children in the child's row
        column_count: Number of columns in the grid
        width: Container content width in pixels, None before measurement
        gutter: Horizontal gap between items

    Returns:
        Percentage in [0, 100], or None when the width is not known yet
    """
    if not width or width <= 0 or column_count <= 0:
        return None
    offset = compute_gutter_offset(row_size, span, column_count, gutter)
    return max(min((width - offset) * span / column_count / width * 100, 100), 0)


def format_percentage(value: float) -> str:
    """Render ``value`` as a CSS percentage, dropping a zero fraction."""
    if float(value).is_integer():
        return f"{int(value)}%"
    text = repr(float(value))
    if "e" in text:
        # shortest digits, but always fixed-point
        text = format(Decimal(text), "f")
    return f"{text}%"


def clamp_span(span: Optional[int], column_count: int) -> int:
    """Effective span: at least 1, at most ``column_count``."""
    if not span or span < 1:
        return 1
    return min(span, column_count)


def resolve_flex_basis(context: GridContext, index: Optional[int], span: int) -> str:
    """
    Flex basis of one child under a published context.

    Returns "auto" before measurement, for column-like flow, and for
    children the context has no row for.
    """
    if not context.is_measured or context.flow_direction.is_column or index is None:
        return AUTO

    row_size = context.rows.row_size(index)
    if row_size == 0:
        logger.debug("Item %s has no row in %s", index, context)
        return AUTO

    effective = clamp_span(span, context.column_count)
    value = compute_flex_basis(effective, row_size, context.column_count,
                               context.calculated_width, context.gutter)
    if value is None:
        return AUTO
    return format_percentage(value)


class GridLayout:
    """
    Resolves responsive layout values against a breakpoint scale.

    Bundles the scale and the fallback values so the coordinator and the
    items it serves agree on how a width maps to columns and spans.
    """

    def __init__(
        self,
        scale: BreakpointScale = DEFAULT_SCALE,
        default_columns: int = GRID_COLUMNS.default,
        default_span: int = COLUMN_SPAN.default,
    ) -> None:
        """
        Initialize layout rules.

        Args:
            scale: Breakpoint thresholds
            default_columns: Column count when no breakpoint applies
            default_span: Span when no breakpoint applies
        """
        self.scale = scale
        self.default_columns = default_columns
        self.default_span = default_span
        self.columns_family = TokenFamily(GRID_COLUMNS.keyword, default_columns)
        self.span_family = TokenFamily(COLUMN_SPAN.keyword, default_span)

    def resolve_column_count(self, spec: ResponsiveSpec, viewport_width: float) -> int:
        value = resolve_breakpoint_value(spec, viewport_width, self.default_columns, self.scale)
        if not value or value < 1:
            logger.debug("Column count %r out of range, using 1", value)
            return 1
        return value

    def resolve_child_span(self, spec: ResponsiveSpec, viewport_width: float, column_count: int) -> int:
        value = resolve_breakpoint_value(spec, viewport_width, self.default_span, self.scale)
        return clamp_span(value, column_count)

    def column_count_for(self, class_name: Optional[str], viewport_width: float) -> int:
        """Column count declared by a container class string at ``viewport_width``."""
        return self.resolve_column_count(extract_responsive_spec(class_name, self.columns_family), viewport_width)

    def span_for(self, class_name: Optional[str], viewport_width: float, column_count: int) -> int:
        """Clamped span declared by an item class string at ``viewport_width``."""
        return self.resolve_child_span(extract_responsive_spec(class_name, self.span_family), viewport_width, column_count)

    def resolve_spans(
        self,
        class_names: Sequence[Optional[str]],
        viewport_width: float,
        column_count: int,
    ) -> List[int]:
        return [self.span_for(name, viewport_width, column_count) for name in class_names]

    def pack(self, spans: Sequence[int], column_count: int) -> RowAssignment:
        return pack_rows(spans, column_count)

    def flex_basis_for(self, context: GridContext, index: Optional[int], class_name: Optional[str]) -> str:
        """Flex basis of the item at ``index`` with the given class string."""
        if not context.is_measured:
            return AUTO
        viewport = context.viewport_width if context.viewport_width is not None else context.calculated_width
        span = self.span_for(class_name, viewport, context.column_count)
        return resolve_flex_basis(context, index, span)

    def describe_rows(self, context: GridContext, spans: Sequence[int]) -> Dict[int, str]:
        """
        Human-readable summary of each row for debugging.

        Returns:
            Row number -> "indices [..] span total/columns"
        """
        summary = {}
        for number, members in context.rows.as_dict().items():
            total = sum(spans[i] for i in members if i < len(spans))
            summary[number] = f"indices {members} span {total}/{context.column_count}"
        return summary
