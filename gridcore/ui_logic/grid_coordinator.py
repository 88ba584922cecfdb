"""
Grid container coordination.

Measure -> resolve -> broadcast: every measurement or structural change
resolves the column count, packs the children into rows and publishes one
new GridContext to the children and any registered listeners. No UI
framework dependencies.
"""
import logging
from typing import Callable, Iterable, List, Optional, Tuple

from ..data_models import ContainerInsets, FlowDirection, GapSettings, GridContext, RowAssignment
from .grid_item import GridItem
from .grid_layout import GridLayout

logger = logging.getLogger(__name__)

# Type alias for context change callbacks
ContextCallback = Callable[[GridContext], None]


class GridCoordinator:
    """
    Owns the layout snapshot of one grid container.

    The coordinator is the only writer: each recomputation builds a complete
    GridContext before storing it, so a reader never pairs the column count
    of one resolution with the rows of another. Items and listeners only
    ever receive whole snapshots.
    """

    def __init__(
        self,
        class_name: str = "",
        *,
        gaps: Optional[GapSettings] = None,
        flow_direction: FlowDirection | str = FlowDirection.ROW,
        insets: Optional[ContainerInsets] = None,
        layout: Optional[GridLayout] = None,
        children: Optional[Iterable[GridItem]] = None,
    ) -> None:
        """
        Initialize grid coordinator.

        Args:
            class_name: Container class tokens declaring the responsive column count
            gaps: Gap settings, no gaps if omitted
            flow_direction: Container main axis
            insets: Padding and borders subtracted from the measured width
            layout: Breakpoint scale and fallbacks shared with the children
            children: Initial children in declaration order
        """
        self._class_name = class_name or ""
        self._gaps = gaps or GapSettings()
        self._flow_direction = FlowDirection.parse(flow_direction)
        self._insets = insets or ContainerInsets()
        self.layout = layout or GridLayout()

        self._children: List[GridItem] = []
        self._callbacks: List[ContextCallback] = []
        self._measured_width: Optional[float] = None
        self._viewport_width: Optional[float] = None
        self._generation = 0
        self._context = self._initial_context()

        if children:
            self.set_children(children)

    # ------------------------------------------------------------------
    def register_callback(self, callback: ContextCallback) -> None:
        """
        Register callback for context publication.

        Args:
            callback: Function called with every new GridContext
        """
        if callback not in self._callbacks:
            self._callbacks.append(callback)

    def unregister_callback(self, callback: ContextCallback) -> None:
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    # ------------------------------------------------------------------
    def measure(self, measured_width: float, viewport_width: Optional[float] = None) -> GridContext:
        """
        Handle a layout measurement of the container.

        Args:
            measured_width: Outer width reported by the host, padding and borders included
            viewport_width: Window width for breakpoint resolution; the measured
                width is used when neither this nor set_viewport_width supplied one

        Returns:
            The newly published context
        """
        self._measured_width = measured_width
        if viewport_width is not None:
            self._viewport_width = viewport_width
        logger.debug("Container measured at %s (viewport %s)", measured_width, self._viewport_width)
        return self._recompute()

    def set_viewport_width(self, viewport_width: Optional[float]) -> None:
        self._viewport_width = viewport_width
        if self._measured_width is not None:
            self._recompute()

    def set_children(self, children: Iterable[GridItem]) -> None:
        """
        Replace the child set.

        Args:
            children: Items in declaration order; indices are reassigned
        """
        previous = list(self._children)
        self._children = list(children)
        for child in previous:
            if child not in self._children:
                child.detach()
        for index, child in enumerate(self._children):
            child.bind(self.layout, index, self._recompute_if_measured)
        logger.debug("Child set changed: %d items", len(self._children))
        self._recompute_if_measured()

    def add_child(self, child: GridItem) -> None:
        self.set_children(self._children + [child])

    def remove_child(self, child: GridItem) -> None:
        if child in self._children:
            self.set_children([c for c in self._children if c is not child])

    def set_class_name(self, class_name: str) -> None:
        class_name = class_name or ""
        if class_name == self._class_name:
            return
        self._class_name = class_name
        self._recompute_if_measured()

    def set_gaps(self, gaps: GapSettings) -> None:
        self._gaps = gaps
        self._recompute_if_measured()

    def set_flow_direction(self, flow_direction: FlowDirection | str) -> None:
        self._flow_direction = FlowDirection.parse(flow_direction)
        self._recompute_if_measured()

    def set_insets(self, insets: ContainerInsets) -> None:
        self._insets = insets
        self._recompute_if_measured()

    def unmount(self) -> None:
        """Discard the context and detach every child."""
        logger.info("Unmounting grid with %d items", len(self._children))
        for child in self._children:
            child.detach()
        self._children = []
        self._measured_width = None
        self._viewport_width = None
        self._context = self._initial_context()

    # ------------------------------------------------------------------
    @property
    def context(self) -> GridContext:
        """Most recently published snapshot."""
        return self._context

    @property
    def children(self) -> Tuple[GridItem, ...]:
        return tuple(self._children)

    @property
    def class_name(self) -> str:
        return self._class_name

    @property
    def should_render_children(self) -> bool:
        """False until a measurement produced a positive content width."""
        return self._context.is_measured

    def visible_children(self) -> List[GridItem]:
        if not self.should_render_children:
            return []
        return list(self._children)

    def get_state_summary(self) -> dict[str, str | int | bool | None]:
        """
        Get summary of current layout state for debugging.

        Returns:
            Dictionary with layout state information
        """
        context = self._context
        return {
            'class_name': self._class_name,
            'measured_width': self._measured_width,
            'content_width': context.calculated_width,
            'viewport_width': context.viewport_width,
            'breakpoint': self.layout.scale.active(context.viewport_width or 0),
            'columns': context.column_count,
            'rows': context.rows.row_count,
            'items': len(self._children),
            'measured': context.is_measured,
            'generation': context.generation,
            'callback_count': len(self._callbacks),
        }

    # ------------------------------------------------------------------
    def _initial_context(self) -> GridContext:
        return GridContext(
            column_count=self.layout.default_columns,
            flow_direction=self._flow_direction,
            gaps=self._gaps,
            generation=self._generation,
        )

    def _recompute_if_measured(self) -> None:
        if self._measured_width is not None:
            self._recompute()

    def _recompute(self) -> GridContext:
        if self._measured_width is None:
            logger.debug("Recompute requested before measurement")
            return self._context
        content_width = self._insets.content_width(self._measured_width)
        viewport = self._viewport_width if self._viewport_width is not None else self._measured_width

        columns = self.layout.column_count_for(self._class_name, viewport)
        if content_width > 0:
            spans = self.layout.resolve_spans([c.class_name for c in self._children], viewport, columns)
            rows = self.layout.pack(spans, columns)
        else:
            logger.debug("Content width %s leaves no room, skipping packing", content_width)
            spans = []
            rows = RowAssignment()

        self._generation += 1
        context = GridContext(
            calculated_width=content_width,
            viewport_width=viewport,
            column_count=columns,
            rows=rows,
            flow_direction=self._flow_direction,
            gaps=self._gaps,
            generation=self._generation,
        )
        self._publish(context)
        logger.debug("Published %s rows=%s", context, self.layout.describe_rows(context, spans))
        return context

    def _publish(self, context: GridContext) -> None:
        self._context = context
        for child in list(self._children):
            child.on_context_changed(context)
        self._notify_context_change(context)

    def _notify_context_change(self, context: GridContext) -> None:
        for callback in list(self._callbacks):
            try:
                callback(context)
            except Exception as e:
                # Log error but don't let listener failures break the layout pass
                logger.error("Context callback error: %s", e)
