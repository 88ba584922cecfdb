"""
Qt bridge for the grid layout core.

Feeds container and window resize events from QML into the core
coordinator, and republishes each new layout snapshot through Qt signals,
properties and the item model. Desktop-only module.
"""
import logging
from typing import List, Optional

from PySide6.QtCore import QObject, Property, Signal, Slot

from config.base import BaseConfiguration
from gridcore.data_models import GridContext
from gridcore.ui_logic.grid_coordinator import GridCoordinator
from gridcore.ui_logic.grid_item import GridItem
from desktop_ui.qt_models.grid_item_model import GridItemModel

logger = logging.getLogger(__name__)


class DesktopGridCoordinator(QObject):
    # Qt signals for property changes
    layoutChanged = Signal()
    measuredChanged = Signal()

    def __init__(self, config: BaseConfiguration, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.config = config
        self.item_model = GridItemModel()
        self.grid = GridCoordinator(
            config.demo_container_class,
            gaps=config.gaps,
            flow_direction=config.flow_direction,
            layout=config.create_layout(),
        )
        self._was_measured = False
        self.grid.register_callback(self._on_context_published)
        self.set_item_classes(config.demo_item_classes)
        logger.info("Creating DesktopGridCoordinator with %d items", len(self.grid.children))

    def set_item_classes(self, class_names: List[str]) -> None:
        """Replace the grid's children with one item per class string."""
        items = [GridItem(name) for name in class_names]
        self.item_model.set_items(items)
        self.grid.set_children(items)

    def _on_context_published(self, context: GridContext) -> None:
        """Handle a new snapshot from the core coordinator"""
        logger.debug("Layout published: %s", context)
        self.item_model.refresh()
        self.layoutChanged.emit()
        if context.is_measured != self._was_measured:
            self._was_measured = context.is_measured
            self.measuredChanged.emit()

    # Slots called from QML
    @Slot(float)
    def containerResized(self, width: float) -> None:
        """Container reported a new outer width."""
        self.grid.measure(width)

    @Slot(float)
    def viewportResized(self, width: float) -> None:
        """Window width changed; breakpoints resolve against it."""
        self.grid.set_viewport_width(width)

    @Slot(str)
    def setContainerClass(self, class_name: str) -> None:
        self.grid.set_class_name(class_name)

    @Slot(str)
    def setFlowDirection(self, flow_direction: str) -> None:
        try:
            self.grid.set_flow_direction(flow_direction)
        except ValueError:
            logger.warning("Ignoring unknown flow direction: %s", flow_direction)

    # Qt Properties for QML binding
    @Property(float, notify=layoutChanged)
    def calculatedWidth(self) -> float:
        """Content width, 0 before the first measurement"""
        return self.grid.context.calculated_width or 0.0

    @Property(int, notify=layoutChanged)
    def columnCount(self) -> int:
        return self.grid.context.column_count

    @Property(int, notify=layoutChanged)
    def rowCount(self) -> int:
        return self.grid.context.rows.row_count

    @Property(float, notify=layoutChanged)
    def gutter(self) -> float:
        return float(self.grid.context.gutter)

    @Property(str, notify=layoutChanged)
    def activeBreakpoint(self) -> str:
        viewport = self.grid.context.viewport_width or 0
        return self.grid.layout.scale.active(viewport)

    @Property(bool, notify=measuredChanged)
    def isMeasured(self) -> bool:
        """True once children may be rendered"""
        return self.grid.should_render_children

    @Property(QObject, constant=True)
    def itemModel(self) -> QObject:
        return self.item_model

    def cleanup(self) -> None:
        """Clean up resources before shutdown."""
        logger.info("Cleaning up grid coordinator")
        self.grid.unregister_callback(self._on_context_published)
        self.grid.unmount()
        self.item_model.set_items([])
