"""
Grid child state.

A GridItem reads the snapshot its coordinator publishes and derives its own
span and flex basis from it. It never packs rows itself and never writes to
the snapshot.
"""
import logging
from typing import Callable, Optional

from ..data_models import AUTO, GridContext
from .grid_layout import GridLayout

logger = logging.getLogger(__name__)


class GridItem:
    """
    One child of a grid container.

    Declares its span through a class string (``"col-span-6 md:col-span-4"``)
    and recomputes its flex basis whenever a new context arrives or the
    class string changes.
    """

    def __init__(self, class_name: str = "", index: Optional[int] = None) -> None:
        """
        Initialize grid item.

        Args:
            class_name: Class tokens declaring the responsive span
            index: Declaration order among siblings, assigned by the coordinator if omitted
        """
        self._class_name = class_name or ""
        self.index = index
        self._layout = GridLayout()
        self._context = GridContext()
        self._flex_basis = AUTO
        self._on_class_changed: Optional[Callable[[], None]] = None

    def bind(
        self,
        layout: GridLayout,
        index: int,
        on_class_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        """
        Attach to a coordinator's layout rules at the given position.

        Args:
            layout: Layout rules shared with the owning coordinator
            index: Declaration order among siblings
            on_class_changed: Owner hook called when the class string changes,
                so rows are re-packed before the item is re-sized
        """
        self._layout = layout
        self.index = index
        self._on_class_changed = on_class_changed

    def on_context_changed(self, context: GridContext) -> None:
        """Receive a newly published snapshot."""
        self._context = context
        self._update_flex_basis()

    def detach(self) -> None:
        """Forget the current snapshot, back to the pre-measurement state."""
        self._context = GridContext()
        self._flex_basis = AUTO
        self._on_class_changed = None

    @property
    def class_name(self) -> str:
        return self._class_name

    @class_name.setter
    def class_name(self, value: str) -> None:
        value = value or ""
        if value == self._class_name:
            return
        self._class_name = value
        if self._on_class_changed is not None:
            # owner publishes a new snapshot, which re-sizes this item too
            self._on_class_changed()
        else:
            self._update_flex_basis()

    @property
    def context(self) -> GridContext:
        return self._context

    @property
    def flex_basis(self) -> str:
        """Percentage string, or "auto" before the first resolution."""
        return self._flex_basis

    @property
    def is_visible(self) -> bool:
        """Items render nothing until the container has been measured."""
        return self._context.is_measured

    @property
    def span(self) -> Optional[int]:
        """Effective span under the current snapshot, None before measurement."""
        if not self._context.is_measured:
            return None
        return self._layout.span_for(self._class_name, self._viewport_width, self._context.column_count)

    @property
    def row_number(self) -> Optional[int]:
        if self.index is None:
            return None
        return self._context.rows.row_number(self.index)

    @property
    def _viewport_width(self) -> float:
        context = self._context
        if context.viewport_width is not None:
            return context.viewport_width
        return context.calculated_width or 0

    def _update_flex_basis(self) -> None:
        value = self._layout.flex_basis_for(self._context, self.index, self._class_name)
        if value != self._flex_basis:
            logger.debug("Item %s flex basis %s -> %s", self.index, self._flex_basis, value)
        self._flex_basis = value

    def __repr__(self) -> str:
        return f"GridItem(index={self.index}, class_name={self._class_name!r}, flex_basis={self._flex_basis})"
