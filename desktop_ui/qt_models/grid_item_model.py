from typing import Any, List
from PySide6.QtCore import QAbstractListModel, QByteArray, QModelIndex, QPersistentModelIndex, Qt
from gridcore.ui_logic.grid_item import GridItem


class GridItemModel(QAbstractListModel):
    ClassNameRole = Qt.ItemDataRole.UserRole + 1
    FlexBasisRole = Qt.ItemDataRole.UserRole + 2
    RowRole = Qt.ItemDataRole.UserRole + 3
    SpanRole = Qt.ItemDataRole.UserRole + 4
    VisibleRole = Qt.ItemDataRole.UserRole + 5

    LAYOUT_ROLES = [FlexBasisRole, RowRole, SpanRole, VisibleRole]

    def __init__(self, items: List[GridItem] | None = None) -> None:
        super().__init__()
        self.items: List[GridItem] = list(items or [])

    def set_items(self, items: List[GridItem]) -> None:
        self.beginResetModel()
        self.items = list(items)
        self.endResetModel()

    def refresh(self) -> None:
        """Tell views every item's layout roles may have changed."""
        if not self.items:
            return
        self.dataChanged.emit(self.index(0), self.index(len(self.items) - 1), self.LAYOUT_ROLES)

    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        return len(self.items)

    def data(self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or index.row() >= len(self.items):
            return None

        item = self.items[index.row()]

        if role == self.ClassNameRole or role == Qt.ItemDataRole.DisplayRole:
            return item.class_name
        elif role == self.FlexBasisRole:
            return item.flex_basis
        elif role == self.RowRole:
            return item.row_number or 0
        elif role == self.SpanRole:
            return item.span or 0
        elif role == self.VisibleRole:
            return item.is_visible

        return None

    def roleNames(self) -> dict[int, QByteArray]:
        return {
            self.ClassNameRole: QByteArray(b"className"),
            self.FlexBasisRole: QByteArray(b"flexBasis"),
            self.RowRole: QByteArray(b"row"),
            self.SpanRole: QByteArray(b"span"),
            self.VisibleRole: QByteArray(b"itemVisible"),
        }
