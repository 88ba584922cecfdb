"""Tests for the Qt bridge around the grid coordinator."""

import pytest
from PySide6.QtCore import QCoreApplication

from config import DesktopConfiguration
from desktop_ui.coordinator import DesktopGridCoordinator
from desktop_ui.qt_models.grid_item_model import GridItemModel


@pytest.fixture(scope="module")
def app():
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def coordinator(app):
    config = DesktopConfiguration(env={
        "GRID_DEMO_CLASS": "grid-cols-4 md:grid-cols-12",
        "GRID_DEMO_ITEMS": "col-span-4 md:col-span-6;col-span-4 md:col-span-6;col-span-4 md:col-span-6",
    })
    coordinator = DesktopGridCoordinator(config)
    yield coordinator
    coordinator.cleanup()


def model_value(model, row, role):
    return model.data(model.index(row, 0), role)


def test_initial_state(coordinator):
    assert not coordinator.isMeasured
    assert coordinator.calculatedWidth == 0.0
    assert coordinator.columnCount == 12
    assert coordinator.item_model.rowCount() == 3
    assert model_value(coordinator.item_model, 0, GridItemModel.FlexBasisRole) == "auto"
    assert model_value(coordinator.item_model, 0, GridItemModel.VisibleRole) is False


def test_resize_publishes_layout(coordinator):
    signals = {"layout": 0, "measured": 0}
    coordinator.layoutChanged.connect(lambda: signals.__setitem__("layout", signals["layout"] + 1))
    coordinator.measuredChanged.connect(lambda: signals.__setitem__("measured", signals["measured"] + 1))

    coordinator.containerResized(1000.0)
    coordinator.containerResized(1000.0)

    assert signals["layout"] == 2
    assert signals["measured"] == 1
    assert coordinator.isMeasured
    assert coordinator.columnCount == 12
    assert coordinator.rowCount == 2
    assert coordinator.activeBreakpoint == "md"

    model = coordinator.item_model
    assert model_value(model, 0, GridItemModel.FlexBasisRole) == "50%"
    assert model_value(model, 2, GridItemModel.RowRole) == 2
    assert model_value(model, 2, GridItemModel.SpanRole) == 6
    assert model_value(model, 1, GridItemModel.ClassNameRole) == "col-span-4 md:col-span-6"


def test_viewport_resize_switches_breakpoint(coordinator):
    coordinator.containerResized(500.0)
    assert coordinator.columnCount == 4
    assert coordinator.rowCount == 3
    assert model_value(coordinator.item_model, 0, GridItemModel.FlexBasisRole) == "100%"

    coordinator.viewportResized(900.0)
    assert coordinator.columnCount == 12
    assert coordinator.activeBreakpoint == "md"


def test_model_emits_data_changed(coordinator):
    changes = []
    coordinator.item_model.dataChanged.connect(lambda first, last, roles: changes.append((first.row(), last.row())))
    coordinator.containerResized(800.0)
    assert changes == [(0, 2)]


def test_flow_direction_slot(coordinator):
    coordinator.containerResized(1000.0)
    coordinator.setFlowDirection("column")
    assert model_value(coordinator.item_model, 0, GridItemModel.FlexBasisRole) == "auto"
    coordinator.setFlowDirection("sideways")
    assert coordinator.grid.context.flow_direction.value == "column"


def test_container_class_slot(coordinator):
    coordinator.containerResized(1000.0)
    coordinator.setContainerClass("grid-cols-6")
    assert coordinator.columnCount == 6
    assert coordinator.rowCount == 3


def test_role_names(app):
    names = {bytes(name) for name in GridItemModel().roleNames().values()}
    assert names == {b"className", b"flexBasis", b"row", b"span", b"itemVisible"}
