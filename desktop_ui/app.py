import sys
import logging
from pathlib import Path
from PySide6.QtGui import QGuiApplication
from PySide6.QtQml import QQmlApplicationEngine
from config import ConfigurationError, DesktopConfiguration
from desktop_ui.coordinator import DesktopGridCoordinator

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    # Configure default console logging if not already configured
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=level.upper(),
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )


def main() -> int:
    config = DesktopConfiguration()
    try:
        config.validate()
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 1

    configure_logging(config.log_level)

    app = QGuiApplication(sys.argv)
    engine = QQmlApplicationEngine()

    coordinator = DesktopGridCoordinator(config)

    engine.rootContext().setContextProperty("gridModel", coordinator.item_model)
    engine.rootContext().setContextProperty("coordinator", coordinator)

    qml_file = Path(__file__).parent / "qml" / "GridWindow.qml"
    engine.load(qml_file)

    if not engine.rootObjects():
        logger.error("Failed to load QML from %s", qml_file)
        coordinator.cleanup()
        return 1

    try:
        return app.exec()
    finally:
        coordinator.cleanup()
