"""Application entry point and setup for the Find the Differences game."""

import logging
import sys
from pathlib import Path

from PySide6.QtGui import QGuiApplication, QIcon
from PySide6.QtWidgets import QApplication

from spotdiff.core.journey import JourneyMap
from spotdiff.core.progress import ProgressStore
from spotdiff.core.storage import SettingsStore
from spotdiff.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Initialize the application, load resources, and start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Find the Differences")
    app.setApplicationDisplayName("Find the Differences")

    settings = SettingsStore()
    progress_store = ProgressStore(settings)
    journey = JourneyMap()
    logging.info("Journey progress: level %d", progress_store.current_level)

    icon_path = Path(__file__).parent / "assets" / "logo.svg"
    if icon_path.exists():
        app.setWindowIcon(QIcon(str(icon_path)))

    window = MainWindow(settings=settings, progress_store=progress_store, journey=journey)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(1200, geometry.width()), min(900, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
