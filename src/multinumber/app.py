"""Application setup for the MultiNumberBox demo."""

from __future__ import annotations

import sys
from pathlib import Path

from PyQt6.QtCore import QStandardPaths
from PyQt6.QtWidgets import QApplication


class MultiNumberApp:
    """Wrapper around QApplication that configures the demo environment."""

    def __init__(self, argv: list[str] | None = None) -> None:
        self.qapp = QApplication(argv or sys.argv)
        self.qapp.setApplicationName("MultiNumberBox")
        self.qapp.setOrganizationName("multinumber")
        self.qapp.setStyle("Fusion")

    def config_dir(self) -> Path:
        """Platform-specific directory for ``settings.json``."""
        location = QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppConfigLocation
        )
        return Path(location) if location else Path.home() / ".multinumber"

    def exec(self) -> int:
        """Run the Qt event loop and return the exit code."""
        return self.qapp.exec()
