"""Demo window with one MultiNumberBox per saved preset."""

from __future__ import annotations

from PyQt6.QtWidgets import (
    QFormLayout,
    QLabel,
    QMainWindow,
    QStatusBar,
    QWidget,
)

from multinumber.core.settings import AppSettings, BoxSettings
from multinumber.ui.widgets.multi_number_box import MultiNumberBox

DEFAULT_PRESETS: dict[str, BoxSettings] = {
    "Position": BoxSettings(),
    "Rotation": BoxSettings(minimum=0.0, maximum=360.0, wrap=True),
    "Scale": BoxSettings(tick_frequency=0.1, minimum=0.0),
}


class MainWindow(QMainWindow):
    """Form of labelled boxes plus a status bar echoing the last edit."""

    def __init__(self, settings: AppSettings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("MultiNumberBox")
        self.resize(420, 160)
        self._settings = settings
        self._seed_presets()

        central = QWidget()
        form = QFormLayout()
        central.setLayout(form)
        self.setCentralWidget(central)

        self.boxes: dict[str, MultiNumberBox] = {}
        for name in self._settings.preset_names():
            box = MultiNumberBox(self._settings.get_preset(name))
            box.value_changed.connect(lambda v, n=name: self._on_value_changed(n, v))
            form.addRow(QLabel(name), box)
            self.boxes[name] = box

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status.showMessage("Up/Down or wheel to step. Shift x10, Ctrl /10.")

    def _seed_presets(self) -> None:
        """Store the default presets on first run."""
        if self._settings.preset_names():
            return
        for name, preset in DEFAULT_PRESETS.items():
            self._settings.save_preset(name, preset)

    def _on_value_changed(self, name: str, values: list[float]) -> None:
        text = ", ".join(f"{v:g}" for v in values)
        self._status.showMessage(f"{name}: {text}")
