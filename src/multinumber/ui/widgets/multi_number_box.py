"""Single line edit showing an x/y/z triple as ``"x, y, z"``.

Up/Down and the mouse wheel step the field under the caret.  Shift makes
the step ten times larger, Control ten times smaller.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial
from typing import Any

from PyQt6.QtCore import Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QFocusEvent, QKeyEvent, QWheelEvent
from PyQt6.QtWidgets import QApplication, QLineEdit, QWidget

from multinumber.core.adjuster import Modifiers, StepResult, ValueAdjuster
from multinumber.core.model import FIELD_NAMES, MultiNumberModel
from multinumber.core.repeat import RepeatController, StepKey
from multinumber.core.settings import BoxSettings

logger = logging.getLogger(__name__)

_STEP_KEYS = {
    Qt.Key.Key_Up.value: StepKey.INCREASE,
    Qt.Key.Key_Down.value: StepKey.DECREASE,
}


def _to_modifiers(flags: Qt.KeyboardModifier | None) -> Modifiers:
    if flags is None:
        flags = QApplication.keyboardModifiers()
    return Modifiers(
        fast=bool(flags & Qt.KeyboardModifier.ShiftModifier),
        fine=bool(flags & Qt.KeyboardModifier.ControlModifier),
    )


class MultiNumberBox(QLineEdit):
    """Line edit bound to a :class:`MultiNumberModel`.

    Emits ``value_changed([x, y, z])`` whenever a field changes.
    """

    value_changed = pyqtSignal(list)

    def __init__(
        self,
        settings: BoxSettings | None = None,
        *,
        model: MultiNumberModel | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._model = model if model is not None else MultiNumberModel()
        self._adjuster = ValueAdjuster(self._model)
        self._repeat = RepeatController(self._step_key, self._start_cadence)
        # Modifiers of the key event being dispatched; None means query the keyboard.
        self._event_modifiers: Qt.KeyboardModifier | None = None

        # Cadence runs on the GUI thread, so every step touches the model
        # from the thread that owns it.
        self._repeat_timer = QTimer(self)
        self._repeat_timer.timeout.connect(self._on_repeat_timeout)

        self._model.add_listener(self._on_model_changed)
        # A caller-supplied model may outlive this widget.
        self.destroyed.connect(partial(self._model.remove_listener, self._on_model_changed))
        self.editingFinished.connect(self._commit_text)

        self.apply_settings(settings or BoxSettings())

    # ---- Public API ----

    @property
    def model(self) -> MultiNumberModel:
        return self._model

    @property
    def repeat_controller(self) -> RepeatController:
        return self._repeat

    def value(self) -> list[float]:
        """Return current [x, y, z] values."""
        return list(self._model.value())

    def set_value(self, values: Sequence[float]) -> None:
        """Set all three components.  Values are not bounds-checked."""
        self._model.set_value(values)

    def apply_settings(self, settings: BoxSettings) -> None:
        """Apply stepping bounds, display precision and repeat timing."""
        bounds = settings.bounds()
        self._model.tick_frequency = settings.tick_frequency
        self._model.bounds = bounds
        self._model.decimals = settings.decimals
        self._repeat_timer.setInterval(settings.repeat_interval_ms)
        self._refresh_text()
        logger.debug(
            "Box settings: tick=%s range=[%s, %s] wrap=%s",
            settings.tick_frequency,
            bounds.minimum,
            bounds.maximum,
            bounds.wrap,
        )

    def repeat_interval(self) -> int:
        return self._repeat_timer.interval()

    def step(
        self, increase: bool, modifiers: Qt.KeyboardModifier | None = None
    ) -> StepResult | None:
        """Step the field under the caret and keep the caret where it was.

        Without *modifiers* the keyboard state is read at the moment of the step.
        """
        caret = self.cursorPosition()
        result = self._adjuster.step(self.text(), caret, increase, _to_modifiers(modifiers))
        if result is not None:
            self.setCursorPosition(result.caret)
        return result

    # ---- Event handlers ----

    def keyPressEvent(self, event: QKeyEvent) -> None:
        key = _STEP_KEYS.get(event.key())
        if key is None:
            super().keyPressEvent(event)
            return
        event.accept()
        self._event_modifiers = event.modifiers()
        try:
            self._repeat.key_down(key, event.isAutoRepeat())
        finally:
            self._event_modifiers = None

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        key = _STEP_KEYS.get(event.key())
        # Qt sends release/press pairs flagged as auto-repeat while a key is held.
        if key is None or event.isAutoRepeat():
            super().keyReleaseEvent(event)
            return
        if self._repeat.key_up(key):
            event.accept()
        else:
            super().keyReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        angle = event.angleDelta()
        # Shift+wheel is reported on the horizontal axis on some platforms.
        delta = angle.y() or angle.x()
        if not self.hasFocus() or delta == 0:
            super().wheelEvent(event)
            return
        event.accept()
        self.step(delta > 0, event.modifiers())

    def focusOutEvent(self, event: QFocusEvent) -> None:
        self._repeat.cancel()
        super().focusOutEvent(event)

    # ---- Internals ----

    def _step_key(self, key: StepKey) -> None:
        # Timer-driven cycles run outside any key event and see None here.
        self.step(key is StepKey.INCREASE, self._event_modifiers)

    def _start_cadence(self) -> None:
        self._repeat_timer.start()

    def _on_repeat_timeout(self) -> None:
        if not self._repeat.cycle():
            self._repeat_timer.stop()

    def _commit_text(self) -> None:
        self._model.display_text = self.text()
        # Rejected or partially rejected edits fall back to the model's values.
        self._refresh_text()

    def _refresh_text(self) -> None:
        text = self._model.display_text
        if self.text() != text:
            self.setText(text)

    def _on_model_changed(self, name: str, value: Any) -> None:
        if name not in FIELD_NAMES:
            return
        self._refresh_text()
        self.value_changed.emit(self.value())
