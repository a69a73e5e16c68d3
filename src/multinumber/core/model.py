"""Observable x/y/z triple plus its stepping configuration."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from typing import Any

from multinumber.core.bounds import Range
from multinumber.core.triple_text import FIELD_COUNT, format_triple, parse_triple

logger = logging.getLogger(__name__)

FIELD_NAMES = ("x", "y", "z")

Listener = Callable[[str, Any], None]


def _same(a: float, b: float) -> bool:
    return a == b or (math.isnan(a) and math.isnan(b))


class MultiNumberModel:
    """Three float fields with change notification.

    Listeners are called with ``(name, value)`` after a property actually
    changes. Field writes are never bounds-checked here; only stepping
    applies :class:`Range`.
    """

    def __init__(
        self,
        values: Sequence[float] = (0.0, 0.0, 0.0),
        *,
        tick_frequency: float = 1.0,
        bounds: Range | None = None,
        decimals: int = 3,
    ) -> None:
        self._listeners: list[Listener] = []
        self._values = [float(v) for v in values]
        if len(self._values) != FIELD_COUNT:
            raise ValueError(f"Expected {FIELD_COUNT} values, got {len(self._values)}")
        self._tick_frequency = 1.0
        self.tick_frequency = tick_frequency
        self._bounds = bounds if bounds is not None else Range()
        self.decimals = decimals

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def add_listener(self, callback: Listener) -> None:
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        self._listeners.remove(callback)

    def _notify(self, name: str, value: Any) -> None:
        for callback in list(self._listeners):
            callback(name, value)

    # ------------------------------------------------------------------
    # Fields
    # ------------------------------------------------------------------

    def get(self, index: int) -> float:
        return self._values[index]

    def set(self, index: int, value: float) -> None:
        value = float(value)
        if _same(self._values[index], value):
            return
        self._values[index] = value
        self._notify(FIELD_NAMES[index], value)

    def value(self) -> tuple[float, float, float]:
        """Return ``(x, y, z)``."""
        return (self._values[0], self._values[1], self._values[2])

    def set_value(self, values: Sequence[float]) -> None:
        for index, v in enumerate(values):
            if index >= FIELD_COUNT:
                break
            self.set(index, v)

    @property
    def x(self) -> float:
        return self._values[0]

    @x.setter
    def x(self, value: float) -> None:
        self.set(0, value)

    @property
    def y(self) -> float:
        return self._values[1]

    @y.setter
    def y(self, value: float) -> None:
        self.set(1, value)

    @property
    def z(self) -> float:
        return self._values[2]

    @z.setter
    def z(self, value: float) -> None:
        self.set(2, value)

    # ------------------------------------------------------------------
    # Display text (derived on read)
    # ------------------------------------------------------------------

    @property
    def display_text(self) -> str:
        return format_triple(self._values, self.decimals)

    @display_text.setter
    def display_text(self, text: str) -> None:
        parsed = parse_triple(text)
        if parsed is None:
            logger.debug("Rejected display text %r", text)
            return
        for index, v in enumerate(parsed):
            if v is not None:
                self.set(index, v)

    # ------------------------------------------------------------------
    # Stepping configuration
    # ------------------------------------------------------------------

    @property
    def tick_frequency(self) -> float:
        return self._tick_frequency

    @tick_frequency.setter
    def tick_frequency(self, value: float) -> None:
        value = float(value)
        if not value > 0:
            raise ValueError(f"tick_frequency must be positive, got {value}")
        if value == self._tick_frequency:
            return
        self._tick_frequency = value
        self._notify("tick_frequency", value)

    @property
    def bounds(self) -> Range:
        return self._bounds

    @bounds.setter
    def bounds(self, bounds: Range) -> None:
        old = self._bounds
        if bounds == old:
            return
        self._bounds = bounds
        if bounds.minimum != old.minimum:
            self._notify("minimum", bounds.minimum)
        if bounds.maximum != old.maximum:
            self._notify("maximum", bounds.maximum)
        if bounds.wrap != old.wrap:
            self._notify("wrap", bounds.wrap)

    def set_range(self, minimum: float, maximum: float) -> None:
        """Replace both bounds at once, keeping the wrap flag."""
        self.bounds = Range(float(minimum), float(maximum), self._bounds.wrap)

    @property
    def minimum(self) -> float:
        return self._bounds.minimum

    @minimum.setter
    def minimum(self, value: float) -> None:
        self.set_range(value, self._bounds.maximum)

    @property
    def maximum(self) -> float:
        return self._bounds.maximum

    @maximum.setter
    def maximum(self, value: float) -> None:
        self.set_range(self._bounds.minimum, value)

    @property
    def wrap(self) -> bool:
        return self._bounds.wrap

    @wrap.setter
    def wrap(self, value: bool) -> None:
        self.bounds = Range(self._bounds.minimum, self._bounds.maximum, bool(value))
