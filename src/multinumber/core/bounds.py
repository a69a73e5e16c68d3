"""Clamp-or-wrap range policy applied after every step."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

FLOAT_MAX = sys.float_info.max


@dataclass(frozen=True)
class Range:
    """Inclusive ``[minimum, maximum]`` bounds for a stepped field.

    With ``wrap`` set, overshooting one bound jumps to the other bound
    instead of clamping. The jump happens once, whatever the overshoot.
    """

    minimum: float = -FLOAT_MAX
    maximum: float = FLOAT_MAX
    wrap: bool = False

    def __post_init__(self) -> None:
        if math.isnan(self.minimum) or math.isnan(self.maximum):
            raise ValueError(f"Range bounds must be numbers: [{self.minimum}, {self.maximum}]")
        if self.minimum > self.maximum:
            raise ValueError(
                f"Range minimum ({self.minimum}) is greater than maximum ({self.maximum})."
            )

    def validate(self, value: float) -> float:
        """Bring *value* back inside the range."""
        if self.wrap:
            if value > self.maximum:
                return self.minimum
            if value < self.minimum:
                return self.maximum
            return value
        return max(min(value, self.maximum), self.minimum)
