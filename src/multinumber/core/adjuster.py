"""Stepping a single field of the triple under modifier keys."""

from __future__ import annotations

import math
from dataclasses import dataclass

from multinumber.core.model import MultiNumberModel
from multinumber.core.triple_text import locate_field

FAST_FACTOR = 10.0
FINE_FACTOR = 10.0


@dataclass(frozen=True)
class Modifiers:
    """Step-size modifiers held at the moment a step runs."""

    fast: bool = False
    fine: bool = False


@dataclass(frozen=True)
class StepResult:
    """A committed step: which field moved, and where the caret goes back to."""

    field_index: int
    old_value: float
    new_value: float
    caret: int


def step_delta(tick: float, increase: bool, modifiers: Modifiers = Modifiers()) -> float:
    """Signed step size: ``tick``, times 10 when fast, then divided by 10 when fine."""
    delta = tick if increase else -tick
    if modifiers.fast:
        delta *= FAST_FACTOR
    if modifiers.fine:
        delta /= FINE_FACTOR
    return delta


class ValueAdjuster:
    """Applies one step to the field under the caret."""

    def __init__(self, model: MultiNumberModel) -> None:
        self._model = model

    @property
    def model(self) -> MultiNumberModel:
        return self._model

    def step(
        self,
        text: str,
        caret: int,
        increase: bool,
        modifiers: Modifiers = Modifiers(),
    ) -> StepResult | None:
        """Step the field *caret* points at within *text*.

        Returns ``None`` when the bounded result equals the current value, in
        which case nothing is written.
        """
        delta = step_delta(self._model.tick_frequency, increase, modifiers)
        index = locate_field(text, caret)
        old = self._model.get(index)
        new = self._model.bounds.validate(old + delta)

        if new == old or (math.isnan(new) and math.isnan(old)):
            return None

        self._model.set(index, new)
        return StepResult(field_index=index, old_value=old, new_value=new, caret=caret)
