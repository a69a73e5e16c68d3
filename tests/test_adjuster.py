"""Tests for core/adjuster.py."""

from __future__ import annotations

import pytest

from multinumber.core.adjuster import Modifiers, StepResult, ValueAdjuster, step_delta
from multinumber.core.bounds import Range
from multinumber.core.model import MultiNumberModel

# ---------------------------------------------------------------------------
# step_delta
# ---------------------------------------------------------------------------


class TestStepDelta:
    def test_plain(self) -> None:
        assert step_delta(1.0, True) == 1.0
        assert step_delta(1.0, False) == -1.0

    def test_fast(self) -> None:
        assert step_delta(1.0, True, Modifiers(fast=True)) == 10.0

    def test_fine(self) -> None:
        assert step_delta(1.0, False, Modifiers(fine=True)) == pytest.approx(-0.1)

    def test_fast_and_fine_cancel(self) -> None:
        assert step_delta(1.0, True, Modifiers(fast=True, fine=True)) == 1.0

    def test_scales_tick(self) -> None:
        assert step_delta(0.5, True, Modifiers(fast=True)) == 5.0


# ---------------------------------------------------------------------------
# ValueAdjuster
# ---------------------------------------------------------------------------


def _adjuster(values=(5.0, 5.0, 5.0), **kwargs) -> ValueAdjuster:
    return ValueAdjuster(MultiNumberModel(values, **kwargs))


class TestStep:
    def test_targets_field_under_caret(self) -> None:
        adj = _adjuster()
        text = adj.model.display_text  # "5, 5, 5"
        result = adj.step(text, len(text), increase=True)
        assert result == StepResult(field_index=2, old_value=5.0, new_value=6.0, caret=len(text))
        assert adj.model.value() == (5.0, 5.0, 6.0)

    def test_decrease_first_field(self) -> None:
        adj = _adjuster()
        adj.step(adj.model.display_text, 0, increase=False)
        assert adj.model.value() == (4.0, 5.0, 5.0)

    def test_clamped_scenario_then_noop(self) -> None:
        adj = _adjuster(bounds=Range(0.0, 10.0))
        text = adj.model.display_text
        caret = text.index(",") + 1

        result = adj.step(text, caret, increase=True, modifiers=Modifiers(fast=True))
        assert result is not None
        assert result.field_index == 1
        assert adj.model.value() == (5.0, 10.0, 5.0)

        events: list[str] = []
        adj.model.add_listener(lambda name, value: events.append(name))
        assert adj.step(adj.model.display_text, caret, increase=True) is None
        assert events == []
        assert adj.model.y == 10.0

    def test_wrap_jumps_to_opposite_bound(self) -> None:
        adj = _adjuster(values=(359.5, 0.0, 0.0), bounds=Range(0.0, 360.0, wrap=True))
        adj.step(adj.model.display_text, 0, increase=True)
        assert adj.model.x == 0.0

    def test_wrap_down_from_minimum(self) -> None:
        adj = _adjuster(values=(0.0, 0.0, 0.0), bounds=Range(0.0, 360.0, wrap=True))
        adj.step(adj.model.display_text, 0, increase=False)
        assert adj.model.x == 360.0

    def test_out_of_range_value_is_pulled_back(self) -> None:
        adj = _adjuster(values=(50.0, 0.0, 0.0), bounds=Range(0.0, 10.0))
        adj.step(adj.model.display_text, 0, increase=True)
        assert adj.model.x == 10.0

    def test_fine_step_uses_tick(self) -> None:
        adj = _adjuster(values=(0.0, 0.0, 0.0), tick_frequency=2.0)
        adj.step(adj.model.display_text, 0, increase=True, modifiers=Modifiers(fine=True))
        assert adj.model.x == pytest.approx(0.2)

    def test_caret_reported_unchanged(self) -> None:
        adj = _adjuster()
        result = adj.step("5, 5, 5", 4, increase=True)
        assert result is not None
        assert result.caret == 4
