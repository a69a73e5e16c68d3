"""Tests for core/settings.py."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from multinumber.core.bounds import FLOAT_MAX, Range
from multinumber.core.settings import AppSettings, BoxSettings

# ---------------------------------------------------------------------------
# BoxSettings round-trip
# ---------------------------------------------------------------------------


class TestBoxSettings:
    def test_to_dict_from_dict_round_trip(self) -> None:
        settings = BoxSettings(
            tick_frequency=0.25,
            minimum=-180.0,
            maximum=180.0,
            wrap=True,
            decimals=2,
            repeat_interval_ms=40,
        )
        restored = BoxSettings.from_dict(settings.to_dict())
        assert restored == settings

    def test_from_empty_dict_gives_defaults(self) -> None:
        restored = BoxSettings.from_dict({})
        assert restored == BoxSettings()
        assert restored.minimum == -FLOAT_MAX
        assert restored.repeat_interval_ms == 10

    def test_bounds(self) -> None:
        assert BoxSettings(minimum=0.0, maximum=1.0, wrap=True).bounds() == Range(0.0, 1.0, True)

    def test_inverted_bounds_raise(self) -> None:
        with pytest.raises(ValueError):
            BoxSettings(minimum=5.0, maximum=1.0).bounds()


# ---------------------------------------------------------------------------
# AppSettings
# ---------------------------------------------------------------------------


class TestAppSettingsPresets:
    def test_empty_initially(self, tmp_path: Path) -> None:
        s = AppSettings(tmp_path)
        assert s.preset_names() == []

    def test_save_and_get(self, tmp_path: Path) -> None:
        s = AppSettings(tmp_path)
        s.save_preset("Rotation", BoxSettings(minimum=0.0, maximum=360.0, wrap=True))
        assert s.get_preset("Rotation").wrap is True

    def test_unknown_preset_raises(self, tmp_path: Path) -> None:
        s = AppSettings(tmp_path)
        with pytest.raises(KeyError):
            s.get_preset("missing")

    def test_unknown_preset_default(self, tmp_path: Path) -> None:
        s = AppSettings(tmp_path)
        default = BoxSettings(tick_frequency=5.0)
        assert s.get_preset("missing", default) is default

    def test_replace_keeps_order(self, tmp_path: Path) -> None:
        s = AppSettings(tmp_path)
        s.save_preset("a", BoxSettings())
        s.save_preset("b", BoxSettings())
        s.save_preset("a", BoxSettings(tick_frequency=2.0))
        assert s.preset_names() == ["a", "b"]
        assert s.get_preset("a").tick_frequency == 2.0

    def test_delete(self, tmp_path: Path) -> None:
        s = AppSettings(tmp_path)
        s.save_preset("a", BoxSettings())
        s.delete_preset("a")
        s.delete_preset("never-saved")
        assert s.preset_names() == []

    def test_inverted_preset_not_saved(self, tmp_path: Path) -> None:
        s = AppSettings(tmp_path)
        with pytest.raises(ValueError):
            s.save_preset("bad", BoxSettings(minimum=1.0, maximum=0.0))
        assert s.preset_names() == []


class TestAppSettingsPersistence:
    def test_survives_reload(self, tmp_path: Path) -> None:
        s1 = AppSettings(tmp_path)
        s1.save_preset("Scale", BoxSettings(tick_frequency=0.1, minimum=0.0))

        s2 = AppSettings(tmp_path)
        assert s2.get_preset("Scale") == BoxSettings(tick_frequency=0.1, minimum=0.0)

    def test_file_is_json(self, tmp_path: Path) -> None:
        s = AppSettings(tmp_path)
        s.save_preset("p", BoxSettings())
        data = json.loads((tmp_path / "settings.json").read_text())
        assert data["presets"]["p"]["tick_frequency"] == 1.0

    def test_creates_config_dir(self, tmp_path: Path) -> None:
        target = tmp_path / "nested" / "config"
        AppSettings(target)
        assert target.is_dir()
