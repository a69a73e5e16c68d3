"""Box presets and application settings."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from multinumber.core.bounds import FLOAT_MAX, Range
from multinumber.core.repeat import DEFAULT_INTERVAL_MS

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# BoxSettings
# ---------------------------------------------------------------------------


@dataclass
class BoxSettings:
    """Stepping configuration for one MultiNumberBox."""

    tick_frequency: float = 1.0
    minimum: float = -FLOAT_MAX
    maximum: float = FLOAT_MAX
    wrap: bool = False

    # Display / timing
    decimals: int = 3
    repeat_interval_ms: int = DEFAULT_INTERVAL_MS

    def bounds(self) -> Range:
        """Build the range policy; raises ``ValueError`` if the bounds are inverted."""
        return Range(self.minimum, self.maximum, self.wrap)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        """Serialise to a plain dict suitable for JSON."""
        return {
            "tick_frequency": self.tick_frequency,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "wrap": self.wrap,
            "decimals": self.decimals,
            "repeat_interval_ms": self.repeat_interval_ms,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> BoxSettings:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        return BoxSettings(
            tick_frequency=d.get("tick_frequency", 1.0),
            minimum=d.get("minimum", -FLOAT_MAX),
            maximum=d.get("maximum", FLOAT_MAX),
            wrap=d.get("wrap", False),
            decimals=d.get("decimals", 3),
            repeat_interval_ms=d.get("repeat_interval_ms", DEFAULT_INTERVAL_MS),
        )


# ---------------------------------------------------------------------------
# AppSettings  (JSON-file backend, no Qt dependency)
# ---------------------------------------------------------------------------

_SETTINGS_FILE = "settings.json"


class AppSettings:
    """Persistent application settings backed by a JSON file.

    Parameters
    ----------
    config_dir:
        Directory where ``settings.json`` is stored.  Typically the
        platform-specific app config directory.
    """

    def __init__(self, config_dir: str | Path) -> None:
        self._dir = Path(config_dir)
        self._dir.mkdir(parents=True, exist_ok=True)
        self._path = self._dir / _SETTINGS_FILE
        self._data: dict[str, Any] = self._load()

    # ------------------------------------------------------------------
    # Internal persistence
    # ------------------------------------------------------------------

    def _load(self) -> dict[str, Any]:
        if self._path.exists():
            logger.info("Loaded settings: %s", self._path)
            return json.loads(self._path.read_text())  # type: ignore[no-any-return]
        return {}

    def _save(self) -> None:
        self._path.write_text(json.dumps(self._data, indent=2))
        logger.info("Saved settings: %s", self._path)

    # ------------------------------------------------------------------
    # Box presets
    # ------------------------------------------------------------------

    def preset_names(self) -> list[str]:
        """Return saved preset names in insertion order."""
        return list(self._data.get("presets", {}))

    def get_preset(self, name: str, default: BoxSettings | None = None) -> BoxSettings:
        """Return the preset called *name*, or *default* when it is not saved."""
        raw = self._data.get("presets", {}).get(name)
        if raw is not None:
            return BoxSettings.from_dict(raw)
        if default is not None:
            return default
        raise KeyError(f"Unknown preset: {name!r}")

    def save_preset(self, name: str, settings: BoxSettings) -> None:
        """Insert or replace a preset.  Inverted bounds are rejected."""
        settings.bounds()
        presets: dict[str, Any] = self._data.setdefault("presets", {})
        presets[name] = settings.to_dict()
        self._save()

    def delete_preset(self, name: str) -> None:
        """Remove a preset by name (no-op when absent)."""
        presets: dict[str, Any] = self._data.get("presets", {})
        if presets.pop(name, None) is not None:
            self._save()
