"""Application settings read from JSON at startup.

Settings are stored at:
    ~/.simtimer/settings.json

The file is optional and only ever read; it supplies the values the input
boxes start with and the sound preference.  Timer progress is never
written back.

Usage::

    settings = load_settings()
    engine.set_config(settings.timer_config())
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

from .timer.config import DEFAULT_CONFIG, TimerConfig, normalize_input


logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / ".simtimer"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer inputs ──────────────────────────────────────────────────
    start_min: int = DEFAULT_CONFIG.start_min
    start_sec: int = DEFAULT_CONFIG.start_sec
    repeat_hour: int = DEFAULT_CONFIG.repeat_hour
    repeat_min: int = DEFAULT_CONFIG.repeat_min
    pause_sec: int = DEFAULT_CONFIG.pause_sec

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True

    # ── window ────────────────────────────────────────────────────────
    always_on_top: bool = False

    def timer_config(self) -> TimerConfig:
        return TimerConfig.from_inputs(
            self.start_min,
            self.start_sec,
            self.repeat_hour,
            self.repeat_min,
            self.pause_sec,
        )


_TIMER_KEYS = ("start_min", "start_sec", "repeat_hour", "repeat_min", "pause_sec")


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("settings root must be an object")
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", SETTINGS_PATH, exc)
        return Settings()

    # Only use keys that exist in the dataclass
    valid_keys = {f.name for f in fields(Settings)}
    filtered = {k: v for k, v in data.items() if k in valid_keys}
    for key in _TIMER_KEYS:
        if key in filtered:
            filtered[key] = normalize_input(filtered[key])
    for key in ("sound_enabled", "always_on_top"):
        if key in filtered and not isinstance(filtered[key], bool):
            logger.warning(
                "Ignoring non-boolean %s=%r in %s", key, filtered.pop(key), SETTINGS_PATH,
            )
    return Settings(**filtered)
