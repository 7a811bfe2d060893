"""Shared pytest fixtures for SimTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from simtimer.timer.config import TimerConfig
from simtimer.timer.engine import TimerEngine

from helpers import ManualClock, RecordingSink


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep settings and cached sounds out of the real home directory."""
    monkeypatch.setattr("simtimer.settings.APP_SUPPORT_DIR", tmp_path)
    monkeypatch.setattr("simtimer.settings.SETTINGS_PATH", tmp_path / "settings.json")
    monkeypatch.setattr("simtimer.audio.sounds.SOUNDS_DIR", tmp_path / "sounds")
    yield


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def engine(qapp, clock, sink):
    """Engine with a 10 s cycle, 1 min session and 5 s pause."""
    return TimerEngine(clock, sink, config=TimerConfig.default())


@pytest.fixture
def idle_engine(qapp, clock, sink):
    """Engine with every input at zero."""
    return TimerEngine(clock, sink)
