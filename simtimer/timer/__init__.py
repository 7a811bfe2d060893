"""Timer package."""

from .clock import Clock, QtClock, TICK_INTERVAL_MS
from .config import (
    TimerConfig,
    normalize_input,
    start_timer_seconds,
    repeat_total_seconds,
)
from .engine import AlertSink, TimerEngine, TimerSnapshot, TimerState

__all__ = [
    "AlertSink",
    "Clock",
    "QtClock",
    "TICK_INTERVAL_MS",
    "TimerConfig",
    "TimerEngine",
    "TimerSnapshot",
    "TimerState",
    "normalize_input",
    "repeat_total_seconds",
    "start_timer_seconds",
]
