"""Repeating countdown state machine for SimTimer.

One *cycle* counts ``start_timer_seconds`` down to zero.  When it runs
out the alert tone plays, the next cycle starts straight away and, if a
pause is configured, a *pause window* (buff exchange) opens.  While the
pause window is open the countdown is frozen but the session clock keeps
running.  The *session* ends once ``repeat_total_seconds`` have elapsed.

States
------
IDLE       Not running (never started, stopped, reset or finished).
COUNTING   Running, countdown decrementing.
PAUSED     Running, inside the pause window.

Tick transition
---------------
1. Session time used up          → stop, clear countdown.
2. Inside pause window           → shrink pause window, session +1 s.
3. Counting, last second of cycle → alert, maybe open pause window,
                                    reload countdown, session +1 s.
4. Counting otherwise            → countdown -1 s, session +1 s.

The end-of-session check looks at the elapsed time *before* the tick, so
the tick that reaches the boundary still runs in full and the following
tick halts the session.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from PyQt6.QtCore import QObject, pyqtSignal

from ..audio.tone import ToneSpec, DEFAULT_TONE
from .clock import Clock
from .config import TimerConfig, start_timer_seconds, repeat_total_seconds


logger = logging.getLogger(__name__)


# ── types ─────────────────────────────────────────────────────────────────


class TimerState(Enum):
    IDLE = "idle"
    COUNTING = "counting"
    PAUSED = "paused"


class AlertSink(Protocol):
    def emit(self, duration: float, frequency: float, volume: float) -> None:
        ...


@dataclass(frozen=True)
class TimerSnapshot:
    time_left: int
    total_elapsed: int
    is_running: bool
    is_paused: bool
    pause_left: int
    start_timer_seconds: int
    repeat_total_seconds: int
    pause_sec: int

    @property
    def state(self) -> TimerState:
        return _derive_state(self.is_running, self.is_paused)


def _derive_state(is_running: bool, is_paused: bool) -> TimerState:
    if not is_running:
        return TimerState.IDLE
    return TimerState.PAUSED if is_paused else TimerState.COUNTING


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Owns every counter of the repeating timer.

    The clock and alert sink are handed in by the caller, so tests can
    drive ``on_tick()`` by hand and capture alerts in a list.

    Signals
    -------
    tick(time_left: int)
        Emitted after every processed tick.
    state_changed(new_state: TimerState)
        Emitted whenever IDLE / COUNTING / PAUSED changes.
    cycle_completed(cycle_number: int)
        Emitted when a countdown reaches zero (1-based, per session).
    session_finished()
        Emitted when the session time runs out.
    config_changed(config: TimerConfig)
        Emitted after ``configure`` / ``set_config``.
    """

    tick = pyqtSignal(int)
    state_changed = pyqtSignal(object)
    cycle_completed = pyqtSignal(int)
    session_finished = pyqtSignal()
    config_changed = pyqtSignal(object)

    def __init__(
        self,
        clock: Clock,
        alert_sink: AlertSink,
        parent: QObject | None = None,
        *,
        config: TimerConfig | None = None,
        tone: ToneSpec = DEFAULT_TONE,
    ) -> None:
        super().__init__(parent)

        # ── collaborators ─────────────────────────────────────────────
        self._clock = clock
        self._alert_sink = alert_sink
        self._tone = tone
        self._subscription: object | None = None

        # ── configuration ─────────────────────────────────────────────
        self._config: TimerConfig = config or TimerConfig()

        # ── countdown / session state ─────────────────────────────────
        self._time_left: int = 0
        self._total_elapsed: int = 0
        self._is_running: bool = False
        self._is_paused: bool = False
        self._pause_left: int = 0
        self._cycles_completed: int = 0

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def config(self) -> TimerConfig:
        return self._config

    @property
    def tone(self) -> ToneSpec:
        return self._tone

    @property
    def start_timer_seconds(self) -> int:
        return start_timer_seconds(self._config)

    @property
    def repeat_total_seconds(self) -> int:
        return repeat_total_seconds(self._config)

    @property
    def pause_sec(self) -> int:
        return self._config.pause_sec

    @property
    def time_left(self) -> int:
        """Seconds left in the current cycle."""
        return self._time_left

    @property
    def total_elapsed(self) -> int:
        """Seconds elapsed since the session started."""
        return self._total_elapsed

    @property
    def pause_left(self) -> int:
        return self._pause_left

    @property
    def is_running(self) -> bool:
        return self._is_running

    @property
    def is_paused(self) -> bool:
        """True inside the post-cycle pause window."""
        return self._is_paused

    @property
    def cycles_completed(self) -> int:
        return self._cycles_completed

    @property
    def state(self) -> TimerState:
        return _derive_state(self._is_running, self._is_paused)

    @property
    def display_minutes(self) -> int:
        return self._time_left // 60

    @property
    def display_seconds(self) -> int:
        return self._time_left % 60

    @property
    def remaining_session_seconds(self) -> int:
        return max(self.repeat_total_seconds - self._total_elapsed, 0)

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            time_left=self._time_left,
            total_elapsed=self._total_elapsed,
            is_running=self._is_running,
            is_paused=self._is_paused,
            pause_left=self._pause_left,
            start_timer_seconds=self.start_timer_seconds,
            repeat_total_seconds=self.repeat_total_seconds,
            pause_sec=self.pause_sec,
        )

    # ══════════════════════════════════════════════════════════════════
    #  CONFIGURATION
    # ══════════════════════════════════════════════════════════════════

    def configure(
        self,
        start_min: object,
        start_sec: object,
        repeat_hour: object,
        repeat_min: object,
        pause_sec: object,
    ) -> None:
        """Replace the configuration from raw input values.

        Safe while running: the derived totals change immediately but the
        running counters are only affected at the next cycle boundary.
        """
        self.set_config(
            TimerConfig.from_inputs(
                start_min, start_sec, repeat_hour, repeat_min, pause_sec,
            )
        )

    def set_config(self, config: TimerConfig) -> None:
        self._config = config
        self.config_changed.emit(config)

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self) -> None:
        """Start a new session from zero.  No-op if either length is 0."""
        cycle = self.start_timer_seconds
        session = self.repeat_total_seconds
        if cycle <= 0 or session <= 0:
            return

        old_state = self.state
        self._cancel_subscription()
        self._time_left = cycle
        self._total_elapsed = 0
        self._cycles_completed = 0
        self._is_paused = False
        self._is_running = True
        self._subscription = self._clock.subscribe(self.on_tick)
        logger.info("Session started: %ds cycles for %ds", cycle, session)

        self.tick.emit(self._time_left)
        self._emit_state_if_changed(old_state)

    def stop(self) -> None:
        """Halt the tick loop, keeping every counter as it is.

        The pause window flag is dropped (a stopped timer is never inside
        one) but ``pause_left`` is kept.
        """
        if not self._is_running:
            return
        old_state = self.state
        self._cancel_subscription()
        self._is_running = False
        self._is_paused = False
        logger.debug("Session stopped at %ds elapsed", self._total_elapsed)
        self._emit_state_if_changed(old_state)

    def reset(self) -> None:
        """Stop and zero every counter.  Configuration is kept."""
        old_state = self.state
        self._cancel_subscription()
        self._is_running = False
        self._time_left = 0
        self._total_elapsed = 0
        self._is_paused = False
        self._pause_left = 0
        self._cycles_completed = 0
        logger.debug("Timer reset")
        self.tick.emit(self._time_left)
        self._emit_state_if_changed(old_state)

    def shutdown(self) -> None:
        """Drop the clock subscription; called when the window goes away."""
        self._cancel_subscription()

    # ══════════════════════════════════════════════════════════════════
    #  TICK
    # ══════════════════════════════════════════════════════════════════

    def on_tick(self) -> None:
        if not self._is_running:
            return
        old_state = self.state

        if self._total_elapsed >= self.repeat_total_seconds:
            self._finish_session()
            self._emit_state_if_changed(old_state)
            return

        if self._is_paused:
            self._pause_left = max(self._pause_left - 1, 0)
            if self._pause_left == 0:
                self._is_paused = False
            self._total_elapsed += 1
            self.tick.emit(self._time_left)
            self._emit_state_if_changed(old_state)
            return

        if self._time_left <= 1:
            self._complete_cycle()
        else:
            self._time_left -= 1
        self._total_elapsed += 1

        self.tick.emit(self._time_left)
        self._emit_state_if_changed(old_state)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _complete_cycle(self) -> None:
        self._play_alert()

        pause = self.pause_sec
        if pause > 0:
            self._is_paused = True
            self._pause_left = pause

        self._time_left = self.start_timer_seconds
        self._cycles_completed += 1
        self.cycle_completed.emit(self._cycles_completed)

    def _finish_session(self) -> None:
        self._cancel_subscription()
        self._is_running = False
        self._time_left = 0
        self._is_paused = False
        logger.info(
            "Session finished after %ds (%d cycles)",
            self._total_elapsed, self._cycles_completed,
        )
        self.tick.emit(self._time_left)
        self.session_finished.emit()

    def _play_alert(self) -> None:
        tone = self._tone
        try:
            self._alert_sink.emit(tone.duration, tone.frequency, tone.volume)
        except Exception:
            # The countdown must keep going even if audio is unavailable.
            logger.debug("Alert tone failed", exc_info=True)

    def _cancel_subscription(self) -> None:
        if self._subscription is None:
            return
        handle, self._subscription = self._subscription, None
        self._clock.cancel(handle)

    def _emit_state_if_changed(self, old_state: TimerState) -> None:
        new_state = self.state
        if new_state != old_state:
            self.state_changed.emit(new_state)
