"""Main timer card.

Layout (top → bottom):
    - Title
    - Buff duration inputs (minutes, seconds)
    - Hunt length inputs (hours, minutes)
    - Buff exchange (pause) input (seconds)
    - Start / Stop / Reset buttons
    - Countdown (MM:SS)
    - Session remaining (HH:MM)
    - Buff exchange banner (only while the pause window is open)
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QSpinBox, QFrame,
)

from ..timer.config import TimerConfig
from ..timer.engine import TimerEngine, TimerState
from .styles import STATE_COLORS


PAUSE_BANNER_TEXT = "Buff exchange time! \N{BELL}"

# Largest value a QSpinBox can hold.
SPIN_MAX = 2**31 - 1


def format_countdown(seconds: int) -> str:
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def format_session_remaining(seconds: int) -> str:
    """Hours and minutes left in the session, both rounded down."""
    seconds = max(0, seconds)
    hours = seconds // 3600
    minutes = (seconds // 60) % 60
    return f"{hours:02d}:{minutes:02d}"


class TimerWidget(QWidget):
    """The timer card: inputs, controls and displays for one engine."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._populate(engine.config)
        self._sync_clamped_inputs()
        self._connect_signals()
        self._refresh_display(engine.time_left)
        self._on_state_changed(engine.state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(32, 24, 32, 28)
        layout.setSpacing(14)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        title = QLabel("SimTimer", card)
        title.setObjectName("timerTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        # ── buff duration ────────────────────────────────────────────
        self._start_min_spin = self._spin(card)
        self._start_sec_spin = self._spin(card)
        layout.addLayout(self._input_row(
            card, "Buff lasts",
            (self._start_min_spin, "min"), (self._start_sec_spin, "sec"),
        ))

        # ── hunt length ──────────────────────────────────────────────
        self._repeat_hour_spin = self._spin(card)
        self._repeat_min_spin = self._spin(card)
        layout.addLayout(self._input_row(
            card, "Hunt runs",
            (self._repeat_hour_spin, "h"), (self._repeat_min_spin, "min"),
        ))

        # ── buff exchange pause ──────────────────────────────────────
        self._pause_sec_spin = self._spin(card)
        layout.addLayout(self._input_row(
            card, "Buff exchange takes", (self._pause_sec_spin, "sec"),
        ))

        # ── controls ─────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(12)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_btn = QPushButton("Start", card)
        self._start_btn.setObjectName("startButton")
        self._stop_btn = QPushButton("Stop", card)
        self._stop_btn.setObjectName("stopButton")
        self._reset_btn = QPushButton("Reset", card)
        self._reset_btn.setObjectName("resetButton")

        btn_row.addWidget(self._start_btn)
        btn_row.addWidget(self._stop_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

        # ── displays ─────────────────────────────────────────────────
        self._countdown_label = QLabel(card)
        self._countdown_label.setObjectName("countdown")
        self._countdown_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._countdown_label)

        self._session_label = QLabel(card)
        self._session_label.setObjectName("sessionRemaining")
        self._session_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._session_label)

        self._pause_banner = QLabel(PAUSE_BANNER_TEXT, card)
        self._pause_banner.setObjectName("pauseBanner")
        self._pause_banner.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._pause_banner.setVisible(False)
        layout.addWidget(self._pause_banner)

    @staticmethod
    def _spin(parent: QWidget) -> QSpinBox:
        spin = QSpinBox(parent)
        spin.setRange(0, SPIN_MAX)
        spin.setAlignment(Qt.AlignmentFlag.AlignCenter)
        return spin

    @staticmethod
    def _input_row(
        parent: QWidget, caption: str, *inputs: tuple[QSpinBox, str],
    ) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setSpacing(8)
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        row.addWidget(QLabel(caption, parent))
        for spin, unit in inputs:
            row.addWidget(spin)
            row.addWidget(QLabel(unit, parent))
        return row

    def _populate(self, config: TimerConfig) -> None:
        """Load the spin boxes from *config* without echoing back."""
        for spin, value in (
            (self._start_min_spin, config.start_min),
            (self._start_sec_spin, config.start_sec),
            (self._repeat_hour_spin, config.repeat_hour),
            (self._repeat_min_spin, config.repeat_min),
            (self._pause_sec_spin, config.pause_sec),
        ):
            spin.blockSignals(True)
            spin.setValue(min(value, SPIN_MAX))
            spin.blockSignals(False)

    def _sync_clamped_inputs(self) -> None:
        """Push back any value the spin boxes had to clamp.

        Keeps the engine in step with what the user sees, so a later edit
        of another box does not silently change the cycle or session.
        """
        shown = TimerConfig(*(spin.value() for spin in self._spins()))
        if shown != self._engine.config:
            self._engine.set_config(shown)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        for spin in self._spins():
            spin.valueChanged.connect(self._on_input_changed)

        self._start_btn.clicked.connect(self._engine.start)
        self._stop_btn.clicked.connect(self._engine.stop)
        self._reset_btn.clicked.connect(self._engine.reset)

        self._engine.tick.connect(self._refresh_display)
        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.config_changed.connect(self._on_config_changed)

    def _spins(self) -> tuple[QSpinBox, ...]:
        return (
            self._start_min_spin,
            self._start_sec_spin,
            self._repeat_hour_spin,
            self._repeat_min_spin,
            self._pause_sec_spin,
        )

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_input_changed(self, _value: int) -> None:
        self._engine.configure(*(spin.value() for spin in self._spins()))

    def _on_config_changed(self, _config: TimerConfig) -> None:
        self._refresh_session_label()

    def _on_state_changed(self, state: TimerState) -> None:
        running = self._engine.is_running
        self._start_btn.setEnabled(not running)
        self._stop_btn.setEnabled(running)
        self._pause_banner.setVisible(state == TimerState.PAUSED)
        self._countdown_label.setStyleSheet(
            f"color: {STATE_COLORS.get(state, '#111827')};"
        )
        self._refresh_display(self._engine.time_left)

    def _refresh_display(self, time_left: int) -> None:
        self._countdown_label.setText(format_countdown(time_left))
        self._refresh_session_label()

    def _refresh_session_label(self) -> None:
        remaining = format_session_remaining(self._engine.remaining_session_seconds)
        self._session_label.setText(f"Remaining: {remaining}")
