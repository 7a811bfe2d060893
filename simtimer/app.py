"""Main application window for SimTimer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from .audio.sounds import SoftBellSink
from .settings import Settings, load_settings
from .timer.clock import Clock, QtClock
from .timer.engine import AlertSink, TimerEngine
from .ui.header import HeaderBar
from .ui.styles import build_stylesheet
from .ui.timer_widget import TimerWidget


logger = logging.getLogger(__name__)


class SimTimerApp(QMainWindow):
    """Header bar on top, timer card below."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        clock: Clock | None = None,
        alert_sink: AlertSink | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("SimTimer")
        self.setMinimumSize(480, 560)

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings or load_settings()
        if self._settings.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        # ── collaborators ─────────────────────────────────────────────
        self._clock = clock or QtClock(self)
        if alert_sink is None:
            alert_sink = SoftBellSink(self, enabled=self._settings.sound_enabled)
        self._alert_sink = alert_sink

        # ── engine ────────────────────────────────────────────────────
        self._timer_engine = TimerEngine(
            self._clock, self._alert_sink, self,
            config=self._settings.timer_config(),
        )
        self._timer_engine.session_finished.connect(self._on_session_finished)

        # ── layout ────────────────────────────────────────────────────
        self.setStyleSheet(build_stylesheet())
        central = QWidget(self)
        central.setObjectName("central")
        self.setCentralWidget(central)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        self._header = HeaderBar(parent=central)
        root_layout.addWidget(self._header)

        self._timer_widget = TimerWidget(self._timer_engine, central)
        root_layout.addWidget(self._timer_widget, 1)

    @property
    def timer_engine(self) -> TimerEngine:
        return self._timer_engine

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def header(self) -> HeaderBar:
        return self._header

    def _on_session_finished(self) -> None:
        self.statusBar().showMessage("Hunt finished", 5000)

    def closeEvent(self, event: QCloseEvent) -> None:
        self._timer_engine.shutdown()
        logger.debug("Window closed; timer subscription cancelled")
        super().closeEvent(event)
