"""One-second tick sources for the timer engine.

The engine never sleeps or owns a timer itself; it asks a ``Clock`` for a
subscription and cancels it when it stops.
"""

from __future__ import annotations

from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer


TICK_INTERVAL_MS = 1000


class Clock(Protocol):
    def subscribe(self, on_tick: Callable[[], None]) -> object:
        """Start calling *on_tick* roughly once a second; return a handle."""
        ...

    def cancel(self, handle: object) -> None:
        """Stop the subscription behind *handle*."""
        ...


class QtClock(QObject):
    """Clock backed by one ``QTimer`` per subscription.

    Ticks are delivered on the Qt event loop, so they never overlap with
    each other or with button clicks.
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        interval_ms: int = TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._interval_ms = interval_ms
        self._timers: set[QTimer] = set()

    @property
    def active_subscriptions(self) -> int:
        return len(self._timers)

    def subscribe(self, on_tick: Callable[[], None]) -> QTimer:
        timer = QTimer(self)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(on_tick)
        self._timers.add(timer)
        timer.start()
        return timer

    def cancel(self, handle: object) -> None:
        """Stop and dispose of *handle*.  Unknown handles are ignored."""
        if not isinstance(handle, QTimer) or handle not in self._timers:
            return
        self._timers.discard(handle)
        handle.stop()
        handle.timeout.disconnect()
        handle.deleteLater()
