"""Shared test helpers for SimTimer."""

from __future__ import annotations

from simtimer.timer.engine import TimerEngine


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class ManualClock:
    """Clock that only ticks when the test says so."""

    def __init__(self):
        self._callbacks: dict[int, object] = {}
        self._next_handle = 0
        self.subscribe_calls = 0
        self.cancel_calls = 0

    @property
    def active(self) -> int:
        return len(self._callbacks)

    def subscribe(self, on_tick):
        self._next_handle += 1
        self.subscribe_calls += 1
        self._callbacks[self._next_handle] = on_tick
        return self._next_handle

    def cancel(self, handle):
        self.cancel_calls += 1
        self._callbacks.pop(handle, None)

    def advance(self, seconds: int = 1) -> None:
        """Fire every live subscription once per second."""
        for _ in range(seconds):
            for callback in list(self._callbacks.values()):
                callback()


class RecordingSink:
    """AlertSink that remembers every tone it was asked to play."""

    def __init__(self):
        self.calls: list[tuple[float, float, float]] = []

    def emit(self, duration, frequency, volume):
        self.calls.append((duration, frequency, volume))

    def __len__(self):
        return len(self.calls)


class FailingSink:
    """AlertSink whose audio backend is always broken."""

    def __init__(self):
        self.attempts = 0

    def emit(self, duration, frequency, volume):
        self.attempts += 1
        raise RuntimeError("no audio device")


def run_ticks(engine: TimerEngine, n: int) -> None:
    for _ in range(n):
        engine.on_tick()
