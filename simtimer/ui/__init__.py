"""UI package."""

from .header import HeaderBar
from .timer_widget import TimerWidget

__all__ = ["HeaderBar", "TimerWidget"]
