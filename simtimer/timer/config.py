"""Timer configuration and the totals derived from it.

The five raw inputs are kept exactly as the user typed them (after
normalisation); the cycle and session lengths are always recomputed from
them and never stored.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimerConfig:
    """Raw values from the five input boxes."""

    start_min: int = 0
    start_sec: int = 0
    repeat_hour: int = 0
    repeat_min: int = 0
    pause_sec: int = 0

    @classmethod
    def default(cls) -> TimerConfig:
        """10 s buff, 1 min hunt, 5 s buff exchange."""
        return DEFAULT_CONFIG

    @classmethod
    def from_inputs(
        cls,
        start_min: object,
        start_sec: object,
        repeat_hour: object,
        repeat_min: object,
        pause_sec: object,
    ) -> TimerConfig:
        return cls(
            start_min=normalize_input(start_min),
            start_sec=normalize_input(start_sec),
            repeat_hour=normalize_input(repeat_hour),
            repeat_min=normalize_input(repeat_min),
            pause_sec=normalize_input(pause_sec),
        )


DEFAULT_CONFIG = TimerConfig(start_min=0, start_sec=10, repeat_hour=0, repeat_min=1, pause_sec=5)


def normalize_input(value: object) -> int:
    """Coerce whatever an input box holds into a non-negative int.

    Empty strings, ``None``, garbage and negatives all become 0.
    Floats are truncated.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
        try:
            return max(0, int(value))
        except ValueError:
            pass
    try:
        number = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0
    return max(0, number)


def start_timer_seconds(config: TimerConfig) -> int:
    """Length of one countdown cycle."""
    return config.start_min * 60 + config.start_sec


def repeat_total_seconds(config: TimerConfig) -> int:
    """Length of the whole session."""
    return config.repeat_hour * 3600 + config.repeat_min * 60
