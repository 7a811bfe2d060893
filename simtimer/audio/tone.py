"""Description of the alert tone, shared by the engine and the sink."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToneSpec:
    duration: float = 1.0      # seconds
    frequency: float = 440.0   # Hz
    volume: float = 0.5        # 0.0–1.0


DEFAULT_TONE = ToneSpec()
