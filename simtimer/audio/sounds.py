"""Alert tone synthesis and playback using numpy + QSoundEffect.

The tone is the "soft bell": a pure sine wave whose gain ramps linearly
up to the requested volume over the first 0.2 s and then linearly back
down to silence at the end of the tone.  Each distinct tone is rendered
once to a WAV file in the sounds cache and replayed from there.
"""

from __future__ import annotations

import io
import logging
import wave
from pathlib import Path

import numpy as np

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QSoundEffect

from .tone import ToneSpec


logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / ".simtimer"
SOUNDS_DIR = APP_SUPPORT_DIR / "sounds"

SAMPLE_RATE = 44100
ATTACK_SECONDS = 0.2


# ═══════════════════════════════════════════════════════════════════════════
#  WAV SYNTHESIS
# ═══════════════════════════════════════════════════════════════════════════


def _sine(freq: float, duration_s: float) -> np.ndarray:
    """Pure sine wave at *freq* Hz for *duration_s* seconds."""
    t = np.linspace(0, duration_s, int(SAMPLE_RATE * duration_s), endpoint=False)
    return np.sin(2 * np.pi * freq * t)


def _soft_bell_envelope(length: int, volume: float) -> np.ndarray:
    """Linear 0 → volume over the attack, then linear volume → 0."""
    env = np.zeros(length, dtype=np.float64)
    if length == 0:
        return env
    attack = min(int(SAMPLE_RATE * ATTACK_SECONDS), length)
    if attack > 0:
        env[:attack] = np.linspace(0.0, volume, attack, endpoint=False)
    if length > attack:
        env[attack:] = np.linspace(volume, 0.0, length - attack)
    return env


def _to_wav_bytes(samples: np.ndarray) -> bytes:
    """Convert a float64 numpy array (-1..1) to 16-bit PCM WAV bytes."""
    samples = np.clip(samples, -1.0, 1.0)
    int_samples = (samples * 32767).astype(np.int16)

    buf = io.BytesIO()
    with wave.open(buf, "wb") as wf:
        wf.setnchannels(1)
        wf.setsampwidth(2)
        wf.setframerate(SAMPLE_RATE)
        wf.writeframes(int_samples.tobytes())
    return buf.getvalue()


def synthesize_soft_bell(
    duration: float = 1.0,
    frequency: float = 440.0,
    volume: float = 0.5,
) -> bytes:
    """Render the soft bell as mono 16-bit WAV bytes."""
    duration = max(0.0, float(duration))
    volume = max(0.0, min(float(volume), 1.0))
    tone = _sine(frequency, duration)
    return _to_wav_bytes(tone * _soft_bell_envelope(len(tone), volume))


def tone_filename(tone: ToneSpec) -> str:
    """Cache file name, unique per duration/frequency/volume."""
    return (
        f"bell_{tone.duration:g}s_{tone.frequency:g}hz_"
        f"{round(tone.volume * 100)}.wav"
    )


# ═══════════════════════════════════════════════════════════════════════════
#  ALERT SINK
# ═══════════════════════════════════════════════════════════════════════════


class SoftBellSink(QObject):
    """Plays the soft bell when a countdown cycle ends.

    Best effort: ``emit`` never raises.  If the cache directory cannot be
    written or Qt has no audio backend the failure is logged and the call
    returns quietly.

    Usage::

        sink = SoftBellSink(parent=self)
        sink.emit(1.0, 440.0, 0.5)
    """

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        sounds_dir: Path | None = None,
        enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._enabled = enabled
        self._sounds_dir = sounds_dir or SOUNDS_DIR
        self._effects: dict[ToneSpec, QSoundEffect] = {}

    # ── public API ────────────────────────────────────────────────────

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    @property
    def sounds_dir(self) -> Path:
        return self._sounds_dir

    def emit(self, duration: float, frequency: float, volume: float) -> None:
        """Play a tone.  No-op if disabled; failures are swallowed."""
        if not self._enabled:
            return
        tone = ToneSpec(float(duration), float(frequency), float(volume))
        try:
            effect = self._effects.get(tone)
            if effect is None:
                effect = self._load_effect(tone)
                self._effects[tone] = effect
            effect.play()
        except Exception:
            logger.debug("Could not play alert tone %s", tone, exc_info=True)

    # ── internal ──────────────────────────────────────────────────────

    def _ensure_wav_file(self, tone: ToneSpec) -> Path:
        """Render *tone* into the cache directory unless already there."""
        self._sounds_dir.mkdir(parents=True, exist_ok=True)
        path = self._sounds_dir / tone_filename(tone)
        if not path.exists():
            path.write_bytes(
                synthesize_soft_bell(tone.duration, tone.frequency, tone.volume)
            )
        return path

    def _load_effect(self, tone: ToneSpec) -> QSoundEffect:
        path = self._ensure_wav_file(tone)
        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(path)))
        # Loudness is baked into the samples.
        effect.setVolume(1.0)
        return effect
