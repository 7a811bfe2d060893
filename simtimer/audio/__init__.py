"""Audio package."""

from .tone import ToneSpec, DEFAULT_TONE
from .sounds import SoftBellSink, synthesize_soft_bell

__all__ = ["ToneSpec", "DEFAULT_TONE", "SoftBellSink", "synthesize_soft_bell"]
