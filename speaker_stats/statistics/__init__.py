"""
Statistics Module

Per-participant dominant speaker time and facial expression accounting.
"""

from .speaker_stats import SpeakerStats
from .clock import Clock, system_clock_ms
from .models import (
    FacialExpression,
    SpeakerStatsSnapshot,
    empty_face_expressions,
)

__all__ = [
    "SpeakerStats",
    "Clock",
    "system_clock_ms",
    "FacialExpression",
    "SpeakerStatsSnapshot",
    "empty_face_expressions",
]
