"""
Speaker statistics for conference participants.
"""

from .statistics import (
    SpeakerStats,
    FacialExpression,
    SpeakerStatsSnapshot,
    empty_face_expressions,
)
from .core import (
    SpeakerStatsException,
    InvalidCategoryError,
    InvalidDurationError,
    ClockSkewError,
)

__all__ = [
    "SpeakerStats",
    "FacialExpression",
    "SpeakerStatsSnapshot",
    "empty_face_expressions",
    "SpeakerStatsException",
    "InvalidCategoryError",
    "InvalidDurationError",
    "ClockSkewError",
]
