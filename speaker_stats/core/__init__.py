"""
Core module exports.
"""

from .exceptions import (
    SpeakerStatsException,
    InvalidCategoryError,
    InvalidDurationError,
    ClockSkewError,
    ConfigurationError,
)

__all__ = [
    "SpeakerStatsException",
    "InvalidCategoryError",
    "InvalidDurationError",
    "ClockSkewError",
    "ConfigurationError",
]
