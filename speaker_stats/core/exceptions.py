"""
Custom exceptions for speaker statistics.
"""

from typing import Any, Dict, Optional


class SpeakerStatsException(Exception):
    """Base exception for speaker statistics errors."""
    
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidCategoryError(SpeakerStatsException):
    """Raised when a facial expression category is not one of the known ones."""
    pass


class InvalidDurationError(SpeakerStatsException):
    """Raised when a duration is negative or not a number."""
    pass


class ClockSkewError(SpeakerStatsException):
    """Raised when the clock moved backwards and clamping is disabled."""
    pass


class ConfigurationError(SpeakerStatsException):
    """Raised when configuration is invalid."""
    pass
