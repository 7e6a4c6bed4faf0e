"""
Data models for speaker statistics.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Union

from speaker_stats.core.exceptions import InvalidCategoryError, InvalidDurationError


class FacialExpression(str, Enum):
    """Facial expression categories reported by expression detectors."""
    HAPPY = "happy"
    NEUTRAL = "neutral"
    SURPRISED = "surprised"
    ANGRY = "angry"
    FEARFUL = "fearful"
    DISGUSTED = "disgusted"
    SAD = "sad"
    
    @classmethod
    def parse(cls, value: Union[str, "FacialExpression"]) -> "FacialExpression":
        """
        Resolve a category name or member to a member.
        
        Raises:
            InvalidCategoryError: If the value is not a known category
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidCategoryError(
                f"Unknown facial expression category: {value!r}",
                {"category": value, "allowed": [e.value for e in cls]},
            ) from None


FaceExpressions = Dict[FacialExpression, float]


def empty_face_expressions() -> FaceExpressions:
    """Fresh mapping with every category at zero."""
    return {expression: 0 for expression in FacialExpression}


def validate_duration(duration: Any) -> float:
    """
    Check a duration in milliseconds is a non-negative number.
    
    Raises:
        InvalidDurationError: If the duration is negative, not finite or not a number
    """
    if isinstance(duration, bool) or not isinstance(duration, (int, float)):
        raise InvalidDurationError(
            f"Duration must be a number of milliseconds, got {type(duration).__name__}",
            {"duration": duration},
        )
    if not math.isfinite(duration) or duration < 0:
        raise InvalidDurationError(
            f"Duration must be finite and non-negative, got {duration}",
            {"duration": duration},
        )
    return duration


def normalize_face_expressions(expressions: Mapping[Any, Any]) -> FaceExpressions:
    """
    Validate a category->duration mapping and return a total copy of it.
    
    Categories missing from the input are set to zero.
    
    Raises:
        InvalidCategoryError: If a key is not a known category
        InvalidDurationError: If a value is not a valid duration
    """
    result = empty_face_expressions()
    for category, duration in expressions.items():
        result[FacialExpression.parse(category)] = validate_duration(duration)
    return result


@dataclass
class SpeakerStatsSnapshot:
    """
    Point-in-time view of one participant's stats.
    Used for end-of-meeting reports and exports.
    """
    user_id: str
    display_name: str
    is_local_stats: bool
    is_dominant_speaker: bool
    has_left: bool
    total_dominant_speaker_time: float  # Milliseconds
    face_expressions: FaceExpressions = field(default_factory=empty_face_expressions)
    exported_at: str = ""  # ISO timestamp
    
    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "user_id": self.user_id,
            "display_name": self.display_name,
            "is_local_stats": self.is_local_stats,
            "is_dominant_speaker": self.is_dominant_speaker,
            "has_left": self.has_left,
            "total_dominant_speaker_time": self.total_dominant_speaker_time,
            "face_expressions": {
                expression.value: duration
                for expression, duration in self.face_expressions.items()
            },
            "exported_at": self.exported_at,
        }
