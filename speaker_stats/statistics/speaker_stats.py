"""
Speaker Stats

Keeps track of one participant's total time as dominant speaker and of
how long each facial expression was detected on them. The participant's
last known name is kept after they leave so a final report can still be
built.

Records are created and driven by the conference event layer:
dominant speaker changes, renames, expression detections and leaves.
"""

from datetime import datetime
from typing import Any, Mapping, Optional, Union

from speaker_stats.config import Settings, get_logger
from speaker_stats.config import settings as default_settings
from speaker_stats.core.exceptions import ClockSkewError
from .clock import Clock, system_clock_ms
from .models import (
    FaceExpressions,
    FacialExpression,
    SpeakerStatsSnapshot,
    empty_face_expressions,
    normalize_face_expressions,
    validate_duration,
)

logger = get_logger("statistics")


class SpeakerStats:
    """
    Per-participant speaking and expression accounting.

    Dominant speaker time is tracked as closed intervals summed into a
    running total, plus at most one open interval started at
    ``_dominant_speaker_start``. All times are in milliseconds.
    """

    def __init__(
        self,
        user_id: str,
        display_name: str,
        is_local_stats: bool = False,
        clock: Optional[Clock] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Args:
            user_id: The id of the participant being tracked
            display_name: The name of the participant being tracked
            is_local_stats: True if the record tracks the local participant
            clock: Millisecond clock, defaults to wall-clock time
            settings: Settings override, defaults to the global settings
        """
        self._user_id = user_id
        self._display_name = display_name
        self._is_local_stats = bool(is_local_stats)
        self._clock = clock or system_clock_ms
        self._settings = settings if settings is not None else default_settings

        # State
        self._total_dominant_speaker_time: int = 0
        self._dominant_speaker_start: Optional[int] = None  # None when not dominant
        self._has_left: bool = False
        self._face_expressions: FaceExpressions = empty_face_expressions()

    def __repr__(self) -> str:
        return (
            f"SpeakerStats(user_id={self._user_id!r}, display_name={self._display_name!r}, "
            f"dominant={self.is_dominant_speaker()}, has_left={self._has_left})"
        )

    # =========================================================================
    # Identity
    # =========================================================================

    def get_user_id(self) -> str:
        return self._user_id

    def get_display_name(self) -> str:
        return self._display_name

    def set_display_name(self, name: str) -> None:
        """Update the last known name of the participant."""
        if self._settings.stats.verbose_logging:
            logger.debug(f"✏️ {self._user_id} renamed {self._display_name!r} -> {name!r}")
        self._display_name = name

    def is_local_stats(self) -> bool:
        return self._is_local_stats

    # =========================================================================
    # Dominant Speaker Time
    # =========================================================================

    def is_dominant_speaker(self) -> bool:
        """True while a dominant speaker interval is open."""
        return self._dominant_speaker_start is not None

    def set_dominant_speaker(self, is_now_dominant_speaker: bool) -> None:
        """
        Start or stop accumulating dominant speaker time.

        Starting while already dominant, or stopping while not dominant,
        does nothing. A participant who has left cannot become dominant
        again; such calls are ignored.

        Args:
            is_now_dominant_speaker: True to open an interval, False to
                close the open one and add it to the total

        Raises:
            ClockSkewError: If the clock went backwards and clamping is disabled
        """
        if not self.is_dominant_speaker() and is_now_dominant_speaker:
            if self._has_left:
                logger.warning(
                    f"Ignoring dominant speaker start for {self._display_name} "
                    f"({self._user_id}): participant has left"
                )
                return

            self._dominant_speaker_start = self._clock()

            if self._settings.stats.verbose_logging:
                logger.debug(f"🎤 {self._display_name} became dominant speaker")
        elif self.is_dominant_speaker() and not is_now_dominant_speaker:
            self._close_dominant_interval(
                strict=not self._settings.stats.clamp_negative_elapsed
            )

    def _close_dominant_interval(self, strict: bool) -> None:
        """Add the open interval to the total and clear the start marker."""
        time_elapsed = self._elapsed_since_start(self._clock(), strict=strict)

        self._total_dominant_speaker_time += time_elapsed
        self._dominant_speaker_start = None

        if self._settings.stats.verbose_logging:
            logger.debug(
                f"🔇 {self._display_name} stopped being dominant speaker "
                f"(interval: {time_elapsed}ms, total: {self._total_dominant_speaker_time}ms)"
            )

    def get_total_dominant_speaker_time(self) -> int:
        """
        Get how long the participant has been dominant speaker.

        Includes the currently open interval, measured now, without
        adding it to the stored total. A backward clock counts the open
        interval as 0ms.

        Returns:
            The speaker time in milliseconds
        """
        total = self._total_dominant_speaker_time

        if self.is_dominant_speaker():
            total += self._elapsed_since_start(self._clock(), strict=False)

        return total

    def _elapsed_since_start(self, now: int, strict: bool) -> int:
        """
        Elapsed time of the open interval, never negative.

        Raises:
            ClockSkewError: If strict and the clock went backwards
        """
        elapsed = now - self._dominant_speaker_start
        if elapsed >= 0:
            return elapsed

        if strict:
            raise ClockSkewError(
                f"Clock moved backwards by {-elapsed}ms for {self._user_id}",
                {"start": self._dominant_speaker_start, "now": now},
            )

        logger.warning(
            f"Clock moved backwards by {-elapsed}ms for {self._user_id}, counting interval as 0ms"
        )
        return 0

    # =========================================================================
    # Leave
    # =========================================================================

    def has_left(self) -> bool:
        """True once the participant is no longer in the meeting."""
        return self._has_left

    def mark_as_has_left(self) -> None:
        """
        Set the participant as having left, closing any open interval.

        Always succeeds: a backward clock counts the open interval as 0ms
        even when clamping is disabled for dominant speaker changes.
        """
        if self.is_dominant_speaker():
            self._close_dominant_interval(strict=False)

        if not self._has_left:
            self._has_left = True
            logger.info(
                f"⬅️ {self._display_name} left "
                f"(dominant speaker time: {self._total_dominant_speaker_time}ms)"
            )

    # =========================================================================
    # Face Expressions
    # =========================================================================

    def get_face_expressions(self) -> FaceExpressions:
        """Get a copy of the category -> milliseconds mapping."""
        return dict(self._face_expressions)

    def set_face_expressions(self, face_expressions: Mapping[Any, Any]) -> None:
        """
        Replace all face expression durations.

        The mapping is validated before anything is replaced. Categories
        it leaves out are reset to zero.

        Raises:
            InvalidCategoryError: If a key is not a known category
            InvalidDurationError: If a value is negative or not a number
        """
        self._face_expressions = normalize_face_expressions(face_expressions)

    def add_face_expression(
        self,
        face_expression: Union[str, FacialExpression],
        duration: float,
    ) -> None:
        """
        Add time spent showing a facial expression.

        Args:
            face_expression: Category name or member
            duration: Milliseconds to add

        Raises:
            InvalidCategoryError: If the category is not known
            InvalidDurationError: If the duration is negative or not a number
        """
        expression = FacialExpression.parse(face_expression)
        duration = validate_duration(duration)

        self._face_expressions[expression] += duration

    # =========================================================================
    # Export
    # =========================================================================

    def snapshot(self) -> SpeakerStatsSnapshot:
        """Point-in-time copy of the record for reports."""
        return SpeakerStatsSnapshot(
            user_id=self._user_id,
            display_name=self._display_name,
            is_local_stats=self._is_local_stats,
            is_dominant_speaker=self.is_dominant_speaker(),
            has_left=self._has_left,
            total_dominant_speaker_time=self.get_total_dominant_speaker_time(),
            face_expressions=self.get_face_expressions(),
            exported_at=datetime.now(self._settings.tz_info).isoformat(),
        )

    def to_dict(self) -> dict:
        """Export the record to a JSON-serializable dictionary."""
        data = self.snapshot().to_dict()
        del data["exported_at"]
        return data
