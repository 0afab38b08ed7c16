"""Accumulate confirmed transcript segments and detect references that span them."""

from __future__ import annotations

from typing import Optional

from verse_engine.core.config import config
from verse_engine.core.logging import get_logger, segment_id_context
from verse_engine.core.models import DetectedVerse, TranscriptSegment
from verse_engine.services.verse_detector import VerseDetector

logger = get_logger(__name__)


class TranscriptSession:
    """Rolling transcript that re-detects over the last few confirmed segments.

    A speaker often says the book and chapter in one segment and the verses
    in the next, so each new segment is also checked together with the
    ``window`` confirmed segments before it.
    """

    def __init__(self, detector: VerseDetector, window: Optional[int] = None) -> None:
        self._detector = detector
        self._window = max(config.CROSS_SEGMENT_WINDOW if window is None else window, 0)
        self._segments: list[TranscriptSegment] = []

    @property
    def segments(self) -> list[TranscriptSegment]:
        return list(self._segments)

    @property
    def detected_verses(self) -> list[DetectedVerse]:
        return [verse for segment in self._segments for verse in segment.detected_references]

    def add_segment(
        self, text: str, start_time: float = 0.0, end_time: Optional[float] = None
    ) -> TranscriptSegment:
        """Detect references in ``text``, store the segment, and return it."""

        segment_number = len(self._segments) + 1
        with segment_id_context(str(segment_number)):
            found = self._detector.detect(text)
            keys = {verse.reference.display_string for verse in found}

            confirmed = [segment for segment in self._segments if segment.is_confirmed]
            recent = confirmed[-self._window :] if self._window else []
            if recent:
                # References already credited to earlier segments are not repeated
                keys.update(
                    verse.reference.display_string
                    for segment in recent
                    for verse in segment.detected_references
                )
                combined = " ".join([*(segment.text for segment in recent), text])
                for verse in self._detector.detect(combined):
                    key = verse.reference.display_string
                    if key in keys:
                        continue
                    keys.add(key)
                    found.append(verse)
                    logger.info("[transcript] Cross-segment reference %s", key)

        segment = TranscriptSegment(
            text=text,
            start_time=start_time,
            end_time=end_time if end_time is not None else start_time,
            is_confirmed=True,
            detected_references=found,
        )
        self._segments.append(segment)
        return segment

    def reset(self) -> None:
        self._segments.clear()


__all__ = ["TranscriptSession"]
