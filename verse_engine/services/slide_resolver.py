"""Turn detected verses into the slides that should be captured."""

from __future__ import annotations

from typing import Optional

from verse_engine.core.config import config
from verse_engine.core.logging import get_logger
from verse_engine.core.models import (
    CaptureStatus,
    DetectedVerse,
    Reference,
    SlideLocation,
    SlideResolution,
)
from verse_engine.services.slide_map import SlideMapHolder

logger = get_logger(__name__)


class SlideResolver:
    """Gate detections on confidence and resolve each new verse to a slide once per session."""

    def __init__(
        self, holder: SlideMapHolder, confidence_threshold: Optional[float] = None
    ) -> None:
        self._holder = holder
        self._threshold = (
            config.CONFIDENCE_THRESHOLD if confidence_threshold is None else confidence_threshold
        )
        self._captured: set[str] = set()

    @property
    def confidence_threshold(self) -> float:
        return self._threshold

    @property
    def captured(self) -> frozenset[str]:
        return frozenset(self._captured)

    def resolve(self, verse: DetectedVerse) -> SlideResolution:
        """Return the capture outcome for ``verse`` and remember what was captured."""

        reference = verse.reference
        if verse.confidence.score < self._threshold:
            logger.info(
                "[slide-resolver] %s below threshold (%s < %.2f)",
                reference.display_string,
                verse.confidence.label,
                self._threshold,
            )
            return SlideResolution(
                status=CaptureStatus.BELOW_THRESHOLD,
                message=f"{verse.confidence.label} confidence below threshold",
            )

        pending = [
            single
            for single in reference.single_verses()
            if single.display_string not in self._captured
        ]
        if not pending:
            return SlideResolution(status=CaptureStatus.DUPLICATE, message="Already captured")

        slide_map = self._holder.current()
        first = slide_map.lookup(pending[0])
        if first is None:
            return SlideResolution(status=CaptureStatus.NOT_FOUND, message="Verse not found")

        targets: list[tuple[Reference, SlideLocation]] = [(pending[0], first)]
        for single in pending[1:]:
            location = slide_map.lookup(single)
            if location is not None:
                targets.append((single, location))
        self._captured.update(single.display_string for single, _ in targets)
        logger.info(
            "[slide-resolver] Resolved %s to %d slide(s)", reference.display_string, len(targets)
        )
        return SlideResolution(status=CaptureStatus.RESOLVED, targets=targets)

    def reset(self) -> None:
        self._captured.clear()


__all__ = ["SlideResolver"]
