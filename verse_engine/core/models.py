"""Core data transfer objects shared across layers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Book(BaseModel):
    """One canonical book with its per-chapter verse counts."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(min_length=1)
    name: str = Field(min_length=1)
    aliases: tuple[str, ...] = ()
    chapters: tuple[int, ...] = Field(min_length=1)

    @field_validator("chapters")
    @classmethod
    def counts_positive(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        if any(count < 1 for count in value):
            raise ValueError("every chapter must contain at least one verse")
        return value

    @property
    def chapter_count(self) -> int:
        return len(self.chapters)

    @property
    def total_verses(self) -> int:
        return sum(self.chapters)

    def verse_count(self, chapter: int) -> Optional[int]:
        """Return the number of verses in ``chapter`` or ``None`` if out of range."""
        if chapter < 1 or chapter > len(self.chapters):
            return None
        return self.chapters[chapter - 1]

    def is_valid(self, chapter: int, verse: int) -> bool:
        """Return True when ``chapter:verse`` exists in this book."""
        count = self.verse_count(chapter)
        return count is not None and 1 <= verse <= count


@dataclass(slots=True, frozen=True)
class Reference:
    """A chapter/verse (or verse range) inside one book."""

    book_code: str
    book_name: str
    chapter: int
    verse_start: int
    verse_end: Optional[int] = None

    @property
    def is_range(self) -> bool:
        return self.verse_end is not None and self.verse_end != self.verse_start

    @property
    def display_string(self) -> str:
        base = f"{self.book_name} {self.chapter}:{self.verse_start}"
        if self.is_range:
            return f"{base}-{self.verse_end}"
        return base

    @property
    def filename_stem(self) -> str:
        stem = f"{self.book_name.replace(' ', '_')}_{self.chapter}_{self.verse_start}"
        if self.is_range:
            return f"{stem}-{self.verse_end}"
        return stem

    def single_verses(self) -> list[Reference]:
        """Expand a range into one reference per verse."""
        last = self.verse_end if self.verse_end is not None else self.verse_start
        return [
            Reference(self.book_code, self.book_name, self.chapter, verse)
            for verse in range(self.verse_start, max(last, self.verse_start) + 1)
        ]


class Confidence(IntEnum):
    """Ordered detection confidence; higher members outrank lower ones."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def score(self) -> float:
        return _CONFIDENCE_SCORES[self]


_CONFIDENCE_SCORES = {
    Confidence.HIGH: 1.0,
    Confidence.MEDIUM: 0.7,
    Confidence.LOW: 0.4,
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, frozen=True)
class DetectedVerse:
    """A validated reference found in transcript text."""

    reference: Reference
    confidence: Confidence
    detected_at: datetime = field(default_factory=_utcnow)
    source_text: str = ""


@dataclass(slots=True, frozen=True)
class BookOccurrence:
    """A book name found in normalized text at ``[start, end)``."""

    book: Book
    start: int
    end: int
    matched_name: str


@dataclass(slots=True, frozen=True)
class SlideEntry:
    """Presentation registered for one book."""

    book_code: str
    presentation_id: str
    chapters: tuple[int, ...]


@dataclass(slots=True, frozen=True)
class SlideLocation:
    """Zero-based slide position inside a presentation."""

    presentation_id: str
    slide_index: int


@dataclass(slots=True)
class TranscriptSegment:
    """A confirmed span of transcript with any references found in it."""

    text: str
    start_time: float
    end_time: float
    is_confirmed: bool = True
    detected_references: list[DetectedVerse] = field(default_factory=list)

    @property
    def formatted_time(self) -> str:
        total = max(int(self.start_time), 0)
        minutes, seconds = divmod(total, 60)
        return f"{minutes}:{seconds:02d}"


class PresentationLibrary(BaseModel):
    """A library exposed by the presentation software."""

    id: str
    name: str


class PresentationItem(BaseModel):
    """A presentation listed inside a library."""

    id: str
    name: str


class CaptureStatus(str, Enum):
    """Outcome of resolving a detected verse to slides."""

    BELOW_THRESHOLD = "below_threshold"
    DUPLICATE = "duplicate"
    NOT_FOUND = "not_found"
    RESOLVED = "resolved"


@dataclass(slots=True)
class SlideResolution:
    """Resolution result with the slides to capture when resolved."""

    status: CaptureStatus
    targets: list[tuple[Reference, SlideLocation]] = field(default_factory=list)
    message: Optional[str] = None


__all__ = [
    "Book",
    "BookOccurrence",
    "CaptureStatus",
    "Confidence",
    "DetectedVerse",
    "PresentationItem",
    "PresentationLibrary",
    "Reference",
    "SlideEntry",
    "SlideLocation",
    "SlideResolution",
    "TranscriptSegment",
]
