"""Tests for core data models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from verse_engine.core import models

# pylint: disable=missing-function-docstring


def _john() -> models.Book:
    return models.Book(
        code="JHN",
        name="John",
        aliases=("jn",),
        chapters=(51, 25, 36, 54, 47, 71, 53, 59, 41, 42, 57, 50, 38, 31, 27, 33, 26, 40, 42, 31, 25),
    )


def test_book_helpers_report_counts() -> None:
    book = _john()
    assert book.chapter_count == 21
    assert book.total_verses == 879
    assert book.verse_count(3) == 36
    assert book.verse_count(0) is None
    assert book.verse_count(22) is None


def test_book_is_valid_bounds() -> None:
    book = _john()
    assert book.is_valid(3, 16)
    assert book.is_valid(3, 36)
    assert not book.is_valid(3, 37)
    assert not book.is_valid(3, 0)
    assert not book.is_valid(100, 1)


def test_book_rejects_empty_or_zero_chapters() -> None:
    with pytest.raises(ValidationError):
        models.Book(code="XXX", name="Empty", chapters=())
    with pytest.raises(ValidationError):
        models.Book(code="XXX", name="Zero", chapters=(3, 0))


def test_book_is_frozen() -> None:
    book = _john()
    with pytest.raises(ValidationError):
        book.name = "Johnny"  # type: ignore[misc]


def test_reference_display_string_hides_degenerate_range() -> None:
    assert models.Reference("JHN", "John", 3, 16).display_string == "John 3:16"
    assert models.Reference("JHN", "John", 3, 16, 17).display_string == "John 3:16-17"
    assert models.Reference("JHN", "John", 3, 16, 16).display_string == "John 3:16"


def test_reference_filename_stem_uses_underscores() -> None:
    ref = models.Reference("1CO", "1 Corinthians", 13, 4, 7)
    assert ref.filename_stem == "1_Corinthians_13_4-7"
    assert models.Reference("SNG", "Song of Solomon", 2, 1).filename_stem == "Song_of_Solomon_2_1"


def test_reference_single_verses_expands_range() -> None:
    ref = models.Reference("ROM", "Romans", 8, 28, 30)
    assert [single.display_string for single in ref.single_verses()] == [
        "Romans 8:28",
        "Romans 8:29",
        "Romans 8:30",
    ]
    assert models.Reference("ROM", "Romans", 8, 28).single_verses() == [
        models.Reference("ROM", "Romans", 8, 28)
    ]


def test_confidence_is_ordered_with_scores() -> None:
    assert models.Confidence.HIGH > models.Confidence.MEDIUM > models.Confidence.LOW
    assert [c.label for c in models.Confidence] == ["Low", "Medium", "High"]
    assert models.Confidence.HIGH.score == 1.0
    assert models.Confidence.MEDIUM.score == 0.7
    assert models.Confidence.LOW.score == 0.4


def test_detected_verse_stamps_utc_time() -> None:
    verse = models.DetectedVerse(
        reference=models.Reference("JHN", "John", 3, 16),
        confidence=models.Confidence.HIGH,
        source_text="John 3:16",
    )
    assert verse.detected_at.tzinfo is not None
    assert verse.detected_at.utcoffset().total_seconds() == 0  # type: ignore[union-attr]


def test_transcript_segment_formatted_time() -> None:
    assert models.TranscriptSegment("x", 75.4, 80.0).formatted_time == "1:15"
    assert models.TranscriptSegment("x", 5, 6).formatted_time == "0:05"
    assert models.TranscriptSegment("x", 3600, 3601).formatted_time == "60:00"
