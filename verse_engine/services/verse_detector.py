"""Detect validated verse references in a span of transcript text.

Detection normalizes the text, locates every book name, then tries a fixed
cascade of numeric patterns on the text immediately after each name. A
separate low-confidence scan catches ``Name ch:vs`` shapes whose name only
resolves through fuzzy matching.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from verse_engine.core.logging import get_logger
from verse_engine.core.models import Book, Confidence, DetectedVerse, Reference
from verse_engine.services.book_matcher import BookNameMatcher
from verse_engine.services.book_table import BookTable
from verse_engine.services.spoken_forms import normalize

logger = get_logger(__name__)

# (chapter, verse, optional range end, confidence)
Candidate = tuple[int, int, Optional[int], Confidence]
Extractor = Callable[[Book, str], Optional[Candidate]]

_COLON = re.compile(r"^\s*(\d{1,3})\s*:\s*(\d{1,3})(?:\s*-\s*(\d{1,3}))?(?!\d)")
_COMMA = re.compile(r"^\s*(\d{1,3})\s*,\s*(\d{1,3})(?:\s*-\s*(\d{1,3}))?(?!\d)")
_AND = re.compile(r"^\s+(\d{1,3})\s+and\s+(\d{1,3})(?!\d)")
_SPACE_AND = re.compile(r"^\s+(\d{1,3})\s+(\d{1,3})\s+and\s+(\d{1,3})(?!\d)")
_SPACE = re.compile(r"^\s+(\d{1,3})\s+(\d{1,3})(?:\s*-\s*(\d{1,3}))?(?!\d)")
_SINGLE = re.compile(r"^\s+(\d{1,3})(?!\d)(?!\s*[:,]\s*\d)")

# Case-sensitive: the fallback only trusts capitalized names
_FALLBACK = re.compile(
    r"\b([1-3]?\s*[A-Z][a-z]{2,}(?:\s+[a-z]+)?)\s+(\d{1,3})\s*:\s*(\d{1,3})(?:\s*-\s*(\d{1,3}))?(?!\d)"
)


def _optional_int(value: Optional[str]) -> Optional[int]:
    return int(value) if value else None


def _chapter_verse(pattern: re.Pattern[str], confidence: Confidence) -> Extractor:
    def extract(_book: Book, rest: str) -> Optional[Candidate]:
        match = pattern.match(rest)
        if not match:
            return None
        groups = match.groups()
        end = _optional_int(groups[2]) if len(groups) > 2 else None
        return int(groups[0]), int(groups[1]), end, confidence

    return extract


def _single_chapter(book: Book, rest: str) -> Optional[Candidate]:
    if book.chapter_count != 1:
        return None
    match = _SINGLE.match(rest)
    if not match:
        return None
    return 1, int(match.group(1)), None, Confidence.HIGH


EXTRACTORS: tuple[Extractor, ...] = (
    _chapter_verse(_COLON, Confidence.HIGH),
    _chapter_verse(_COMMA, Confidence.MEDIUM),
    _chapter_verse(_AND, Confidence.MEDIUM),
    _chapter_verse(_SPACE_AND, Confidence.MEDIUM),
    _chapter_verse(_SPACE, Confidence.MEDIUM),
    _single_chapter,
)


def build_reference(
    book: Book, chapter: int, verse: int, end: Optional[int] = None
) -> Optional[Reference]:
    """Return a validated reference, dropping an unusable range end."""

    if not book.is_valid(chapter, verse):
        logger.debug(
            "[verse-detector] Rejected out-of-range %s %d:%d", book.code, chapter, verse
        )
        return None
    if end is not None and (end <= verse or not book.is_valid(chapter, end)):
        logger.debug(
            "[verse-detector] Dropped range end %d for %s %d:%d", end, book.code, chapter, verse
        )
        end = None
    return Reference(
        book_code=book.code,
        book_name=book.name,
        chapter=chapter,
        verse_start=verse,
        verse_end=end,
    )


class VerseDetector:
    """Extract ``DetectedVerse`` values from free transcript text."""

    def __init__(self, table: BookTable, matcher: Optional[BookNameMatcher] = None) -> None:
        self._table = table
        self._matcher = matcher or BookNameMatcher(table)

    @property
    def table(self) -> BookTable:
        return self._table

    @property
    def matcher(self) -> BookNameMatcher:
        return self._matcher

    def detect(self, text: str) -> list[DetectedVerse]:
        """Return the references in ``text`` in order of discovery, one per display string."""

        normalized = normalize(text)
        found: list[tuple[Reference, Confidence]] = []

        for occurrence in self._matcher.find_all_occurrences(normalized):
            rest = normalized[occurrence.end :]
            for extractor in EXTRACTORS:
                candidate = extractor(occurrence.book, rest)
                if candidate is None:
                    continue
                chapter, verse, end, confidence = candidate
                reference = build_reference(occurrence.book, chapter, verse, end)
                if reference is None:
                    continue
                found.append((reference, confidence))
                break

        found.extend(self._fallback_scan(normalized))

        results: list[DetectedVerse] = []
        seen: set[str] = set()
        for reference, confidence in found:
            key = reference.display_string
            if key in seen:
                continue
            seen.add(key)
            results.append(
                DetectedVerse(reference=reference, confidence=confidence, source_text=text)
            )
        if results:
            logger.info(
                "[verse-detector] Detected %s",
                ", ".join(verse.reference.display_string for verse in results),
            )
        return results

    def _fallback_scan(self, normalized: str) -> list[tuple[Reference, Confidence]]:
        found: list[tuple[Reference, Confidence]] = []
        for match in _FALLBACK.finditer(normalized):
            book = self._matcher.match(match.group(1))
            if book is None:
                continue
            reference = build_reference(
                book, int(match.group(2)), int(match.group(3)), _optional_int(match.group(4))
            )
            if reference is not None:
                found.append((reference, Confidence.LOW))
        return found

    def clear_history(self) -> None:
        """Reset detection history; detection keeps no state between calls."""


__all__ = ["VerseDetector", "EXTRACTORS", "build_reference"]
