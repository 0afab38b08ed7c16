"""Resolve book names in transcript text, tolerating ordinals and misspellings."""

from __future__ import annotations

from typing import Optional

from verse_engine.core.logging import get_logger
from verse_engine.core.models import Book, BookOccurrence
from verse_engine.services.book_table import BookTable

logger = get_logger(__name__)

ORDINAL_PREFIXES: tuple[tuple[str, str], ...] = (
    ("first ", "1 "),
    ("second ", "2 "),
    ("third ", "3 "),
    ("1st ", "1 "),
    ("2nd ", "2 "),
    ("3rd ", "3 "),
)

MIN_SCAN_LENGTH = 2
MIN_FUZZY_LENGTH = 3


def levenshtein(left: str, right: str) -> int:
    """Return the unit-cost edit distance between two strings."""
    if left == right:
        return 0
    if not left:
        return len(right)
    if not right:
        return len(left)
    previous = list(range(len(right) + 1))
    for i, left_char in enumerate(left, start=1):
        current = [i]
        for j, right_char in enumerate(right, start=1):
            cost = 0 if left_char == right_char else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def fuzzy_threshold(length: int) -> int:
    """Maximum edit distance accepted for an input of ``length`` characters."""
    if length <= 5:
        return 1
    if length <= 10:
        return 2
    return 3


def _is_boundary(text: str, index: int) -> bool:
    return index < 0 or index >= len(text) or not text[index].isalnum()


def _lower_in_place(text: str) -> str:
    """Lower-case ``text`` without changing its length.

    Characters whose lower-case form is longer (e.g. "İ") are kept as-is so
    offsets found in the result index the original text.
    """
    lowered = text.lower()
    if len(lowered) == len(text):
        return lowered
    return "".join(char.lower() if len(char.lower()) == 1 else char for char in text)


class BookNameMatcher:
    """Locate and resolve book names against a ``BookTable``."""

    def __init__(self, table: BookTable) -> None:
        self._table = table
        pairs = [
            (candidate.lower(), book)
            for book in table.books
            for candidate in (book.name, *book.aliases)
        ]
        # Longest names first so "1 john" claims its span before "john"
        self._sorted_names: list[tuple[str, Book]] = sorted(
            pairs, key=lambda pair: len(pair[0]), reverse=True
        )

    def find_all_occurrences(self, text: str) -> list[BookOccurrence]:
        """Return every non-overlapping, word-bounded book name in ``text`` by position."""

        lowered = _lower_in_place(text)
        occurrences: list[BookOccurrence] = []
        claimed: list[tuple[int, int]] = []
        for name, book in self._sorted_names:
            if len(name) < MIN_SCAN_LENGTH:
                continue
            search_start = 0
            while True:
                start = lowered.find(name, search_start)
                if start == -1:
                    break
                end = start + len(name)
                search_start = end
                if not (_is_boundary(lowered, start - 1) and _is_boundary(lowered, end)):
                    continue
                if any(start < taken_end and taken_start < end for taken_start, taken_end in claimed):
                    continue
                claimed.append((start, end))
                occurrences.append(
                    BookOccurrence(book=book, start=start, end=end, matched_name=text[start:end])
                )
        occurrences.sort(key=lambda occurrence: occurrence.start)
        return occurrences

    def match(self, name: str) -> Optional[Book]:
        """Resolve a single spoken or written book name, or return ``None``."""

        candidate = " ".join(name.split()).lower()
        if not candidate:
            return None

        book = self._table.lookup(candidate)
        if book is not None:
            return book

        for prefix, replacement in ORDINAL_PREFIXES:
            if candidate.startswith(prefix):
                book = self._table.lookup(replacement + candidate[len(prefix) :])
                if book is not None:
                    return book
                break

        return self._fuzzy_match(candidate)

    def _fuzzy_match(self, candidate: str) -> Optional[Book]:
        threshold = fuzzy_threshold(len(candidate))
        best: Optional[Book] = None
        best_distance = threshold + 1
        # Table order, name before aliases: ties go to the earlier book
        for book in self._table.books:
            for spelling in (book.name, *book.aliases):
                name = spelling.lower()
                if len(name) < MIN_FUZZY_LENGTH or abs(len(name) - len(candidate)) > threshold:
                    continue
                distance = levenshtein(candidate, name)
                if distance < best_distance:
                    best, best_distance = book, distance
        if best is not None:
            logger.debug(
                "[book-matcher] Fuzzy matched %r to %s (distance=%d)",
                candidate,
                best.code,
                best_distance,
            )
        return best


__all__ = ["BookNameMatcher", "levenshtein", "fuzzy_threshold", "ORDINAL_PREFIXES"]
