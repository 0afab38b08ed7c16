"""Map verse references to slide positions inside per-book presentations.

Each book's presentation holds one slide per verse in canonical order, so the
slide for ``chapter:verse`` sits after every verse of the earlier chapters.
"""

from __future__ import annotations

import threading
from typing import Iterable, Iterator, Optional

from verse_engine.core.logging import get_logger
from verse_engine.core.models import Reference, SlideEntry, SlideLocation
from verse_engine.services.book_table import BookTable

logger = get_logger(__name__)


class SlideMap:
    """Book-code keyed registry of presentations and their chapter layouts."""

    def __init__(self, table: Optional[BookTable] = None) -> None:
        self._table = table
        self._entries: dict[str, SlideEntry] = {}

    def register(self, book_code: str, presentation_id: str, chapters: Iterable[int]) -> None:
        """Insert or replace the presentation for ``book_code``."""
        entry = SlideEntry(
            book_code=book_code.upper(),
            presentation_id=presentation_id,
            chapters=tuple(chapters),
        )
        self._entries[entry.book_code] = entry

    def entry_for(self, book_code: str) -> Optional[SlideEntry]:
        """Return the registered presentation for ``book_code``, if any."""
        return self._entries.get(book_code.upper())

    def has_book(self, book_code: str) -> bool:
        return book_code.upper() in self._entries

    def lookup(self, reference: Reference) -> Optional[SlideLocation]:
        """Return the slide holding ``reference``'s first verse, or ``None``."""

        entry = self.entry_for(reference.book_code)
        if entry is None:
            logger.warning(
                "[slide-map] No presentation registered for %s", reference.book_code
            )
            return None
        if not 1 <= reference.chapter <= len(entry.chapters):
            logger.warning(
                "[slide-map] Chapter %d outside %s (1-%d)",
                reference.chapter,
                entry.book_code,
                len(entry.chapters),
            )
            return None
        verse_count = entry.chapters[reference.chapter - 1]
        if not 1 <= reference.verse_start <= verse_count:
            logger.warning(
                "[slide-map] Verse %d outside %s %d (1-%d)",
                reference.verse_start,
                entry.book_code,
                reference.chapter,
                verse_count,
            )
            return None
        slide_index = sum(entry.chapters[: reference.chapter - 1]) + reference.verse_start - 1
        return SlideLocation(presentation_id=entry.presentation_id, slide_index=slide_index)

    def label_for(self, presentation_id: str, slide_index: int) -> Optional[str]:
        """Return ``"<Book> <ch>:<vs>"`` for a slide, or ``None`` if it is not mapped."""

        if slide_index < 0:
            return None
        entry = next(
            (item for item in self._entries.values() if item.presentation_id == presentation_id),
            None,
        )
        if entry is None:
            return None
        remaining = slide_index
        for chapter, verse_count in enumerate(entry.chapters, start=1):
            if remaining < verse_count:
                return f"{self._book_name(entry.book_code)} {chapter}:{remaining + 1}"
            remaining -= verse_count
        return None

    def _book_name(self, book_code: str) -> str:
        if self._table is not None:
            book = self._table.get(book_code)
            if book is not None:
                return book.name
        return book_code

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[SlideEntry]:
        return iter(self._entries.values())


class SlideMapHolder:
    """Publish the active ``SlideMap``; re-indexing swaps in a fully built map."""

    def __init__(self, initial: Optional[SlideMap] = None) -> None:
        self._lock = threading.Lock()
        self._current = initial if initial is not None else SlideMap()

    def current(self) -> SlideMap:
        with self._lock:
            return self._current

    def swap(self, new_map: SlideMap) -> SlideMap:
        """Replace the active map and return the previous one."""
        with self._lock:
            previous, self._current = self._current, new_map
        logger.info("[slide-map] Published map with %d books", len(new_map))
        return previous


__all__ = ["SlideMap", "SlideMapHolder"]
