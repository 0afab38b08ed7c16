"""Build the slide map from the presentations in a presentation-software library."""

from __future__ import annotations

import re
from typing import Optional

from verse_engine.core.config import config
from verse_engine.core.exceptions import LibraryNotFoundError, PresentationLibraryError
from verse_engine.core.logging import get_logger
from verse_engine.core.models import PresentationLibrary
from verse_engine.core.ports import PresentationLibraryPort
from verse_engine.services.book_matcher import BookNameMatcher
from verse_engine.services.book_table import BookTable
from verse_engine.services.slide_map import SlideMap, SlideMapHolder

logger = get_logger(__name__)

# "<Book Name> <c>_<v>-<c>_<v> (<edition>)", e.g. "Song of Solomon 1_1-8_14 (KJV)"
_PRESENTATION_NAME = re.compile(r"^(.+?)\s+\d+_\d+-\d+_\d+\s*\(.*\)$")


def parse_book_name(name: str) -> Optional[str]:
    """Return the book portion of a presentation name, or ``None`` if it does not fit."""
    match = _PRESENTATION_NAME.match(name.strip())
    if not match:
        return None
    return match.group(1).strip()


class PresentationIndexer:
    """Index one library into a fresh ``SlideMap`` and publish it through the holder."""

    def __init__(
        self,
        library_port: PresentationLibraryPort,
        table: BookTable,
        holder: SlideMapHolder,
        matcher: Optional[BookNameMatcher] = None,
    ) -> None:
        self._port = library_port
        self._table = table
        self._holder = holder
        self._matcher = matcher or BookNameMatcher(table)
        self.is_indexing = False
        self.indexed_book_count = 0
        self.error_message: Optional[str] = None

    def _find_library(self, library_name: str) -> PresentationLibrary:
        libraries = self._port.list_libraries()
        wanted = library_name.strip().lower()
        for library in libraries:
            if library.name.strip().lower() == wanted:
                return library
        available = ", ".join(library.name for library in libraries) or "none"
        raise LibraryNotFoundError(
            f"Library '{library_name}' not found. Available: {available}"
        )

    def build_map(self, library_name: str) -> SlideMap:
        """Return a new map for ``library_name`` without publishing it."""

        library = self._find_library(library_name)
        new_map = SlideMap(self._table)
        for item in self._port.list_items(library.id):
            book_name = parse_book_name(item.name)
            if book_name is None:
                logger.debug("[indexer] Skipping presentation %r", item.name)
                continue
            book = self._matcher.match(book_name)
            if book is None:
                logger.warning("[indexer] No book matches presentation %r", item.name)
                continue
            new_map.register(book.code, item.id, book.chapters)
        return new_map

    def index(self, library_name: Optional[str] = None) -> int:
        """Rebuild and publish the slide map; return the number of books indexed.

        ``library_name`` defaults to the configured ``BIBLE_LIBRARY_NAME``.

        On failure the previously published map stays active and
        ``error_message`` describes the problem.
        """

        library_name = library_name or config.BIBLE_LIBRARY_NAME
        self.is_indexing = True
        self.error_message = None
        try:
            new_map = self.build_map(library_name)
        except PresentationLibraryError as exc:
            self.error_message = str(exc)
            logger.error("[indexer] Indexing failed: %s", exc)
            return self.indexed_book_count
        finally:
            self.is_indexing = False

        self._holder.swap(new_map)
        self.indexed_book_count = len(new_map)
        logger.info(
            "[indexer] Indexed %d books from library %r", self.indexed_book_count, library_name
        )
        return self.indexed_book_count


__all__ = ["PresentationIndexer", "parse_book_name"]
