"""Read-only lookup table over the canonical books."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from verse_engine.core.models import Book


class BookTable:
    """Map lower-cased names, codes, and aliases to books.

    The first book registered under a key keeps it; later collisions are
    ignored so dataset order decides ambiguous aliases.
    """

    def __init__(self, books: Iterable[Book] = ()) -> None:
        self._books: tuple[Book, ...] = tuple(books)
        self._by_code: dict[str, Book] = {}
        self._index: dict[str, Book] = {}
        for book in self._books:
            self._by_code.setdefault(book.code.upper(), book)
            for key in (book.name, book.code, *book.aliases):
                normalized = key.strip().lower()
                if normalized:
                    self._index.setdefault(normalized, book)

    @property
    def books(self) -> tuple[Book, ...]:
        return self._books

    def lookup(self, name: str) -> Optional[Book]:
        """Return the book whose name, code, or alias equals ``name`` (case-insensitive)."""
        return self._index.get(name.strip().lower())

    def get(self, code: str) -> Optional[Book]:
        """Return the book registered under ``code``."""
        return self._by_code.get(code.strip().upper())

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __bool__(self) -> bool:
        return bool(self._books)


__all__ = ["BookTable"]
