"""Load the canonical book dataset from bundled or configured JSON."""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from verse_engine.core.config import config
from verse_engine.core.exceptions import BookDatasetError
from verse_engine.core.logging import get_logger
from verse_engine.core.models import Book
from verse_engine.services.book_table import BookTable

logger = get_logger(__name__)

BUNDLED_DATASET = "bible_books.json"

_BOOKS_ADAPTER = TypeAdapter(list[Book])


def _read_raw(path: Optional[Path]) -> str:
    try:
        if path is None:
            return (
                resources.files("verse_engine.data")
                .joinpath(BUNDLED_DATASET)
                .read_text(encoding="utf-8")
            )
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise BookDatasetError(f"unable to read book dataset: {exc}") from exc


def parse_books(raw: str) -> list[Book]:
    """Parse a JSON array of ``{code, name, aliases, chapters}`` records."""

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise BookDatasetError(f"book dataset is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise BookDatasetError("book dataset must be a JSON array")
    try:
        return _BOOKS_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise BookDatasetError(f"book dataset failed validation: {exc}") from exc


def load_books(path: Optional[Path] = None) -> list[Book]:
    """Read and parse the dataset, raising ``BookDatasetError`` on any failure."""

    return parse_books(_read_raw(path))


def load_book_table(path: Optional[Path] = None) -> BookTable:
    """Return the canonical book table, or an empty table if the dataset is unusable."""

    dataset_path = path if path is not None else config.BOOK_DATASET_PATH
    try:
        books = load_books(dataset_path)
    except BookDatasetError:
        logger.error(
            "[book-dataset] Failed to load dataset; detection disabled",
            exc_info=True,
            extra={"dataset_path": str(dataset_path) if dataset_path else BUNDLED_DATASET},
        )
        return BookTable()
    logger.info("[book-dataset] Loaded %d books", len(books))
    return BookTable(books)


__all__ = ["BUNDLED_DATASET", "load_book_table", "load_books", "parse_books"]
