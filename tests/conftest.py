"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so local overrides are honored.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

os.environ.setdefault("VERSE_ENGINE_LOG_LEVEL", "info")
os.environ.setdefault("CONFIDENCE_THRESHOLD", "0.7")
os.environ.setdefault("CROSS_SEGMENT_WINDOW", "2")

# pylint: disable=wrong-import-position
from verse_engine.adapters.book_dataset import load_books  # noqa: E402
from verse_engine.services.book_table import BookTable  # noqa: E402
from verse_engine.services.verse_detector import VerseDetector  # noqa: E402


@pytest.fixture(name="book_table", scope="session")
def _book_table() -> BookTable:
    """Canonical table built from the bundled dataset."""
    return BookTable(load_books())


@pytest.fixture(name="detector")
def _detector(book_table: BookTable) -> VerseDetector:
    return VerseDetector(book_table)
