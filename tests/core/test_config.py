"""Tests for environment-driven settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from verse_engine.core.config import Settings

# pylint: disable=missing-function-docstring


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "VERSE_ENGINE_LOG_LEVEL",
        "VERSE_ENGINE_LOG_DIR",
        "BOOK_DATASET_PATH",
        "CONFIDENCE_THRESHOLD",
        "CROSS_SEGMENT_WINDOW",
        "BIBLE_LIBRARY_NAME",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)  # type: ignore[call-arg]
    assert settings.VERSE_ENGINE_LOG_LEVEL == "info"
    assert settings.VERSE_ENGINE_LOG_DIR is None
    assert settings.BOOK_DATASET_PATH is None
    assert settings.CONFIDENCE_THRESHOLD == 0.7
    assert settings.CROSS_SEGMENT_WINDOW == 2
    assert settings.BIBLE_LIBRARY_NAME == "Default"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    dataset = tmp_path / "books.json"
    monkeypatch.setenv("CONFIDENCE_THRESHOLD", "0.4")
    monkeypatch.setenv("BOOK_DATASET_PATH", str(dataset))
    monkeypatch.setenv("BIBLE_LIBRARY_NAME", "KJV Slides")

    settings = Settings(_env_file=None)  # type: ignore[call-arg]
    assert settings.CONFIDENCE_THRESHOLD == 0.4
    assert settings.BOOK_DATASET_PATH == dataset
    assert settings.BIBLE_LIBRARY_NAME == "KJV Slides"
