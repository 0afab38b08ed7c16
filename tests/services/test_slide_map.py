"""Tests for slide index arithmetic and map publication."""

from __future__ import annotations

import threading

from verse_engine.core.models import Reference
from verse_engine.services.book_table import BookTable
from verse_engine.services.slide_map import SlideMap, SlideMapHolder

# pylint: disable=missing-function-docstring

JOHN_CHAPTERS = (51, 25, 36, 54, 47, 71, 53, 59, 41, 42, 57, 50, 38, 31, 27, 33, 26, 40, 42, 31, 25)


def _john(chapter: int, verse: int) -> Reference:
    return Reference("JHN", "John", chapter, verse)


def test_lookup_sums_previous_chapters() -> None:
    slide_map = SlideMap()
    slide_map.register("JHN", "pres-john", JOHN_CHAPTERS)
    location = slide_map.lookup(_john(3, 16))
    assert location is not None
    assert location.presentation_id == "pres-john"
    assert location.slide_index == 91
    assert slide_map.lookup(_john(1, 1)).slide_index == 0  # type: ignore[union-attr]
    assert slide_map.lookup(_john(21, 25)).slide_index == 878  # type: ignore[union-attr]


def test_lookup_rejects_unknown_or_out_of_range() -> None:
    slide_map = SlideMap()
    slide_map.register("JHN", "pres-john", JOHN_CHAPTERS)
    assert slide_map.lookup(Reference("ROM", "Romans", 8, 28)) is None
    assert slide_map.lookup(_john(22, 1)) is None
    assert slide_map.lookup(_john(0, 1)) is None
    assert slide_map.lookup(_john(3, 37)) is None
    assert slide_map.lookup(_john(3, 0)) is None


def test_label_round_trip_for_every_verse(book_table: BookTable) -> None:
    book = book_table.get("JHN")
    assert book is not None
    slide_map = SlideMap(book_table)
    slide_map.register(book.code, "pres-john", book.chapters)
    for chapter, count in enumerate(book.chapters, start=1):
        for verse in range(1, count + 1):
            location = slide_map.lookup(_john(chapter, verse))
            assert location is not None
            assert slide_map.label_for("pres-john", location.slide_index) == (
                f"John {chapter}:{verse}"
            )


def test_label_for_falls_back_to_code_and_bounds() -> None:
    slide_map = SlideMap()
    slide_map.register("JUD", "pres-jude", (25,))
    assert slide_map.label_for("pres-jude", 24) == "JUD 1:25"
    assert slide_map.label_for("pres-jude", 25) is None
    assert slide_map.label_for("pres-jude", -1) is None
    assert slide_map.label_for("missing", 0) is None


def test_register_replaces_and_reports_size() -> None:
    slide_map = SlideMap()
    assert slide_map.is_empty()
    slide_map.register("jhn", "old", JOHN_CHAPTERS)
    slide_map.register("JHN", "new", JOHN_CHAPTERS)
    assert len(slide_map) == 1
    assert slide_map.has_book("JHN")
    assert not slide_map.has_book("ROM")
    assert slide_map.lookup(_john(1, 1)).presentation_id == "new"  # type: ignore[union-attr]


def test_entry_for_is_case_insensitive() -> None:
    slide_map = SlideMap()
    slide_map.register("jhn", "pres-john", JOHN_CHAPTERS)
    entry = slide_map.entry_for("Jhn")
    assert entry is not None
    assert (entry.book_code, entry.presentation_id) == ("JHN", "pres-john")
    assert entry.chapters == JOHN_CHAPTERS
    assert slide_map.entry_for("ROM") is None


def test_holder_swaps_whole_maps() -> None:
    holder = SlideMapHolder()
    original = holder.current()
    assert original.is_empty()

    replacement = SlideMap()
    replacement.register("JHN", "pres-john", JOHN_CHAPTERS)
    previous = holder.swap(replacement)

    assert previous is original
    assert holder.current() is replacement


def test_holder_readers_see_complete_maps() -> None:
    holder = SlideMapHolder()
    sizes: list[int] = []

    def reader() -> None:
        for _ in range(200):
            sizes.append(len(holder.current()))

    def writer() -> None:
        for _ in range(50):
            new_map = SlideMap()
            new_map.register("JHN", "a", JOHN_CHAPTERS)
            new_map.register("ROM", "b", (32, 29))
            holder.swap(new_map)

    threads = [threading.Thread(target=reader), threading.Thread(target=writer)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert set(sizes) <= {0, 2}
