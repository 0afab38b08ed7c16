"""Tests for number-word conversion."""

from __future__ import annotations

import pytest

from verse_engine.services import number_words

# pylint: disable=missing-function-docstring


@pytest.mark.parametrize(
    ("phrase", "expected"),
    [
        ("sixteen", "16"),
        ("  Twenty ", "20"),
        ("twenty-eight", "28"),
        ("twenty eight", "28"),
        ("twenty-first", "21"),
        ("twenty first", "21"),
        ("third", "3"),
        ("fortieth", "40"),
        ("150", "150"),
        ("one hundred", "100"),
        ("a hundred", "100"),
        ("one hundred fifty", "150"),
        ("one hundred and fifty", "150"),
        ("one hundred and third", "103"),
        ("one hundred nineteen", "119"),
        ("one hundred twenty-one", "121"),
    ],
)
def test_convert_recognised_shapes(phrase: str, expected: str) -> None:
    assert number_words.convert(phrase) == expected


@pytest.mark.parametrize(
    "phrase",
    [
        "",
        "   ",
        "hello",
        "sixteen is",
        "one two",
        "eight twenty",
        "twenty zero",
        "one hundred and",
        "hundred",
        "zero hundred",
        "one hundred twenty eight verses",
        "٣",
    ],
)
def test_convert_rejects_other_phrases(phrase: str) -> None:
    assert number_words.convert(phrase) is None


def test_replace_all_prefers_longest_window() -> None:
    assert (
        number_words.replace_all("one hundred and fifty three verses") == "153 verses"
    )
    assert number_words.replace_all("Psalm twenty three") == "Psalm 23"


def test_replace_all_keeps_punctuation_per_token() -> None:
    assert number_words.replace_all("three, four") == "3, 4"
    assert number_words.replace_all("(twelve) apostles.") == "(12) apostles."
    assert number_words.replace_all("chapter twenty-one.") == "chapter 21."


def test_replace_all_preserves_spacing_and_unknown_words() -> None:
    assert number_words.replace_all("read  two   things") == "read  2   things"
    assert number_words.replace_all("nothing to see") == "nothing to see"
    assert number_words.replace_all("") == ""


def test_replace_all_converts_ordinal_book_prefix() -> None:
    assert number_words.replace_all("First Corinthians thirteen four") == "1 Corinthians 13 4"
