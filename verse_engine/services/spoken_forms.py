"""Rewrite spoken reference phrasing into the compact numeric form the detector reads.

"John chapter three verse sixteen" becomes "John 3:16" and "Romans 8 verses
28 through 30" becomes "Romans 8 28-30". Rules run in a fixed order and each
one rewrites every non-overlapping match before the next rule sees the text.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from verse_engine.services import number_words

# One word or a two-word number phrase joined by a space or hyphen
_NUM = r"(\w+(?:[\s-]\w+)?)"
_RANGE = r"\s+(?:through|to|thru)\s+"
_CHAPTER_VERSE = rf"\bchapter\s+{_NUM}\s*,?\s*verses?\s+{_NUM}"

_TWO_WORDS = re.compile(r"^(\w+)([\s-]\w+)$")

Rule = tuple[re.Pattern[str], Callable[[re.Match[str]], str]]


def _split_capture(capture: str) -> tuple[Optional[str], str]:
    """Return digits for ``capture`` plus any trailing word that was not part of the number."""
    digits = number_words.convert(capture)
    if digits is not None:
        return digits, ""
    two_words = _TWO_WORDS.match(capture)
    if two_words:
        head = number_words.convert(two_words.group(1))
        if head is not None:
            return head, two_words.group(2)
    return None, ""


def _middle(capture: str) -> str:
    digits, _ = _split_capture(capture)
    return capture if digits is None else digits


def _last(capture: str) -> tuple[str, str]:
    digits, remainder = _split_capture(capture)
    if digits is None:
        return capture, ""
    return digits, remainder


def _chapter_verse_range(match: re.Match[str]) -> str:
    end, remainder = _last(match.group(3))
    return f"{_middle(match.group(1))}:{_middle(match.group(2))}-{end}{remainder}"


def _chapter_verse(match: re.Match[str]) -> str:
    verse, remainder = _last(match.group(2))
    return f"{_middle(match.group(1))}:{verse}{remainder}"


def _verse_pair(match: re.Match[str]) -> str:
    end, remainder = _last(match.group(2))
    return f"{_middle(match.group(1))}-{end}{remainder}"


def _single_verse(match: re.Match[str]) -> str:
    digits, remainder = _split_capture(match.group(1))
    if digits is None:
        return match.group(0)
    return f"{digits}{remainder}"


def _digit_range(match: re.Match[str]) -> str:
    return f"{match.group(1)}-{match.group(2)}"


def _chapter_in_verse(match: re.Match[str]) -> str:
    if match.group(3):
        return f"{match.group(1)}:{match.group(2)}-{match.group(3)}"
    return f"{match.group(1)}:{match.group(2)}"


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


RULES: tuple[Rule, ...] = (
    (_compile(rf"{_CHAPTER_VERSE}{_RANGE}{_NUM}"), _chapter_verse_range),
    (_compile(_CHAPTER_VERSE), _chapter_verse),
    (_compile(rf"\bverses?\s+{_NUM}{_RANGE}{_NUM}"), _verse_pair),
    (_compile(rf"\bverses?\s+{_NUM}\s+and\s+{_NUM}"), _verse_pair),
    (_compile(rf"\bverses?\s+{_NUM}\b"), _single_verse),
    (_compile(r"\bthe\s+book\s+of\s+"), lambda _match: ""),
)

POST_NUMBER_RULES: tuple[Rule, ...] = (
    (_compile(rf"(\d+){_RANGE}(\d+)"), _digit_range),
    (_compile(r"\b(\d{1,3})\s+in\s+(\d{1,3})(?:-(\d{1,3}))?\b"), _chapter_in_verse),
)


def normalize(text: str) -> str:
    """Return ``text`` with spoken reference phrasing rewritten to digits."""

    for pattern, replacement in RULES:
        text = pattern.sub(replacement, text)
    text = number_words.replace_all(text)
    for pattern, replacement in POST_NUMBER_RULES:
        text = pattern.sub(replacement, text)
    return text


__all__ = ["normalize", "RULES", "POST_NUMBER_RULES"]
