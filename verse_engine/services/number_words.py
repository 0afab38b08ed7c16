"""Convert English number words ("twenty eight", "one hundred and third") to digits.

Only the shapes that appear in spoken verse references are recognised: ones,
tens, ordinals, two-word and hyphenated compounds, and a single ``hundred``
construction. Anything else converts to ``None`` so callers can leave the
original words untouched.
"""

from __future__ import annotations

import re
import string
from typing import Optional

ONES: dict[str, int] = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

TENS: dict[str, int] = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

ORDINAL_ONES: dict[str, int] = {
    "first": 1,
    "second": 2,
    "third": 3,
    "fourth": 4,
    "fifth": 5,
    "sixth": 6,
    "seventh": 7,
    "eighth": 8,
    "ninth": 9,
    "tenth": 10,
    "eleventh": 11,
    "twelfth": 12,
    "thirteenth": 13,
    "fourteenth": 14,
    "fifteenth": 15,
    "sixteenth": 16,
    "seventeenth": 17,
    "eighteenth": 18,
    "nineteenth": 19,
}

ORDINAL_TENS: dict[str, int] = {
    "twentieth": 20,
    "thirtieth": 30,
    "fortieth": 40,
    "fiftieth": 50,
    "sixtieth": 60,
    "seventieth": 70,
    "eightieth": 80,
    "ninetieth": 90,
}

MAX_WINDOW = 6

_TOKEN_SPLIT = re.compile(r"[\s-]+")


def _single(word: str) -> Optional[int]:
    for table in (ONES, TENS, ORDINAL_ONES, ORDINAL_TENS):
        if word in table:
            return table[word]
    return None


def _unit(word: str) -> Optional[int]:
    """Return 1-9 for a cardinal or ordinal unit word, else None."""
    value = ONES.get(word, ORDINAL_ONES.get(word))
    if value is None or not 1 <= value <= 9:
        return None
    return value


def _below_hundred(tokens: list[str]) -> Optional[int]:
    if len(tokens) == 1:
        return _single(tokens[0])
    if len(tokens) == 2 and tokens[0] in TENS:
        unit = _unit(tokens[1])
        if unit is not None:
            return TENS[tokens[0]] + unit
    return None


def _hundreds(tokens: list[str]) -> Optional[int]:
    if len(tokens) < 2 or tokens[1] != "hundred":
        return None
    head = tokens[0]
    if head == "a":
        multiplier = 1
    else:
        multiplier = ONES.get(head, 0)
        if multiplier < 1:
            return None
    rest = tokens[2:]
    if rest and rest[0] == "and":
        rest = rest[1:]
        if not rest:
            return None
    if not rest:
        return multiplier * 100
    remainder = _below_hundred(rest)
    if remainder is None:
        return None
    return multiplier * 100 + remainder


def convert(phrase: str) -> Optional[str]:
    """Return the decimal digits for ``phrase`` or ``None`` when it is not a number."""

    cleaned = phrase.strip().lower()
    if not cleaned:
        return None
    if cleaned.isascii() and cleaned.isdigit():
        return cleaned

    tokens = [token for token in _TOKEN_SPLIT.split(cleaned) if token]
    if not tokens:
        return None
    if "hundred" in tokens:
        value = _hundreds(tokens)
    else:
        value = _below_hundred(tokens)
    return None if value is None else str(value)


def _leading_punctuation(token: str) -> str:
    return token[: len(token) - len(token.lstrip(string.punctuation))]


def _trailing_punctuation(token: str) -> str:
    stripped = token.rstrip(string.punctuation)
    return token[len(stripped) :]


def replace_all(text: str) -> str:
    """Replace every number-word phrase in ``text`` with digits.

    Tokens are split on single spaces so runs of spaces survive. At each
    position the longest convertible window (up to six tokens) wins.
    """

    tokens = text.split(" ")
    output: list[str] = []
    index = 0
    while index < len(tokens):
        replaced = False
        longest = min(MAX_WINDOW, len(tokens) - index)
        for size in range(longest, 0, -1):
            window = tokens[index : index + size]
            if any(not token for token in window):
                continue
            candidate = " ".join(window).strip(string.punctuation)
            digits = convert(candidate)
            if digits is None:
                continue
            output.append(
                _leading_punctuation(window[0]) + digits + _trailing_punctuation(window[-1])
            )
            index += size
            replaced = True
            break
        if not replaced:
            output.append(tokens[index])
            index += 1
    return " ".join(output)


__all__ = ["convert", "replace_all", "MAX_WINDOW"]
