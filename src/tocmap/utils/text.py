"""Word-level text helpers used to break ties between TOC candidates."""

from __future__ import annotations

import re
from typing import List, Sequence

from rapidfuzz.distance import Levenshtein

WORD_SPLIT_CHARS = ("-", "#", "_", " ", "/")

_WORD_SPLIT_RE = re.compile("[" + re.escape("".join(WORD_SPLIT_CHARS)) + "]")


def split_words(text: str) -> List[str]:
    """Split text on word delimiters, discarding empty tokens."""
    return [word for word in _WORD_SPLIT_RE.split(text) if word]


def _upper_char(char: str) -> str:
    upper = char.upper()
    # Multi-character mappings such as "ß" -> "SS" leave the character as is.
    return upper if len(upper) == 1 else char


def fold_case(text: str) -> str:
    """Upper-case text one character at a time.

    The result keeps the length of ``text`` and serves ordinal comparisons
    that ignore case.
    """
    return "".join(_upper_char(char) for char in text)


def compare_ignore_case(left: str, right: str) -> int:
    """Ordinal comparison ignoring case: negative, zero or positive."""
    left, right = fold_case(left), fold_case(right)
    return (left > right) - (left < right)


def word_edit_distance(source: Sequence[str], target: Sequence[str]) -> int:
    """Levenshtein distance between two word sequences.

    Each word is an atomic unit and words match case-insensitively. Insertions,
    deletions and substitutions all cost 1.
    """
    return Levenshtein.distance(
        [fold_case(word) for word in source],
        [fold_case(word) for word in target],
    )
