"""
Script detection for Serbian text.

Counts letters that belong to the Serbian Cyrillic or Latin alphabet and
reports which script is in the majority. Anything else (digits,
punctuation, foreign letters such as q/w/x/y) is ignored.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

from serbian_transliteration._charmap import CYRILLIC_TO_LATIN, LATIN_TO_CYRILLIC

__all__ = ["LetterCount", "count_letters", "is_cyrillic", "is_latin"]


class LetterCount(NamedTuple):
    cyrillic: int
    latin: int


def count_letters(text: Optional[str]) -> LetterCount:
    """Count Serbian Cyrillic and Serbian Latin letters in ``text``."""
    cyrillic = latin = 0
    for char in text or "":
        if char in CYRILLIC_TO_LATIN:
            cyrillic += 1
        elif char in LATIN_TO_CYRILLIC:
            latin += 1
    return LetterCount(cyrillic=cyrillic, latin=latin)


def is_cyrillic(text: Optional[str]) -> bool:
    """
    True if Cyrillic letters strictly outnumber Latin letters.

    Ties, including text with no letters at all, give False.

    Example:
        >>> is_cyrillic("Добар дан")
        True
        >>> is_cyrillic("Добар Dobar")
        False
    """
    if not text:
        return False
    counts = count_letters(text)
    return counts.cyrillic > counts.latin


def is_latin(text: Optional[str]) -> bool:
    """
    True if Latin letters strictly outnumber Cyrillic letters.

    Example:
        >>> is_latin("Dobar dan")
        True
        >>> is_latin("1234!?")
        False
    """
    if not text:
        return False
    counts = count_letters(text)
    return counts.latin > counts.cyrillic
