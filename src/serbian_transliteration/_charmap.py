"""
Character tables for Serbian Cyrillic and Latin.

Both directions are one-to-one at the code point level: every Cyrillic
letter maps to one Latin letter or digraph, every Latin letter maps to one
Cyrillic letter. Digraphs (lj, nj, dž) are collapsed before the Latin table
is consulted, see ``serbian_transliteration.digraphs``.

These have no external dependencies.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

__all__ = ["CYRILLIC_TO_LATIN", "LATIN_TO_CYRILLIC", "to_latin"]

CYRILLIC_TO_LATIN: Mapping[str, str] = MappingProxyType(
    {
        "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "ђ": "đ", "е": "e",
        "ж": "ž", "з": "z", "и": "i", "ј": "j", "к": "k", "л": "l", "љ": "lj",
        "м": "m", "н": "n", "њ": "nj", "о": "o", "п": "p", "р": "r", "с": "s",
        "т": "t", "ћ": "ć", "у": "u", "ф": "f", "х": "h", "ц": "c", "ч": "č",
        "џ": "dž", "ш": "š",
        "А": "A", "Б": "B", "В": "V", "Г": "G", "Д": "D", "Ђ": "Đ", "Е": "E",
        "Ж": "Ž", "З": "Z", "И": "I", "Ј": "J", "К": "K", "Л": "L", "Љ": "Lj",
        "М": "M", "Н": "N", "Њ": "Nj", "О": "O", "П": "P", "Р": "R", "С": "S",
        "Т": "T", "Ћ": "Ć", "У": "U", "Ф": "F", "Х": "H", "Ц": "C", "Ч": "Č",
        "Џ": "Dž", "Ш": "Š",
    }
)

# Single letters only; lj/nj/dž are merged upstream
LATIN_TO_CYRILLIC: Mapping[str, str] = MappingProxyType(
    {
        "a": "а", "b": "б", "v": "в", "g": "г", "d": "д", "đ": "ђ", "e": "е",
        "ž": "ж", "z": "з", "i": "и", "j": "ј", "k": "к", "l": "л", "m": "м",
        "n": "н", "o": "о", "p": "п", "r": "р", "s": "с", "t": "т", "ć": "ћ",
        "u": "у", "f": "ф", "h": "х", "c": "ц", "č": "ч", "š": "ш",
        "A": "А", "B": "Б", "V": "В", "G": "Г", "D": "Д", "Đ": "Ђ", "E": "Е",
        "Ž": "Ж", "Z": "З", "I": "И", "J": "Ј", "K": "К", "L": "Л", "M": "М",
        "N": "Н", "O": "О", "P": "П", "R": "Р", "S": "С", "T": "Т", "Ć": "Ћ",
        "U": "У", "F": "Ф", "H": "Х", "C": "Ц", "Č": "Ч", "Š": "Ш",
    }
)


def to_latin(text: Optional[str]) -> str:
    """
    Convert Serbian Cyrillic text to Latin script.

    Characters without a Cyrillic mapping (Latin letters, digits,
    punctuation, other scripts) pass through unchanged.

    Args:
        text: Text in Serbian Cyrillic (may be mixed)

    Returns:
        Text in Serbian Latin, or "" for empty input

    Example:
        >>> to_latin("Добар дан")
        'Dobar dan'
        >>> to_latin("Љубав")
        'Ljubav'
    """
    if not text:
        return ""
    return "".join(CYRILLIC_TO_LATIN.get(char, char) for char in text)
