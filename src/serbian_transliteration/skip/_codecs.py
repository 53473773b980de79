"""
Extraction of skipped regions and words.

Each extractor replaces the text it keeps with a placeholder token from a
shared PlaceholderTable and returns the rewritten working text. Restoration
is done once at the end by PlaceholderTable.restore().
"""

from __future__ import annotations

from typing import Iterable

import regex

from serbian_transliteration.skip._options import IdenticalMarkersError
from serbian_transliteration.skip._placeholders import PlaceholderKind, PlaceholderTable

__all__ = [
    "FOREIGN_LETTERS",
    "extract_foreign_words",
    "extract_skip_regions",
    "extract_skip_words",
]

# Letters outside the Serbian alphabet; words containing them stay Latin
FOREIGN_LETTERS = frozenset("qwxyQWXY")

# ASCII word runs: Serbian letters such as č or š end a run
_WORD_RUN_RE = regex.compile(r"[A-Za-z0-9_]+")

# Word boundary: start/end of text or any character that is not a
# letter, number or underscore in the Unicode sense
_BOUNDARY_BEFORE = r"(?:^|(?<=[^\p{L}\p{N}_]))"
_BOUNDARY_AFTER = r"(?=[^\p{L}\p{N}_]|$)"


def _flags(case_sensitive: bool) -> int:
    return 0 if case_sensitive else regex.IGNORECASE


def extract_skip_regions(
    text: str,
    markers: tuple[str, str],
    table: PlaceholderTable,
    case_sensitive: bool = True,
) -> str:
    """
    Replace every ``open ... close`` region with a MARKER placeholder.

    Matching is non-greedy and does not cross line breaks. The markers are
    dropped; only the content between them is kept for restoration. The
    full match, markers included, is recorded as the segment's source.

    Args:
        text: Working text
        markers: (open, close) marker strings
        table: Placeholder table for this call
        case_sensitive: Whether markers match case-sensitively

    Returns:
        Text with regions replaced by placeholders

    Raises:
        IdenticalMarkersError: If open and close markers are equal

    Example:
        >>> table = PlaceholderTable()
        >>> out = extract_skip_regions("a <skip>b</skip> c", ("<skip>", "</skip>"), table)
        >>> table.restore(out)
        'a b c'
    """
    open_marker, close_marker = markers
    if open_marker == close_marker:
        raise IdenticalMarkersError()

    pattern = regex.compile(
        regex.escape(open_marker) + "(.*?)" + regex.escape(close_marker),
        _flags(case_sensitive),
    )
    return pattern.sub(
        lambda m: table.add(PlaceholderKind.MARKER, m.group(1), source=m.group(0)),
        text,
    )


def extract_foreign_words(text: str, table: PlaceholderTable) -> str:
    """
    Replace every word containing q, w, x or y with a WORD placeholder.

    A word is a run of ASCII letters, digits and underscores. Serbian letters
    with diacritics split a run, so only the ASCII part around q, w, x or y
    is kept.

    Example:
        >>> table = PlaceholderTable()
        >>> table.restore(extract_foreign_words("Python je super", table))
        'Python je super'
        >>> table.count(PlaceholderKind.WORD)
        1
    """

    def _replace(match: regex.Match) -> str:
        word = match.group(0)
        if FOREIGN_LETTERS.isdisjoint(word):
            return word
        return table.add(PlaceholderKind.WORD, word)

    return _WORD_RUN_RE.sub(_replace, text)


def extract_skip_words(
    text: str,
    words: Iterable[str],
    table: PlaceholderTable,
    case_sensitive: bool = True,
) -> str:
    """
    Replace standalone occurrences of each word with WORD placeholders.

    Words are processed in the given order. The text actually matched is
    stored, so with ``case_sensitive=False`` the original casing survives.

    Args:
        text: Working text
        words: Words to keep in Latin
        table: Placeholder table for this call
        case_sensitive: Whether words match case-sensitively

    Returns:
        Text with matched words replaced by placeholders
    """
    flags = _flags(case_sensitive)
    for word in words:
        if not word:
            continue
        pattern = regex.compile(
            _BOUNDARY_BEFORE + regex.escape(word) + _BOUNDARY_AFTER, flags
        )
        text = pattern.sub(lambda m: table.add(PlaceholderKind.WORD, m.group(0)), text)
    return text
