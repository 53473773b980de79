"""
Placeholder tokens for text that must not be transliterated.

Skipped text is cut out of the working string and replaced by an opaque
token. After conversion the tokens are swapped back for the original text.

A token is built only from private-use code points:

    U+E000  kind  index digits (U+E010..U+E019)  U+E003

so it contains no letter, digit or underscore. Word-run matching, word
boundary checks, digraph rules and the character map all pass over it
without seeing inside.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace
from typing import Optional

import regex

from serbian_transliteration._charmap import LATIN_TO_CYRILLIC
from serbian_transliteration.digraphs import SEPARATOR

__all__ = [
    "PLACEHOLDER_PREFIX",
    "PLACEHOLDER_TERMINATOR",
    "PlaceholderKind",
    "PlaceholderTable",
    "SkippedSegment",
    "scan_to_cyrillic",
]

PLACEHOLDER_PREFIX = "\ue000"
PLACEHOLDER_TERMINATOR = "\ue003"
_DIGIT_BASE = 0xE010

_ENCODE_DIGITS = str.maketrans({str(d): chr(_DIGIT_BASE + d) for d in range(10)})
_DECODE_DIGITS = str.maketrans({chr(_DIGIT_BASE + d): str(d) for d in range(10)})


class PlaceholderKind(enum.Enum):
    """What was cut out: a marker-delimited region or a single word."""

    MARKER = "\ue001"
    WORD = "\ue002"


_TOKEN_RE = regex.compile(
    regex.escape(PLACEHOLDER_PREFIX)
    + "([\ue001\ue002])([\ue010-\ue019]+)"
    + regex.escape(PLACEHOLDER_TERMINATOR)
)


@dataclass(frozen=True)
class SkippedSegment:
    """
    Record of one piece of text kept out of conversion.

    ``start`` and ``end`` are offsets of the whole cut-out span (markers
    included) in the text before extraction. They stay None until
    PlaceholderTable.locate() has been called.
    """

    kind: PlaceholderKind
    index: int
    text: str
    start: Optional[int] = None
    end: Optional[int] = None


@dataclass
class PlaceholderTable:
    """
    Side table of skipped segments for a single conversion call.

    Indices grow monotonically per kind, so every token issued by one table
    is unique and entries never need to be removed.

    Example:
        >>> table = PlaceholderTable()
        >>> token = table.add(PlaceholderKind.WORD, "quick")
        >>> table.restore("je " + token)
        'je quick'
    """

    segments: list[SkippedSegment] = field(default_factory=list)
    _counters: dict[PlaceholderKind, int] = field(default_factory=dict, repr=False)
    _lookup: dict[tuple[PlaceholderKind, int], str] = field(default_factory=dict, repr=False)
    _sources: dict[tuple[PlaceholderKind, int], str] = field(default_factory=dict, repr=False)

    def add(
        self, kind: PlaceholderKind, original: str, source: Optional[str] = None
    ) -> str:
        """
        Store ``original`` and return the token standing in for it.

        ``source`` is the text the token replaces when it differs from
        ``original``, e.g. a region together with its markers.
        """
        index = self._counters.get(kind, 0)
        self._counters[kind] = index + 1
        self.segments.append(SkippedSegment(kind=kind, index=index, text=original))
        self._lookup[(kind, index)] = original
        self._sources[(kind, index)] = original if source is None else source
        return _make_token(kind, index)

    def count(self, kind: PlaceholderKind) -> int:
        """Number of segments stored under ``kind``."""
        return self._counters.get(kind, 0)

    def get(self, kind: PlaceholderKind, index: int) -> Optional[str]:
        return self._lookup.get((kind, index))

    def restore(self, text: str) -> str:
        """
        Replace every token issued by this table with its original text.

        Restored text is not rescanned, so skipped content that happens to
        look like a token is returned verbatim. Tokens this table did not
        issue are left as they are.
        """
        if not self._lookup:
            return text

        def _replace(match: regex.Match) -> str:
            kind = PlaceholderKind(match.group(1))
            index = int(match.group(2).translate(_DECODE_DIGITS))
            original = self._lookup.get((kind, index))
            return match.group(0) if original is None else original

        return _TOKEN_RE.sub(_replace, text)

    def locate(self, text: str) -> list[SkippedSegment]:
        """
        Return the segments with offsets into the text before extraction.

        ``text`` must be the working text right after the extractors ran,
        before any conversion. Each token is widened back to the length of
        the text it replaced to recover the original positions.

        Example:
            >>> table = PlaceholderTable()
            >>> token = table.add(PlaceholderKind.WORD, "quick")
            >>> [(s.start, s.end) for s in table.locate("je " + token)]
            [(3, 8)]
        """
        spans: dict[tuple[PlaceholderKind, int], tuple[int, int]] = {}
        shift = 0
        for match in _TOKEN_RE.finditer(text):
            key = (
                PlaceholderKind(match.group(1)),
                int(match.group(2).translate(_DECODE_DIGITS)),
            )
            source = self._sources.get(key)
            if source is None:
                continue
            start = match.start() + shift
            spans[key] = (start, start + len(source))
            shift += len(source) - len(match.group(0))

        located = []
        for segment in self.segments:
            span = spans.get((segment.kind, segment.index))
            if span is not None:
                segment = replace(segment, start=span[0], end=span[1])
            located.append(segment)
        return located


def _make_token(kind: PlaceholderKind, index: int) -> str:
    return (
        PLACEHOLDER_PREFIX
        + kind.value
        + str(index).translate(_ENCODE_DIGITS)
        + PLACEHOLDER_TERMINATOR
    )


# =============================================================================
# Scanner
# =============================================================================


def scan_to_cyrillic(text: str) -> str:
    """
    Map Latin characters to Cyrillic, copying placeholder tokens unchanged.

    Expects digraphs to be merged already. The digraph SEPARATOR is dropped.
    A token prefix with no terminator after it is treated as an ordinary
    character.

    Args:
        text: Working text (digraphs merged, skips replaced by tokens)

    Returns:
        Cyrillic text with tokens intact
    """
    result = []
    i = 0
    length = len(text)

    while i < length:
        char = text[i]

        if char == PLACEHOLDER_PREFIX:
            end = text.find(PLACEHOLDER_TERMINATOR, i + 1)
            if end != -1:
                end += 1
                result.append(text[i:end])
                i = end
                continue

        if char != SEPARATOR:
            result.append(LATIN_TO_CYRILLIC.get(char, char))
        i += 1

    return "".join(result)
