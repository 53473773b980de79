"""
Latin → Cyrillic conversion pipeline.

Order of operations:

    1. validate options (identical markers fail before anything else)
    2. cut out marker regions          <skip>...</skip>
    3. cut out words with q/w/x/y      Python, quick
    4. cut out caller-listed words     SkipOptions.words
    5. split digraphs in exception words
    6. merge remaining digraphs        lj → љ, nj → њ, dž → џ
    7. map characters, copying placeholders as they are
    8. put skipped text back

Example:
    >>> to_cyrillic("Dobar dan")
    'Добар дан'
    >>> to_cyrillic("ovo je <skip>some code</skip> za primer")
    'ово је some code за пример'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

from serbian_transliteration._charmap import to_latin
from serbian_transliteration._detect import is_cyrillic, is_latin
from serbian_transliteration.digraphs import (
    SEPARATOR,
    guard_digraph_exceptions,
    merge_digraphs,
)
from serbian_transliteration.skip import (
    PlaceholderKind,
    PlaceholderTable,
    SkipOptions,
    SkippedSegment,
    extract_foreign_words,
    extract_skip_regions,
    extract_skip_words,
    resolve_options,
    scan_to_cyrillic,
)

__all__ = [
    "TransliterationResult",
    "Transliterator",
    "auto_transliterate",
    "to_cyrillic",
    "to_cyrillic_detailed",
]

logger = logging.getLogger(__name__)

OptionsLike = Union[SkipOptions, Mapping[str, Any], None]


@dataclass
class TransliterationResult:
    """Detailed result from Latin → Cyrillic conversion."""

    original: str
    transliterated: str
    skipped: list[SkippedSegment] = field(default_factory=list)

    @property
    def skipped_words(self) -> list[str]:
        return [s.text for s in self.skipped if s.kind is PlaceholderKind.WORD]

    @property
    def skipped_regions(self) -> list[str]:
        return [s.text for s in self.skipped if s.kind is PlaceholderKind.MARKER]


def _convert(text: str, skip: SkipOptions) -> tuple[str, list[SkippedSegment]]:
    skip.validate()
    table = PlaceholderTable()

    working = text
    if skip.has_markers:
        working = extract_skip_regions(
            working, skip.markers, table, case_sensitive=skip.case_sensitive
        )
    working = extract_foreign_words(working, table)
    if skip.words:
        working = extract_skip_words(
            working, skip.words, table, case_sensitive=skip.case_sensitive
        )

    logger.debug(
        "Skipping %d region(s) and %d word(s)",
        table.count(PlaceholderKind.MARKER),
        table.count(PlaceholderKind.WORD),
    )

    segments = table.locate(working)

    working = guard_digraph_exceptions(working)
    working = merge_digraphs(working)
    working = scan_to_cyrillic(working)
    working = table.restore(working)

    return working.replace(SEPARATOR, ""), segments


def to_cyrillic(text: Optional[str], options: OptionsLike = None) -> str:
    """
    Convert Serbian Latin text to Cyrillic script.

    Always kept in Latin:
        - words containing q, w, x or y
        - words listed in ``options.words``
        - regions between ``options.markers``; the markers are removed

    Args:
        text: Text in Serbian Latin
        options: SkipOptions, a mapping accepted by SkipOptions.from_dict,
            or None for defaults

    Returns:
        Text in Serbian Cyrillic, or "" for empty input

    Raises:
        IdenticalMarkersError: If the opening and closing markers are equal

    Example:
        >>> to_cyrillic("JavaScript je quick!")
        'ЈаваСцрипт је quick!'
        >>> to_cyrillic("Visit Wikipedia", {"skip": {"words": ["Visit"]}})
        'Visit Wikipedia'
    """
    if not text:
        return ""
    converted, _ = _convert(text, resolve_options(options))
    return converted


def to_cyrillic_detailed(
    text: Optional[str], options: OptionsLike = None
) -> TransliterationResult:
    """
    Convert Latin to Cyrillic and report which segments were skipped.

    Example:
        >>> result = to_cyrillic_detailed("ovo je <skip>kod</skip> i quick")
        >>> result.transliterated
        'ово је kod и quick'
        >>> result.skipped_regions, result.skipped_words
        (['kod'], ['quick'])
    """
    if not text:
        return TransliterationResult(original=text or "", transliterated="")
    converted, segments = _convert(text, resolve_options(options))
    return TransliterationResult(
        original=text, transliterated=converted, skipped=segments
    )


def auto_transliterate(text: Optional[str], options: OptionsLike = None) -> str:
    """
    Convert text to the opposite script of whichever one dominates.

    Cyrillic-majority text goes to Latin, Latin-majority text goes to
    Cyrillic (honoring ``options``). Anything else is returned unchanged.

    Example:
        >>> auto_transliterate("Dobar dan")
        'Добар дан'
        >>> auto_transliterate("Добар дан")
        'Dobar dan'
        >>> auto_transliterate("123")
        '123'
    """
    if not text:
        return ""
    if is_cyrillic(text):
        return to_latin(text)
    if is_latin(text):
        return to_cyrillic(text, options)
    return text


class Transliterator:
    """
    Converter bound to one set of skip options.

    Options are resolved and validated once, at construction.

    Example:
        >>> t = Transliterator(SkipOptions(words=("Beograd",)))
        >>> t.to_cyrillic("Beograd je grad")
        'Beograd је град'
    """

    def __init__(self, options: OptionsLike = None) -> None:
        self.options = resolve_options(options)
        self.options.validate()

    def to_cyrillic(self, text: Optional[str]) -> str:
        return to_cyrillic(text, self.options)

    def to_latin(self, text: Optional[str]) -> str:
        return to_latin(text)

    def auto(self, text: Optional[str]) -> str:
        return auto_transliterate(text, self.options)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"
