"""
serbian-transliteration: Serbian Cyrillic ↔ Latin conversion.

Cyrillic → Latin is a plain character map. Latin → Cyrillic merges the
digraphs lj, nj and dž, except in words where the two letters are separate
(injekcija, nadživeti), and can keep foreign words or marked regions in
Latin.

Basic usage:
    >>> from serbian_transliteration import to_cyrillic, to_latin
    >>> to_cyrillic("Ljubav, Nježnost, Džem")
    'Љубав, Њежност, Џем'
    >>> to_latin("Добар дан")
    'Dobar dan'

Skipping:
    >>> from serbian_transliteration import SkipOptions
    >>> to_cyrillic("Test TEST test", SkipOptions(words=("test",), case_sensitive=False))
    'Test TEST test'

Detection:
    >>> from serbian_transliteration import auto_transliterate, is_cyrillic
    >>> is_cyrillic("Добар Dobar")
    False
    >>> auto_transliterate("Dobar dan")
    'Добар дан'
"""

import logging

from serbian_transliteration._charmap import (
    CYRILLIC_TO_LATIN,
    LATIN_TO_CYRILLIC,
    to_latin,
)
from serbian_transliteration._detect import (
    LetterCount,
    count_letters,
    is_cyrillic,
    is_latin,
)
from serbian_transliteration.skip import (
    IdenticalMarkersError,
    PlaceholderKind,
    SkipOptions,
    SkippedSegment,
)
from serbian_transliteration._transliterate import (
    TransliterationResult,
    Transliterator,
    auto_transliterate,
    to_cyrillic,
    to_cyrillic_detailed,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
__all__ = [
    "CYRILLIC_TO_LATIN",
    "LATIN_TO_CYRILLIC",
    "IdenticalMarkersError",
    "LetterCount",
    "PlaceholderKind",
    "SkipOptions",
    "SkippedSegment",
    "TransliterationResult",
    "Transliterator",
    "auto_transliterate",
    "count_letters",
    "is_cyrillic",
    "is_latin",
    "to_cyrillic",
    "to_cyrillic_detailed",
    "to_latin",
]


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "SerbianTransliteratorComponent":
        try:
            from serbian_transliteration.spacy import SerbianTransliteratorComponent
            return SerbianTransliteratorComponent
        except ImportError as exc:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install serbian-transliteration[spacy]"
            ) from exc
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
