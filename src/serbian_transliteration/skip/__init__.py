"""
Skip submodule.

Options, placeholder tokens and extractors that keep parts of the input
out of Latin → Cyrillic conversion.
"""

from serbian_transliteration.skip._options import (
    DEFAULT_MARKERS,
    IdenticalMarkersError,
    SkipOptions,
    resolve_options,
)
from serbian_transliteration.skip._placeholders import (
    PLACEHOLDER_PREFIX,
    PLACEHOLDER_TERMINATOR,
    PlaceholderKind,
    PlaceholderTable,
    SkippedSegment,
    scan_to_cyrillic,
)
from serbian_transliteration.skip._codecs import (
    FOREIGN_LETTERS,
    extract_foreign_words,
    extract_skip_regions,
    extract_skip_words,
)

__all__ = [
    "DEFAULT_MARKERS",
    "FOREIGN_LETTERS",
    "IdenticalMarkersError",
    "PLACEHOLDER_PREFIX",
    "PLACEHOLDER_TERMINATOR",
    "PlaceholderKind",
    "PlaceholderTable",
    "SkipOptions",
    "SkippedSegment",
    "extract_foreign_words",
    "extract_skip_regions",
    "extract_skip_words",
    "resolve_options",
    "scan_to_cyrillic",
]
