"""
Skip options for Latin → Cyrillic conversion.

Callers can keep parts of the text in Latin script:

    - words containing q, w, x or y (always, no option needed)
    - words listed in ``words``
    - regions wrapped in a marker pair, ``<skip>...</skip>`` by default

Options can be given as a ``SkipOptions`` instance or as a plain mapping,
either flat or nested under ``"skip"``, with snake_case or camelCase keys:

    >>> SkipOptions.from_dict({"skip": {"words": ["Wikipedia"], "caseSensitive": False}})
    SkipOptions(case_sensitive=False, words=('Wikipedia',), markers=('<skip>', '</skip>'))
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

__all__ = [
    "DEFAULT_MARKERS",
    "IdenticalMarkersError",
    "SkipOptions",
    "resolve_options",
]

DEFAULT_MARKERS = ("<skip>", "</skip>")

# Accepted spellings → field name
_KEY_ALIASES = {
    "case_sensitive": "case_sensitive",
    "caseSensitive": "case_sensitive",
    "words": "words",
    "markers": "markers",
}


class IdenticalMarkersError(ValueError):
    """Raised when the opening and closing skip markers are the same string."""

    def __init__(self, message: str = "The opening and closing markers cannot be the same."):
        super().__init__(message)


@dataclass(frozen=True)
class SkipOptions:
    """
    What to leave untouched when converting Latin to Cyrillic.

    Attributes:
        case_sensitive: Match ``words`` and ``markers`` case-sensitively
        words: Extra words to keep in Latin, matched as whole words
        markers: (open, close) pair delimiting regions to keep; the markers
            themselves are removed. None disables region skipping.
    """

    case_sensitive: bool = True
    words: tuple[str, ...] = ()
    markers: Optional[tuple[str, str]] = DEFAULT_MARKERS

    def __post_init__(self) -> None:
        # A bare string would otherwise be split into single characters
        for name in ("words", "markers"):
            if isinstance(getattr(self, name), str):
                raise TypeError(f"{name} must be a sequence of strings, not str")

        # Normalize lists coming from JSON/spaCy configs to tuples
        if not isinstance(self.words, tuple):
            object.__setattr__(self, "words", tuple(self.words))
        if self.markers is not None and not isinstance(self.markers, tuple):
            object.__setattr__(self, "markers", tuple(self.markers))

    @property
    def has_markers(self) -> bool:
        """True if ``markers`` is an (open, close) pair."""
        return self.markers is not None and len(self.markers) == 2

    def validate(self) -> None:
        """
        Check the options before any text is processed.

        Raises:
            IdenticalMarkersError: If the open and close markers are equal
        """
        if self.has_markers and self.markers[0] == self.markers[1]:
            raise IdenticalMarkersError()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SkipOptions":
        """
        Build options from a mapping.

        Accepts ``{"skip": {...}}`` or the inner mapping directly. Missing
        keys fall back to the defaults.

        Raises:
            ValueError: On unknown keys
            TypeError: If ``words`` or ``markers`` is a single string
        """
        if "skip" in data:
            extra = set(data) - {"skip"}
            if extra:
                raise ValueError(f"Unknown option keys: {sorted(extra)}")
            data = data["skip"] or {}

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            field_name = _KEY_ALIASES.get(key)
            if field_name is None:
                raise ValueError(
                    f"Unknown skip option: {key!r}. "
                    f"Expected one of: {sorted(_KEY_ALIASES)}"
                )
            if value is not None:
                kwargs[field_name] = value
        return cls(**kwargs)


def resolve_options(
    options: Union[SkipOptions, Mapping[str, Any], None],
) -> SkipOptions:
    """Return ``options`` as a SkipOptions, filling in defaults."""
    if options is None:
        return SkipOptions()
    if isinstance(options, SkipOptions):
        return options
    if isinstance(options, Mapping):
        return SkipOptions.from_dict(options)
    raise TypeError(
        f"options must be SkipOptions, a mapping or None, got {type(options).__name__}"
    )
