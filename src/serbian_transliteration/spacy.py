"""
spaCy integration for serbian-transliteration.

Provides a pipeline component that converts Serbian text between Cyrillic
and Latin script.

Example:
    >>> import spacy
    >>> nlp = spacy.blank("sr")
    >>> nlp.add_pipe("serbian_transliterator", config={"direction": "cyrillic"})
    >>> doc = nlp("Dobar dan")
    >>> doc._.transliterated
    'Добар дан'
"""

from typing import List, Optional, Tuple

from spacy.language import Language
from spacy.tokens import Doc, Token

from serbian_transliteration._charmap import to_latin
from serbian_transliteration._detect import is_cyrillic, is_latin
from serbian_transliteration._transliterate import to_cyrillic_detailed
from serbian_transliteration.skip import DEFAULT_MARKERS, SkipOptions

__all__ = [
    "DIRECTIONS",
    "SerbianTransliteratorComponent",
    "create_serbian_transliterator",
]

DIRECTIONS = ("auto", "cyrillic", "latin")


@Language.factory(
    "serbian_transliterator",
    default_config={
        "direction": "auto",
        "case_sensitive": True,
        "skip_words": [],
        "skip_markers": list(DEFAULT_MARKERS),
    },
    assigns=["doc._.transliterated", "token._.transliterated"],
)
def create_serbian_transliterator(
    nlp: Language,
    name: str,
    direction: str = "auto",
    case_sensitive: bool = True,
    skip_words: Optional[List[str]] = None,
    skip_markers: Optional[List[str]] = list(DEFAULT_MARKERS),
) -> "SerbianTransliteratorComponent":
    """Create a Serbian transliteration pipeline component."""
    return SerbianTransliteratorComponent(
        nlp,
        name,
        direction=direction,
        case_sensitive=case_sensitive,
        skip_words=skip_words,
        skip_markers=skip_markers,
    )


class SerbianTransliteratorComponent:
    """
    spaCy pipeline component for Serbian script conversion.

    With ``direction="auto"`` the target script is chosen once per document
    from its dominant script, and every token is converted the same way.
    Tokens that start inside text skipped for the whole document (marker
    regions, q/w/x/y words, ``skip_words``) keep their original text.

    Extensions:
        - Doc._.transliterated: Full converted text.
        - Token._.transliterated: Converted token text.

    Note: token.text is never modified.
    """

    def __init__(
        self,
        nlp: Language,
        name: str,
        *,
        direction: str = "auto",
        case_sensitive: bool = True,
        skip_words: Optional[List[str]] = None,
        skip_markers: Optional[List[str]] = None,
    ) -> None:
        if direction not in DIRECTIONS:
            raise ValueError(
                f"Unknown direction: {direction}. Expected one of {DIRECTIONS}."
            )

        self.name = name
        self.direction = direction
        self.options = SkipOptions(
            case_sensitive=case_sensitive,
            words=tuple(skip_words or ()),
            markers=tuple(skip_markers) if skip_markers else None,
        )
        self.options.validate()

        if not Doc.has_extension("transliterated"):
            Doc.set_extension("transliterated", default=None)
        if not Token.has_extension("transliterated"):
            Token.set_extension("transliterated", default=None)

    def _resolve_direction(self, text: str) -> Optional[str]:
        if self.direction != "auto":
            return self.direction
        if is_cyrillic(text):
            return "latin"
        if is_latin(text):
            return "cyrillic"
        return None

    def _convert(
        self, text: str, direction: Optional[str]
    ) -> Tuple[str, List[Tuple[int, int]]]:
        """Return the converted text and the character spans kept as is."""
        if direction == "latin":
            return to_latin(text), []
        if direction == "cyrillic":
            result = to_cyrillic_detailed(text, self.options)
            spans = [
                (s.start, s.end) for s in result.skipped if s.start is not None
            ]
            return result.transliterated, spans
        return text, []

    def __call__(self, doc: Doc) -> Doc:
        direction = self._resolve_direction(doc.text)
        doc._.transliterated, skipped = self._convert(doc.text, direction)

        # Tokens inside a skipped region or word keep their text, so they
        # agree with the document value
        for token in doc:
            if any(start <= token.idx < end for start, end in skipped):
                token._.transliterated = token.text
            else:
                token._.transliterated, _ = self._convert(token.text, direction)

        return doc

    def to_disk(self, path: str, *, exclude: tuple[str, ...] = ()) -> None:
        pass

    def from_disk(
        self, path: str, *, exclude: tuple[str, ...] = ()
    ) -> "SerbianTransliteratorComponent":
        return self

    def to_bytes(self, *, exclude: tuple[str, ...] = ()) -> bytes:
        return b""

    def from_bytes(
        self, data: bytes, *, exclude: tuple[str, ...] = ()
    ) -> "SerbianTransliteratorComponent":
        return self


def get_transliterator_pipe(nlp: Language) -> Optional[SerbianTransliteratorComponent]:
    """Get the transliterator component from a pipeline."""
    if "serbian_transliterator" in nlp.pipe_names:
        return nlp.get_pipe("serbian_transliterator")
    return None
