"""
Digraph handling for Serbian Latin → Cyrillic conversion.

Serbian Latin writes three Cyrillic letters as two-letter digraphs:
lj → љ, nj → њ, dž → џ. Most of the time a digraph in Latin text really
is one letter, but in some words the two letters belong to different
morphemes and must stay separate:

    - "injekcija" (in + jekcija) → инјекција, not ињекција
    - "nadživeti" (nad + živeti) → надживети, not наџивети
    - "adjektiv" → адјектив

Conversion therefore runs in two steps:

    1. guard_digraph_exceptions() finds words from the exception list and
       splits their digraphs with an invisible SEPARATOR.
    2. merge_digraphs() collapses every digraph that is still contiguous.

The separator is removed later, when characters are mapped to Cyrillic.

Example:
    >>> merge_digraphs(guard_digraph_exceptions("injekcija i konj"))
    'in\\u200cjekcija i koњ'
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

import regex

__all__ = [
    "DIGRAPH_EXCEPTIONS",
    "DIGRAPHS",
    "SEPARATOR",
    "guard_digraph_exceptions",
    "merge_digraphs",
]

# Zero-width non-joiner; never expected in real input
SEPARATOR = "\u200c"

# =============================================================================
# Digraph Table
# =============================================================================

# Surface form → Cyrillic letter. The six forms never overlap each other,
# so replacement order is irrelevant.
DIGRAPHS: Mapping[str, str] = MappingProxyType(
    {
        "Lj": "Љ",
        "Nj": "Њ",
        "Dž": "Џ",
        "lj": "љ",
        "nj": "њ",
        "dž": "џ",
    }
)

# =============================================================================
# Exception Lists
# =============================================================================

# Word fragments (matched case-insensitively anywhere in the text) in which
# the keyed letter pair is two letters, not a digraph. Curated data: keep the
# entries and their order exactly as they are.
_DJ_EXCEPTIONS = (
    "adjektiv", "adjunkt", "bazdje", "bdje", "bezdje", "blijedje", "bludje",
    # final letter is Cyrillic е (U+0435)
    "bridj\u0435",
    "vidjel", "vidjet", "vindjakn", "višenedje", "vrijedje", "gdje",
    "gudje", "gdjir", "daždje", "dvonedje", "devetonedje", "desetonedje", "djb",
    "djeva", "djevi", "djevo", "djed", "djejstv", "djel", "djenem",
    "djeneš", "djenu", "djet", "djec", "dječ", "djuar", "djubison",
    "djubouz", "djuer", "djui", "djuks", "djulej", "djumars", "djupont",
    "djurant", "djusenberi", "djuharst", "djuherst", "dovdje", "dogrdje", "dodjel",
    "drvodje", "drugdje", "elektrosnabdje", "žudje", "zabludje", "zavidje", "zavrijedje",
    "zagudje", "zadjev", "zadjen", "zalebdje", "zaludje", "zaodje", "zapodje",
    "zarudje", "zasjedje", "zasmrdje", "zastidje", "zaštedje", "zdje", "zlodje",
    "igdje", "izbledje", "izblijedje", "izvidje", "izdjejst", "izdjelj", "izludje",
    "isprdje", "jednonedje", "kojegdje", "kudjelj", "lebdje", "ludjel", "ludjet",
    "makfadjen", "marmadjuk", "međudjel", "nadjaha", "nadjača", "nadjeb", "nadjev",
    "nadjenul", "nadjenuo", "nadjenut", "negdje", "nedjel", "nadjunač", "nenadjača",
    "nenavidje", "neodje", "nepodjarm", "nerazdje", "nigdje", "obdjel", "obnevidje",
    "ovdje", "odjav", "odjah", "odjaš", "odjeb", "odjev", "odjed",
    "odjezd", "odjek", "odjel", "odjen", "odjeć", "odjec", "odjur",
    "odsjedje", "ondje", "opredje", "osijedje", "osmonedje", "pardju", "perdju",
    "petonedje", "poblijedje", "povidje", "pogdjegdje", "pogdje", "podjakn", "podjamč",
    "podjemč", "podjar", "podjeb", "podjebrad", "podjed", "podjezič", "podjel",
    "podjen", "podjet", "pododjel", "pozavidje", "poludje", "poljodjel", "ponegdje",
    "ponedjelj", "porazdje", "posijedje", "posjedje", "postidje", "potpodjel", "poštedje",
    "pradjed", "prdje", "preblijedje", "previdje", "predvidje", "predjel", "preodjen",
    "preraspodje", "presjedje", "pridjev", "pridjen", "prismrdje", "prištedje", "probdje",
    "problijedje", "prodjen", "prolebdje", "prosijedje", "prosjedje", "protivdjel", "prošlonedje",
    "razvidje", "razdjev", "razdjel", "razodje", "raspodje", "rasprdje", "remekdjel",
    "rudjen", "rudjet", "sadje", "svagdje", "svidje", "svugdje", "sedmonedjelj",
    "sijedje", "sjedje", "smrdje", "snabdje", "snovidje", "starosjedje", "stidje",
    "studje", "sudjel", "tronedje", "ublijedje", "uvidje", "udjel", "udjen",
    "uprdje", "usidjel", "usjedje", "usmrdje", "uštedje", "cjelonedje", "četvoronedje",
    "čukundjed", "šestonedjelj", "štedje", "štogdje", "šukundjed",
)

_DZ_EXCEPTIONS = (
    "feldžandarm", "nadžanj", "nadždrel", "nadžel", "nadžeo", "nadžet", "nadživ",
    "nadžinj", "nadžnj", "nadžrec", "nadžup", "odžali", "odžari", "odžel", "odžive",
    "odživljava", "odžubor", "odžvaka", "odžval", "odžvać", "podžanr", "podžel",
    "podže", "podžig", "podžiz", "podžil", "podžnje", "podžupan", "predželu", "predživot",
)

_NJ_EXCEPTIONS = (
    "anjon", "injaric", "injekc", "injekt", "injicira", "injurij", "kenjon", "konjug",
    "konjunk", "nekonjug", "nekonjunk", "ssrnj", "tanjug", "vanjezičk",
)

DIGRAPH_EXCEPTIONS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "dj": _DJ_EXCEPTIONS,
        "dž": _DZ_EXCEPTIONS,
        "nj": _NJ_EXCEPTIONS,
    }
)

# (digraph, split form, compiled pattern) in application order
_COMPILED_EXCEPTIONS = tuple(
    (
        digraph,
        digraph[0] + SEPARATOR + digraph[1],
        regex.compile(regex.escape(word), regex.IGNORECASE),
    )
    for digraph, words in DIGRAPH_EXCEPTIONS.items()
    for word in words
)


# =============================================================================
# Guard and Merge
# =============================================================================


def guard_digraph_exceptions(text: str) -> str:
    """
    Split digraphs inside exception words so they survive merging.

    Every exception pattern is searched over the whole text, case-insensitively.
    Inside each match, the literal (lowercase) digraph it is filed under is
    rewritten as first letter + SEPARATOR + second letter.

    Args:
        text: Latin text

    Returns:
        Text with protected digraphs split by SEPARATOR

    Example:
        >>> guard_digraph_exceptions("nadživeti")
        'nad\\u200cživeti'
    """
    for digraph, split_form, pattern in _COMPILED_EXCEPTIONS:
        text = pattern.sub(lambda m: m.group(0).replace(digraph, split_form), text)
    return text


def merge_digraphs(text: str) -> str:
    """
    Collapse Lj, Nj, Dž, lj, nj, dž into single Cyrillic letters.

    All-caps forms (LJ, NJ, DŽ) are left alone and map letter by letter.

    Example:
        >>> merge_digraphs("Ljubav i džem")
        'Љubav i џem'
    """
    for digraph, cyrillic in DIGRAPHS.items():
        text = text.replace(digraph, cyrillic)
    return text
