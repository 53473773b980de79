"""
Digraph submodule.

Re-exports the exception guard and the digraph merger used by the
Latin → Cyrillic pipeline.
"""

from serbian_transliteration.digraphs._rules import (
    DIGRAPH_EXCEPTIONS,
    DIGRAPHS,
    SEPARATOR,
    guard_digraph_exceptions,
    merge_digraphs,
)

__all__ = [
    "DIGRAPH_EXCEPTIONS",
    "DIGRAPHS",
    "SEPARATOR",
    "guard_digraph_exceptions",
    "merge_digraphs",
]
