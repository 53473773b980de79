"""Tests for the digraph exception guard and digraph merging."""

import pytest

from serbian_transliteration.digraphs import (
    DIGRAPH_EXCEPTIONS,
    DIGRAPHS,
    SEPARATOR,
    guard_digraph_exceptions,
    merge_digraphs,
)


# =============================================================================
# Exception Data
# =============================================================================


class TestExceptionData:
    def test_keys(self):
        assert set(DIGRAPH_EXCEPTIONS) == {"dj", "dž", "nj"}

    def test_list_sizes(self):
        assert len(DIGRAPH_EXCEPTIONS["dj"]) == 215
        assert len(DIGRAPH_EXCEPTIONS["dž"]) == 30
        assert len(DIGRAPH_EXCEPTIONS["nj"]) == 14

    def test_every_pattern_contains_its_digraph(self):
        for digraph, words in DIGRAPH_EXCEPTIONS.items():
            for word in words:
                assert digraph in word, word

    def test_cyrillic_e_entry_kept(self):
        assert "bridj\u0435" in DIGRAPH_EXCEPTIONS["dj"]


# =============================================================================
# Guard
# =============================================================================


class TestGuard:
    def test_nj_exception(self):
        assert guard_digraph_exceptions("injekcija") == f"in{SEPARATOR}jekcija"

    def test_dz_exception(self):
        assert guard_digraph_exceptions("nadživeti") == f"nad{SEPARATOR}živeti"

    def test_dj_exception(self):
        assert guard_digraph_exceptions("gdje") == f"gd{SEPARATOR}je"

    def test_case_insensitive_match(self):
        assert guard_digraph_exceptions("Injekcija") == f"In{SEPARATOR}jekcija"

    def test_only_lowercase_digraph_split(self):
        # Pattern matches, but the literal "nj" is not present in upper case
        assert guard_digraph_exceptions("INJEKCIJA") == "INJEKCIJA"

    def test_matches_inside_longer_text(self):
        text = "dao je injekciju konju"
        assert guard_digraph_exceptions(text) == f"dao je in{SEPARATOR}jekciju konju"

    def test_unmatched_text_untouched(self):
        assert guard_digraph_exceptions("konj i ljubav") == "konj i ljubav"

    def test_empty(self):
        assert guard_digraph_exceptions("") == ""


# =============================================================================
# Merge
# =============================================================================


class TestMerge:
    @pytest.mark.parametrize(
        "latin, cyrillic",
        [("Lj", "Љ"), ("Nj", "Њ"), ("Dž", "Џ"), ("lj", "љ"), ("nj", "њ"), ("dž", "џ")],
    )
    def test_each_digraph(self, latin, cyrillic):
        assert merge_digraphs(latin) == cyrillic
        assert DIGRAPHS[latin] == cyrillic

    def test_in_words(self):
        assert merge_digraphs("Ljubav, Nježnost, Džem") == "Љubav, Њežnost, Џem"

    def test_all_caps_not_merged(self):
        assert merge_digraphs("LJ NJ DŽ") == "LJ NJ DŽ"

    def test_separator_blocks_merge(self):
        guarded = f"in{SEPARATOR}jekcija"
        assert merge_digraphs(guarded) == guarded
